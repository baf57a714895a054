import json

import pytest

from mcdata.api import Api
from mcdata.data import DataStore
from mcdata.errors import NotFoundError
from mcdata.versions import available_versions, versions

PROTOCOL_VERSIONS = [
    {"version": 757, "minecraftVersion": "1.18.1", "majorVersion": "1.18"},
    {"version": 755, "minecraftVersion": "1.17", "majorVersion": "1.17"},
    {"version": 340, "minecraftVersion": "1.12.2", "majorVersion": "1.12"},
]

ITEMS = [
    {"id": 1, "displayName": "Stone", "stackSize": 64, "name": "stone"},
    {"id": 797, "displayName": "Bread", "stackSize": 64, "name": "bread"},
]

RECIPES = {"797": [{"result": 797, "ingredients": [790, 790, 790]}]}


def _write(path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def store(tmp_path):
    _write(tmp_path / "pc" / "common" / "protocolVersions.json", PROTOCOL_VERSIONS)
    _write(tmp_path / "pc" / "common" / "versions.json", ["1.12.2", "1.18.1"])
    _write(
        tmp_path / "dataPaths.json",
        {
            "pc": {
                "1.18.1": {"items": "pc/1.18", "recipes": "pc/1.18"},
                "1.12.2": {"items": "pc/1.12"},
            },
            "bedrock": {},
        },
    )
    _write(tmp_path / "pc" / "1.18" / "items.json", ITEMS)
    _write(tmp_path / "pc" / "1.18" / "recipes.json", RECIPES)
    return DataStore(tmp_path)


def _test_versions(store):
    available = available_versions(store)
    return [
        version
        for version in versions(store)
        if version.minecraft_version in available and version.version >= 477
    ]


def test_test_versions_are_filtered(store):
    assert [v.minecraft_version for v in _test_versions(store)] == ["1.18.1"]


def test_api_views_share_version(store):
    for version in _test_versions(store):
        api = Api(store, version)
        assert api.version == version
        assert api.items.version == version
        assert api.entities.version == version
        assert api.recipes.store is store


def test_api_items_and_recipes(store):
    for version in _test_versions(store):
        api = Api(store, version)
        bread_id = api.items.items_by_name()["bread"].id
        recipes = api.recipes.recipes()
        assert bread_id == 797
        assert len(recipes[bread_id]) == 1


def test_api_reports_missing_file(store):
    version = _test_versions(store)[0]
    api = Api(store, version)
    with pytest.raises(NotFoundError) as info:
        api.biomes.biomes_array()
    assert info.value.name == "biomes"


def test_api_repr(store):
    api = Api(store, _test_versions(store)[0])
    assert repr(api) == "Api(version='1.18.1')"