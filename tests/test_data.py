import json

import pytest

from mcdata.data import BLOCKS_FILE, ITEMS_FILE, Datapaths, DataStore
from mcdata.errors import InvalidEncodingError, JsonError, NotFoundError
from mcdata.models import Version

VERSION = Version(757, "1.18.1", "1.18")
PATHS = {
    "pc": {"1.18.1": {"blocks": "pc/1.18", "items": "pc/1.18.1", "bad": "pc/1.18"}},
    "bedrock": {"1.17.10": {"blocks": "bedrock/1.17.10"}},
}
BLOCKS_TEXT = '[{"id": 1, "name": "stone"}]'


def _write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def store(tmp_path):
    _write(tmp_path / "dataPaths.json", json.dumps(PATHS))
    _write(tmp_path / "pc" / "common" / "versions.json", '["1.18.1"]')
    _write(tmp_path / "pc" / "common" / "broken.json", b"\xff\xfe\xfd")
    _write(tmp_path / "pc" / "1.18" / "blocks.json", BLOCKS_TEXT)
    _write(tmp_path / "pc" / "1.18" / "bad.json", b"\xc3\x28")
    return DataStore(tmp_path)


def test_datapaths_from_dict_round_trip():
    paths = Datapaths.from_dict(PATHS)
    assert paths.pc == PATHS["pc"]
    assert paths.bedrock == PATHS["bedrock"]


def test_datapaths_missing_edition():
    with pytest.raises(JsonError):
        Datapaths.from_dict({"pc": {}})


def test_datapaths_rejects_non_string_location():
    with pytest.raises(JsonError):
        Datapaths.from_dict({"pc": {"1.18.1": {"blocks": 3}}, "bedrock": {}})


def test_store_reads_and_caches_datapaths(store):
    first = store.datapaths()
    assert first.pc == PATHS["pc"]
    assert store.datapaths() is first


def test_path_lookup(store):
    assert store.path(VERSION, BLOCKS_FILE) == "pc/1.18"


def test_path_unknown_version(store):
    with pytest.raises(NotFoundError) as info:
        store.path(Version(1, "1.99", "1.99"), BLOCKS_FILE)
    assert info.value.name == "1.99"


def test_path_unknown_file(store):
    with pytest.raises(NotFoundError) as info:
        store.path(VERSION, "tints")
    assert info.value.name == "tints"


def test_common_file(store):
    assert json.loads(store.common_file("versions")) == ["1.18.1"]


def test_common_file_missing(store):
    with pytest.raises(NotFoundError) as info:
        store.common_file("protocolVersions")
    assert info.value.name == "protocolVersions"


def test_common_file_invalid_encoding(store):
    with pytest.raises(InvalidEncodingError) as info:
        store.common_file("broken")
    assert info.value.filename == "broken"


def test_version_specific_file(store):
    assert store.version_specific_file(VERSION, BLOCKS_FILE) == BLOCKS_TEXT


def test_version_specific_file_missing_on_disk(store):
    with pytest.raises(NotFoundError) as info:
        store.version_specific_file(VERSION, ITEMS_FILE)
    assert info.value.name == f"{VERSION.minecraft_version}/{ITEMS_FILE}"


def test_version_specific_file_invalid_encoding(store):
    with pytest.raises(InvalidEncodingError) as info:
        store.version_specific_file(VERSION, "bad")
    assert info.value.filename == "bad"


def test_missing_datapaths_file(tmp_path):
    with pytest.raises(NotFoundError) as info:
        DataStore(tmp_path).datapaths()
    assert info.value.name == "dataPaths.json"


def test_malformed_datapaths_file(tmp_path):
    _write(tmp_path / "dataPaths.json", "{not json")
    with pytest.raises(JsonError):
        DataStore(tmp_path).path(VERSION, BLOCKS_FILE)


def test_store_accepts_string_root(tmp_path):
    _write(tmp_path / "pc" / "common" / "versions.json", "[]")
    assert DataStore(str(tmp_path)).common_file("versions") == "[]"