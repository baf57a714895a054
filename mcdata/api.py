"""One entry point bundling every data view for a single game version."""

from __future__ import annotations

from mcdata.data import DataStore
from mcdata.models import Version
from mcdata.resources import (
    Biomes,
    Blocks,
    Enchantments,
    Entities,
    Foods,
    Items,
    Loot,
    Recipes,
)


class Api:
    """All data views for one version, reading from one store."""

    def __init__(self, store: DataStore, version: Version) -> None:
        self.store = store
        self.version = version
        self.items = Items(store, version)
        self.recipes = Recipes(store, version)
        self.enchantments = Enchantments(store, version)
        self.loot = Loot(store, version)
        self.blocks = Blocks(store, version)
        self.foods = Foods(store, version)
        self.biomes = Biomes(store, version)
        self.entities = Entities(store, version)

    def __repr__(self) -> str:
        return f"Api(version={self.version.minecraft_version!r})"