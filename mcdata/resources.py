"""Per-version views over the data files: biomes, blocks, items and the rest."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter
from typing import Any, TypeVar

from mcdata.data import (
    BIOMES_FILE,
    BLOCK_LOOT_FILE,
    BLOCKS_FILE,
    ENCHANTMENTS_FILE,
    ENTITIES_FILE,
    ENTITY_LOOT_FILE,
    FOODS_FILE,
    ITEMS_FILE,
    RECIPES_FILE,
    DataStore,
)
from mcdata.errors import JsonError
from mcdata.models import (
    Biome,
    Block,
    BlockLoot,
    Enchantment,
    Entity,
    EntityLoot,
    Food,
    Item,
    Recipe,
    Version,
    parse_recipe,
)

T = TypeVar("T")

_U32_MAX = 0xFFFFFFFF


def _decode(content: str) -> Any:
    try:
        return json.loads(content)
    except ValueError as exc:
        raise JsonError(exc) from exc


@dataclass(frozen=True)
class _VersionedData:
    store: DataStore
    version: Version

    def _load(self, filename: str) -> Any:
        return _decode(self.store.version_specific_file(self.version, filename))

    def _load_array(self, filename: str, parse: Callable[[Any], T]) -> list[T]:
        decoded = self._load(filename)
        if not isinstance(decoded, list):
            raise JsonError(f"invalid type: expected a list in {filename}")
        return [parse(entry) for entry in decoded]


@dataclass(frozen=True)
class Biomes(_VersionedData):
    """Biome data for one version."""

    def biomes_array(self) -> list[Biome]:
        return self._load_array(BIOMES_FILE, Biome.from_dict)

    def biomes(self) -> dict[int, Biome]:
        return {biome.id: biome for biome in self.biomes_array()}

    def biomes_by_name(self) -> dict[str, Biome]:
        return {biome.name: biome for biome in self.biomes_array()}


@dataclass(frozen=True)
class Blocks(_VersionedData):
    """Block data for one version."""

    def blocks_array(self) -> list[Block]:
        return self._load_array(BLOCKS_FILE, Block.from_dict)

    def blocks(self) -> dict[int, Block]:
        return {block.id: block for block in self.blocks_array()}

    def blocks_by_name(self) -> dict[str, Block]:
        return {block.name: block for block in self.blocks_array()}


@dataclass(frozen=True)
class Enchantments(_VersionedData):
    """Enchantment data for one version."""

    def enchantments_array(self) -> list[Enchantment]:
        return self._load_array(ENCHANTMENTS_FILE, Enchantment.from_dict)

    def enchantments(self) -> dict[int, Enchantment]:
        return {enchantment.id: enchantment for enchantment in self.enchantments_array()}

    def enchantments_by_name(self) -> dict[str, Enchantment]:
        return {enchantment.name: enchantment for enchantment in self.enchantments_array()}

    def enchantments_by_category(self) -> dict[str, list[Enchantment]]:
        """Group consecutive enchantments by category; a later run replaces an earlier one."""
        return {
            category: list(group)
            for category, group in groupby(
                self.enchantments_array(), key=attrgetter("category")
            )
        }


@dataclass(frozen=True)
class Entities(_VersionedData):
    """Entity data for one version."""

    def entities_array(self) -> list[Entity]:
        return self._load_array(ENTITIES_FILE, Entity.from_dict)

    def entities(self) -> dict[int, Entity]:
        return {entity.id: entity for entity in self.entities_array()}

    def entities_by_name(self) -> dict[str, Entity]:
        return {entity.name: entity for entity in self.entities_array()}


@dataclass(frozen=True)
class Foods(_VersionedData):
    """Food data for one version."""

    def foods_array(self) -> list[Food]:
        return self._load_array(FOODS_FILE, Food.from_dict)

    def foods(self) -> dict[int, Food]:
        return {food.id: food for food in self.foods_array()}

    def foods_by_name(self) -> dict[str, Food]:
        return {food.name: food for food in self.foods_array()}


@dataclass(frozen=True)
class Items(_VersionedData):
    """Item data for one version."""

    def items_array(self) -> list[Item]:
        return self._load_array(ITEMS_FILE, Item.from_dict)

    def items(self) -> dict[int, Item]:
        return {item.id: item for item in self.items_array()}

    def items_by_name(self) -> dict[str, Item]:
        return {item.name: item for item in self.items_array()}


@dataclass(frozen=True)
class Loot(_VersionedData):
    """Entity and block drop tables for one version."""

    def entity_loot_array(self) -> list[EntityLoot]:
        return self._load_array(ENTITY_LOOT_FILE, EntityLoot.from_dict)

    def entity_loot(self) -> dict[str, EntityLoot]:
        return {loot.entity: loot for loot in self.entity_loot_array()}

    def block_loot_array(self) -> list[BlockLoot]:
        return self._load_array(BLOCK_LOOT_FILE, BlockLoot.from_dict)

    def block_loot(self) -> dict[str, BlockLoot]:
        return {loot.block: loot for loot in self.block_loot_array()}


def _item_id(key: Any) -> int:
    if not (isinstance(key, str) and key.isascii() and key.isdigit()):
        raise JsonError(f"invalid key {key!r}: expected an item id")
    value = int(key)
    if value > _U32_MAX:
        raise JsonError(f"invalid key {key!r}: item id is out of range")
    return value


@dataclass(frozen=True)
class Recipes(_VersionedData):
    """Crafting recipes for one version."""

    def recipes(self) -> dict[int, list[Recipe]]:
        """Return the recipes for each item, keyed by the item id they produce."""
        decoded = self._load(RECIPES_FILE)
        if not isinstance(decoded, dict):
            raise JsonError(f"invalid type: expected an object in {RECIPES_FILE}")
        table: dict[int, list[Recipe]] = {}
        for key, entries in decoded.items():
            item_id = _item_id(key)
            if not isinstance(entries, list):
                raise JsonError(f"invalid type for recipes of {key}: expected a list")
            table[item_id] = [parse_recipe(entry) for entry in entries]
        return table