"""Typed records for the game data files, built from decoded JSON."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from mcdata.errors import JsonError

_Converter = Callable[[Any, str], Any]


def _integer(low: int, high: int) -> _Converter:
    def convert(value: Any, key: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise JsonError(f"invalid type for `{key}`: expected an integer, got {value!r}")
        if not low <= value <= high:
            raise JsonError(f"invalid value for `{key}`: {value} is out of range")
        return value

    return convert


_u8 = _integer(0, 0xFF)
_u32 = _integer(0, 0xFFFFFFFF)
_i32 = _integer(-(2**31), 2**31 - 1)
_usize = _integer(0, 2**64 - 1)
_isize = _integer(-(2**63), 2**63 - 1)


def _f32(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JsonError(f"invalid type for `{key}`: expected a number, got {value!r}")
    return float(value)


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise JsonError(f"invalid type for `{key}`: expected a string, got {value!r}")
    return value


def _boolean(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise JsonError(f"invalid type for `{key}`: expected a boolean, got {value!r}")
    return value


def _list_of(convert: _Converter) -> _Converter:
    def convert_list(value: Any, key: str) -> list:
        if not isinstance(value, list):
            raise JsonError(f"invalid type for `{key}`: expected a list, got {value!r}")
        return [convert(element, f"{key}[{index}]") for index, element in enumerate(value)]

    return convert_list


def _pair(convert: _Converter) -> _Converter:
    def convert_pair(value: Any, key: str) -> tuple:
        if not isinstance(value, list) or len(value) != 2:
            raise JsonError(f"invalid value for `{key}`: expected a list of length 2")
        first, second = value
        return convert(first, f"{key}[0]"), convert(second, f"{key}[1]")

    return convert_pair


def _optional(convert: _Converter) -> _Converter:
    def convert_optional(value: Any, key: str) -> Any:
        return None if value is None else convert(value, key)

    return convert_optional


def _nested(cls: Any) -> _Converter:
    return lambda value, key: cls.from_dict(value)


def _enum(cls: type[Enum]) -> _Converter:
    def convert(value: Any, key: str) -> Enum:
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise JsonError(f"unknown variant {value!r} for `{key}`") from None

    return convert


def _object(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise JsonError(f"invalid type: expected an object for {what}, got {data!r}")
    return data


def _required(data: Mapping, key: str, convert: _Converter, *aliases: str) -> Any:
    for name in (key, *aliases):
        if name in data:
            return convert(data[name], name)
    raise JsonError(f"missing field `{key}`")


def _maybe(data: Mapping, key: str, convert: _Converter, *aliases: str) -> Any:
    for name in (key, *aliases):
        if name in data:
            value = data[name]
            return None if value is None else convert(value, name)
    return None


def _harvest_tools(value: Any, key: str) -> dict[int, bool]:
    if not isinstance(value, Mapping):
        raise JsonError(f"invalid type for `{key}`: expected an object")
    tools: dict[int, bool] = {}
    for name, enabled in value.items():
        if not (isinstance(name, str) and name.isascii() and name.isdigit()):
            raise JsonError(f"invalid key {name!r} in `{key}`: expected an integer")
        tools[_u32(int(name), key)] = _boolean(enabled, f"{key}.{name}")
    return tools


@dataclass(frozen=True)
class Version:
    """A protocol version and the game release it belongs to."""

    version: int
    minecraft_version: str
    major_version: str

    @classmethod
    def from_dict(cls, data: Any) -> Version:
        data = _object(data, "Version")
        return cls(
            version=_required(data, "version", _i32),
            minecraft_version=_required(data, "minecraftVersion", _string),
            major_version=_required(data, "majorVersion", _string),
        )


@dataclass(frozen=True)
class Biome:
    id: int
    name: str
    category: str
    temperature: float
    precipitation: str
    depth: float
    dimension: str
    display_name: str
    color: int
    rainfall: float

    @classmethod
    def from_dict(cls, data: Any) -> Biome:
        data = _object(data, "Biome")
        return cls(
            id=_required(data, "id", _u32),
            name=_required(data, "name", _string),
            category=_required(data, "category", _string),
            temperature=_required(data, "temperature", _f32),
            precipitation=_required(data, "precipitation", _string),
            depth=_required(data, "depth", _f32),
            dimension=_required(data, "dimension", _string),
            display_name=_required(data, "displayName", _string),
            color=_required(data, "color", _u32),
            rainfall=_required(data, "rainfall", _f32),
        )


class BoundingBox(str, Enum):
    BLOCK = "block"
    EMPTY = "empty"


@dataclass(frozen=True)
class BlockVariation:
    metadata: int
    display_name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> BlockVariation:
        data = _object(data, "Variation")
        return cls(
            metadata=_required(data, "metadata", _u32),
            display_name=_required(data, "displayName", _string),
            description=_maybe(data, "description", _string),
        )


class StateType(str, Enum):
    ENUM = "enum"
    BOOL = "bool"
    INT = "int"


@dataclass(frozen=True)
class State:
    name: str
    state_type: StateType
    values: Optional[list[str]]
    num_values: int

    @classmethod
    def from_dict(cls, data: Any) -> State:
        data = _object(data, "State")
        return cls(
            name=_required(data, "name", _string),
            state_type=_required(data, "stateType", _enum(StateType), "type"),
            values=_maybe(data, "values", _list_of(_string)),
            num_values=_required(data, "numValues", _u32),
        )


@dataclass(frozen=True)
class Block:
    id: int
    display_name: str
    name: str
    hardness: Optional[float]
    stack_size: int
    diggable: bool
    bounding_box: BoundingBox
    material: Optional[str]
    harvest_tool: Optional[dict[int, bool]]
    variations: Optional[list[BlockVariation]]
    drops: list[int]
    transparent: bool
    emit_light: int
    filter_light: int
    min_state_id: Optional[int]
    max_state_id: Optional[int]
    default_state: Optional[int]
    blast_resistance: Optional[float]

    @classmethod
    def from_dict(cls, data: Any) -> Block:
        data = _object(data, "Block")
        return cls(
            id=_required(data, "id", _u32),
            display_name=_required(data, "displayName", _string),
            name=_required(data, "name", _string),
            hardness=_maybe(data, "hardness", _f32),
            stack_size=_required(data, "stackSize", _u8),
            diggable=_required(data, "diggable", _boolean),
            bounding_box=_required(data, "boundingBox", _enum(BoundingBox)),
            material=_maybe(data, "material", _string),
            harvest_tool=_maybe(data, "harvestTool", _harvest_tools),
            variations=_maybe(data, "variations", _list_of(_nested(BlockVariation))),
            drops=_required(data, "drops", _list_of(_u32)),
            transparent=_required(data, "transparent", _boolean),
            emit_light=_required(data, "emitLight", _u8),
            filter_light=_required(data, "filterLight", _u8),
            min_state_id=_maybe(data, "minStateId", _u32),
            max_state_id=_maybe(data, "maxStateId", _u32),
            default_state=_maybe(data, "defaultState", _u32),
            blast_resistance=_maybe(data, "blastResistance", _f32, "resistance"),
        )


@dataclass(frozen=True)
class BlockItemDrop:
    item: str
    drop_chance: float
    stack_size_range: tuple[Optional[int], Optional[int]]
    block_age: Optional[int] = None
    silk_touch: Optional[bool] = None
    no_silk_touch: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> BlockItemDrop:
        data = _object(data, "ItemDrop")
        return cls(
            item=_required(data, "item", _string),
            drop_chance=_required(data, "dropChance", _f32),
            stack_size_range=_required(data, "stackSizeRange", _pair(_optional(_isize))),
            block_age=_maybe(data, "blockAge", _usize),
            silk_touch=_maybe(data, "silkTouch", _boolean),
            no_silk_touch=_maybe(data, "noSilkTouch", _boolean),
        )


@dataclass(frozen=True)
class BlockLoot:
    block: str
    drops: list[BlockItemDrop]

    @classmethod
    def from_dict(cls, data: Any) -> BlockLoot:
        data = _object(data, "BlockLoot")
        return cls(
            block=_required(data, "block", _string),
            drops=_required(data, "drops", _list_of(_nested(BlockItemDrop))),
        )


@dataclass(frozen=True)
class Cost:
    a: int
    b: int

    @classmethod
    def from_dict(cls, data: Any) -> Cost:
        data = _object(data, "Cost")
        return cls(a=_required(data, "a", _i32), b=_required(data, "b", _i32))


@dataclass(frozen=True)
class Enchantment:
    id: int
    name: str
    display_name: str
    max_level: int
    min_cost: Cost
    max_cost: Cost
    treasure_only: bool
    exclude: list[str]
    category: str
    weight: int
    tradeable: bool
    discoverable: bool

    @classmethod
    def from_dict(cls, data: Any) -> Enchantment:
        data = _object(data, "Enchantment")
        return cls(
            id=_required(data, "id", _u32),
            name=_required(data, "name", _string),
            display_name=_required(data, "displayName", _string),
            max_level=_required(data, "maxLevel", _u8),
            min_cost=_required(data, "minCost", _nested(Cost)),
            max_cost=_required(data, "maxCost", _nested(Cost)),
            treasure_only=_required(data, "treasureOnly", _boolean),
            exclude=_required(data, "exclude", _list_of(_string)),
            category=_required(data, "category", _string),
            weight=_required(data, "weight", _u8),
            tradeable=_required(data, "tradeable", _boolean),
            discoverable=_required(data, "discoverable", _boolean),
        )


@dataclass(frozen=True)
class Entity:
    id: int
    internal_id: Optional[int]
    display_name: str
    name: str
    entity_type: str
    width: Optional[float]
    height: Optional[float]
    category: Optional[str]

    @classmethod
    def from_dict(cls, data: Any) -> Entity:
        data = _object(data, "Entity")
        return cls(
            id=_required(data, "id", _u32),
            internal_id=_maybe(data, "internalId", _u32),
            display_name=_required(data, "displayName", _string),
            name=_required(data, "name", _string),
            entity_type=_required(data, "entityType", _string, "type"),
            width=_maybe(data, "width", _f32),
            height=_maybe(data, "height", _f32),
            category=_maybe(data, "category", _string),
        )


@dataclass(frozen=True)
class EntityItemDrop:
    item: str
    drop_chance: float
    stack_size_range: tuple[int, int]
    player_kill: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> EntityItemDrop:
        data = _object(data, "ItemDrop")
        return cls(
            item=_required(data, "item", _string),
            drop_chance=_required(data, "dropChance", _f32),
            stack_size_range=_required(data, "stackSizeRange", _pair(_usize)),
            player_kill=_maybe(data, "playerKill", _boolean),
        )


@dataclass(frozen=True)
class EntityLoot:
    entity: str
    drops: list[EntityItemDrop]

    @classmethod
    def from_dict(cls, data: Any) -> EntityLoot:
        data = _object(data, "EntityLoot")
        return cls(
            entity=_required(data, "entity", _string),
            drops=_required(data, "drops", _list_of(_nested(EntityItemDrop))),
        )


@dataclass(frozen=True)
class Variation:
    """A metadata variant of a food or an item."""

    metadata: int
    display_name: str

    @classmethod
    def from_dict(cls, data: Any) -> Variation:
        data = _object(data, "Variation")
        return cls(
            metadata=_required(data, "metadata", _u32),
            display_name=_required(data, "displayName", _string),
        )


@dataclass(frozen=True)
class Food:
    id: int
    display_name: str
    stack_size: int
    name: str
    food_points: float
    saturation: float
    effective_quality: float
    saturation_ratio: float
    variations: Optional[list[Variation]] = None

    @classmethod
    def from_dict(cls, data: Any) -> Food:
        data = _object(data, "Food")
        return cls(
            id=_required(data, "id", _u32),
            display_name=_required(data, "displayName", _string),
            stack_size=_required(data, "stackSize", _u8),
            name=_required(data, "name", _string),
            food_points=_required(data, "foodPoints", _f32),
            saturation=_required(data, "saturation", _f32),
            effective_quality=_required(data, "effectiveQuality", _f32),
            saturation_ratio=_required(data, "saturationRatio", _f32),
            variations=_maybe(data, "variations", _list_of(_nested(Variation))),
        )


@dataclass(frozen=True)
class Item:
    id: int
    display_name: str
    stack_size: int
    enchant_categories: Optional[list[str]]
    fixed_with: Optional[list[str]]
    max_durability: Optional[int]
    name: str
    variations: Optional[list[Variation]]
    durability: Optional[int]

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        data = _object(data, "Item")
        return cls(
            id=_required(data, "id", _u32),
            display_name=_required(data, "displayName", _string),
            stack_size=_required(data, "stackSize", _u8),
            enchant_categories=_maybe(data, "enchantCategories", _list_of(_string)),
            fixed_with=_maybe(data, "fixedWith", _list_of(_string)),
            max_durability=_maybe(data, "maxDurability", _u32),
            name=_required(data, "name", _string),
            variations=_maybe(data, "variations", _list_of(_nested(Variation))),
            durability=_maybe(data, "durability", _u32),
        )


@dataclass(frozen=True)
class IdMetadataCount:
    """A recipe item given as an object with an id and optional metadata and count."""

    id: int
    metadata: Optional[int] = None
    count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> IdMetadataCount:
        data = _object(data, "IDMetadataCountObject")
        return cls(
            id=_required(data, "id", _i32),
            metadata=_maybe(data, "metadata", _i32),
            count=_maybe(data, "count", _u32),
        )


RecipeItem = Union[int, "tuple[int, int]", IdMetadataCount, None]


def parse_recipe_item(data: Any) -> RecipeItem:
    """Decode a recipe item: an id, an [id, metadata] pair, an object, or null."""
    if data is None:
        return None
    if isinstance(data, int) and not isinstance(data, bool) and 0 <= data <= 0xFFFFFFFF:
        return data
    if isinstance(data, list) and len(data) == 2:
        try:
            return _pair(_u32)(data, "item")
        except JsonError:
            pass
    if isinstance(data, Mapping):
        try:
            return IdMetadataCount.from_dict(data)
        except JsonError:
            pass
    raise JsonError("data did not match any variant of untagged enum RecipeItem")


def _recipe_item(value: Any, key: str) -> RecipeItem:
    return parse_recipe_item(value)


_shape = _list_of(_list_of(_recipe_item))


@dataclass(frozen=True)
class ShapedRecipe:
    result: RecipeItem
    in_shape: list[list[RecipeItem]]
    out_shape: Optional[list[list[RecipeItem]]] = None

    @classmethod
    def from_dict(cls, data: Any) -> ShapedRecipe:
        data = _object(data, "ShapedRecipe")
        return cls(
            result=_required(data, "result", _recipe_item),
            in_shape=_required(data, "inShape", _shape),
            out_shape=_maybe(data, "outShape", _shape),
        )


@dataclass(frozen=True)
class ShapelessRecipe:
    result: RecipeItem
    ingredients: list[RecipeItem]

    @classmethod
    def from_dict(cls, data: Any) -> ShapelessRecipe:
        data = _object(data, "ShapelessRecipe")
        return cls(
            result=_required(data, "result", _recipe_item),
            ingredients=_required(data, "ingredients", _list_of(_recipe_item)),
        )


Recipe = Union[ShapedRecipe, ShapelessRecipe]


def parse_recipe(data: Any) -> Recipe:
    """Decode a recipe, trying the shaped form before the shapeless one."""
    for kind in (ShapedRecipe, ShapelessRecipe):
        try:
            return kind.from_dict(data)
        except JsonError:
            continue
    raise JsonError("data did not match any variant of untagged enum Recipe")