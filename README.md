# mcdata

Typed, read-only access to Minecraft game data stored as JSON files in the
minecraft-data directory layout: a `dataPaths.json` table, shared files under
`pc/common/`, and per-version files in the directories that table points to.

The package ships no data of its own. Point a `DataStore` at a data directory
and the package parses its JSON files into frozen dataclasses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from mcdata.api import Api
from mcdata.data import DataStore
from mcdata.versions import latest_stable, versions_by_minecraft_version

store = DataStore("path/to/data")

version = latest_stable(store)           # the entry for "1.18.1"
api = Api(store, version)

bread = api.items.items_by_name()["bread"]
print(bread.id, bread.stack_size)

recipes = api.recipes.recipes()          # recipes keyed by the item id they produce
print(len(recipes[bread.id]))

jungle = api.biomes.biomes_by_name()["jungle"]
print(jungle.dimension)

by_category = api.enchantments.enchantments_by_category()
print([e.name for e in by_category["breakable"]])

sheep_drops = api.loot.entity_loot()["sheep"].drops
```

Any other version can be picked by its game release string:

```python
v1_16_3 = versions_by_minecraft_version(store)["1.16.3"]
print(v1_16_3.major_version)
```

## What is available

### `mcdata.data`

- `DataStore(root)` — reads files below `root`.
  - `datapaths()` — the parsed `dataPaths.json` as a `Datapaths` (`pc` and
    `bedrock` tables), read once and then cached.
  - `path(version, filename)` — the directory holding a file for a version,
    looked up in the `pc` table.
  - `common_file(filename)` — text of `pc/common/<filename>.json`.
  - `version_specific_file(version, filename)` — text of a per-version file.
- File name constants such as `ITEMS_FILE`, `BLOCKS_FILE`, `RECIPES_FILE`.

### `mcdata.versions`

- `versions(store)` — every `Version` in `protocolVersions.json`, in file order.
- `versions_by_minecraft_version(store)` — keyed by release; later entries win.
- `latest_stable(store)` — the `"1.18.1"` entry (`LATEST_STABLE`).
- `available_versions(store)` — the release names in `versions.json`.

### `mcdata.api` and `mcdata.resources`

`Api(store, version)` bundles one view per data file, each also usable on its
own as `View(store, version)`:

- `api.items` (`Items`) — `items_array()`, `items()` (by id), `items_by_name()`
- `api.blocks` (`Blocks`) — `blocks_array()`, `blocks()`, `blocks_by_name()`
- `api.biomes` (`Biomes`) — `biomes_array()`, `biomes()`, `biomes_by_name()`
- `api.entities` (`Entities`) — `entities_array()`, `entities()`, `entities_by_name()`
- `api.foods` (`Foods`) — `foods_array()`, `foods()`, `foods_by_name()`
- `api.enchantments` (`Enchantments`) — `enchantments_array()`, `enchantments()`,
  `enchantments_by_name()`, `enchantments_by_category()`; the last groups
  consecutive runs of the same category, and a later run of a category
  replaces an earlier one
- `api.loot` (`Loot`) — `entity_loot_array()`, `entity_loot()`,
  `block_loot_array()`, `block_loot()`
- `api.recipes` (`Recipes`) — `recipes()`

Every call reads and parses its file again; nothing but the path table is cached.

### `mcdata.models`

Frozen dataclasses with a `from_dict` class method that validates decoded
JSON: `Version`, `Biome`, `Block`, `BlockVariation`, `State`, `BlockLoot`,
`BlockItemDrop`, `Enchantment`, `Cost`, `Entity`, `EntityLoot`,
`EntityItemDrop`, `Food`, `Item`, `Variation`, `IdMetadataCount`,
`ShapedRecipe`, `ShapelessRecipe`, and the enums `BoundingBox` and
`StateType`. `parse_recipe` tries the shaped form before the shapeless one;
`parse_recipe_item` accepts an id, an `[id, metadata]` pair, an object, or null.

## Errors

All failures raise subclasses of `mcdata.errors.DataError`:

- `NotFoundError` — a file, version or lookup key is missing
- `JsonError` — a file holds invalid JSON or does not have the expected shape
- `InvalidEncodingError` — a file is not valid UTF-8
- `DataIOError` — the file could not be read

## What it does not do

- It bundles no game data; a data directory must be supplied.
- Per-version lookups use only the `pc` edition; the `bedrock` table is
  parsed but not used.
- Only the files listed above are parsed; protocol, commands, materials,
  tints, particles, map icons and login packet files are not.
- There is no command-line tool; it is a library only.