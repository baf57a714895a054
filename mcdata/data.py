"""Access to the bundled data directory and its version path table."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from mcdata.errors import DataIOError, InvalidEncodingError, JsonError, NotFoundError
from mcdata.models import Version

BIOMES_FILE = "biomes"
BLOCK_LOOT_FILE = "blockLoot"
BLOCKS_FILE = "blocks"
COMMANDS_FILE = "commands"
ENTITIES_FILE = "entities"
ENTITY_LOOT_FILE = "entityLoot"
FOODS_FILE = "foods"
ITEMS_FILE = "items"
LOGIN_PACKET_FILE = "loginPacket"
MATERIALS_FILE = "materials"
PROTOCOL_FILE = "protocol"
RECIPES_FILE = "recipes"
TINTS_FILE = "tints"
ENCHANTMENTS_FILE = "enchantments"
MAP_ICONS_FILE = "mapIcons"
PARTICLES_FILE = "particles"
PROTOCOL_VERSIONS_FILE = "protocolVersions"
VERSIONS_FILE = "versions"

DATAPATHS_FILE = "dataPaths.json"


def _edition(data: Mapping, key: str) -> dict[str, dict[str, str]]:
    if key not in data:
        raise JsonError(f"missing field `{key}`")
    versions = data[key]
    if not isinstance(versions, Mapping):
        raise JsonError(f"invalid type for `{key}`: expected an object")
    table: dict[str, dict[str, str]] = {}
    for version, files in versions.items():
        if not isinstance(files, Mapping) or not all(
            isinstance(location, str) for location in files.values()
        ):
            raise JsonError(f"invalid value for `{key}.{version}`: expected an object of strings")
        table[version] = dict(files)
    return table


@dataclass(frozen=True)
class Datapaths:
    """Where each data file lives, per edition and game version."""

    pc: dict[str, dict[str, str]]
    bedrock: dict[str, dict[str, str]]

    @classmethod
    def from_dict(cls, data: Any) -> Datapaths:
        if not isinstance(data, Mapping):
            raise JsonError("invalid type: expected an object for data paths")
        return cls(pc=_edition(data, "pc"), bedrock=_edition(data, "bedrock"))


class DataStore:
    """Reads data files from a data directory laid out like the upstream data set."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        self._datapaths: Optional[Datapaths] = None

    def _read(self, relative: str, missing_name: str, encoding_name: str) -> str:
        path = self.root / relative
        if not path.is_file():
            raise NotFoundError(missing_name)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(missing_name) from None
        except OSError as exc:
            raise DataIOError(exc) from exc
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidEncodingError(encoding_name) from None

    def datapaths(self) -> Datapaths:
        """Return the parsed path table, reading it on first use."""
        if self._datapaths is None:
            content = self._read(DATAPATHS_FILE, DATAPATHS_FILE, DATAPATHS_FILE)
            try:
                decoded = json.loads(content)
            except ValueError as exc:
                raise JsonError(exc) from exc
            self._datapaths = Datapaths.from_dict(decoded)
        return self._datapaths

    def path(self, version: Version, filename: str) -> str:
        """Return the directory that holds `filename` for the given version."""
        files = self.datapaths().pc.get(version.minecraft_version)
        if files is None:
            raise NotFoundError(version.minecraft_version)
        location = files.get(filename)
        if location is None:
            raise NotFoundError(filename)
        return location

    def common_file(self, filename: str) -> str:
        """Return the text of a file shared by all versions."""
        return self._read(f"pc/common/{filename}.json", filename, filename)

    def version_specific_file(self, version: Version, filename: str) -> str:
        """Return the text of a file as it stands for the given version."""
        location = self.path(version, filename)
        return self._read(
            f"{location}/{filename}.json",
            f"{version.minecraft_version}/{filename}",
            filename,
        )