"""Lookups over the protocol version table shared by all game versions."""

from __future__ import annotations

import json
from typing import Any

from mcdata.data import PROTOCOL_VERSIONS_FILE, VERSIONS_FILE, DataStore
from mcdata.errors import JsonError, NotFoundError
from mcdata.models import Version

LATEST_STABLE = "1.18.1"


def _decode_list(content: str, what: str) -> list[Any]:
    try:
        decoded = json.loads(content)
    except ValueError as exc:
        raise JsonError(exc) from exc
    if not isinstance(decoded, list):
        raise JsonError(f"invalid type: expected a list of {what}, got {type(decoded).__name__}")
    return decoded


def versions(store: DataStore) -> list[Version]:
    """Return every known protocol version, in file order."""
    content = store.common_file(PROTOCOL_VERSIONS_FILE)
    return [Version.from_dict(entry) for entry in _decode_list(content, "versions")]


def versions_by_minecraft_version(store: DataStore) -> dict[str, Version]:
    """Return the versions keyed by game release; later entries win on duplicates."""
    return {version.minecraft_version: version for version in versions(store)}


def latest_stable(store: DataStore) -> Version:
    """Return the version currently treated as the latest stable release."""
    try:
        return versions_by_minecraft_version(store)[LATEST_STABLE]
    except KeyError:
        raise NotFoundError(LATEST_STABLE) from None


def available_versions(store: DataStore) -> list[str]:
    """Return the game releases for which data is available."""
    content = store.common_file(VERSIONS_FILE)
    names = _decode_list(content, "strings")
    for name in names:
        if not isinstance(name, str):
            raise JsonError(f"invalid type: expected a string, got {name!r}")
    return names