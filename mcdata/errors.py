"""Errors raised while locating, decoding and parsing game data."""

from __future__ import annotations


class DataError(Exception):
    """Base class for every error raised while reading game data."""


class DataIOError(DataError):
    """Reading a data file failed at the operating-system level."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"IO Error: {cause}")


class JsonError(DataError):
    """A data file is not valid JSON or does not have the expected shape."""

    def __init__(self, message: object) -> None:
        self.message = str(message)
        super().__init__(f"JSON Error: {message}")


class NotFoundError(DataError):
    """A requested file, version or record does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Object {name} not found")


class InvalidEncodingError(DataError):
    """A data file is not valid UTF-8."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Invalid encoding of file {filename}")