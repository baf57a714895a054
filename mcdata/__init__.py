"""Typed, read-only access to Minecraft game data files in a data directory."""

__version__ = "0.1.0"
__all__ = ["api", "data", "errors", "models", "resources", "versions"]