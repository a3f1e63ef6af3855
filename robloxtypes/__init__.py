"""Value types for Roblox instance properties, with JSON-compatible conversion."""

__version__ = "0.1.0"