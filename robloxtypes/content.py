"""References to assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Content:
    """A reference to an asset; behaves as a plain string URL."""

    url: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.url, str):
            raise TypeError(f"content url must be a str, not {type(self.url).__name__}")

    def __str__(self) -> str:
        return self.url

    def to_json(self) -> str:
        """Return the JSON form: the URL string itself."""
        return self.url

    @classmethod
    def from_json(cls, data: Any) -> Content:
        """Build a content reference from a JSON string."""
        if not isinstance(data, str):
            raise TypeError("expected a string")
        return cls(data)