"""Untyped binary data."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BinaryString:
    """Container for binary data whose meaning is unknown or not modelled."""

    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, not {type(self.data).__name__}")
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def to_json(self) -> str:
        """Return the JSON form: the data encoded as standard base64."""
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def from_json(cls, data: Any) -> BinaryString:
        """Decode a base64 string; raise ValueError if it is not valid base64."""
        if not isinstance(data, str):
            raise TypeError("expected a base64 string")
        try:
            return cls(base64.b64decode(data, validate=True))
        except binascii.Error as error:
            raise ValueError(f"invalid base64 data: {error}") from None