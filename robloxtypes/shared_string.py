"""Deduplicated binary data."""

from __future__ import annotations

import hashlib
import threading
import weakref
from dataclasses import dataclass

_DIGEST_SIZE = 32


class _Buffer:
    __slots__ = ("data", "__weakref__")

    def __init__(self, data: bytes) -> None:
        self.data = data


_cache: weakref.WeakValueDictionary[bytes, _Buffer] = weakref.WeakValueDictionary()
_cache_lock = threading.Lock()


@dataclass(frozen=True, order=True)
class SharedStringHash:
    """The 32-byte content digest identifying a SharedString."""

    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.digest, bytes) or len(self.digest) != _DIGEST_SIZE:
            raise ValueError(f"digest must be {_DIGEST_SIZE} bytes")

    def as_bytes(self) -> bytes:
        """Return the raw digest bytes."""
        return self.digest

    def __repr__(self) -> str:
        return f"SharedStringHash({self.digest.hex()})"


class SharedString:
    """Binary data that is commonly repeated.

    Equal buffers share a single stored copy for as long as any SharedString
    holding them is alive.
    """

    __slots__ = ("_buffer", "_digest")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, not {type(data).__name__}")
        data = bytes(data)
        digest = hashlib.blake2b(data, digest_size=_DIGEST_SIZE).digest()
        with _cache_lock:
            buffer = _cache.get(digest)
            if buffer is None:
                buffer = _Buffer(data)
                _cache[digest] = buffer
        self._buffer = buffer
        self._digest = digest

    @property
    def data(self) -> bytes:
        """The shared bytes."""
        return self._buffer.data

    def hash(self) -> SharedStringHash:
        """Return the digest identifying this data."""
        return SharedStringHash(self._digest)

    def __bytes__(self) -> bytes:
        return self._buffer.data

    def __len__(self) -> int:
        return len(self._buffer.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharedString):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __repr__(self) -> str:
        return f"SharedString({self._buffer.data!r})"