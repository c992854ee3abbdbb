"""Structured keys."""

from __future__ import annotations

from functools import total_ordering
from typing import Any

__all__ = ["Key", "to_key"]


@total_ordering
class Key:
    """A key in a key-value pair.

    Comparison, ordering and hashing depend only on the key's string.
    """

    __slots__ = ("_key",)

    def __init__(self, key: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f"a key must be a string, not {type(key).__name__!r}")
        self._key = key

    @classmethod
    def from_str(cls, key: str) -> Key:
        """Get a key from a string."""
        return cls(key)

    def as_str(self) -> str:
        """Get the string of this key."""
        return self._key

    def to_borrowed_str(self) -> str | None:
        """Get the key's string if it is not internally buffered."""
        return self._key

    def to_key(self) -> Key:
        """Return an equal key."""
        return Key(self._key)

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"Key({self._key!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Key):
            return self._key == other._key
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Key):
            return self._key < other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)


def to_key(value: Any) -> Key:
    """Convert a string, a key or any object with a ``to_key`` method into a key."""
    if isinstance(value, Key):
        return value.to_key()
    if isinstance(value, str):
        return Key(value)
    converter = getattr(value, "to_key", None)
    if callable(converter):
        result = converter()
        if not isinstance(result, Key):
            raise TypeError("to_key() must return a Key")
        return result
    raise TypeError(f"cannot convert {type(value).__name__!r} into a key")