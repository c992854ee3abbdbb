"""Sources of key-value pairs.

A source is like an iterator over its key-values, except that it pushes
each pair into a visitor rather than being pulled from.

Besides subclasses of :class:`Source`, the module-level :func:`visit`,
:func:`get` and :func:`count` accept:

* a ``(key, value)`` tuple, where the key is a string or a
  :class:`~kvlog.key.Key`, as a single pair;
* a mapping from keys to values;
* a list or tuple of sources, visited in order;
* ``None``, as an empty source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from kvlog.error import KvError
from kvlog.key import Key, to_key
from kvlog.value import Value, to_value

__all__ = ["Source", "VisitSource", "visit", "get", "count", "KvError"]


class VisitSource(ABC):
    """A visitor for the key-value pairs in a source.

    A visitor signals failure by raising :class:`~kvlog.error.KvError`;
    the source then stops and lets the error propagate.
    """

    @abstractmethod
    def visit_pair(self, key: Key, value: Value) -> None:
        """Visit a key-value pair."""


class _CallbackVisitor(VisitSource):
    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[Key, Value], Any]) -> None:
        self._callback = callback

    def visit_pair(self, key: Key, value: Value) -> None:
        self._callback(key, value)


class Source(ABC):
    """A source of key-values.

    Only :meth:`visit` must be provided. A source makes no promise about the
    ordering or uniqueness of its pairs, but should yield the same pairs to
    every visitor that does not itself fail.
    """

    @abstractmethod
    def visit(self, visitor: VisitSource) -> None:
        """Feed every key-value pair to the visitor."""

    def get(self, key: Key | str) -> Value | None:
        """Get the value for a key, or ``None`` if the key is absent.

        If the key appears several times, the last one visited wins.
        """
        return _get_default(self, to_key(key))

    def count(self) -> int:
        """Count the key-value pairs that a visit would yield."""
        return _count_default(self)


def _as_visitor(visitor: Any) -> Any:
    if callable(getattr(visitor, "visit_pair", None)):
        return visitor
    if callable(visitor):
        return _CallbackVisitor(visitor)
    raise TypeError(
        f"{type(visitor).__name__!r} is neither a source visitor nor a callable"
    )


def _is_pair(source: Any) -> bool:
    return (
        isinstance(source, tuple)
        and len(source) == 2
        and isinstance(source[0], (str, Key))
    )


def _is_sequence(source: Any) -> bool:
    return isinstance(source, Sequence) and not isinstance(
        source, (str, bytes, bytearray)
    )


def _get_default(source: Any, key: Key) -> Value | None:
    found: Value | None = None

    def collect(pair_key: Key, value: Value) -> None:
        nonlocal found
        if pair_key == key:
            found = value

    try:
        visit(source, collect)
    except KvError:
        pass
    return found


def _count_default(source: Any) -> int:
    total = 0

    def tally(_key: Key, _value: Value) -> None:
        nonlocal total
        total += 1

    try:
        visit(source, tally)
    except KvError:
        pass
    return total


def _not_a_source(source: Any) -> TypeError:
    return TypeError(f"{type(source).__name__!r} is not a key-value source")


def visit(source: Any, visitor: Any) -> None:
    """Feed every key-value pair of a source to a visitor.

    The visitor is a :class:`VisitSource`, any object with a ``visit_pair``
    method, or a callable taking a key and a value.
    """
    visitor = _as_visitor(visitor)
    if source is None:
        return
    if isinstance(source, Source):
        source.visit(visitor)
    elif _is_pair(source):
        visitor.visit_pair(to_key(source[0]), to_value(source[1]))
    elif isinstance(source, Mapping):
        for pair_key, value in source.items():
            visitor.visit_pair(to_key(pair_key), to_value(value))
    elif _is_sequence(source):
        for item in source:
            visit(item, visitor)
    else:
        raise _not_a_source(source)


def get(source: Any, key: Key | str) -> Value | None:
    """Get the value for a key in a source, or ``None`` if it is absent."""
    key = to_key(key)
    if source is None:
        return None
    if isinstance(source, Source):
        return source.get(key)
    if _is_pair(source):
        return to_value(source[1]) if to_key(source[0]) == key else None
    if isinstance(source, Mapping):
        for candidate in (key.as_str(), key):
            if candidate in source:
                return to_value(source[candidate])
        return None
    if _is_sequence(source):
        for item in source:
            found = get(item, key)
            if found is not None:
                return found
        return None
    raise _not_a_source(source)


def count(source: Any) -> int:
    """Count the key-value pairs in a source."""
    if source is None:
        return 0
    if isinstance(source, Source):
        return source.count()
    if _is_pair(source):
        return 1
    if isinstance(source, Mapping):
        return len(source)
    if _is_sequence(source):
        return sum(count(item) for item in source)
    raise _not_a_source(source)