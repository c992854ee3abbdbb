"""Structured values."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from kvlog.error import KvError

__all__ = ["ValueKind", "Value", "to_value", "KvError"]

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_U32_MAX = 2**32 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U64_MAX = 2**64 - 1
_I128_MIN, _I128_MAX = -(2**127), 2**127 - 1
_U128_MAX = 2**128 - 1

_RANGES = {
    "i64": (_I64_MIN, _I64_MAX),
    "u64": (0, _U64_MAX),
    "i128": (_I128_MIN, _I128_MAX),
    "u128": (0, _U128_MAX),
}


class ValueKind(Enum):
    """The kind of datum held by a value."""

    NULL = "null"
    BOOL = "bool"
    STR = "str"
    CHAR = "char"
    I64 = "i64"
    U64 = "u64"
    F64 = "f64"
    I128 = "i128"
    U128 = "u128"
    DEBUG = "debug"
    DISPLAY = "display"
    ERROR = "error"


def _check_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, not {type(value).__name__!r}")
    low, high = _RANGES[name]
    if not low <= value <= high:
        raise OverflowError(f"{value} is out of range for {name}")
    return value


def _in_range(value: int, name: str) -> int | None:
    low, high = _RANGES[name]
    return value if low <= value <= high else None


def _display_float(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", "0") and repr(value).startswith("-"):
        return "-0"
    return text


def _debug_float(value: float) -> str:
    text = _display_float(value)
    if text.lstrip("-").isdigit():
        text += ".0"
    return text


_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def _escape(text: str, quote: str) -> str:
    out = []
    for ch in text:
        if ch == quote:
            out.append("\\" + ch)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable():
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return "".join(out)


class Value:
    """An immutable bag holding a structured datum of one of a few kinds."""

    __slots__ = ("_kind", "_inner")

    def __init__(self, kind: ValueKind, inner: Any = None) -> None:
        self._kind = kind
        self._inner = inner

    @classmethod
    def null(cls) -> Value:
        """Get a null value."""
        return cls(ValueKind.NULL)

    @classmethod
    def from_any(cls, value: Any) -> Value:
        """Get a value from anything that can be converted into one."""
        return to_value(value)

    @classmethod
    def from_debug(cls, value: Any) -> Value:
        """Get a value formatted with the object's ``repr``."""
        return cls(ValueKind.DEBUG, value)

    @classmethod
    def from_display(cls, value: Any) -> Value:
        """Get a value formatted with the object's ``str``."""
        return cls(ValueKind.DISPLAY, value)

    @classmethod
    def from_error(cls, err: BaseException) -> Value:
        """Get a value from an exception."""
        if not isinstance(err, BaseException):
            raise TypeError(f"expected an exception, not {type(err).__name__!r}")
        return cls(ValueKind.ERROR, err)

    @classmethod
    def from_bool(cls, value: bool) -> Value:
        """Get a boolean value."""
        if not isinstance(value, bool):
            raise TypeError(f"expected a bool, not {type(value).__name__!r}")
        return cls(ValueKind.BOOL, value)

    @classmethod
    def from_char(cls, value: str) -> Value:
        """Get a value from a single character."""
        if not isinstance(value, str) or len(value) != 1:
            raise TypeError("expected a string of exactly one character")
        return cls(ValueKind.CHAR, value)

    @classmethod
    def from_str(cls, value: str) -> Value:
        """Get a string value."""
        if not isinstance(value, str):
            raise TypeError(f"expected a string, not {type(value).__name__!r}")
        return cls(ValueKind.STR, value)

    @classmethod
    def from_i64(cls, value: int) -> Value:
        """Get a signed 64-bit integer value."""
        return cls(ValueKind.I64, _check_int(value, "i64"))

    @classmethod
    def from_u64(cls, value: int) -> Value:
        """Get an unsigned 64-bit integer value."""
        return cls(ValueKind.U64, _check_int(value, "u64"))

    @classmethod
    def from_i128(cls, value: int) -> Value:
        """Get a signed 128-bit integer value."""
        return cls(ValueKind.I128, _check_int(value, "i128"))

    @classmethod
    def from_u128(cls, value: int) -> Value:
        """Get an unsigned 128-bit integer value."""
        return cls(ValueKind.U128, _check_int(value, "u128"))

    @classmethod
    def from_f64(cls, value: float) -> Value:
        """Get a floating point value."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected a float, not {type(value).__name__!r}")
        return cls(ValueKind.F64, float(value))

    def kind(self) -> ValueKind:
        """The kind of datum this value holds."""
        return self._kind

    def to_value(self) -> Value:
        """Return this value."""
        return self

    def _integer(self) -> int | None:
        if self._kind in (ValueKind.I64, ValueKind.U64, ValueKind.I128, ValueKind.U128):
            return self._inner
        return None

    def to_u64(self) -> int | None:
        """Try convert this value into an unsigned 64-bit integer."""
        v = self._integer()
        return None if v is None else _in_range(v, "u64")

    def to_i64(self) -> int | None:
        """Try convert this value into a signed 64-bit integer."""
        v = self._integer()
        return None if v is None else _in_range(v, "i64")

    def to_u128(self) -> int | None:
        """Try convert this value into an unsigned 128-bit integer."""
        v = self._integer()
        return None if v is None else _in_range(v, "u128")

    def to_i128(self) -> int | None:
        """Try convert this value into a signed 128-bit integer."""
        v = self._integer()
        return None if v is None else _in_range(v, "i128")

    def to_f64(self) -> float | None:
        """Try convert this value into a float.

        Only integers from the signed 32-bit minimum to the unsigned
        32-bit maximum convert.
        """
        if self._kind is ValueKind.F64:
            return self._inner
        if self._kind in (ValueKind.I64, ValueKind.I128):
            return float(self._inner) if _I32_MIN <= self._inner <= _I32_MAX else None
        if self._kind in (ValueKind.U64, ValueKind.U128):
            return float(self._inner) if self._inner <= _U32_MAX else None
        return None

    def to_char(self) -> str | None:
        """Try convert this value into a single character."""
        return self._inner if self._kind is ValueKind.CHAR else None

    def to_bool(self) -> bool | None:
        """Try convert this value into a boolean."""
        return self._inner if self._kind is ValueKind.BOOL else None

    def to_borrowed_str(self) -> str | None:
        """Try get the string held by this value."""
        return self._inner if self._kind is ValueKind.STR else None

    def to_cow_str(self) -> str | None:
        """Try convert this value into a string."""
        return self._inner if self._kind is ValueKind.STR else None

    def to_borrowed_error(self) -> BaseException | None:
        """Try get the exception held by this value."""
        return self._inner if self._kind is ValueKind.ERROR else None

    def visit(self, visitor: Any) -> None:
        """Feed this value to the matching method of a value visitor."""
        kind, inner = self._kind, self._inner
        if kind is ValueKind.NULL:
            visitor.visit_null()
        elif kind is ValueKind.BOOL:
            visitor.visit_bool(inner)
        elif kind is ValueKind.STR:
            visitor.visit_borrowed_str(inner)
        elif kind is ValueKind.CHAR:
            visitor.visit_char(inner)
        elif kind is ValueKind.I64:
            visitor.visit_i64(inner)
        elif kind is ValueKind.U64:
            visitor.visit_u64(inner)
        elif kind is ValueKind.F64:
            visitor.visit_f64(inner)
        elif kind is ValueKind.I128:
            visitor.visit_i128(inner)
        elif kind is ValueKind.U128:
            visitor.visit_u128(inner)
        elif kind is ValueKind.ERROR:
            visitor.visit_borrowed_error(inner)
        elif kind is ValueKind.DEBUG:
            visitor.visit_any(Value.from_debug(inner))
        else:
            visitor.visit_any(Value.from_display(inner))

    def __str__(self) -> str:
        kind, inner = self._kind, self._inner
        if kind is ValueKind.NULL:
            return "None"
        if kind is ValueKind.BOOL:
            return "true" if inner else "false"
        if kind is ValueKind.F64:
            return _display_float(inner)
        if kind is ValueKind.DEBUG:
            return repr(inner)
        return str(inner)

    def __repr__(self) -> str:
        kind, inner = self._kind, self._inner
        if kind is ValueKind.NULL:
            return "None"
        if kind is ValueKind.BOOL:
            return "true" if inner else "false"
        if kind is ValueKind.STR:
            return '"' + _escape(inner, '"') + '"'
        if kind is ValueKind.CHAR:
            return "'" + _escape(inner, "'") + "'"
        if kind is ValueKind.F64:
            return _debug_float(inner)
        if kind in (ValueKind.DEBUG, ValueKind.ERROR):
            return repr(inner)
        return str(inner)


def to_value(obj: Any) -> Value:
    """Capture a Python object as a value.

    ``None`` is null; integers take the narrowest of i64, u64, i128 and u128
    that holds them; exceptions are captured as errors; other objects must
    provide a ``to_value`` method.
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Value.null()
    if isinstance(obj, bool):
        return Value.from_bool(obj)
    if isinstance(obj, int):
        for name, factory in (
            ("i64", Value.from_i64),
            ("u64", Value.from_u64),
            ("i128", Value.from_i128),
            ("u128", Value.from_u128),
        ):
            if _in_range(obj, name) is not None:
                return factory(obj)
        raise OverflowError(f"{obj} is too large to capture as a value")
    if isinstance(obj, float):
        return Value.from_f64(obj)
    if isinstance(obj, str):
        return Value.from_str(obj)
    if isinstance(obj, BaseException):
        return Value.from_error(obj)
    converter = getattr(obj, "to_value", None)
    if callable(converter):
        result = converter()
        if not isinstance(result, Value):
            raise TypeError("to_value() must return a Value")
        return result
    raise TypeError(f"cannot convert {type(obj).__name__!r} into a value")