"""Errors raised while working with structured key-value data."""

from __future__ import annotations

from enum import Enum

__all__ = ["KvError"]

_FMT_MESSAGE = "an error occurred when formatting an argument"


class _Kind(Enum):
    MSG = "msg"
    BOXED = "boxed"
    FMT = "fmt"


class KvError(Exception):
    """An error encountered while working with structured data."""

    def __init__(
        self,
        message: str | None = None,
        *,
        _kind: _Kind = _Kind.MSG,
        _inner: BaseException | str | None = None,
    ) -> None:
        if _kind is _Kind.MSG and not isinstance(message, str):
            raise TypeError("an error message must be a string")
        self._kind = _kind
        self._message = message
        self._inner = _inner
        super().__init__(str(self))
        if isinstance(_inner, BaseException):
            self.__cause__ = _inner

    @classmethod
    def msg(cls, message: str) -> KvError:
        """Create an error from a message."""
        return cls(message, _kind=_Kind.MSG)

    @classmethod
    def boxed(cls, err: BaseException | str) -> KvError:
        """Create an error wrapping another error or an error string."""
        if not isinstance(err, (BaseException, str)):
            raise TypeError(
                f"cannot wrap a value of type {type(err).__name__!r} as an error"
            )
        return cls(_kind=_Kind.BOXED, _inner=err)

    @classmethod
    def fmt(cls) -> KvError:
        """Create an error signalling that formatting a value failed."""
        return cls(_kind=_Kind.FMT)

    def __str__(self) -> str:
        if self._kind is _Kind.BOXED:
            return str(self._inner)
        if self._kind is _Kind.FMT:
            return _FMT_MESSAGE
        return self._message if self._message is not None else ""

    def __repr__(self) -> str:
        if self._kind is _Kind.BOXED:
            return f"KvError.boxed({self._inner!r})"
        if self._kind is _Kind.FMT:
            return "KvError.fmt()"
        return f"KvError.msg({self._message!r})"