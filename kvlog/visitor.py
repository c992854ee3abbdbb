"""Visitors that inspect the datum held by a value."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kvlog.error import KvError
from kvlog.value import Value

__all__ = ["VisitValue", "KvError"]


class VisitValue(ABC):
    """A visitor for a :class:`~kvlog.value.Value`.

    Only :meth:`visit_any` must be provided. Every more specific method
    falls back to it unless overridden. Maps, sequences and values captured
    through ``repr`` or ``str`` always arrive at :meth:`visit_any`.
    A visitor signals failure by raising :class:`~kvlog.error.KvError`.
    """

    @abstractmethod
    def visit_any(self, value: Value) -> None:
        """Visit any value; the fallback for every other method."""

    def visit_null(self) -> None:
        """Visit an empty value."""
        self.visit_any(Value.null())

    def visit_u64(self, value: int) -> None:
        """Visit an unsigned integer."""
        self.visit_any(Value.from_u64(value))

    def visit_i64(self, value: int) -> None:
        """Visit a signed integer."""
        self.visit_any(Value.from_i64(value))

    def visit_u128(self, value: int) -> None:
        """Visit a big unsigned integer."""
        self.visit_any(Value.from_u128(value))

    def visit_i128(self, value: int) -> None:
        """Visit a big signed integer."""
        self.visit_any(Value.from_i128(value))

    def visit_f64(self, value: float) -> None:
        """Visit a floating point number."""
        self.visit_any(Value.from_f64(value))

    def visit_bool(self, value: bool) -> None:
        """Visit a boolean."""
        self.visit_any(Value.from_bool(value))

    def visit_str(self, value: str) -> None:
        """Visit a string."""
        self.visit_any(Value.from_str(value))

    def visit_borrowed_str(self, value: str) -> None:
        """Visit a string held by the value itself."""
        self.visit_str(value)

    def visit_char(self, value: str) -> None:
        """Visit a single character; by default as a string."""
        self.visit_str(value)

    def visit_error(self, err: BaseException) -> None:
        """Visit an exception."""
        self.visit_any(Value.from_error(err))

    def visit_borrowed_error(self, err: BaseException) -> None:
        """Visit an exception held by the value itself."""
        self.visit_any(Value.from_error(err))