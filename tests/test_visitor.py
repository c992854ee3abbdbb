import pytest

from kvlog.error import KvError
from kvlog.value import Value, ValueKind
from kvlog.visitor import VisitValue


class Recorder(VisitValue):
    """Records every call to visit_any."""

    def __init__(self):
        self.seen = []

    def visit_any(self, value):
        self.seen.append(value)


class Unexpected(VisitValue):
    def visit_any(self, value):
        raise AssertionError(f"unexpected value: {value!r}")


def test_cannot_instantiate_without_visit_any():
    with pytest.raises(TypeError):
        VisitValue()


def test_visit_integer():
    class Extract(Unexpected):
        def __init__(self):
            self.found = None

        def visit_u64(self, value):
            self.found = value

    extract = Extract()
    Value.from_u64(42).visit(extract)
    assert extract.found == 42


def test_visit_borrowed_str():
    class Extract(Unexpected):
        def __init__(self):
            self.found = None

        def visit_borrowed_str(self, value):
            self.found = value

    extract = Extract()
    short_lived = "".join(["A short-lived ", "string"])
    Value.from_str(short_lived).visit(extract)
    assert extract.found == "A short-lived string"


@pytest.mark.parametrize(
    "value, kind, expected",
    [
        (Value.from_u64(7), ValueKind.U64, 7),
        (Value.from_i64(-7), ValueKind.I64, -7),
        (Value.from_u128(2**100), ValueKind.U128, 2**100),
        (Value.from_i128(-(2**100)), ValueKind.I128, -(2**100)),
        (Value.from_f64(1.5), ValueKind.F64, 1.5),
    ],
)
def test_numbers_fall_back_to_visit_any(value, kind, expected):
    rec = Recorder()
    value.visit(rec)
    assert len(rec.seen) == 1
    assert rec.seen[0].kind() is kind
    assert rec.seen[0].to_value().kind() is kind
    if kind is ValueKind.F64:
        assert rec.seen[0].to_f64() == expected
    else:
        assert rec.seen[0].to_i128() == expected or rec.seen[0].to_u128() == expected


def test_null_falls_back_to_visit_any():
    rec = Recorder()
    Value.null().visit(rec)
    assert [v.kind() for v in rec.seen] == [ValueKind.NULL]


def test_bool_falls_back_to_visit_any():
    rec = Recorder()
    Value.from_bool(True).visit(rec)
    assert rec.seen[0].to_bool() is True


def test_str_falls_back_to_visit_any():
    rec = Recorder()
    Value.from_str("a string").visit(rec)
    assert rec.seen[0].to_borrowed_str() == "a string"


def test_char_is_visited_as_str():
    class Extract(Unexpected):
        def __init__(self):
            self.found = None

        def visit_str(self, value):
            self.found = value

    extract = Extract()
    Value.from_char("⛰").visit(extract)
    assert extract.found == "⛰"


def test_char_reaches_visit_any_as_string():
    rec = Recorder()
    Value.from_char("a").visit(rec)
    assert rec.seen[0].kind() is ValueKind.STR
    assert rec.seen[0].to_borrowed_str() == "a"


def test_error_falls_back_to_visit_any():
    err = ValueError("an error")
    rec = Recorder()
    Value.from_error(err).visit(rec)
    assert rec.seen[0].to_borrowed_error() is err


def test_visit_error_default():
    err = RuntimeError("boom")
    rec = Recorder()
    VisitValue.visit_error(rec, err)
    assert len(rec.seen) == 1
    assert rec.seen[0].to_borrowed_error() is err


def test_debug_and_display_reach_visit_any():
    class Data:
        def __repr__(self):
            return "Data { a: 1 }"

        def __str__(self):
            return "data"

    rec = Recorder()
    Value.from_debug(Data()).visit(rec)
    Value.from_display(Data()).visit(rec)
    assert [repr(v) for v in rec.seen[:1]] == ["Data { a: 1 }"]
    assert str(rec.seen[1]) == "data"


def test_is_numeric_visitor():
    class IsNumeric(VisitValue):
        def __init__(self):
            self.numeric = None

        def visit_any(self, value):
            self.numeric = False

        def visit_u64(self, value):
            self.numeric = True

        def visit_i64(self, value):
            self.numeric = True

        def visit_u128(self, value):
            self.numeric = True

        def visit_i128(self, value):
            self.numeric = True

        def visit_f64(self, value):
            self.numeric = True

    visitor = IsNumeric()
    Value.from_i64(1).visit(visitor)
    assert visitor.numeric is True
    Value.from_str("1").visit(visitor)
    assert visitor.numeric is False


def test_visitor_error_propagates():
    class Failing(VisitValue):
        def visit_any(self, value):
            raise KvError.msg("visitor failed")

    with pytest.raises(KvError, match="visitor failed"):
        Value.from_u64(1).visit(Failing())