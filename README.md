# kvlog

Structured key-value data for log records.

A log record can carry attributes as well as a message. Each attribute is a
pair of a `Key` and a `Value`. A source holds a collection of pairs, and
visitors walk over what a source or a value holds.

The package has no dependencies beyond the standard library.

## Installation

```
pip install kvlog
```

## Keys (`kvlog.key`)

`Key` wraps a string. Equality, ordering and hashing depend only on that
string. `to_key` accepts a string, a `Key`, or any object with a `to_key()`
method that returns a `Key`; anything else raises `TypeError`.

```python
from kvlog.key import Key, to_key

key = Key.from_str("user")
assert key.as_str() == "user"
assert key.to_borrowed_str() == "user"
assert str(key) == "user"
assert to_key("user") == key
assert Key("a") < Key("b")
```

## Values (`kvlog.value`)

A `Value` holds one datum. `Value.kind()` tells which, as a member of
`ValueKind`: `NULL`, `BOOL`, `STR`, `CHAR`, `I64`, `U64`, `F64`, `I128`,
`U128`, `DEBUG`, `DISPLAY` or `ERROR`.

Build values with the `Value.from_*` class methods (`from_bool`,
`from_char`, `from_str`, `from_i64`, `from_u64`, `from_i128`, `from_u128`,
`from_f64`, `from_error`, `from_debug`, `from_display`), `Value.null()`, or
`to_value` / `Value.from_any`:

* `None` becomes null;
* an `int` takes the narrowest of i64, u64, i128 and u128 that holds it
  (larger integers raise `OverflowError`);
* `bool`, `float`, `str` and exceptions map to their own kinds;
* any other object must have a `to_value()` method returning a `Value`,
  otherwise `TypeError` is raised.

The integer constructors raise `OverflowError` for out-of-range numbers and
`TypeError` for non-integers.

```python
from kvlog.value import Value, ValueKind, to_value

v = to_value(42)
assert v.kind() is ValueKind.I64
assert v.to_i64() == 42
assert v.to_f64() == 42.0
assert str(v) == "42"

assert to_value(None).to_bool() is None
assert str(Value.null()) == "None"
assert str(to_value(True)) == "true"
assert repr(to_value("a")) == '"a"'

shown = Value.from_debug([1, 2, 3])
assert shown.to_i64() is None
assert str(shown) == "[1, 2, 3]"
```

Conversions (`to_u64`, `to_i64`, `to_u128`, `to_i128`, `to_f64`,
`to_char`, `to_bool`, `to_borrowed_str`, `to_cow_str`,
`to_borrowed_error`) return `None` when the value is of another kind or
does not fit. Integer-to-float conversion only works for integers from the
smallest 32-bit signed integer up to the largest 32-bit unsigned integer.

## Visiting a value (`kvlog.visitor`)

Subclass `VisitValue` and override the methods you care about. Only
`visit_any` is required; every other method falls back to it. A character
falls back to `visit_str`, and values captured with `from_debug` or
`from_display` always arrive at `visit_any`.

```python
from kvlog.value import to_value
from kvlog.visitor import VisitValue

class IsNumeric(VisitValue):
    def __init__(self):
        self.numeric = False

    def visit_any(self, value):
        self.numeric = False

    def visit_i64(self, value):
        self.numeric = True

checker = IsNumeric()
to_value(-7).visit(checker)
assert checker.numeric
```

## Sources (`kvlog.source`)

The functions `visit`, `get` and `count` accept subclasses of `Source`,
`(key, value)` tuples, mappings, lists or tuples of sources, and `None` as
an empty source. A visitor is a `VisitSource`, any object with a
`visit_pair(key, value)` method, or a plain callable taking a key and a
value.

```python
from kvlog import source
from kvlog.key import Key

pairs = [("a", 1), ("b", 2), ("a", 1)]
assert source.count(pairs) == 3
assert source.get(pairs, Key.from_str("b")).to_i64() == 2
assert source.get(pairs, "c") is None
assert source.get(None, Key.from_str("a")) is None

class Printer(source.VisitSource):
    def visit_pair(self, key, value):
        print(f"{key}: {value}")

source.visit({"a": 1, "b": 2}, Printer())
source.visit(("x", 3.5), lambda key, value: print(key, value))
```

To write your own source, subclass `Source` and implement `visit`; `get`
and `count` have default implementations built on it.

## Errors (`kvlog.error`)

`KvError` is the error for structured data. Create one with
`KvError.msg(message)`, `KvError.boxed(err)` to wrap another exception or
an error string, or `KvError.fmt()` for a formatting failure. A visitor
signals failure by raising `KvError`; the visit stops and the error
propagates.

## What this package does not do

It only models the key-value data that accompanies a log record. It has no
logger, no log levels or filtering, no record type and nothing that writes
log output.

## Running the tests

```
pip install -e ".[test]"
pytest
```