import pytest

import kvlog.key
from kvlog.key import Key, to_key


def test_key_from_string():
    assert Key.from_str("a key").as_str() == "a key"


def test_key_to_borrowed():
    assert Key.from_str("a key").to_borrowed_str() == "a key"


def test_display_is_key_string():
    assert str(Key.from_str("a key")) == "a key"


def test_key_to_key_is_equal_copy():
    key = Key.from_str("a")
    copied = key.to_key()
    assert copied == key
    assert copied.as_str() == "a"


def test_equality_depends_on_string():
    assert Key("a") == Key.from_str("a")
    assert not (Key("a") == Key("b"))


def test_not_equal_to_plain_string():
    assert (Key("a") == "a") is False


def test_hash_matches_equal_keys():
    mapping = {Key("a"): 1, Key("b"): 2}
    assert mapping[Key.from_str("a")] == 1
    assert len({Key("a"), Key("a"), Key("b")}) == 2


def test_ordering_follows_strings():
    keys = [Key("c"), Key("a"), Key("b")]
    assert [k.as_str() for k in sorted(keys)] == ["a", "b", "c"]
    assert Key("a") < Key("b")
    assert Key("b") >= Key("a")


def test_rejects_non_string():
    with pytest.raises(TypeError):
        Key(1)


def test_to_key_from_str():
    assert to_key("name") == Key("name")


def test_to_key_from_key():
    key = Key("name")
    assert to_key(key) == key


def test_to_key_uses_to_key_method():
    class Named:
        def to_key(self):
            return Key("named")

    assert to_key(Named()) == Key("named")


def test_to_key_method_must_return_key():
    class Broken:
        def to_key(self):
            return "not a key"

    with pytest.raises(TypeError):
        kvlog.key.to_key(Broken())


def test_to_key_rejects_other_types():
    with pytest.raises(TypeError):
        to_key(3)