"""Tests for the primitive value wrapper."""

import pytest

from jss.errors import UnsupportedValueType
from jss.rules import Rules
from jss.value import Value, display


class TestDisplay:
    def test_scalars(self):
        assert display(True) == "true"
        assert display(12) == "12"
        assert display(2.5) == "2.5"
        assert display(3.0) == "3"
        assert display("red") == "red"

    def test_nested_lists_are_flattened(self):
        assert display([1, [2, 3], ("a", False)]) == "1 2 3 a false"

    def test_rejects_none(self):
        with pytest.raises(UnsupportedValueType) as info:
            display(None)
        assert info.value.value is None


class TestValue:
    def test_wraps_primitive(self):
        assert str(Value(10)) == "10"
        assert str(Value("1px solid")) == "1px solid"

    def test_tuple_is_stored_as_list(self):
        value = Value((1, 2))
        assert value.is_list()
        assert value.inner == [1, 2]

    def test_new_does_not_rewrap(self):
        value = Value(1)
        assert Value.new(value) is value

    def test_rejects_unsupported(self):
        with pytest.raises(UnsupportedValueType):
            Value(None)  # type: ignore[arg-type]

    def test_append_to_scalar_makes_a_list(self):
        value = Value(1)
        value.append("px")
        assert value == Value([1, "px"])

    def test_append_to_list_pushes(self):
        value = Value([1, 2])
        value.append(3)
        assert value.inner == [1, 2, 3]
        assert str(value) == "1 2 3"

    def test_rejects_blocks_in_lists(self):
        with pytest.raises(UnsupportedValueType):
            Value([1, {"x": 1}])
        with pytest.raises(UnsupportedValueType):
            Value([Rules([("x", 1)])])

    def test_display_rejects_blocks(self):
        with pytest.raises(UnsupportedValueType):
            display([Rules([("x", 1)])])

    def test_accessors(self):
        assert Value("a").as_str() == "a"
        assert Value(1).as_str() is None
        assert Value(True).as_bool() is True
        assert Value(1).as_bool() is None
        assert Value(3).as_float() == 3.0
        assert Value(2.9).as_int() == 2
        assert Value(True).as_int() is None
        assert Value("1").as_float() is None

    def test_iter_and_len(self):
        assert [str(v) for v in Value([1, 2])] == ["1", "2"]
        assert list(Value(5)) == [Value(5)]
        assert len(Value([1, 2, 3])) == 3
        assert len(Value("x")) == 1

    def test_equality_is_type_aware(self):
        assert Value(1) != Value(True)
        assert Value(1) != 1
