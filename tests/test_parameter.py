"""
Tests for type-tagged parameters.

Tests cover:
- Parameter construction, immutability and equality
- ParameterList ordering and snapshots
- Strict empty-list policy for types()/values()
"""
import dataclasses
from typing import List

import pytest

from privreflect import InvalidArgumentType, NoParametersSet, Parameter, ParameterList


class TestParameter:
    """Test the immutable (declared_type, value) pair."""

    @pytest.mark.parametrize("value", ["", " ", "　", "t", "test", "/!*;="])
    def test_string_argument(self, value):
        """Type and value are kept as given."""
        parameter = Parameter.of(str, value)

        assert parameter.declared_type is str
        assert parameter.value == value

    @pytest.mark.parametrize("value", [-1, 0, 1])
    def test_integer_argument(self, value):
        parameter = Parameter.of(int, value)

        assert parameter.declared_type is int
        assert parameter.value == value

    def test_list_argument(self):
        """Generic aliases are valid type tags."""
        parameter = Parameter.of(List[str], ["test"])

        assert parameter.declared_type == List[str]
        assert parameter.value == ["test"]

    def test_none_value_allowed(self):
        parameter = Parameter.of(str, None)
        assert parameter.value is None

    def test_value_defaults_to_none(self):
        assert Parameter.of(str).value is None

    def test_none_type_rejected(self):
        """A missing type tag fails immediately."""
        with pytest.raises(InvalidArgumentType):
            Parameter.of(None, "value")

    def test_is_frozen(self):
        parameter = Parameter.of(str, "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            parameter.value = "b"

    def test_equality(self):
        assert Parameter.of(str, "a") == Parameter.of(str, "a")
        assert Parameter.of(str, "a") != Parameter.of(bytes, "a")
        assert Parameter.of(int, 1) != Parameter.of(bool, True)


class TestParameterListAdd:
    """Test appending parameters."""

    def test_add_keeps_insertion_order(self):
        parameters = ParameterList()
        parameters.add(str, "a")
        parameters.add(int, 1)
        parameters.add(bool, True)

        assert parameters.types() == (str, int, bool)
        assert parameters.values() == ("a", 1, True)

    def test_add_none_value(self):
        parameters = ParameterList()
        parameters.add(str, None)

        assert parameters.types() == (str,)
        assert parameters.values() == (None,)

    def test_add_none_type_rejected(self):
        """Failure leaves the list unchanged."""
        parameters = ParameterList()
        with pytest.raises(InvalidArgumentType):
            parameters.add(None, "value")
        assert parameters.is_empty()

    def test_invalid_argument_type_is_type_error(self):
        with pytest.raises(TypeError):
            ParameterList().add(None)

    def test_len_and_iteration(self):
        parameters = ParameterList()
        parameters.add(str, "a")
        parameters.add(int, 2)

        assert len(parameters) == 2
        assert list(parameters) == [Parameter.of(str, "a"), Parameter.of(int, 2)]
        assert parameters.parameters() == (Parameter.of(str, "a"), Parameter.of(int, 2))


class TestParameterListSnapshots:
    """types()/values() are tuples taken at call time."""

    def test_snapshot_not_affected_by_later_add(self):
        parameters = ParameterList()
        parameters.add(str, "a")
        types = parameters.types()
        values = parameters.values()

        parameters.add(int, 1)

        assert types == (str,)
        assert values == ("a",)
        assert parameters.types() == (str, int)

    def test_list_stays_mutable_after_lookup(self):
        parameters = ParameterList()
        parameters.add(str, "a")
        parameters.types()
        parameters.clear()

        assert parameters.is_empty()


class TestEmptyPolicy:
    """Empty lists refuse types()/values() lookups."""

    def test_is_empty_on_new_list(self):
        assert ParameterList().is_empty()

    def test_types_on_empty_list(self):
        with pytest.raises(NoParametersSet) as exc_info:
            ParameterList().types()
        assert str(exc_info.value) == "No parameter is set. Parameter is required."

    def test_values_on_empty_list(self):
        with pytest.raises(NoParametersSet):
            ParameterList().values()

    def test_no_parameters_set_is_lookup_error(self):
        with pytest.raises(LookupError):
            ParameterList().types()

    def test_clear_makes_list_empty_again(self):
        parameters = ParameterList()
        parameters.add(str, "a")
        parameters.clear()

        with pytest.raises(NoParametersSet):
            parameters.values()


class TestParameterListEquality:
    """Structural equality."""

    def test_equal_lists(self):
        first, second = ParameterList(), ParameterList()
        first.add(str, "a")
        second.add(str, "a")

        assert first == second

    def test_different_lists(self):
        first, second = ParameterList(), ParameterList()
        first.add(str, "a")
        second.add(str, "b")

        assert first != second

    def test_repr_lists_parameters(self):
        parameters = ParameterList()
        parameters.add(int, 3)
        assert "Parameter(declared_type=<class 'int'>, value=3)" in repr(parameters)
