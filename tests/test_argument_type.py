import pytest

from cairofuzz.argument_type import ArgumentType, map_argument_type


def test_felt():
    assert map_argument_type("felt252") is ArgumentType.FELT


def test_felt_span():
    assert map_argument_type("core::array::Span::<core::felt252>") is ArgumentType.FELT_ARRAY


@pytest.mark.parametrize("name", ["u256", "core::integer::u128", "", "Felt252"])
def test_unsupported(name):
    assert map_argument_type(name) is None