"""Entry-point argument types the fuzzer knows how to generate."""

from __future__ import annotations

import enum


class ArgumentType(enum.Enum):
    """Kinds of arguments that can be passed to a function."""

    FELT = "felt"
    FELT_ARRAY = "felt_array"


_BY_DEBUG_NAME = {
    "felt252": ArgumentType.FELT,
    # felt252 spans are fed as a run of single felts
    "core::array::Span::<core::felt252>": ArgumentType.FELT_ARRAY,
}


def map_argument_type(debug_name: str) -> ArgumentType | None:
    """Map a Sierra type debug name to an argument type, or None if unsupported."""
    return _BY_DEBUG_NAME.get(debug_name)