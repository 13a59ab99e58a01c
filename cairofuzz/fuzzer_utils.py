"""Helpers for the fuzzer: banner, argument types, prototypes, entry points."""

from __future__ import annotations

from .argument_type import ArgumentType, map_argument_type
from .sierra import (
    Function,
    FunctionId,
    Program,
    get_cairo_native_version,
    get_function_by_id,
)

_INIT_MESSAGE_FORMAT = """
=============================================================================================================================================================
╔═╗ ┌─┐ ┬ ┬─┐ ┌───┐   ╔═╗ ┬ ┬ ┌─┐ ┌─┐ ┌─┐ ┬─┐      | Seed -- {}
║   ├─┤ │ ├┬┘ │2.0│───╠╣  │ │ ┌─┘ ┌─┘ ├┤  ├┬┘      | cairo-native version -- {}
╚═╝ ┴ ┴ ┴ ┴└─ └───┘   ╚   └─┘ └─┘ └─┘ └─┘ ┴└─      |
=============================================================================================================================================================
"""


class EntryPointNotFoundError(LookupError):
    """Raised when no function carries the requested entry point name."""


def init_message(seed: int) -> str:
    """Return the banner shown at launch, with the seed and engine version."""
    message = _INIT_MESSAGE_FORMAT.replace("{}", str(seed), 1)
    return message.replace("{}", get_cairo_native_version(), 1)


def print_init_message(seed: int) -> None:
    """Print the launch banner."""
    print(init_message(seed))


def get_function_argument_types(
    program: Program | None, entry_point_id: FunctionId | None
) -> list[ArgumentType]:
    """Return the supported argument types of the entry point, in order."""
    if program is None or entry_point_id is None:
        return []
    func = get_function_by_id(program, entry_point_id)
    if func is None:
        return []
    mapped = (
        map_argument_type(param.debug_name)
        for param in func.signature.param_types
        if param.debug_name is not None
    )
    return [arg for arg in mapped if arg is not None]


def _debug_names(types, what: str) -> list[str]:
    names = [t.debug_name for t in types]
    if any(name is None for name in names):
        raise ValueError(f"{what} name not found")
    return names


def format_function_prototype(function: Function) -> str:
    """Render a function as ``name (params) -> (returns)``."""
    name = function.id.debug_name
    if name is None:
        name = str(function.id.id)
    params = _debug_names(function.signature.param_types, "Parameter")
    rets = _debug_names(function.signature.ret_types, "Return type")
    return f"{name} ({', '.join(params)}) -> ({', '.join(rets)})"


def print_contract_functions(program: Program | None) -> None:
    """Print the prototype of every function of the program."""
    print("Contract functions :\n")
    if program is None:
        return
    for function in program.funcs:
        print(f"- {format_function_prototype(function)}")


def find_entry_point_id(program: Program | None, entry_point: str) -> FunctionId:
    """Return the id of the function whose debug name is the entry point."""
    if program is None:
        raise ValueError("Sierra program not available")
    for function in program.funcs:
        if function.id.debug_name == entry_point:
            return function.id
    raise EntryPointNotFoundError(f"Entry point '{entry_point}' not found")