"""A minimal model of Sierra programs: functions, their ids and signatures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_CAIRO_NATIVE_VERSION = "0.2.5-rc1"


@dataclass(frozen=True)
class FunctionId:
    """Identifier of a Sierra function; equality ignores the debug name."""

    id: int
    debug_name: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.debug_name if self.debug_name is not None else f"[{self.id}]"


@dataclass(frozen=True)
class TypeRef:
    """Reference to a concrete Sierra type; equality ignores the debug name."""

    id: int
    debug_name: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.debug_name if self.debug_name is not None else f"[{self.id}]"


@dataclass(frozen=True)
class Signature:
    """Parameter and return types of a function."""

    param_types: tuple[TypeRef, ...] = ()
    ret_types: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class Function:
    """A Sierra function declaration."""

    id: FunctionId
    signature: Signature = field(default_factory=Signature)


@dataclass(frozen=True)
class Program:
    """The functions of a Sierra program."""

    funcs: tuple[Function, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Program:
        """Build a program from its JSON form, which holds a "funcs" list."""
        try:
            funcs = tuple(_parse_function(raw) for raw in data["funcs"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed Sierra program: {exc}") from exc
        return cls(funcs=funcs)


def _parse_id(raw: dict[str, Any]) -> tuple[int, str | None]:
    debug_name = raw.get("debug_name")
    return int(raw["id"]), None if debug_name is None else str(debug_name)


def _parse_type(raw: dict[str, Any]) -> TypeRef:
    return TypeRef(*_parse_id(raw))


def _parse_function(raw: dict[str, Any]) -> Function:
    signature = raw.get("signature", {})
    return Function(
        id=FunctionId(*_parse_id(raw["id"])),
        signature=Signature(
            param_types=tuple(_parse_type(t) for t in signature.get("param_types", ())),
            ret_types=tuple(_parse_type(t) for t in signature.get("ret_types", ())),
        ),
    )


def load_program(path: str | Path) -> Program:
    """Read a Sierra program from a JSON file."""
    with open(path, encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"malformed Sierra program: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("malformed Sierra program: expected a JSON object")
    return Program.from_dict(data)


def get_cairo_native_version() -> str:
    """Return the version of the native execution engine targeted."""
    return _CAIRO_NATIVE_VERSION


def get_function_by_id(program: Program, function_id: FunctionId) -> Function | None:
    """Find the function with the given id, or None."""
    return next((func for func in program.funcs if func.id == function_id), None)