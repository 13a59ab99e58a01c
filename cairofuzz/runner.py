"""Execution of Sierra entry points through a pluggable executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from .sierra import FunctionId
from .syscall_handler import SyscallHandler

U64_MAX = (1 << 64) - 1

EntryPointImpl = Callable[[list[int], int, Any], "ExecutionResult"]


class ExecutionError(Exception):
    """Raised when an entry point cannot be executed at all."""


@dataclass
class ExecutionResult:
    """Outcome of one contract execution."""

    remaining_gas: int = 0
    failure_flag: bool = False
    return_values: list[int] = field(default_factory=list)
    error_msg: str | None = None


class Executor:
    """Dispatches entry-point invocations to their implementations.

    Each implementation is called as ``impl(params, gas, syscall_handler)``
    and returns an :class:`ExecutionResult`.
    """

    def __init__(self, functions: Mapping[FunctionId, EntryPointImpl]) -> None:
        self._functions = dict(functions)

    def invoke(
        self,
        entry_point_id: FunctionId,
        params: Iterable[int],
        gas: int,
        syscall_handler: Any,
    ) -> ExecutionResult:
        """Run the entry point with the given parameters and gas budget."""
        implementation = self._functions.get(entry_point_id)
        if implementation is None:
            raise ExecutionError(f"function {entry_point_id} not found")
        if gas < 0:
            raise ExecutionError("gas must not be negative")
        try:
            result = implementation(list(params), gas, syscall_handler)
        except ExecutionError:
            raise
        except Exception as exc:
            raise ExecutionError(str(exc)) from exc
        if not isinstance(result, ExecutionResult):
            raise ExecutionError(
                f"function {entry_point_id} returned {type(result).__name__}, "
                "expected ExecutionResult"
            )
        return result


def run_program(
    executor: Executor, entry_point_id: FunctionId, params: Iterable[int]
) -> ExecutionResult:
    """Execute an entry point with maximal gas and the default syscall handler."""
    return executor.invoke(entry_point_id, params, U64_MAX, SyscallHandler())