"""Mutation fuzzer driving Sierra entry points through an executor."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from .argument_type import ArgumentType
from .fuzzer_utils import (
    find_entry_point_id,
    get_function_argument_types,
    print_contract_functions,
    print_init_message,
)
from .mutator import Mutator
from .runner import ExecutionError, Executor, run_program
from .sierra import FunctionId, Program, load_program
from .statistics import FuzzerStats

logger = logging.getLogger(__name__)

ExecutorFactory = Callable[[Program], Executor]

_I32_MAX = 2**31 - 1
_DESERIALIZE_PREFIX = "Failed to deserialize param"
_IGNORED_ERROR = "Failed to deserialize param #1"
_WRAPPER_PREFIX = "__wrapper__"
_FUZZ_PREFIX = "fuzz_"
_STATS_EVERY = 1000


class FuzzerError(Exception):
    """Raised when the fuzzer cannot be set up or run."""


def _is_fuzz_function(name: str) -> bool:
    last_part = name.split("::")[-1]
    while last_part.startswith(_WRAPPER_PREFIX):
        last_part = last_part[len(_WRAPPER_PREFIX) :]
    return last_part.startswith(_FUZZ_PREFIX)


class Fuzzer:
    """Fuzzes the felt252 parameters of Sierra entry points until a crash."""

    def __init__(
        self,
        program: Program | None = None,
        entry_point: str | None = None,
        executor_factory: ExecutorFactory | None = None,
        *,
        program_path: str | Path | None = None,
    ) -> None:
        self.program = program
        self.program_path = Path(program_path) if program_path is not None else None
        self.entry_point = entry_point
        self.executor_factory = executor_factory
        self.entry_point_id: FunctionId | None = None
        self.params: list[int] = []
        self.argument_types: list[ArgumentType] = []
        self.stats = FuzzerStats()
        self._mutator: Mutator | None = None
        self._is_mlir_compiled = False
        # Set once an argument is an array whose length must be discovered.
        self._unknown_arguments_count = False

    @classmethod
    def from_sierra_file(
        cls,
        path: str | Path,
        entry_point: str | None = None,
        executor_factory: ExecutorFactory | None = None,
    ) -> Fuzzer:
        """Create a fuzzer for the Sierra program stored in a JSON file."""
        try:
            program = load_program(path)
        except (OSError, ValueError) as exc:
            raise FuzzerError(f"Failed to read Sierra program file: {exc}") from exc
        return cls(program, entry_point, executor_factory)

    def init(self, seed: int) -> None:
        """Seed the mutator, make the Sierra program available and find the entry point."""
        print_init_message(seed)
        self._mutator = Mutator(seed)
        if self.program is None:
            logger.info("Compiling Cairo contract to Sierra")
            self._compile_cairo_to_sierra()
        if self.entry_point is not None:
            self.entry_point_id = find_entry_point_id(self.program, self.entry_point)

    def print_functions_prototypes(self) -> None:
        """Print the prototype of every function in the program."""
        print()
        print_contract_functions(self.program)

    def _compile_cairo_to_sierra(self) -> None:
        raise FuzzerError(
            "Failed to compile Cairo program: compiling Cairo sources "
            f"({self.program_path}) is not supported, provide a Sierra program"
        )

    def generate_params(self) -> None:
        """Reset the parameters to zero, one per supported argument."""
        self.params = []
        for arg_type in self.argument_types:
            if arg_type is ArgumentType.FELT_ARRAY:
                self._unknown_arguments_count = True
            self.params.append(0)
        if self._unknown_arguments_count:
            self._determine_argument_count()

    def _determine_argument_count(self) -> None:
        """Add parameters until the entry point stops failing to deserialize them."""
        while True:
            try:
                executor = self._setup_execution_environment()
            except FuzzerError as exc:
                logger.error("Error setting up execution environment: %s", exc)
                return
            try:
                result = run_program(executor, self.entry_point_id, self.params)
            except ExecutionError:
                return
            if (
                result.failure_flag
                and result.error_msg is not None
                and result.error_msg.startswith(_DESERIALIZE_PREFIX)
            ):
                self.params.append(0)
                continue
            return

    def _initialize_parameters(self) -> None:
        self.argument_types = get_function_argument_types(
            self.program, self.entry_point_id
        )
        self.generate_params()

    def _setup_execution_environment(self) -> Executor:
        if self.program is None:
            raise FuzzerError("Sierra program not available")
        if self.executor_factory is None:
            raise FuzzerError("no executor available for the Sierra program")
        try:
            return self.executor_factory(self.program)
        except ExecutionError as exc:
            raise FuzzerError(str(exc)) from exc

    def _execute_program(self, executor: Executor) -> bool:
        """Run the entry point once; return True when it crashed."""
        try:
            result = run_program(executor, self.entry_point_id, self.params)
        except ExecutionError as exc:
            logger.error("Error during execution: %s\n", exc)
            return False
        if result.failure_flag and result.error_msg != _IGNORED_ERROR:
            print(f"Parameters at crash: {self.params}")
            error = "None" if result.error_msg is None else f"Some({result.error_msg!r})"
            print(
                f"Results: Remaining Gas = {result.remaining_gas}, "
                f"Failure Flag = {str(result.failure_flag).lower()}, "
                f"Return Values = {result.return_values}, "
                f"Error Message = {error}\n"
            )
            return True
        return False

    def _mutate_parameters(self, mutator: Mutator) -> None:
        self.params = [mutator.mutate(param) for param in self.params]

    def _print_statistics(self, current_iter: int) -> None:
        if current_iter == 0 or current_iter % _STATS_EVERY:
            return
        stats = self.stats
        columns = (
            f"{'Total Executions = ' + str(stats.total_executions):<30}",
            f"{f'Uptime = {stats.uptime():.1f}s':<25}",
            f"{'Crashes = ' + str(stats.crashes):<25}",
            f"{f'Exec Speed = {stats.execs_per_second():.2f} execs/s':<20}",
        )
        print(f"| {' | '.join(columns)} |")

    def get_entry_points(self) -> list[str]:
        """Return the debug names of the program's functions."""
        if self.program is None:
            return []
        return [
            func.id.debug_name
            for func in self.program.funcs
            if func.id.debug_name is not None
        ]

    def fuzz(self, iterations: int = -1) -> FuzzerStats:
        """Fuzz the entry point until a crash or until the iterations run out.

        An iteration count of -1 means no practical limit.
        """
        if self._mutator is None:
            raise FuzzerError("fuzzer is not initialised")
        mutator = self._mutator
        self._initialize_parameters()
        self.stats.start_time = time.monotonic()
        max_iter = _I32_MAX if iterations == -1 else iterations

        if not self._is_mlir_compiled:
            logger.info("Compiling Sierra to MLIR module")
            print()
            self._is_mlir_compiled = True

        executor = self._setup_execution_environment()
        if self.entry_point is None:
            raise FuzzerError("no entry point to fuzz")
        logger.info("Fuzzing function: %s", self.entry_point)

        for current_iter in range(max(max_iter, 0)):
            if self._execute_program(executor):
                self.stats.crashes += 1
                break
            self.stats.total_executions += 1
            self._mutate_parameters(mutator)
            self._print_statistics(current_iter)
        else:
            logger.warning("Maximum iterations reached.")
            print()
        return self.stats

    def fuzz_proptesting(self, iterations: int = 10000) -> dict[str, FuzzerStats]:
        """Fuzz every function whose name ends in a ``fuzz_*`` part."""
        results: dict[str, FuzzerStats] = {}
        for name in filter(_is_fuzz_function, self.get_entry_points()):
            self.stats = FuzzerStats()
            self.entry_point = name
            self.entry_point_id = find_entry_point_id(self.program, name)
            self._initialize_parameters()
            try:
                results[name] = self.fuzz(iterations)
            except FuzzerError as exc:
                logger.error("Error fuzzing function %s: %s", name, exc)
        return results