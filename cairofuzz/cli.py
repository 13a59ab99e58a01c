"""Command-line entry point of the fuzzer."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Sequence

from .fuzzer import ExecutorFactory, Fuzzer, FuzzerError
from .fuzzer_utils import EntryPointNotFoundError

_PROPTESTING_DEFAULT_ITER = 10000
_UNLIMITED_ITER = -1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cairofuzz", description="Fuzzer for Sierra programs."
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-p", "--program-path", help="Path to the Cairo program")
    parser.add_argument("--sierra-program", help="Path to the Sierra program")
    parser.add_argument("-e", "--entry-point", help="Entry point of the Sierra program")
    parser.add_argument(
        "-a",
        "--analyze",
        action="store_true",
        help="Analyze the program and print function prototypes",
    )
    parser.add_argument(
        "-i", "--iter", type=int, help="Number of iterations to use for fuzzing"
    )
    parser.add_argument(
        "--proptesting", action="store_true", help="Enable property-based testing"
    )
    parser.add_argument(
        "-s", "--seed", type=int, help="Seed for the random number generator"
    )
    return parser


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(
    argv: Sequence[str] | None = None, executor_factory: ExecutorFactory | None = None
) -> int:
    """Run the fuzzer from command-line arguments; return the exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    seed = args.seed if args.seed is not None else int(time.time())
    if args.iter is not None:
        iterations = args.iter
    else:
        iterations = _PROPTESTING_DEFAULT_ITER if args.proptesting else _UNLIMITED_ITER

    if not (args.proptesting or args.analyze) and args.entry_point is None:
        return _error("Error: --entry-point is required if --proptesting is not set")
    if args.analyze and args.program_path is None and args.sierra_program is None:
        return _error(
            "Error: --analyze requires either --program-path or --sierra-program"
        )

    if args.sierra_program is not None:
        try:
            fuzzer = Fuzzer.from_sierra_file(
                args.sierra_program, args.entry_point, executor_factory
            )
        except FuzzerError as exc:
            return _error(f"Error: {exc}")
    elif args.program_path is not None:
        fuzzer = Fuzzer(
            None,
            args.entry_point,
            executor_factory,
            program_path=args.program_path,
        )
    else:
        return _error("Error: Either --program-path or --sierra-program must be specified")

    try:
        fuzzer.init(seed)
    except (FuzzerError, EntryPointNotFoundError, ValueError) as exc:
        return _error(f"Error during initialization: {exc}")

    if args.analyze:
        fuzzer.print_functions_prototypes()
        return 0

    if args.proptesting:
        try:
            fuzzer.fuzz_proptesting(iterations)
        except (FuzzerError, EntryPointNotFoundError, ValueError) as exc:
            return _error(f"Error during property-based testing: {exc}")
        print("Property-based testing completed successfully.")
        return 0

    try:
        fuzzer.fuzz(iterations)
    except FuzzerError as exc:
        return _error(f"Error during fuzzing: {exc}")
    print("Fuzzing completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())