import json

import pytest

from cairofuzz.cli import build_parser, main
from cairofuzz.runner import ExecutionResult, Executor
from cairofuzz.sierra import FunctionId


def write_program(path):
    def func(idx, name):
        return {
            "id": {"id": idx, "debug_name": name},
            "signature": {
                "param_types": [{"id": 1, "debug_name": "felt252"}],
                "ret_types": [],
            },
        }

    path.write_text(json.dumps({"funcs": [func(0, "c::fuzz_a"), func(1, "c::other")]}))
    return str(path)


def ok_factory(program):
    def ok(params, gas, handler):
        return ExecutionResult(remaining_gas=gas)

    return Executor({f.id: ok for f in program.funcs})


@pytest.fixture
def program_file(tmp_path):
    return write_program(tmp_path / "program.json")


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.iter is None
    assert args.seed is None
    assert args.analyze is False
    assert args.proptesting is False


def test_parser_short_options():
    args = build_parser().parse_args(["-e", "c::f", "-i", "5", "-s", "9", "-a"])
    assert (args.entry_point, args.iter, args.seed, args.analyze) == ("c::f", 5, 9, True)


def test_entry_point_required(capsys):
    assert main(["--sierra-program", "x.json"]) == 1
    assert "--entry-point is required" in capsys.readouterr().err


def test_analyze_requires_program(capsys):
    assert main(["--analyze"]) == 1
    assert "--analyze requires" in capsys.readouterr().err


def test_program_required(capsys):
    assert main(["--entry-point", "c::f"]) == 1
    assert "Either --program-path or --sierra-program" in capsys.readouterr().err


def test_analyze_prints_prototypes(program_file, capsys):
    assert main(["--sierra-program", program_file, "--analyze", "--seed", "77"]) == 0
    out = capsys.readouterr().out
    assert "Seed -- 77" in out
    assert "- c::fuzz_a (felt252) -> ()" in out


def test_fuzz_completes(program_file, capsys):
    argv = ["--sierra-program", program_file, "-e", "c::other", "-i", "3", "-s", "1"]
    assert main(argv, executor_factory=ok_factory) == 0
    assert "Fuzzing completed successfully." in capsys.readouterr().out


def test_proptesting_completes(program_file, capsys):
    argv = ["--sierra-program", program_file, "--proptesting", "-i", "2", "-s", "1"]
    assert main(argv, executor_factory=ok_factory) == 0
    assert "Property-based testing completed successfully." in capsys.readouterr().out


def test_fuzz_without_executor_reports_error(program_file, capsys):
    argv = ["--sierra-program", program_file, "-e", "c::other", "-i", "3", "-s", "1"]
    assert main(argv) == 1
    assert "Error during fuzzing" in capsys.readouterr().err


def test_program_path_cannot_be_compiled(capsys):
    assert main(["--program-path", "contract.cairo", "-e", "c::f", "-s", "1"]) == 1
    assert "Error during initialization" in capsys.readouterr().err


def test_unknown_entry_point(program_file, capsys):
    assert main(["--sierra-program", program_file, "-e", "c::nope", "-s", "1"]) == 1
    assert "Entry point 'c::nope' not found" in capsys.readouterr().err


def test_missing_sierra_file(tmp_path, capsys):
    missing = str(tmp_path / "absent.json")
    assert main(["--sierra-program", missing, "-e", "c::f", "-s", "1"]) == 1
    assert "Failed to read Sierra program file" in capsys.readouterr().err


def test_crash_is_reported(program_file, capsys):
    def factory(program):
        def crash(params, gas, handler):
            return ExecutionResult(failure_flag=True, error_msg="assert failed")

        return Executor({FunctionId(1): crash})

    argv = ["--sierra-program", program_file, "-e", "c::other", "-i", "10", "-s", "1"]
    assert main(argv, executor_factory=factory) == 0
    out = capsys.readouterr().out
    assert "Parameters at crash: [0]" in out
    assert "Fuzzing completed successfully." in out