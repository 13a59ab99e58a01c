# cairofuzz

A mutation-based fuzzer for Sierra programs, the intermediate form of Cairo
contracts on Starknet. It reads the function declarations of a Sierra
program, works out which parameters of an entry point are `felt252` values,
and feeds the entry point such values. It changes the values with a set of
byte-level and arithmetic mutations until an execution fails or the iteration
budget runs out.

The package has no dependencies beyond the standard library.

## Installation

```console
pip install .
```

For running the test suite:

```console
pip install ".[test]"
pytest
```

## What the package does not do

- It does not compile Cairo sources. `--program-path` is accepted, but
  initialisation then stops with an error that asks for a Sierra program.
- It has no execution engine of its own. Entry points are run by an
  executor that you supply from Python (see *Library use*). The
  `cairofuzz` command cannot supply one. From the command line you can
  list a program's functions with `--analyze`. A fuzzing run started there
  reports `no executor available for the Sierra program`.

## Sierra program files

`cairofuzz.sierra.load_program` and `--sierra-program` read a JSON object
that holds a `funcs` list. Each function has an `id` and a `signature`:

```json
{
  "funcs": [
    {
      "id": {"id": 0, "debug_name": "demo::demo::fuzz_check"},
      "signature": {
        "param_types": [{"id": 1, "debug_name": "felt252"}],
        "ret_types": [{"id": 2, "debug_name": "felt252"}]
      }
    }
  ]
}
```

`debug_name` may be left out. Entry points are looked up by their
`debug_name`. Malformed input raises `ValueError`.

## Command line

```console
cairofuzz --sierra-program program.json --analyze
```

prints the banner (with the seed and the targeted engine version) and then
every function as `name (param types) -> (return types)`.

Options:

| Option | Meaning |
| --- | --- |
| `-p`, `--program-path PATH` | Cairo program (compiling it is not supported, see above) |
| `--sierra-program PATH` | Sierra program in the JSON form above |
| `-e`, `--entry-point NAME` | Function to fuzz; required unless `--proptesting` or `--analyze` is given |
| `-a`, `--analyze` | Print the prototypes of the program's functions and exit |
| `-i`, `--iter N` | Number of iterations; defaults to 10000 with `--proptesting`, otherwise `-1` (no practical limit) |
| `--proptesting` | Fuzz every function whose last `::` part starts with `fuzz_`; a leading `__wrapper__` is ignored |
| `-s`, `--seed N` | Seed for the random number generator; defaults to the current Unix time |
| `-V`, `--version` | Print the version |

Errors are printed to standard error and the command exits with status 1.
`cairofuzz.cli.main(argv, executor_factory)` can also be called from Python
with an executor factory. It then runs the same options with real fuzzing and
returns the exit status.

## Library use

- `cairofuzz.rng.Rng(seed)` is a xorshift64 generator with `rand()`,
  `rand_usize()` and `gen_range(start, end)`, both bounds included. It
  raises `ValueError` if `end < start`.
- `cairofuzz.felt` treats field elements as Python integers modulo the
  Starknet prime: `from_int`, `to_bytes_be` (32 bytes) and `from_bytes_be`.
- `cairofuzz.mutator.Mutator(seed)` mutates one field element at a time with
  `mutate(felt)`. Its strategies are small additions and subtractions
  (clamped at zero), bit flips, increments and decrements, and byte swaps,
  copies and splices. It also overwrites or inserts magic values from
  `cairofuzz.magic_values.MAGIC_VALUES`, random bytes and repeated bytes.
- `cairofuzz.argument_type.map_argument_type` maps `felt252` to
  `ArgumentType.FELT` and `core::array::Span::<core::felt252>` to
  `ArgumentType.FELT_ARRAY`. Other types give `None` and are not fuzzed.
- `cairofuzz.fuzzer_utils` has `find_entry_point_id`, which raises
  `EntryPointNotFoundError`. It also has `get_function_argument_types`,
  `format_function_prototype`, `print_contract_functions`, `init_message`
  and `print_init_message`.
- `cairofuzz.runner.Executor` maps `FunctionId`s to callables
  `impl(params, gas, syscall_handler)` that return an `ExecutionResult`
  (`remaining_gas`, `failure_flag`, `return_values`, `error_msg`).
  `Executor.invoke` raises `ExecutionError` for unknown functions, negative
  gas, or exceptions raised by the callable. `run_program` invokes with the
  maximal 64-bit gas and a `cairofuzz.syscall_handler.SyscallHandler`. That
  handler logs each Starknet system call and answers it with fixed,
  predictable values.
- `cairofuzz.statistics.FuzzerStats` counts `total_executions` and
  `crashes`, and gives `uptime()` and `execs_per_second()`.

`cairofuzz.fuzzer.Fuzzer(program, entry_point, executor_factory)` drives a
run. It can also be built with `Fuzzer.from_sierra_file(path, entry_point,
executor_factory)`. Call `init(seed)`, then either:

- `fuzz(iterations)`, which returns the `FuzzerStats`, or
- `fuzz_proptesting(iterations)`, which returns a dict of stats per function.

Every parameter starts at zero. For a felt array, parameters are added until
the entry point stops failing with `Failed to deserialize param...`. An
execution counts as a crash when `failure_flag` is set and the error is not
`Failed to deserialize param #1`. The crashing parameters and result are
printed and fuzzing of that function stops. Statistics are printed every
1000 executions.

```python
from cairofuzz.fuzzer import Fuzzer
from cairofuzz.runner import ExecutionResult, Executor
from cairofuzz.sierra import Program

program = Program.from_dict({
    "funcs": [{
        "id": {"id": 0, "debug_name": "demo::fuzz_check"},
        "signature": {"param_types": [{"id": 1, "debug_name": "felt252"}]},
    }]
})

def check(params, gas, syscall_handler):
    if params[0] == 3:
        return ExecutionResult(remaining_gas=gas, failure_flag=True, error_msg="boom")
    return ExecutionResult(remaining_gas=gas)

def make_executor(prog):
    return Executor({func.id: check for func in prog.funcs})

fuzzer = Fuzzer(program, "demo::fuzz_check", make_executor)
fuzzer.init(42)
stats = fuzzer.fuzz(10000)
print(stats.total_executions, stats.crashes)
```