import json

import pytest

from cairofuzz.sierra import (
    FunctionId,
    Program,
    get_cairo_native_version,
    get_function_by_id,
    load_program,
)

SAMPLE = {
    "type_declarations": [],
    "funcs": [
        {
            "id": {"id": 0, "debug_name": "demo::demo::fuzz_add"},
            "signature": {
                "param_types": [{"id": 1, "debug_name": "felt252"}],
                "ret_types": [{"id": 2, "debug_name": "core::panics::PanicResult"}],
            },
        },
        {
            "id": {"id": 3, "debug_name": None},
            "signature": {"param_types": [], "ret_types": []},
        },
    ],
}


def test_from_dict_parses_functions():
    program = Program.from_dict(SAMPLE)
    assert [f.id.id for f in program.funcs] == [0, 3]
    first = program.funcs[0]
    assert first.id.debug_name == "demo::demo::fuzz_add"
    assert [t.debug_name for t in first.signature.param_types] == ["felt252"]
    assert [t.debug_name for t in first.signature.ret_types] == ["core::panics::PanicResult"]


def test_function_id_display():
    program = Program.from_dict(SAMPLE)
    assert str(program.funcs[0].id) == "demo::demo::fuzz_add"
    assert str(program.funcs[1].id) == "[3]"


def test_ids_compare_without_debug_name():
    assert FunctionId(4, "a") == FunctionId(4, "b")
    assert FunctionId(4) != FunctionId(5)


def test_get_function_by_id():
    program = Program.from_dict(SAMPLE)
    found = get_function_by_id(program, FunctionId(3))
    assert found is program.funcs[1]
    assert get_function_by_id(program, FunctionId(99)) is None


def test_load_program(tmp_path):
    path = tmp_path / "program.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert load_program(path) == Program.from_dict(SAMPLE)


def test_load_program_rejects_garbage(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_program(path)


def test_from_dict_rejects_missing_funcs():
    with pytest.raises(ValueError):
        Program.from_dict({"statements": []})


def test_version():
    assert get_cairo_native_version() == "0.2.5-rc1"