from cairofuzz.felt import from_bytes_be, to_bytes_be
from cairofuzz.magic_values import MAGIC_VALUES


def _decode(value: bytes) -> int:
    return from_bytes_be(value.rjust(32, b"\x00"))


def test_first_and_last_entries_decode():
    assert _decode(MAGIC_VALUES[0]) == 0
    assert _decode(MAGIC_VALUES[-1]) == 0xFEFFFFFFFFFFFFFF


def test_every_value_fits_its_width():
    assert {len(value) for value in MAGIC_VALUES} == {1, 2, 4, 8}
    for value in MAGIC_VALUES:
        assert 0 <= _decode(value) < 1 << (8 * len(value))


def test_every_value_round_trips_through_felt_bytes():
    for value in MAGIC_VALUES:
        encoded = to_bytes_be(_decode(value))
        assert len(encoded) == 32
        assert encoded[-len(value):] == value
        assert encoded[: 32 - len(value)] == bytes(32 - len(value))


def test_widths_are_ordered():
    widths = [len(to_bytes_be(_decode(value)).lstrip(b"\x00")) for value in MAGIC_VALUES]
    assert max(widths[:26]) <= 1
    lengths = [len(value) for value in MAGIC_VALUES]
    assert lengths == sorted(lengths)


def test_extremes_are_present():
    decoded = [_decode(value) for value in MAGIC_VALUES]
    assert max(decoded) == (1 << 64) - 1
    assert min(decoded) == 0
    assert 0x7FFFFFFF in decoded
    assert 0x8000000000000001 in decoded