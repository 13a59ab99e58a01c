from cairofuzz.felt import PRIME, from_bytes_be, from_int, to_bytes_be


def test_negative_values_wrap():
    assert from_int(-1) == PRIME - 1


def test_prime_reduces_to_zero():
    assert from_int(PRIME) == 0
    assert to_bytes_be(PRIME) == bytes(32)


def test_one_encoding():
    assert to_bytes_be(1) == b"\x00" * 31 + b"\x01"


def test_round_trip():
    for value in (0, 1, 255, 2**64 - 1, PRIME - 1, 2**200 + 12345):
        assert from_bytes_be(to_bytes_be(value)) == value


def test_encoding_is_32_bytes():
    for value in (0, 7, PRIME - 1):
        assert len(to_bytes_be(value)) == 32


def test_from_bytes_reduces():
    value = from_bytes_be(b"\xff" * 32)
    assert 0 <= value < PRIME
    assert value == (2**256 - 1) % PRIME


def test_from_short_slice():
    assert from_bytes_be(b"\x01\x00") == 256