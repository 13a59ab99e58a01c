"""Starknet field elements represented as plain integers modulo the field prime."""

PRIME = 0x800000000000011000000000000000000000000000000000000000000000001
FELT_BYTES = 32


def from_int(value: int) -> int:
    """Reduce any integer, negative ones included, into the field."""
    return value % PRIME


def to_bytes_be(value: int) -> bytes:
    """Encode a field element as 32 big-endian bytes."""
    return from_int(value).to_bytes(FELT_BYTES, "big")


def from_bytes_be(data: bytes) -> int:
    """Decode big-endian bytes into a field element, reducing modulo the prime."""
    return int.from_bytes(bytes(data), "big") % PRIME