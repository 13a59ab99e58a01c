"""Magic values of various sizes and endiannesses."""

_SMALL = (*range(0x01, 0x11), 0x20, 0x40, 0x7E, 0x7F, 0x80, 0x81, 0xC0, 0xFE, 0xFF)


def _wide_values(width: int) -> list[bytes]:
    bits = 8 * width
    full = (1 << bits) - 1
    high = 1 << (bits - 1)
    specials = (
        (full >> 1) - (1 << (bits - 8)),
        full >> 1,
        high,
        high + 1,
        full - 1,
    )
    repeated = [int.from_bytes(bytes([byte]) * width, "big") for byte in (0x01, 0x80)]
    big_endian = [0, *repeated, full, *_SMALL, *specials]
    little_endian = [0, *_SMALL, *specials]
    return [value.to_bytes(width, "big") for value in big_endian] + [
        value.to_bytes(width, "little") for value in little_endian
    ]


MAGIC_VALUES: tuple[bytes, ...] = (
    *(bytes([value]) for value in (0, *_SMALL)),
    *_wide_values(2),
    *_wide_values(4),
    *_wide_values(8),
)