"""Random mutation of felt252 values."""

from __future__ import annotations

from typing import Callable

from .felt import FELT_BYTES, from_bytes_be, from_int, to_bytes_be
from .magic_values import MAGIC_VALUES
from .rng import Rng

_U64_MAX = (1 << 64) - 1
_SIZE = FELT_BYTES


def _fit(data: bytes | bytearray) -> int:
    """Truncate or zero-pad to the felt width and decode."""
    return from_bytes_be(bytes(data[:_SIZE]).ljust(_SIZE, b"\x00"))


class Mutator:
    """Applies one randomly chosen mutation strategy to a felt252."""

    def __init__(self, seed: int, max_input_size: int = 252) -> None:
        self.rng = Rng(seed)
        self.max_input_size = max_input_size
        self._strategies: dict[int, Callable[[int], int]] = {
            0: self._add_small_random_value,
            1: self._subtract_small_random_value,
            2: self._flip_random_bit,
            3: self._inc_byte,
            4: self._dec_byte,
            6: self._add_sub,
            7: self._swap,
            8: self._copy,
            9: self._inter_splice,
            10: self._magic_overwrite,
            11: self._magic_insert,
            12: self._random_overwrite,
            13: self._random_insert,
            14: self._byte_repeat_overwrite,
            15: self._byte_repeat_insert,
        }

    def mutate(self, felt: int) -> int:
        """Return a mutated copy of the given field element."""
        strategy = self._strategies.get(self.rng.gen_range(0, 15))
        return strategy(felt) if strategy else felt

    def _add_small_random_value(self, value: int) -> int:
        return from_int(value + self.rng.gen_range(1, 9))

    def _subtract_small_random_value(self, value: int) -> int:
        small = self.rng.gen_range(1, 9)
        return 0 if value < small else value - small

    def _flip_random_bit(self, value: int) -> int:
        data = bytearray(to_bytes_be(value))
        trimmed = bytes(data).rstrip(b"\x00")
        if not trimmed:
            return value
        bit_length = len(trimmed) * 8 + trimmed[-1].bit_length()
        byte_index, bit_position = divmod(self.rng.gen_range(0, bit_length - 1), 8)
        if byte_index >= len(data):
            return value
        data[byte_index] ^= 1 << bit_position
        return from_bytes_be(data)

    def _inc_byte(self, value: int) -> int:
        return from_int(value + 1)

    def _dec_byte(self, value: int) -> int:
        return 0 if value <= 0 else value - 1

    def _add_sub(self, value: int) -> int:
        delta = self.rng.gen_range(0, 200) - 100
        return min(from_int(value + delta), _U64_MAX)

    def _ranges(self) -> tuple[int, int, int]:
        src = self.rng.gen_range(0, _SIZE - 1)
        dst = self.rng.gen_range(0, _SIZE - 1)
        length = self.rng.gen_range(1, min(_SIZE, _SIZE - max(src, dst)))
        return src, dst, length

    def _swap(self, value: int) -> int:
        data = bytearray(to_bytes_be(value))
        src, dst, length = self._ranges()
        # Byte by byte, so overlapping ranges behave like successive swaps.
        for offset in range(length):
            a, b = src + offset, dst + offset
            data[a], data[b] = data[b], data[a]
        return from_bytes_be(data)

    def _copy(self, value: int) -> int:
        data = bytearray(to_bytes_be(value))
        src, dst, length = self._ranges()
        # Byte by byte, so an overlapping forward copy repeats bytes.
        for offset in range(length):
            data[dst + offset] = data[src + offset]
        return from_bytes_be(data)

    def _inter_splice(self, value: int) -> int:
        data = to_bytes_be(value)
        src, dst, length = self._ranges()
        return _fit(data[:dst] + data[src : src + length] + data[dst:])

    def _pick_magic(self) -> bytes:
        return MAGIC_VALUES[self.rng.gen_range(0, len(MAGIC_VALUES) - 1)]

    def _magic_overwrite(self, value: int) -> int:
        magic = self._pick_magic()
        data = to_bytes_be(value)
        return from_bytes_be(magic[:_SIZE] + data[len(magic) :])

    def _magic_insert(self, value: int) -> int:
        magic = self._pick_magic()
        data = to_bytes_be(value)
        offset = self.rng.gen_range(0, len(data))
        return _fit(data[:offset] + magic + data[offset:])

    def _random_overwrite(self, value: int) -> int:
        data = bytearray(to_bytes_be(value))
        offset = self.rng.gen_range(0, len(data) - 1)
        amount = self.rng.gen_range(1, len(data) - offset)
        data[offset : offset + amount] = bytes(
            self.rng.rand_usize() & 0xFF for _ in range(amount)
        )
        return from_bytes_be(data)

    def _random_insert(self, value: int) -> int:
        data = to_bytes_be(value)
        offset = self.rng.gen_range(0, len(data))
        amount = self.rng.gen_range(0, self.max_input_size - len(data))
        filler = self.rng.rand_usize() & 0xFF
        return _fit(data[:offset] + bytes([filler]) * amount + data[offset:])

    def _byte_repeat_overwrite(self, value: int) -> int:
        data = bytearray(to_bytes_be(value))
        offset = self.rng.gen_range(0, len(data) - 1)
        amount = self.rng.gen_range(1, len(data) - offset)
        data[offset + 1 : offset + amount] = bytes([data[offset]]) * (amount - 1)
        return from_bytes_be(data)

    def _byte_repeat_insert(self, value: int) -> int:
        data = to_bytes_be(value)
        offset = self.rng.gen_range(0, len(data) - 1)
        amount = self.rng.gen_range(0, self.max_input_size - len(data))
        repeated = bytes([data[offset]]) * amount
        return _fit(data[:offset] + repeated + data[offset:])