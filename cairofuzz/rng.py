"""Xorshift64 pseudo-random generator used by the mutator."""

_MASK64 = (1 << 64) - 1


class Rng:
    """A fast, deterministic xorshift64 generator."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64

    def rand(self) -> int:
        """Return the next 64-bit value."""
        state = self._state
        state ^= (state << 13) & _MASK64
        state ^= state >> 17
        state ^= (state << 43) & _MASK64
        self._state = state
        return state

    def rand_usize(self) -> int:
        """Return the next value as an unsigned machine word."""
        return self.rand()

    def gen_range(self, start: int, end: int) -> int:
        """Return a value in the inclusive range [start, end]."""
        if end < start:
            raise ValueError("end must be greater than or equal to start")
        return start + self.rand_usize() % (end - start + 1)