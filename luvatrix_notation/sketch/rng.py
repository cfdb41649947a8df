from __future__ import annotations


_MULTIPLIER = 48271
_MASK_32 = 0xFFFFFFFF
_MASK_31 = 0x7FFFFFFF


class SeededRandom:
    """Park-Miller style generator yielding floats in [0, 1).

    Sequences are a pure function of the seed so repeated renders with the
    same seed produce identical sketches. A zero seed is promoted to 1, since
    the recurrence would otherwise stay at zero forever.
    """

    def __init__(self, seed: int) -> None:
        self._state = (int(seed) & _MASK_32) or 1

    def next(self) -> float:
        self._state = (_MULTIPLIER * self._state) & _MASK_32
        return (self._state & _MASK_31) / float(1 << 31)
