#!/usr/bin/env python3
"""
Seeded Random Stream

Turns a 64-bit key into a reproducible stream of floats in [0, 1). The state is
a single 32-bit word owned by one ``SeededStream``; nothing here touches the
global ``random`` module, so concurrent generations never interfere.

All arithmetic is done on unsigned 32-bit words (``& MASK32``); the bit
patterns match a signed 32-bit implementation exactly.
"""

import math
from typing import Sequence, TypeVar

MASK32 = 0xFFFFFFFF
TWO_32 = 4294967296.0

T = TypeVar("T")


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


def mix_seed(key: int) -> int:
    """Fold the two 32-bit halves of ``key`` into one avalanched 32-bit state."""
    lo = key & MASK32
    hi = (key >> 32) & MASK32

    # Asymmetric so that lo == hi keys (all zeros vs all ones) stay distinct
    x = lo ^ 0x9E3779B9
    x = (x + _imul(hi ^ 0x85EBCA6B, 0xC2B2AE35)) & MASK32
    x = _imul(x ^ (x >> 16), 0x7FEB352D)
    x = _imul(x ^ (x >> 15), 0x846CA68B)
    x ^= x >> 16
    return x & MASK32


class SeededStream:
    """xorshift32 stream seeded from a canonical 16-hex-digit key."""

    def __init__(self, seed_hex: str):
        self.seed = seed_hex
        self.state = mix_seed(int(seed_hex, 16))
        self.draws = 0

    def next(self) -> float:
        x = self.state
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self.state = x
        self.draws += 1
        return x / TWO_32

    def int_in(self, lo: int, hi: int) -> int:
        """Uniform integer in the inclusive range [lo, hi]."""
        return int(math.floor(self.next() * (hi - lo + 1))) + lo

    def pick(self, items: Sequence[T]) -> T:
        return items[self.int_in(0, len(items) - 1)]

    def chance(self, p: float) -> bool:
        return self.next() < p

    def __repr__(self) -> str:
        return f"SeededStream(seed={self.seed!r}, draws={self.draws})"


def make_stream(seed_hex: str) -> SeededStream:
    return SeededStream(seed_hex)
