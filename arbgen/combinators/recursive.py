# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Recursive combinator for self-referential types."""

from __future__ import annotations

import random
from typing import Callable, TypeVar

from arbgen.core.generator import Generator, assert_is_generator, bless
from arbgen.core.sizing import logsize

T = TypeVar("T")

# One chance in RECURSION_STOP_ODDS of stopping early at each level.
RECURSION_STOP_ODDS = 4


def recursive(
    gen_z: Generator[T],
    gen_s: Callable[[Generator[T]], Generator[T]],
    stop_odds: int = RECURSION_STOP_ODDS,
) -> Generator[T]:
    """
    Generator for a type with base case gen_z and step gen_s.

    gen_s receives a generator for "one level deeper" and decides whether and at
    what size to invoke it. Depth is bounded by logsize(size); on top of that each
    level stops early with probability 1 / stop_odds.
    """
    assert_is_generator(gen_z)
    if not callable(gen_s):
        raise TypeError(f"recursive() step should be callable, got {type(gen_s).__name__}")
    if stop_odds < 1:
        raise ValueError(f"stop_odds must be at least 1, got {stop_odds}")

    def rec(n: int, size_at_level: int, rng: random.Random) -> T:
        if n <= 0 or rng.randint(0, stop_odds - 1) == 0:
            return gen_z(size_at_level, rng)

        def deeper(size_q: int, rng_q: random.Random) -> T:
            return rec(n - 1, size_q, rng_q)

        step = gen_s(bless(deeper))
        assert_is_generator(step)
        return step(size_at_level, rng)

    def generate(size: int, rng: random.Random) -> T:
        return rec(logsize(size), size, rng)

    return bless(generate)
