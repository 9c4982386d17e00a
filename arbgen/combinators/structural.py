# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""
Structural combinators: pairs, tuples, sums, arrays and dicts.

All of them invoke their sub-generators with the caller's size and draw from
the caller's rng left to right, so a seeded rng reproduces the whole structure.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Sequence, TypeVar

from arbgen.core.addend import Addend, addend
from arbgen.core.curry import curried
from arbgen.core.errors import GeneratorContractError
from arbgen.core.generator import Generator, assert_is_generator, bless
from arbgen.core.registry import default_registry
from arbgen.core.sizing import logsize

from .primitive import Constant, Membership, as_predicate

T = TypeVar("T")

# Registry names of the key and JSON generators.
STRING_GENERATOR = "string"
JSON_GENERATOR = "json"


@curried(2)
def pair(gen_a: Generator[Any], gen_b: Generator[Any]) -> Generator[list]:
    assert_is_generator(gen_a)
    assert_is_generator(gen_b)

    def generate(size: int, rng: random.Random) -> list:
        return [gen_a(size, rng), gen_b(size, rng)]

    return bless(generate)


@curried(2)
def either(con_a: Callable[[Any], bool], con_b: Callable[[Any], bool]) -> Membership:
    test_a = as_predicate(con_a)
    test_b = as_predicate(con_b)
    return Membership(lambda value: test_a(value) or test_b(value), "either")


unit: Constant[bool] = Constant(True)


@curried(1)
def tuple_(gens: Sequence[Generator[Any]]) -> Generator[list]:
    gens = list(gens)
    for gen in gens:
        assert_is_generator(gen)

    def generate(size: int, rng: random.Random) -> list:
        return [gen(size, rng) for gen in gens]

    return bless(generate)


@curried(1)
def sum_(gens: Sequence[Generator[Any]]) -> Generator[Addend[Any]]:
    """Pick a branch uniformly; the Addend records which one and out of how many."""
    gens = list(gens)
    if not gens:
        raise GeneratorContractError("sum_() needs at least one generator")
    for gen in gens:
        assert_is_generator(gen)
    length = len(gens)

    def generate(size: int, rng: random.Random) -> Addend[Any]:
        idx = rng.randint(0, length - 1)
        return addend(idx, length, gens[idx](size, rng))

    return bless(generate)


@curried(1)
def array(gen: Generator[T]) -> Generator[list[T]]:
    """Lists of 0 to logsize(size) elements."""
    assert_is_generator(gen)

    def generate(size: int, rng: random.Random) -> list[T]:
        arrsize = rng.randint(0, logsize(size))
        return [gen(size, rng) for _ in range(arrsize)]

    return bless(generate)


@curried(1)
def nearray(gen: Generator[T]) -> Generator[list[T]]:
    """Lists of 1 to max(logsize(size), 1) elements."""
    assert_is_generator(gen)

    def generate(size: int, rng: random.Random) -> list[T]:
        arrsize = rng.randint(1, max(logsize(size), 1))
        return [gen(size, rng) for _ in range(arrsize)]

    return bless(generate)


@curried(2)
def dict_with_keys(keys: Generator[Any], gen: Generator[T]) -> Generator[dict[Any, T]]:
    """Dicts folded from an array of (key, value) pairs; a repeated key keeps the later value."""
    return array(pair(keys, gen)).map(dict)


@curried(1)
def dict_(gen: Generator[T]) -> Generator[dict[str, T]]:
    return dict_with_keys(default_registry.lazy(STRING_GENERATOR), gen)


json: Generator[Any] = default_registry.lazy(JSON_GENERATOR)
