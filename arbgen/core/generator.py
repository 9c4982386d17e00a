# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""
Generator contract.

A generator is a ``Generator`` wrapping a function ``(size, rng) -> value``.
``size`` is a non-negative int bounding how large the value may be and ``rng``
is the ``random.Random`` every draw is taken from, so a seeded rng replays the
same values. Raw functions become generators through ``bless``.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Generic, TypeVar

from arbgen.core.errors import GeneratorContractError

T = TypeVar("T")
U = TypeVar("U")

GenFn = Callable[[int, random.Random], T]


class Generator(Generic[T]):
    """Size-parameterised sample function with map/flat_map composition."""

    __slots__ = ("_fn",)

    def __init__(self, fn: GenFn) -> None:
        self._fn = fn

    def __call__(self, size: int, rng: random.Random) -> T:
        return self._fn(size, rng)

    def map(self, f: Callable[[T], U]) -> Generator[U]:
        generator = self
        assert_is_generator(generator)

        def mapped(size: int, rng: random.Random) -> U:
            return f(generator(size, rng))

        return bless(mapped)

    def flat_map(self, f: Callable[[T], Generator[U]]) -> Generator[U]:
        generator = self
        assert_is_generator(generator)

        def bound(size: int, rng: random.Random) -> U:
            dependent = f(generator(size, rng))
            assert_is_generator(dependent)
            return dependent(size, rng)

        return bless(bound)

    flatmap = flat_map

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return f"{self.__class__.__name__}({name})"


_CANONICAL = (
    ("map", Generator.map),
    ("flat_map", Generator.flat_map),
    ("flatmap", Generator.flat_map),
)


def assert_is_generator(generator: Any) -> None:
    """Raise GeneratorContractError unless generator carries the canonical map/flat_map."""
    if not callable(generator):
        raise GeneratorContractError(f"generator should be callable, got {type(generator).__name__}")
    for name, impl in _CANONICAL:
        member = getattr(generator, name, None)
        if getattr(member, "__func__", None) is not impl:
            raise GeneratorContractError(
                f"generator.{name} should be the canonical Generator.{impl.__name__}"
            )


def is_generator(value: Any) -> bool:
    try:
        assert_is_generator(value)
    except GeneratorContractError:
        return False
    return True


def bless(fn: GenFn | Generator[T]) -> Generator[T]:
    """Wrap a raw (size, rng) function as a Generator."""
    if isinstance(fn, Generator):
        assert_is_generator(fn)
        return fn
    if not callable(fn):
        raise GeneratorContractError(f"cannot bless non-callable {type(fn).__name__}")
    return Generator(fn)
