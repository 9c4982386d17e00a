# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Primitive combinators: constant, combine, choose and membership predicates."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, Sequence, TypeVar

from arbgen.core.curry import curried
from arbgen.core.errors import GeneratorContractError, MembershipTypeError
from arbgen.core.generator import Generator, assert_is_generator, bless

T = TypeVar("T")


class Constant(Generator[T]):
    """
    Generator always producing the same value, ignoring size and drawing nothing.

    Also recognises its value: ``contains(v)`` is true iff v is (or equals) it.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        super().__init__(lambda size, rng: value)
        self.value = value

    def contains(self, candidate: Any) -> bool:
        return candidate is self.value or candidate == self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class Membership:
    """Predicate ``value -> bool`` built by oneof and either."""

    __slots__ = ("_test", "description")

    def __init__(self, test: Callable[[Any], bool], description: str) -> None:
        self._test = test
        self.description = description

    def __call__(self, value: Any) -> bool:
        return bool(self._test(value))

    def __repr__(self) -> str:
        return f"Membership({self.description})"


def as_predicate(predicate: Any) -> Callable[[Any], bool]:
    """Constant generators test membership via contains; other callables are used as is."""
    if isinstance(predicate, Constant):
        return predicate.contains
    if isinstance(predicate, Generator):
        raise MembershipTypeError(
            f"only constant generators can be used as predicates, got {predicate!r}"
        )
    if not callable(predicate):
        raise MembershipTypeError(f"predicate should be callable, got {type(predicate).__name__}")
    return predicate


def constant(x: T) -> Constant[T]:
    return Constant(x)


def combine(*args: Any) -> Generator[Any]:
    """
    combine(gen_1, ..., gen_n, f): invoke each gen with the same size, in
    argument order, then apply f to the results.
    """
    if not args:
        raise TypeError("combine() needs at least the combining function")
    *generators, f = args
    for gen in generators:
        assert_is_generator(gen)
    if not callable(f):
        raise TypeError(f"combine() last argument should be callable, got {type(f).__name__}")

    def combined(size: int, rng: random.Random) -> Any:
        values = [gen(size, rng) for gen in generators]
        return f(*values)

    return bless(combined)


@curried(1)
def oneof(xs: Iterable[Any]) -> Membership:
    """Predicate true iff the candidate is, or equals, one of xs."""
    targets = list(xs)
    for target in targets:
        if not callable(target):
            raise MembershipTypeError(
                f"oneof() elements should be callable, got {type(target).__name__}"
            )

    def test(value: Any) -> bool:
        return any(target is value or target == value for target in targets)

    return Membership(test, f"oneof {len(targets)}")


def choose(gens: Sequence[Generator[T]]) -> Generator[T]:
    """Pick one of gens uniformly and return its value."""
    gens = list(gens)
    if not gens:
        raise GeneratorContractError("choose() needs at least one generator")
    for gen in gens:
        assert_is_generator(gen)
    last = len(gens) - 1

    def chosen(size: int, rng: random.Random) -> T:
        return gens[rng.randint(0, last)](size, rng)

    return bless(chosen)
