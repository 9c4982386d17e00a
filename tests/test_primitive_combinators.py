# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for constant, combine, oneof and choose."""

import random

import pytest

from arbgen.combinators import Constant, choose, combine, constant, oneof
from arbgen.core.curry import Curried
from arbgen.core.errors import GeneratorContractError, MembershipTypeError
from arbgen.core.generator import assert_is_generator, bless


def _nat(size, rng):
    return rng.randint(0, size)


nat = bless(_nat)


def test_constant_ignores_size_and_draws_nothing():
    gen = constant("x")
    assert_is_generator(gen)
    rng = random.Random(4)
    state = rng.getstate()
    assert [gen(size, rng) for size in (0, 1, 50, 10_000)] == ["x"] * 4
    assert rng.getstate() == state


def test_constant_as_predicate_matches_only_its_value():
    gen = constant(3)
    assert gen.contains(3)
    for probe in (2, 4, "3", None, [3], 3.5):
        assert not gen.contains(probe)


def test_constant_contains_by_identity():
    class NeverEqual:
        def __eq__(self, other):
            return False

    value = NeverEqual()
    assert constant(value).contains(value)


def test_combine_invokes_in_argument_order():
    calls = []

    def recorder(tag):
        def generate(size, rng):
            calls.append((tag, size))
            return tag

        return bless(generate)

    gen = combine(recorder("a"), recorder("b"), recorder("c"), lambda *xs: "".join(xs))
    assert gen(6, random.Random(0)) == "abc"
    assert calls == [("a", 6), ("b", 6), ("c", 6)]


def test_combine_matches_sequential_draws():
    gen = combine(nat, nat, lambda a, b: (a, b))
    rng = random.Random(11)
    expected = (nat(30, rng), nat(30, rng))
    assert gen(30, random.Random(11)) == expected


def test_combine_with_only_function():
    assert combine(lambda: 5)(3, random.Random(0)) == 5


def test_combine_rejects_non_generator_at_combination_time():
    with pytest.raises(GeneratorContractError):
        combine(_nat, lambda n: n)


def test_combine_requires_callable_function():
    with pytest.raises(TypeError, match="callable"):
        combine(nat, 3)
    with pytest.raises(TypeError):
        combine()


def test_oneof_membership():
    f = bless(_nat)
    g = constant(1)
    is_member = oneof([f, g])
    assert is_member(f)
    assert is_member(g)
    assert not is_member(constant(1))
    assert not is_member(1)


def test_oneof_is_curried():
    f = bless(_nat)
    assert isinstance(oneof, Curried)
    assert oneof([f], f) is True
    assert oneof([f], nat.map(str)) is False


def test_oneof_rejects_non_callable_elements():
    with pytest.raises(MembershipTypeError, match="callable"):
        oneof([nat, 1])


def test_choose_returns_value_of_some_branch():
    gen = choose([constant("a"), constant("b"), constant("c")])
    rng = random.Random(2)
    seen = {gen(1, rng) for _ in range(200)}
    assert seen == {"a", "b", "c"}


def test_choose_requires_generators():
    with pytest.raises(GeneratorContractError):
        choose([])
    with pytest.raises(GeneratorContractError):
        choose([_nat])


def test_constant_is_a_generator_subclass():
    assert isinstance(constant(None), Constant)
    assert constant(2).map(lambda v: v + 1)(0, random.Random(0)) == 3
