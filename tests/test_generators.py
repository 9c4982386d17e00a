# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for the built-in numeric, text and JSON generators."""

import json
import math
import random

from arbgen.core.sizing import logsize
from arbgen.generators import (
    asciichar,
    asciistring,
    boolean,
    char,
    integer,
    json_leaf,
    json_value,
    nat,
    null,
    number,
    string,
)


def test_numeric_ranges():
    rng = random.Random(1)
    for size in (0, 1, 10, 1000):
        for _ in range(50):
            assert 0 <= nat(size, rng) <= size
            assert -size <= integer(size, rng) <= size
            n = number(size, rng)
            assert -size <= n <= size
            assert math.isfinite(n)


def test_boolean_produces_both_values():
    rng = random.Random(2)
    assert {boolean(0, rng) for _ in range(100)} == {True, False}


def test_chars():
    rng = random.Random(3)
    for _ in range(200):
        assert 0 <= ord(char(0, rng)) <= 0xFF
        assert 0x20 <= ord(asciichar(0, rng)) <= 0x7E


def test_strings_bounded_by_logsize():
    rng = random.Random(4)
    for size in (0, 3, 64, 4096):
        for _ in range(30):
            s = string(size, rng)
            assert isinstance(s, str)
            assert len(s) <= logsize(size)
            a = asciistring(size, rng)
            assert all(0x20 <= ord(c) <= 0x7E for c in a)


def test_null_is_none():
    assert null(10, random.Random(0)) is None


def test_json_leaf_types():
    rng = random.Random(5)
    for _ in range(100):
        value = json_leaf(20, rng)
        assert value is None or isinstance(value, (bool, float, str))


def _depth(value):
    if isinstance(value, list):
        return 1 + max((_depth(v) for v in value), default=0)
    if isinstance(value, dict):
        return 1 + max((_depth(v) for v in value.values()), default=0)
    return 0


def test_json_value_is_serialisable_and_bounded():
    rng = random.Random(6)
    for size in (0, 1, 10, 100):
        for _ in range(20):
            value = json_value(size, rng)
            assert json.loads(json.dumps(value)) == value
            assert _depth(value) <= logsize(size)


def test_json_value_reproducible():
    assert json_value(60, random.Random(7)) == json_value(60, random.Random(7))
