# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Numeric, boolean and text generators."""

from __future__ import annotations

import random

from arbgen.combinators import array, constant
from arbgen.core.generator import bless


def _nat(size: int, rng: random.Random) -> int:
    return rng.randint(0, size)


def _integer(size: int, rng: random.Random) -> int:
    return rng.randint(-size, size)


def _number(size: int, rng: random.Random) -> float:
    return rng.uniform(-size, size)


def _boolean(size: int, rng: random.Random) -> bool:
    return rng.randint(0, 1) == 1


def _char(size: int, rng: random.Random) -> str:
    return chr(rng.randint(0, 0xFF))


def _asciichar(size: int, rng: random.Random) -> str:
    # Printable ASCII only
    return chr(rng.randint(0x20, 0x7E))


nat = bless(_nat)
integer = bless(_integer)
number = bless(_number)
boolean = bless(_boolean)
char = bless(_char)
asciichar = bless(_asciichar)
null = constant(None)

string = array(char).map("".join)
asciistring = array(asciichar).map("".join)
