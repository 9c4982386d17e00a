# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Arbitrary JSON values: null, booleans, numbers and strings nested in arrays and objects."""

from __future__ import annotations

import random
from typing import Any

from arbgen.combinators import array, choose, dict_with_keys, recursive
from arbgen.core.generator import Generator, bless

from .primitives import boolean, null, number, string

json_leaf = choose([null, boolean, number, string])


def _json_step(deeper: Generator[Any]) -> Generator[Any]:
    # Children get half the size so container fan-out shrinks with depth.
    def halved(size: int, rng: random.Random) -> Any:
        return deeper(size // 2, rng)

    children = bless(halved)
    return choose([array(children), dict_with_keys(string, children)])


json_value = recursive(json_leaf, _json_step)
