# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Generator combinators."""

from .primitive import Constant, Membership, as_predicate, choose, combine, constant, oneof
from .recursive import RECURSION_STOP_ODDS, recursive
from .structural import (
    array,
    dict_,
    dict_with_keys,
    either,
    json,
    nearray,
    pair,
    sum_,
    tuple_,
    unit,
)

__all__ = [
    "RECURSION_STOP_ODDS",
    "Constant",
    "Membership",
    "array",
    "as_predicate",
    "choose",
    "combine",
    "constant",
    "dict_",
    "dict_with_keys",
    "either",
    "json",
    "nearray",
    "oneof",
    "pair",
    "recursive",
    "sum_",
    "tuple_",
    "unit",
]
