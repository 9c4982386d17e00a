# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Size-bounded generator combinators for property-based testing."""

from arbgen.combinators import (
    RECURSION_STOP_ODDS,
    Constant,
    Membership,
    array,
    choose,
    combine,
    constant,
    dict_,
    dict_with_keys,
    either,
    json,
    nearray,
    oneof,
    pair,
    recursive,
    sum_,
    tuple_,
    unit,
)
from arbgen.core.addend import Addend, addend
from arbgen.core.curry import Curried, curried
from arbgen.core.errors import GeneratorContractError, MembershipTypeError
from arbgen.core.generator import Generator, assert_is_generator, bless, is_generator
from arbgen.core.registry import GeneratorRegistry, default_registry
from arbgen.core.sampler import Sampler
from arbgen.core.settings import Settings, load_settings
from arbgen.core.sizing import logsize
from arbgen.generators import register_defaults

register_defaults()

__version__ = "0.1.0"
