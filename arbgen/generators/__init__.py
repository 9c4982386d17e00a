# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Built-in generators and their registration in the generator registry."""

from arbgen.combinators.structural import JSON_GENERATOR, STRING_GENERATOR
from arbgen.core.registry import GeneratorRegistry, default_registry

from .json import json_leaf, json_value
from .primitives import asciichar, asciistring, boolean, char, integer, nat, null, number, string


def register_defaults(registry: GeneratorRegistry = default_registry) -> None:
    """Register the string and JSON generators that dict_ and json resolve by name."""
    registry.register(STRING_GENERATOR, string, replace=True)
    registry.register(JSON_GENERATOR, json_value, replace=True)


__all__ = [
    "asciichar",
    "asciistring",
    "boolean",
    "char",
    "integer",
    "json_leaf",
    "json_value",
    "nat",
    "null",
    "number",
    "register_defaults",
    "string",
]
