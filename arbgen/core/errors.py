# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Exceptions raised when a value does not honour the generator contract."""


class GeneratorContractError(TypeError):
    """A value used as a generator is not a blessed Generator."""


class MembershipTypeError(GeneratorContractError):
    """A value used in a membership test is not callable."""
