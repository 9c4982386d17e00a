# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tests for the Addend tagged variant."""

import dataclasses

import pytest

from arbgen.core.addend import Addend, addend


def test_addend_fields():
    a = addend(1, 3, "v")
    assert a == Addend(idx=1, length=3, value="v")


def test_addend_is_immutable():
    a = addend(0, 1, None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.idx = 2


@pytest.mark.parametrize("idx,length", [(-1, 2), (2, 2), (0, 0)])
def test_addend_index_out_of_range(idx, length):
    with pytest.raises(ValueError, match="out of range"):
        addend(idx, length, None)


def test_fold_sees_tag_and_value():
    a = addend(2, 4, 10)
    assert a.fold(lambda idx, length, value: idx * 100 + length * 10 + value) == 250
