# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Tagged variant produced by sum generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Addend(Generic[T]):
    """
    One branch of a sum type: which branch (idx) out of how many (length),
    and the value that branch produced.
    """

    idx: int
    length: int
    value: T

    def fold(self, f: Callable[[int, int, T], Any]) -> Any:
        return f(self.idx, self.length, self.value)


def addend(idx: int, length: int, value: T) -> Addend[T]:
    if not 0 <= idx < length:
        raise ValueError(f"Addend index {idx} out of range for {length} branches")
    return Addend(idx=idx, length=length, value=value)
