# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Explicit partial application for combinators with a declared arity."""

from __future__ import annotations

import functools
from typing import Any, Callable


class Curried:
    """
    Combinator that accepts its arguments incrementally.

    With fewer than ``arity`` arguments a new Curried holding them is returned.
    With exactly ``arity`` the combinator is built. Any extra trailing arguments
    are applied to the built result, so ``array(gen, size, rng)`` samples at once.
    """

    def __init__(self, func: Callable[..., Any], arity: int, bound: tuple = ()) -> None:
        self._func = func
        self._arity = arity
        self._bound = bound
        functools.update_wrapper(self, func)

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def bound(self) -> tuple:
        return self._bound

    def __call__(self, *args: Any) -> Any:
        collected = self._bound + args
        if len(collected) < self._arity:
            return Curried(self._func, self._arity, collected)
        result = self._func(*collected[: self._arity])
        rest = collected[self._arity :]
        if rest:
            return result(*rest)
        return result

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"Curried({name}, {len(self._bound)}/{self._arity})"


def curried(arity: int) -> Callable[[Callable[..., Any]], Curried]:
    def decorator(func: Callable[..., Any]) -> Curried:
        return Curried(func, arity)

    return decorator
