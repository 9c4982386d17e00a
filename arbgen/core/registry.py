# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Named generators injected at start-up (string keys for dicts, JSON values)."""

from __future__ import annotations

import logging
import random
from typing import Any

from arbgen.core.generator import Generator, assert_is_generator, bless

log = logging.getLogger("arbgen.registry")


class GeneratorRegistry:
    """Name -> Generator table. Combinators resolve entries lazily at sample time."""

    def __init__(self) -> None:
        self._items: dict[str, Generator[Any]] = {}

    def register(self, name: str, generator: Generator[Any], *, replace: bool = False) -> None:
        assert_is_generator(generator)
        if name in self._items and not replace:
            raise ValueError(f"Generator already registered under {name!r}")
        self._items[name] = generator
        log.debug(f"Registered generator {name!r}: {generator!r}")

    def unregister(self, name: str) -> None:
        self._items.pop(name, None)

    def get(self, name: str) -> Generator[Any]:
        try:
            return self._items[name]
        except KeyError:
            known = ", ".join(sorted(self._items)) or "none"
            raise KeyError(f"No generator registered under {name!r} (registered: {known})") from None

    def lazy(self, name: str) -> Generator[Any]:
        """Generator that looks ``name`` up each time it is invoked."""

        def resolve(size: int, rng: random.Random) -> Any:
            return self.get(name)(size, rng)

        resolve.__qualname__ = f"lazy[{name}]"
        return bless(resolve)

    def names(self) -> list[str]:
        return sorted(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items


default_registry = GeneratorRegistry()
