# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Seeded sampler: owns the random source and draws values from generators."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Any, Iterator

from arbgen.core.generator import Generator, assert_is_generator
from arbgen.core.settings import Settings, get_default_settings_path, load_settings

VERBOSITY_LEVELS = ("debug", "info", "warning", "error")


class Sampler:
    """
    Draws samples from generators with a single seeded random.Random.

    Two samplers built with the same seed replay the same values for the same
    sequence of calls.
    """

    def __init__(
        self,
        seed: int | None = None,
        verbosity: str | None = None,
        settings: Path | Settings | None = None,
    ) -> None:
        if isinstance(settings, Settings):
            self.settings = settings
        else:
            settings_path = settings if settings is not None else get_default_settings_path()
            self.settings = load_settings(settings_path)

        self.seed = seed if seed is not None else self.settings.seed
        verbosity = verbosity or self.settings.verbosity
        if verbosity not in VERBOSITY_LEVELS:
            raise ValueError(
                f"Unknown verbosity {verbosity!r}; expected one of {', '.join(VERBOSITY_LEVELS)}"
            )

        self.log = logging.getLogger("arbgen")
        if not self.log.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)-20s - %(levelname)s - %(message)s")
            )
            self.log.addHandler(handler)
        self.log.setLevel(getattr(logging, verbosity.upper()))
        self.debug = self.log.debug
        self.info = self.log.info
        self.warning = self.log.warning
        self.error = self.log.error

        self.random = random.Random()
        self.random.seed(self.seed)
        self.info(f"Sampler seeded with {self.seed}")

    def reseed(self, seed: int) -> None:
        self.seed = seed
        self.random.seed(seed)
        self.info(f"Sampler reseeded with {seed}")

    def sample(self, generator: Generator[Any], size: int) -> Any:
        assert_is_generator(generator)
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        value = generator(size, self.random)
        self.debug(f"Sampled size={size}: {value!r}")
        return value

    def sizes(self, count: int | None = None, max_size: int | None = None) -> list[int]:
        """Sizes ramping linearly from 0 up to max_size over count samples."""
        count = count if count is not None else self.settings.count
        max_size = max_size if max_size is not None else self.settings.max_size
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        if count == 1:
            return [max_size]
        return [(i * max_size) // (count - 1) for i in range(count)]

    def samples(
        self,
        generator: Generator[Any],
        count: int | None = None,
        max_size: int | None = None,
    ) -> Iterator[Any]:
        assert_is_generator(generator)
        sizes = self.sizes(count, max_size)
        self.info(f"Sampling {len(sizes)} values up to size {sizes[-1]}")
        return (self.sample(generator, size) for size in sizes)
