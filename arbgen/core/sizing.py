# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Size scaling for array lengths and recursion depth."""

import math


def logsize(size: int) -> int:
    """Essentially round(log2(size + 1)), rounding halves up."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return max(int(math.floor(math.log2(size + 1) + 0.5)), 0)
