#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Validate an arbgen settings YAML against the schema and the loader.
Use this when authoring custom sampler settings to sanity-check before sampling.
Exit 0 if valid; non-zero and message on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root so we can import arbgen
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def main() -> int:
    if len(sys.argv) != 2:
        print("Usage: check-settings.py <path-to-settings.yaml>", file=sys.stderr)
        return 2
    path = Path(sys.argv[1])
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1
    try:
        from arbgen.core.settings import load_settings

        settings = load_settings(path)
        print(f"OK: {path}")
        print(f"  seed: {settings.seed}")
        print(f"  verbosity: {settings.verbosity}")
        print(f"  samples: {settings.count} up to size {settings.max_size}")
        return 0
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
