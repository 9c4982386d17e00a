# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Stuart Alldred.

"""Load sampler settings from YAML, validated against the settings schema."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_SEED = 42
DEFAULT_VERBOSITY = "info"
DEFAULT_COUNT = 100
DEFAULT_MAX_SIZE = 100


@dataclass(frozen=True)
class Settings:
    """Sampler settings. Sizes ramp from 0 to max_size over count samples."""

    seed: int = DEFAULT_SEED
    verbosity: str = DEFAULT_VERBOSITY
    count: int = DEFAULT_COUNT
    max_size: int = DEFAULT_MAX_SIZE


def get_schema_path() -> Path:
    """Path to the settings JSON Schema (for validation of user and default settings)."""
    return Path(__file__).resolve().parent.parent / "config" / "settings_schema.json"


def get_default_settings_path() -> Path:
    """Path to the default settings shipped with arbgen."""
    return Path(__file__).resolve().parent.parent / "config" / "settings_default.yaml"


def validate_settings(raw: dict[str, Any], path: Path | None = None) -> None:
    """Validate parsed YAML against the settings schema. Raises ValueError on failure."""
    import jsonschema

    schema = json.loads(get_schema_path().read_text())
    try:
        jsonschema.validate(instance=raw, schema=schema)
    except jsonschema.ValidationError as e:
        loc = f" ({path})" if path else ""
        msg = getattr(e, "message", str(e))
        raise ValueError(f"Settings schema validation failed{loc}: {msg}") from e


def load_settings(path: Path) -> Settings:
    """Load and validate settings from YAML. Keys missing from the file keep their defaults."""
    import yaml

    raw = yaml.safe_load(Path(path).read_text())
    if not raw:
        raise ValueError(f"Settings file is empty: {path}")
    validate_settings(raw, path)

    sampler = raw["sampler"] or {}
    return Settings(
        seed=int(sampler.get("seed", DEFAULT_SEED)),
        verbosity=str(sampler.get("verbosity", DEFAULT_VERBOSITY)),
        count=int(sampler.get("count", DEFAULT_COUNT)),
        max_size=int(sampler.get("max_size", DEFAULT_MAX_SIZE)),
    )
