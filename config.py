"""Centralized configuration for environment variables."""

import os
from pathlib import Path

ROSTER_PATH_ENV = "DRAFT_EVOLUTION_ROSTER"
SEED_ENV = "DRAFT_EVOLUTION_SEED"

DEFAULT_ROSTER_PATH = Path(__file__).resolve().parent / "data" / "character_data.json"
DEFAULT_NUM_AGENTS = 8
DEFAULT_GENERATIONS = 1000


def get_roster_path() -> Path:
    """Return the roster JSON path, honouring the environment override."""
    override = os.environ.get(ROSTER_PATH_ENV, "")
    return Path(override) if override else DEFAULT_ROSTER_PATH


def get_seed() -> int | None:
    """Return the configured random seed, or None if not set."""
    raw = os.environ.get(SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from None
