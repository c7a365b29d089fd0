# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Load the draftable player pool from JSON.

The roster file is a JSON array of player objects::

    [{"id": 1, "name": "Mario", "pitching": 6, "batting": 7,
      "fielding": 6, "running": 7, "image": "mario.png", "isCaptain": true}]

A roster that cannot be read is treated as an empty pool: the simulator
still runs, every team is simply left incomplete.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from config import get_roster_path
from models import Player

logger = logging.getLogger(__name__)

_PLAYER_LIST = TypeAdapter(list[Player])


def parse_players(data: object) -> list[Player]:
    """Validate decoded JSON into players.

    Raises:
        ValidationError: a record is missing fields or a skill is out of range.
    """
    return _PLAYER_LIST.validate_python(data)


def load_players(path: str | Path | None = None) -> list[Player]:
    """Read the roster file, returning [] if it is missing or invalid."""
    p = Path(path) if path is not None else get_roster_path()
    try:
        with open(p) as f:
            data = json.load(f)
        players = parse_players(data)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.error("Error loading players from %s: %s", p, exc)
        return []

    ids = [player.id for player in players]
    if len(set(ids)) != len(ids):
        logger.warning("Roster %s contains duplicate player ids", p)
    logger.debug("Loaded %d players from %s", len(players), p)
    return players
