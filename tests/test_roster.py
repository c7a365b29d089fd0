# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for roster loading and configuration.

Verifies:
1. The bundled roster loads and validates
2. Missing, malformed or out-of-range roster files degrade to an empty pool
3. Environment variables override the roster path and seed
"""

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from pydantic import ValidationError

import config
from roster import load_players, parse_players


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps([
        {"id": 1, "name": "Mario", "pitching": 6, "batting": 7, "fielding": 6,
         "running": 7, "image": "mario.png", "isCaptain": True},
        {"id": 2, "name": "Toad", "pitching": 5, "batting": 5, "fielding": 3,
         "running": 7, "image": "toad.png", "isCaptain": False},
    ]))
    return path


# ===========================================================================
# Loading
# ===========================================================================

class TestLoadPlayers:

    def test_bundled_roster(self):
        players = load_players(config.DEFAULT_ROSTER_PATH)
        assert len(players) == 80
        assert len({p.id for p in players}) == 80
        assert sum(p.is_captain for p in players) >= 8
        assert all(0 <= p.batting <= 10 for p in players)

    def test_custom_file(self, roster_file):
        players = load_players(roster_file)
        assert [p.name for p in players] == ["Mario", "Toad"]
        assert players[0].is_captain and not players[1].is_captain

    def test_missing_file_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="roster"):
            assert load_players(tmp_path / "nope.json") == []
        assert "Error loading players" in caplog.text

    def test_malformed_json_is_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert load_players(path) == []

    def test_out_of_range_skill_is_empty(self, tmp_path):
        path = tmp_path / "strong.json"
        path.write_text(json.dumps([{"id": 1, "name": "X", "pitching": 12,
                                     "batting": 1, "fielding": 1, "running": 1}]))
        assert load_players(path) == []

    def test_env_override(self, roster_file, monkeypatch):
        monkeypatch.setenv(config.ROSTER_PATH_ENV, str(roster_file))
        assert len(load_players()) == 2


def test_parse_players_raises_on_missing_fields():
    with pytest.raises(ValidationError):
        parse_players([{"id": 1, "name": "Half"}])


# ===========================================================================
# Configuration
# ===========================================================================

class TestConfig:

    def test_default_roster_path(self, monkeypatch):
        monkeypatch.delenv(config.ROSTER_PATH_ENV, raising=False)
        assert config.get_roster_path() == config.DEFAULT_ROSTER_PATH

    def test_seed_unset(self, monkeypatch):
        monkeypatch.delenv(config.SEED_ENV, raising=False)
        assert config.get_seed() is None

    def test_seed_from_env(self, monkeypatch):
        monkeypatch.setenv(config.SEED_ENV, " 42 ")
        assert config.get_seed() == 42

    def test_bad_seed(self, monkeypatch):
        monkeypatch.setenv(config.SEED_ENV, "forty-two")
        with pytest.raises(ValueError, match=config.SEED_ENV):
            config.get_seed()
