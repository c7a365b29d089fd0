# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for per-player statistics and the merge between scopes."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from models import Player
from stats import PlayerStatistics, copy_stats, merge_stats, zeroed_stats


def test_batting_average():
    line = PlayerStatistics(player_id=1, at_bats=8, hits=2)
    assert line.batting_average == 0.25
    assert PlayerStatistics(player_id=2).batting_average == 0.0


def test_add_is_field_wise():
    line = PlayerStatistics(1, "A", at_bats=3, hits=1, runs=1, innings_pitched=2, strikeouts=4)
    line.add(PlayerStatistics(1, "A", at_bats=1, hits=1, runs=0, innings_pitched=1, strikeouts=2))
    assert line.to_dict() == {
        "player_id": 1, "player_name": "A", "at_bats": 4, "hits": 2,
        "runs": 1, "innings_pitched": 3, "strikeouts": 6,
    }


def test_merge_copies_unseen_lines():
    target = {}
    delta = {5: PlayerStatistics(5, "E", at_bats=2)}
    merge_stats(target, delta)
    assert target[5] == delta[5]
    assert target[5] is not delta[5]

    delta[5].at_bats += 10
    assert target[5].at_bats == 2


def test_merge_adds_existing_lines():
    target = {5: PlayerStatistics(5, "E", runs=1)}
    merge_stats(target, {5: PlayerStatistics(5, "E", runs=2)})
    assert target[5].runs == 3


def test_zeroed_stats():
    players = [Player(id=i, name=f"P{i}", pitching=1, batting=1, fielding=1, running=1)
               for i in (3, 4)]
    stats = zeroed_stats(players)
    assert set(stats) == {3, 4}
    assert stats[3].player_name == "P3"
    assert all(line.is_zero() for line in stats.values())


def test_copy_stats_is_deep():
    original = {1: PlayerStatistics(1, hits=1)}
    clone = copy_stats(original)
    clone[1].hits = 7
    assert original[1].hits == 1
