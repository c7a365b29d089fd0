# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for the reporting helpers and the player-ranking study."""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from models import AgentRanking, GenerationResult, Player, TeamStats
from rankings import format_player_rankings, run_player_rankings
from report import (
    format_generation,
    format_player_stats_summary,
    format_simulation_summary,
    summarize_agent_performance,
    top_batters,
    top_pitchers,
)
from stats import PlayerStatistics


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def ranking(agent_id, wins, score):
    return AgentRanking(agent_id=agent_id, team_name=f"Team {agent_id}",
                        wins=wins, score=score, team_stats=TeamStats())


def history():
    return [
        GenerationResult(generation=1, rankings=(ranking(0, 3, 20), ranking(1, 1, 30))),
        GenerationResult(generation=2, rankings=(ranking(1, 2, 12), ranking(2, 0, 4))),
    ]


def stats_map():
    return {
        1: PlayerStatistics(1, "Slugger", at_bats=40, hits=15, runs=9),
        2: PlayerStatistics(2, "Contact", at_bats=40, hits=18, runs=5),
        3: PlayerStatistics(3, "Ace", innings_pitched=12, strikeouts=30),
        4: PlayerStatistics(4, "Bench"),
    }


# ===========================================================================
# Aggregation
# ===========================================================================

def test_summarize_agent_performance():
    perf = summarize_agent_performance(history())
    assert [p.agent_id for p in perf] == [0, 1, 2]
    agent_1 = perf[1]
    assert (agent_1.total_wins, agent_1.total_score, agent_1.appearances) == (3, 42, 2)
    assert agent_1.avg_score == pytest.approx(21.0)


def test_top_batters_by_runs():
    assert [s.player_name for s in top_batters(stats_map())] == ["Slugger", "Contact"]


def test_top_pitchers_by_strikeouts():
    pitchers = top_pitchers(stats_map())
    assert [s.player_name for s in pitchers] == ["Ace"]
    assert pitchers[0].strikeouts_per_inning == pytest.approx(2.5)


# ===========================================================================
# Formatting
# ===========================================================================

def test_format_generation():
    text = format_generation(history()[0])
    assert text.splitlines() == [
        "Generation 1 results:",
        "1. Team 0 - Wins: 3, Score: 20",
        "2. Team 1 - Wins: 1, Score: 30",
    ]


def test_format_player_stats_summary():
    text = format_player_stats_summary(stats_map())
    assert "1. Slugger - Runs: 9, Hits: 15, At Bats: 40, Avg: 0.375" in text
    assert "1. Ace - Strikeouts: 30, Innings Pitched: 12, K/IP: 2.50" in text
    assert "Bench" not in text


def test_format_simulation_summary():
    text = format_simulation_summary(history(), stats_map(), ["Team: Team 1 (Agent 1)"])
    assert "Total generations: 2" in text
    assert "1. Agent 1 - Total Score: 42" in text
    assert "Final Generation 2 results:" in text
    assert "Winning Team Players:" in text


def test_format_simulation_summary_empty():
    text = format_simulation_summary([], {})
    assert "Total generations: 0" in text


# ===========================================================================
# Player rankings
# ===========================================================================

def make_pool(n=72, seed=0):
    rng = random.Random(seed)
    return [
        Player(id=i, name=f"Player {i}", pitching=rng.randint(0, 10),
               batting=rng.randint(0, 10), fielding=rng.randint(0, 10),
               running=rng.randint(0, 10), is_captain=True)
        for i in range(1, n + 1)
    ]


class TestPlayerRankings:

    def test_every_drafted_player_credited(self):
        rankings = run_player_rankings(make_pool(), iterations=3, seed=5)
        assert len(rankings) == 72
        # 72 players, all drafted every time
        assert all(r.games_played == 3 for r in rankings)
        # 28 games per tournament, each win credited to 9 players
        assert sum(r.wins for r in rankings) == 3 * 28 * 9

    def test_sorted_by_wins_then_rate(self):
        rankings = run_player_rankings(make_pool(80), iterations=2, seed=6)
        keys = [(r.wins, r.win_rate) for r in rankings]
        assert keys == sorted(keys, reverse=True)
        undrafted = [r for r in rankings if r.games_played == 0]
        assert all(r.win_rate == 0.0 for r in undrafted)

    def test_win_rate_normalised(self):
        rankings = run_player_rankings(make_pool(), iterations=2, seed=7)
        for r in rankings:
            assert r.win_rate == pytest.approx((r.wins / r.games_played) / 7)
            assert 0.0 <= r.win_rate <= 1.0

    def test_seeded_study_replays(self):
        first = run_player_rankings(make_pool(), iterations=2, seed=8)
        second = run_player_rankings(make_pool(), iterations=2, seed=8)
        assert first == second

    def test_empty_pool(self):
        assert run_player_rankings([], iterations=2, seed=1) == []

    def test_format(self):
        rankings = run_player_rankings(make_pool(), iterations=1, seed=9)
        lines = format_player_rankings(rankings).splitlines()
        assert lines[0] == "===== PLAYER RANKINGS BY WINS ====="
        assert len(lines) == 3 + 72
        assert lines[3].startswith("   1 | ")
