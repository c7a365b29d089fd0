# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Text summaries of an evolution run.

Everything here reads the simulator's history and statistics; nothing is
mutated. The CLI prints the strings these functions return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from models import GenerationResult
from stats import PlayerStatistics, StatsMap


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

@dataclass
class AgentPerformance:
    agent_id: int
    total_wins: int = 0
    total_score: int = 0
    appearances: int = 0

    @property
    def avg_wins(self) -> float:
        return self.total_wins / self.appearances if self.appearances else 0.0

    @property
    def avg_score(self) -> float:
        return self.total_score / self.appearances if self.appearances else 0.0


def summarize_agent_performance(results: Iterable[GenerationResult]) -> list[AgentPerformance]:
    """Total each agent id's wins and runs over every generation it appeared in.

    Returned in order of total wins, highest first.
    """
    by_agent: dict[int, AgentPerformance] = {}
    for result in results:
        for ranking in result.rankings:
            perf = by_agent.setdefault(ranking.agent_id, AgentPerformance(ranking.agent_id))
            perf.total_wins += ranking.wins
            perf.total_score += ranking.score
            perf.appearances += 1
    return sorted(by_agent.values(), key=lambda p: p.total_wins, reverse=True)


def top_batters(stats: StatsMap, limit: int = 10) -> list[PlayerStatistics]:
    batters = [s for s in stats.values() if s.at_bats > 0]
    return sorted(batters, key=lambda s: s.runs, reverse=True)[:limit]


def top_pitchers(stats: StatsMap, limit: int = 10) -> list[PlayerStatistics]:
    pitchers = [s for s in stats.values() if s.innings_pitched > 0]
    return sorted(pitchers, key=lambda s: s.strikeouts, reverse=True)[:limit]


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_generation(result: GenerationResult) -> str:
    lines = [f"Generation {result.generation} results:"]
    for idx, ranking in enumerate(result.rankings, start=1):
        lines.append(f"{idx}. {ranking.team_name} - Wins: {ranking.wins}, Score: {ranking.score}")
    return "\n".join(lines)


def format_player_stats_summary(stats: StatsMap, limit: int = 10) -> str:
    lines = ["=== PLAYER STATISTICS SUMMARY ===", "", "Top Batters by Runs Scored:"]
    for idx, s in enumerate(top_batters(stats, limit), start=1):
        lines.append(
            f"{idx}. {s.player_name} - Runs: {s.runs}, Hits: {s.hits}, "
            f"At Bats: {s.at_bats}, Avg: {s.batting_average:.3f}"
        )
    lines += ["", "Top Pitchers by Strikeouts:"]
    for idx, s in enumerate(top_pitchers(stats, limit), start=1):
        lines.append(
            f"{idx}. {s.player_name} - Strikeouts: {s.strikeouts}, "
            f"Innings Pitched: {s.innings_pitched}, K/IP: {s.strikeouts_per_inning:.2f}"
        )
    return "\n".join(lines)


def format_simulation_summary(results: Sequence[GenerationResult], stats: StatsMap,
                              winning_roster: Sequence[str] = ()) -> str:
    """Render the end-of-run report.

    Args:
        results: Generation history, oldest first.
        stats: Tournament-wide player statistics.
        winning_roster: Pre-formatted lines describing the final winner's players.
    """
    performance = summarize_agent_performance(results)
    lines = ["=== SIMULATION FINAL SUMMARY ===", f"Total generations: {len(results)}", ""]

    lines.append("Top Agents by Total Wins:")
    for idx, p in enumerate(performance[:5], start=1):
        lines.append(
            f"{idx}. Agent {p.agent_id} - Total Wins: {p.total_wins}, "
            f"Total Score: {p.total_score}, Appearances: {p.appearances}"
        )

    lines += ["", "Top Agents by Total Score:"]
    by_score = sorted(performance, key=lambda p: p.total_score, reverse=True)
    for idx, p in enumerate(by_score[:9], start=1):
        lines.append(
            f"{idx}. Agent {p.agent_id} - Total Score: {p.total_score}, "
            f"Total Wins: {p.total_wins}, Appearances: {p.appearances}"
        )

    if results:
        lines += ["", "Final " + format_generation(results[-1])]
    if winning_roster:
        lines += ["", "Winning Team Players:", *winning_roster]

    lines += ["", format_player_stats_summary(stats)]
    return "\n".join(lines)
