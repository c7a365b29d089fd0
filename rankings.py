# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Rank players by how often the teams that drafted them win.

Each iteration seats eight fresh random agents, runs one draft and
round-robin, and credits every drafted player with their agent's wins.
Over many iterations the totals show which players the simulator rewards,
independent of any evolved drafting strategy.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from agent import DraftingAgent
from models import Player
from tournament import Tournament

logger = logging.getLogger(__name__)

AGENTS_PER_TOURNAMENT = 8
PROGRESS_INTERVAL = 100


@dataclass
class PlayerRanking:
    player_id: int
    name: str
    wins: int = 0
    games_played: int = 0
    win_rate: float = 0.0


def run_player_rankings(players: Sequence[Player], iterations: int = 100,
                        seed: int | None = None,
                        num_agents: int = AGENTS_PER_TOURNAMENT) -> list[PlayerRanking]:
    """Run *iterations* random tournaments and rank every player.

    ``games_played`` counts tournaments in which the player was drafted.
    ``win_rate`` is wins per appearance as a fraction of the most games a
    team can win in one round-robin.
    """
    rng = random.Random(seed)
    wins = {p.id: 0 for p in players}
    appearances = {p.id: 0 for p in players}

    for i in range(iterations):
        agents = [DraftingAgent(agent_id, rng=rng) for agent_id in range(1, num_agents + 1)]
        tournament = Tournament(agents, players=players, rng=rng)
        for agent in tournament.run_generation():
            for player in agent.team.players:
                wins[player.id] = wins.get(player.id, 0) + agent.tournament_wins
                appearances[player.id] = appearances.get(player.id, 0) + 1

        if i % PROGRESS_INTERVAL == 0:
            logger.info("Completed %d of %d tournaments", i, iterations)

    max_wins = max(num_agents - 1, 1)
    rankings = []
    for player in players:
        played = appearances.get(player.id, 0)
        won = wins.get(player.id, 0)
        rankings.append(PlayerRanking(
            player_id=player.id,
            name=player.name,
            wins=won,
            games_played=played,
            win_rate=(won / played) / max_wins if played else 0.0,
        ))

    rankings.sort(key=lambda r: (r.wins, r.win_rate), reverse=True)
    return rankings


def format_player_rankings(rankings: Sequence[PlayerRanking]) -> str:
    lines = [
        "===== PLAYER RANKINGS BY WINS =====",
        "Rank | Player Name          | Wins  | Games | Win Rate",
        "-----|----------------------|------:|------:|--------:",
    ]
    for idx, r in enumerate(rankings, start=1):
        lines.append(
            f"{idx:>4} | {r.name:<20} | {r.wins:>5} | {r.games_played:>5} | "
            f"{r.win_rate * 100:.2f}%"
        )
    return "\n".join(lines)
