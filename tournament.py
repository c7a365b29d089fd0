# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""One generation of the evolution: draft, round-robin, and selection.

The draft runs nine rounds in the fixed order of the agent list. It is not a
snake draft, so earlier agents pick first in every round. The round-robin
plays each pair of complete teams once and ranks agents by wins alone; equal
win counts keep the order the agents were listed in.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

from agent import DEFAULT_MUTATION_RATE, DraftingAgent
from models import Player
from roster import load_players
from simulation import GameSimulator, InvalidTeamError
from stats import StatsMap, merge_stats, zeroed_stats
from team import MAX_PLAYERS

logger = logging.getLogger(__name__)

DRAFT_ROUNDS = MAX_PLAYERS
SURVIVORS = 4
PARENTS = 3

RosterLoader = Callable[[], list[Player]]


class Tournament:
    """Runs drafts and round-robins over a population of agents."""

    def __init__(self, agents: Sequence[DraftingAgent],
                 players: Sequence[Player] | None = None,
                 roster_loader: RosterLoader | None = None,
                 simulator: GameSimulator | None = None,
                 rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.agents: list[DraftingAgent] = list(agents)
        self.game_simulator = simulator or GameSimulator(rng=self.rng)

        if roster_loader is None and players is not None:
            snapshot = list(players)

            def roster_loader() -> list[Player]:
                return list(snapshot)

        self._roster_loader = roster_loader or load_players

        self.available_players: list[Player] = (
            list(players) if players is not None else self._load_pool()
        )
        self.global_player_stats: StatsMap = zeroed_stats(self.available_players)
        self.games_played = 0

    def _load_pool(self) -> list[Player]:
        return list(self._roster_loader() or [])

    # -------------------------------------------------------------------
    # Draft
    # -------------------------------------------------------------------

    def run_draft(self) -> None:
        for agent in self.agents:
            agent.reset_team()
        self.available_players = self._load_pool()
        if not self.available_players:
            logger.warning("No players available; every team will be incomplete")

        for round_no in range(DRAFT_ROUNDS):
            for agent in self.agents:
                drafted = agent.draft_player(list(self.available_players))
                if drafted is not None:
                    self.available_players = [
                        p for p in self.available_players if p.id != drafted.id
                    ]
            logger.debug("Draft round %d done, %d players left",
                         round_no + 1, len(self.available_players))

    # -------------------------------------------------------------------
    # Round-robin
    # -------------------------------------------------------------------

    def _credit_stats(self, agent: DraftingAgent, game_stats: StatsMap) -> None:
        roster_ids = {p.id for p in agent.team.players}
        agent.update_player_stats(
            {pid: line for pid, line in game_stats.items() if pid in roster_ids}
        )

    def run_tournament(self) -> list[DraftingAgent]:
        """Play every pair of valid teams once and return agents ranked by wins."""
        n = len(self.agents)
        wins = [0] * n
        scores = [0] * n
        self.games_played = 0

        for i in range(n):
            for j in range(i + 1, n):
                agent_a, agent_b = self.agents[i], self.agents[j]
                if not agent_a.team.is_valid() or not agent_b.team.is_valid():
                    continue

                try:
                    result = self.game_simulator.simulate_game(agent_a.team, agent_b.team)
                except InvalidTeamError as exc:
                    logger.warning("Skipping %s vs %s: %s",
                                   agent_a.team.name, agent_b.team.name, exc)
                    continue

                self.games_played += 1
                if result.winner is agent_a.team:
                    wins[i] += 1
                    scores[i] += result.winner_score
                    scores[j] += result.loser_score
                else:
                    wins[j] += 1
                    scores[j] += result.winner_score
                    scores[i] += result.loser_score

                merge_stats(self.global_player_stats, result.stats)
                self._credit_stats(agent_a, result.stats)
                self._credit_stats(agent_b, result.stats)

        for idx, agent in enumerate(self.agents):
            agent.tournament_wins = wins[idx]
            agent.tournament_score = scores[idx]

        logger.debug("Round-robin finished: %d games", self.games_played)
        # sorted() is stable, so agents with equal wins keep their list order.
        order = sorted(range(n), key=lambda idx: wins[idx], reverse=True)
        return [self.agents[idx] for idx in order]

    def run_generation(self) -> list[DraftingAgent]:
        self.run_draft()
        return self.run_tournament()

    # -------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------

    def _new_agent(self, agent_id: int) -> DraftingAgent:
        return DraftingAgent(agent_id, rng=self.rng)

    def create_next_generation(self, ranked_agents: Sequence[DraftingAgent]) -> list[DraftingAgent]:
        """Build the next population from a ranked list.

        The top four survive unchanged, the top three each produce one
        mutated child, and one fresh random agent joins. New agents take ids
        counting up from the highest id already in use. The result always has
        as many agents as the current population.
        """
        population_size = len(self.agents)
        existing_ids = [a.id for a in self.agents] + [a.id for a in ranked_agents]
        next_id = max(existing_ids, default=-1) + 1

        survivors = list(ranked_agents[:min(SURVIVORS, len(ranked_agents))])
        for agent in survivors:
            agent.update_lifetime_stats()
        new_agents: list[DraftingAgent] = list(survivors)

        for parent in survivors[:min(PARENTS, len(survivors))]:
            child = parent.reproduce(DEFAULT_MUTATION_RATE, next_id)
            child.reset_team()
            new_agents.append(child)
            next_id += 1

        new_agents.append(self._new_agent(next_id))
        next_id += 1

        while len(new_agents) < population_size:
            new_agents.append(self._new_agent(next_id))
            next_id += 1

        return new_agents[:population_size]
