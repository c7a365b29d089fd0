# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Generation loop for the drafting-agent evolution.

Usage::

    from evolution import EvolutionSimulator

    sim = EvolutionSimulator(num_agents=8, max_generations=50, seed=7)
    sim.set_generation_complete_callback(lambda result: print(result.generation))
    history = sim.run_simulation()
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

from agent import DraftingAgent
from config import DEFAULT_GENERATIONS, DEFAULT_NUM_AGENTS
from models import AgentRanking, GenerationResult, Player
from stats import StatsMap
from tournament import RosterLoader, Tournament

logger = logging.getLogger(__name__)

GenerationHandler = Callable[[GenerationResult], None]


def build_generation_result(generation: int,
                            ranked_agents: Sequence[DraftingAgent]) -> GenerationResult:
    return GenerationResult(
        generation=generation,
        rankings=tuple(
            AgentRanking(
                agent_id=agent.id,
                team_name=agent.team.name,
                wins=agent.tournament_wins,
                score=agent.tournament_score,
                team_stats=agent.team.get_stats(),
            )
            for agent in ranked_agents
        ),
    )


class EvolutionSimulator:
    """Runs the tournament for a fixed number of generations.

    After each generation a GenerationResult is appended to the history and
    passed to the registered handler, if any, before the population is
    replaced. The history only ever grows.

    Args:
        num_agents: Population size.
        max_generations: Number of generations to run.
        players: Fixed player pool. When omitted the roster is loaded
            through *roster_loader* (or from the configured roster file).
        roster_loader: Zero-argument callable returning the player pool.
        seed: Seed for the single random stream shared by every component.
    """

    def __init__(self, num_agents: int = DEFAULT_NUM_AGENTS,
                 max_generations: int = DEFAULT_GENERATIONS,
                 players: Sequence[Player] | None = None,
                 roster_loader: RosterLoader | None = None,
                 seed: int | None = None) -> None:
        if num_agents < 1:
            raise ValueError(f"num_agents must be at least 1, got {num_agents}")
        if max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")

        self.seed = seed
        self.rng = random.Random(seed)
        agents = [DraftingAgent(i, rng=self.rng) for i in range(num_agents)]
        self.tournament = Tournament(agents, players=players,
                                     roster_loader=roster_loader, rng=self.rng)
        self.max_generations = max_generations
        self.generation = 0
        self._generation_results: list[GenerationResult] = []
        self._on_generation_complete: GenerationHandler | None = None
        self.ranked_agents: list[DraftingAgent] = []

    # -- accessors ---------------------------------------------------------

    @property
    def agents(self) -> tuple[DraftingAgent, ...]:
        return tuple(self.tournament.agents)

    @property
    def global_player_stats(self) -> StatsMap:
        return self.tournament.global_player_stats

    def get_generation_results(self) -> tuple[GenerationResult, ...]:
        return tuple(self._generation_results)

    def set_generation_complete_callback(self, handler: GenerationHandler | None) -> None:
        """Register the single generation handler; None removes it."""
        self._on_generation_complete = handler

    # -- main loop ---------------------------------------------------------

    def run_generation(self) -> GenerationResult:
        """Run one draft and round-robin and record the result."""
        self.generation += 1
        ranked = self.tournament.run_generation()
        result = build_generation_result(self.generation, ranked)
        self._generation_results.append(result)
        self.ranked_agents = ranked

        if self._on_generation_complete is not None:
            self._on_generation_complete(result)

        logger.info(
            "Generation %d/%d: leader %s with %d wins (%d runs)",
            self.generation, self.max_generations,
            ranked[0].team.name if ranked else "-",
            ranked[0].tournament_wins if ranked else 0,
            ranked[0].tournament_score if ranked else 0,
        )
        return result

    def run_simulation(self) -> list[GenerationResult]:
        logger.info("Starting evolution simulation: %d agents, %d generations",
                    len(self.tournament.agents), self.max_generations)
        self._generation_results = []
        self.generation = 0

        for gen in range(self.max_generations):
            self.run_generation()
            if gen < self.max_generations - 1:
                self.tournament.agents = self.tournament.create_next_generation(
                    self.ranked_agents
                )
                logger.debug("Generation %d population: %s", gen + 2,
                             ", ".join(f"Agent {a.id}" for a in self.tournament.agents))

        logger.info("Evolution simulation complete")
        return list(self._generation_results)
