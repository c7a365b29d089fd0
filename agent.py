# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Drafting agent: a team, a preference network, and a lineage record.

An agent scores every available player against the averages of the team it
has drafted so far and takes the top score. Reproduction copies the network
with small random perturbations; lifetime counters follow an agent only as
long as it survives selection.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from models import Player, TeamStats
from scorer import FeedForwardScorer
from stats import PlayerStatistics, StatsMap, copy_stats, merge_stats
from team import Team

logger = logging.getLogger(__name__)

# Skills are rated 0-10; inputs to the network are scaled into 0-1.
SKILL_SCALE = 10.0
DEFAULT_MUTATION_RATE = 0.1


def team_name_for(agent_id: int) -> str:
    return f"Team {agent_id}"


class DraftingAgent:
    """An evolvable drafting strategy."""

    def __init__(self, agent_id: int, scorer: FeedForwardScorer | None = None,
                 rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.id = agent_id
        self.team = Team(team_name_for(agent_id))
        self.scorer = scorer or FeedForwardScorer.with_random_weights(self.rng)

        # Reset every generation
        self.tournament_score = 0
        self.tournament_wins = 0

        # Carried forward only while the agent survives selection
        self.lifetime_wins = 0
        self.lifetime_score = 0
        self.generations = 1
        self.player_stats: StatsMap = {}

    def __repr__(self) -> str:
        return f"DraftingAgent(id={self.id}, wins={self.tournament_wins})"

    @property
    def weights(self) -> list[float]:
        return self.scorer.weights

    # -------------------------------------------------------------------
    # Player evaluation
    # -------------------------------------------------------------------

    @staticmethod
    def features(player: Player, team_stats: TeamStats) -> list[float]:
        return [
            player.pitching / SKILL_SCALE,
            player.batting / SKILL_SCALE,
            player.fielding / SKILL_SCALE,
            player.running / SKILL_SCALE,
            team_stats.pitching / SKILL_SCALE,
            team_stats.batting / SKILL_SCALE,
            team_stats.fielding / SKILL_SCALE,
            team_stats.running / SKILL_SCALE,
        ]

    def evaluate(self, player: Player, team_stats: TeamStats) -> float:
        return self.scorer.evaluate(self.features(player, team_stats))

    def draft_player(self, available_players: Sequence[Player]) -> Player | None:
        """Pick the best-scoring player and add them to the team.

        Returns the player drafted, or None if the pool is empty or the team
        has no room left.
        """
        if not available_players:
            return None

        team_stats = self.team.get_stats()
        best_player: Player | None = None
        best_score = float("-inf")
        for player in available_players:
            score = self.evaluate(player, team_stats)
            # Strict comparison: the first of several equal scores wins.
            if score > best_score:
                best_score = score
                best_player = player

        if best_player is None or not self.team.add_player(best_player):
            return None

        if best_player.id not in self.player_stats:
            self.player_stats[best_player.id] = PlayerStatistics.for_player(best_player)

        logger.debug("Agent %d drafted %s (score %.4f)", self.id, best_player.name, best_score)
        return best_player

    # -------------------------------------------------------------------
    # Reproduction and bookkeeping
    # -------------------------------------------------------------------

    def reproduce(self, mutation_rate: float = DEFAULT_MUTATION_RATE,
                  new_id: int | None = None) -> DraftingAgent:
        """Create a mutated child.

        The child inherits a snapshot of this agent's player statistics and
        starts with an empty team and zeroed tournament counters.
        """
        child_id = self.id if new_id is None else new_id
        child = DraftingAgent(
            child_id,
            scorer=self.scorer.mutated(mutation_rate, self.rng),
            rng=self.rng,
        )
        child.player_stats = copy_stats(self.player_stats)
        return child

    def reset_team(self) -> None:
        self.team = Team(team_name_for(self.id))

    def update_player_stats(self, player_stats: StatsMap) -> None:
        merge_stats(self.player_stats, player_stats)

    def update_lifetime_stats(self) -> None:
        """Fold this generation's results into the lifetime totals.

        Call exactly once per generation survived; a second call counts the
        same generation twice.
        """
        self.lifetime_wins += self.tournament_wins
        self.lifetime_score += self.tournament_score
        self.generations += 1
