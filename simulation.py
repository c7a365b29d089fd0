# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Baseball game simulation engine.

Resolves games at the at-bat level from the four player skill ratings.
Each half-inning the defending team's best pitcher faces batters in lineup
order until three outs are recorded; hits move runners around the bases
under a fixed advancement table.

All randomness comes from one ``random.Random`` so a seed replays a game.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from models import Player
from stats import PlayerStatistics, StatsMap
from team import Team

logger = logging.getLogger(__name__)

REGULATION_INNINGS = 9
MAX_EXTRA_INNINGS = 3
OUTS_PER_HALF_INNING = 3

SINGLE = "single"
DOUBLE = "double"
TRIPLE = "triple"
HOME_RUN = "home_run"


class InvalidTeamError(ValueError):
    """A team without nine players and a captain was sent to play."""


# ---------------------------------------------------------------------------
# Base state
# ---------------------------------------------------------------------------

@dataclass
class Bases:
    """Runners on first, second and third (None when the base is empty)."""
    first: Player | None = None
    second: Player | None = None
    third: Player | None = None

    def runners(self) -> list[Player]:
        return [r for r in (self.third, self.second, self.first) if r is not None]

    def clear(self) -> None:
        self.first = self.second = self.third = None

    def as_tuple(self) -> tuple[bool, bool, bool]:
        return (self.first is not None, self.second is not None, self.third is not None)


# ---------------------------------------------------------------------------
# Game result
# ---------------------------------------------------------------------------

@dataclass
class GameResult:
    winner: Team
    loser: Team
    winner_score: int
    loser_score: int
    stats: StatsMap = field(default_factory=dict)
    innings: int = REGULATION_INNINGS
    decided_by_coin_flip: bool = False


# ---------------------------------------------------------------------------
# Simulation engine
# ---------------------------------------------------------------------------

class GameSimulator:
    """Plays games between two valid teams.

    Per game the simulator keeps a statistics map and one lineup cursor per
    team. Cursors carry over from inning to inning and start again at the
    top of the order in the next game.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        if rng is None:
            if seed is None:
                seed = random.randint(0, 2**31 - 1)
            rng = random.Random(seed)
        self.seed = seed
        self.rng = rng
        self.game_stats: StatsMap = {}
        self._lineup_cursors: dict[int, int] = {}

    # -------------------------------------------------------------------
    # Probability helpers
    # -------------------------------------------------------------------

    def _clamp(self, v: float, lo: float = 0.0, hi: float = 1.0) -> float:
        return max(lo, min(hi, v))

    def hit_probability(self, batter: Player, pitcher: Player) -> float:
        return self._clamp(0.3 + (batter.batting - 0.8 * pitcher.pitching) / 100, 0.1, 0.5)

    def power_factor(self, batter: Player, fielding_strength: float) -> float:
        """Batting relative to the defence. Higher values favour extra bases."""
        if fielding_strength <= 0:
            return math.inf
        return batter.batting / (0.5 * fielding_strength)

    def determine_hit_type(self, batter: Player, fielding_strength: float) -> str:
        """Draw single/double/triple/home run.

        The thresholds are not normalised: a strong batter against a weak
        defence shrinks the single band and pushes the draw toward extra
        bases.
        """
        power = self.power_factor(batter, fielding_strength)
        single_threshold = 0.6 / power if power > 0 else math.inf

        roll = self.rng.random()
        if roll < single_threshold:
            return SINGLE
        elif roll < 0.85 - 0.05 * power:
            return DOUBLE
        elif roll < 0.95 - 0.02 * power:
            return TRIPLE
        else:
            return HOME_RUN

    @staticmethod
    def designated_pitcher(team: Team) -> Player:
        # max() keeps the first of equal ratings
        return max(team.players, key=lambda p: p.pitching)

    # -------------------------------------------------------------------
    # Stat tracking
    # -------------------------------------------------------------------

    def _stats_for(self, player: Player) -> PlayerStatistics:
        line = self.game_stats.get(player.id)
        if line is None:
            line = self.game_stats[player.id] = PlayerStatistics.for_player(player)
        return line

    def _score(self, runners: list[Player]) -> int:
        for runner in runners:
            self._stats_for(runner).runs += 1
        return len(runners)

    # -------------------------------------------------------------------
    # Base running
    # -------------------------------------------------------------------

    def advance_runners(self, hit_type: str, bases: Bases, batter: Player) -> int:
        """Move runners for a hit. Updates *bases* and returns runs scored."""
        if hit_type == HOME_RUN:
            runs = self._score(bases.runners() + [batter])
            bases.clear()
            return runs

        if hit_type == TRIPLE:
            runs = self._score(bases.runners())
            bases.clear()
            bases.third = batter
            return runs

        if hit_type == DOUBLE:
            runs = self._score([r for r in (bases.third, bases.second) if r is not None])
            bases.third = bases.first
            bases.second = batter
            bases.first = None
            return runs

        # single
        runs = self._score([bases.third] if bases.third is not None else [])
        bases.third = bases.second
        bases.second = bases.first
        bases.first = batter
        return runs

    # -------------------------------------------------------------------
    # Innings
    # -------------------------------------------------------------------

    def _next_batter(self, team: Team) -> Player:
        key = id(team)
        cursor = self._lineup_cursors.get(key, 0)
        batter = team.players[cursor % len(team.players)]
        self._lineup_cursors[key] = (cursor + 1) % len(team.players)
        return batter

    def simulate_half_inning(self, batting_team: Team, fielding_team: Team) -> int:
        """Play one half-inning and return the runs scored."""
        pitcher = self.designated_pitcher(fielding_team)
        fielding_strength = fielding_team.get_stats().fielding
        self._stats_for(pitcher).innings_pitched += 1

        bases = Bases()
        outs = 0
        runs = 0
        while outs < OUTS_PER_HALF_INNING:
            batter = self._next_batter(batting_team)
            batter_stats = self._stats_for(batter)
            batter_stats.at_bats += 1

            if self.rng.random() < self.hit_probability(batter, pitcher):
                batter_stats.hits += 1
                hit_type = self.determine_hit_type(batter, fielding_strength)
                runs += self.advance_runners(hit_type, bases, batter)
            else:
                outs += 1
                self._stats_for(pitcher).strikeouts += 1
        return runs

    def _play_inning(self, team_a: Team, team_b: Team) -> tuple[int, int]:
        return (
            self.simulate_half_inning(team_a, team_b),
            self.simulate_half_inning(team_b, team_a),
        )

    # -------------------------------------------------------------------
    # Full game
    # -------------------------------------------------------------------

    def simulate_game(self, team_a: Team, team_b: Team,
                      innings: int = REGULATION_INNINGS) -> GameResult:
        """Simulate a game. Team A bats first in every inning.

        Ties after regulation go to at most three extra innings, then to a
        coin flip whose winner is awarded one extra run.

        Raises:
            InvalidTeamError: either team is short of players or a captain.
        """
        for team in (team_a, team_b):
            if not team.is_valid():
                raise InvalidTeamError(
                    f"{team.name} must have 9 players and a captain "
                    f"(has {len(team.players)}, captain={team.captain is not None})"
                )

        self.game_stats = {}
        self._lineup_cursors = {id(team_a): 0, id(team_b): 0}

        score_a = score_b = 0
        played = 0
        for _ in range(innings):
            runs_a, runs_b = self._play_inning(team_a, team_b)
            score_a += runs_a
            score_b += runs_b
            played += 1

        extra = 0
        while score_a == score_b and extra < MAX_EXTRA_INNINGS:
            runs_a, runs_b = self._play_inning(team_a, team_b)
            score_a += runs_a
            score_b += runs_b
            extra += 1
            played += 1

        coin_flip = False
        if score_a == score_b:
            coin_flip = True
            if self.rng.random() < 0.5:
                score_a += 1
            else:
                score_b += 1

        if score_a > score_b:
            result = GameResult(team_a, team_b, score_a, score_b)
        else:
            result = GameResult(team_b, team_a, score_b, score_a)
        result.stats = self.game_stats
        result.innings = played
        result.decided_by_coin_flip = coin_flip

        logger.debug(
            "%s beat %s %d-%d in %d innings%s",
            result.winner.name, result.loser.name, result.winner_score,
            result.loser_score, played, " (coin flip)" if coin_flip else "",
        )
        return result
