# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Per-player statistics and the merge helpers shared by every scope.

Three scopes keep statistics with the same shape: a single game, one agent's
history, and the tournament as a whole. Scopes never share entries; data moves
between them only through ``merge_stats``, which adds field by field and
copies entries it has not seen before.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterable

from models import Player


# ---------------------------------------------------------------------------
# Stat line
# ---------------------------------------------------------------------------

_COUNTERS = ("at_bats", "hits", "runs", "innings_pitched", "strikeouts")


@dataclass
class PlayerStatistics:
    player_id: int
    player_name: str = ""
    at_bats: int = 0
    hits: int = 0
    runs: int = 0
    innings_pitched: int = 0
    strikeouts: int = 0

    @classmethod
    def for_player(cls, player: Player) -> PlayerStatistics:
        return cls(player_id=player.id, player_name=player.name)

    @property
    def batting_average(self) -> float:
        return self.hits / self.at_bats if self.at_bats else 0.0

    @property
    def strikeouts_per_inning(self) -> float:
        if not self.innings_pitched:
            return 0.0
        return self.strikeouts / self.innings_pitched

    def add(self, other: PlayerStatistics) -> None:
        """Accumulate *other*'s counters into this line."""
        for name in _COUNTERS:
            setattr(self, name, getattr(self, name) + getattr(other, name))

    def copy(self) -> PlayerStatistics:
        return replace(self)

    def is_zero(self) -> bool:
        return all(getattr(self, name) == 0 for name in _COUNTERS)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


StatsMap = dict[int, PlayerStatistics]


# ---------------------------------------------------------------------------
# Map helpers
# ---------------------------------------------------------------------------

def zeroed_stats(players: Iterable[Player]) -> StatsMap:
    """Build a map with an empty line for every player."""
    return {p.id: PlayerStatistics.for_player(p) for p in players}


def merge_stats(target: StatsMap, delta: StatsMap) -> StatsMap:
    """Add every line in *delta* into *target* and return *target*.

    Players missing from *target* get a copy of the incoming line, so the two
    maps never end up holding the same object.
    """
    for player_id, line in delta.items():
        existing = target.get(player_id)
        if existing is None:
            target[player_id] = line.copy()
        else:
            existing.add(line)
    return target


def copy_stats(stats: StatsMap) -> StatsMap:
    return {player_id: line.copy() for player_id, line in stats.items()}
