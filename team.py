# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Roster container drafted by each agent."""

from __future__ import annotations

import logging

from models import Player, TeamStats

logger = logging.getLogger(__name__)

MAX_PLAYERS = 9


class Team:
    """Up to nine players in batting order, plus a captain.

    The first captain-eligible player added becomes the captain and stays
    captain for the life of the team. A team can play only when it is full
    and has a captain.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.players: list[Player] = []
        self.captain: Player | None = None

    def __len__(self) -> int:
        return len(self.players)

    def __repr__(self) -> str:
        return f"Team({self.name!r}, {len(self.players)} players)"

    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def add_player(self, player: Player) -> bool:
        """Append *player* to the batting order. Returns False when full."""
        if self.is_full():
            logger.debug("%s is full, rejecting %s", self.name, player.name)
            return False

        if player.is_captain and self.captain is None:
            self.captain = player

        self.players.append(player)
        return True

    def get_stats(self) -> TeamStats:
        """Average each skill over the roster. An empty roster averages to 0."""
        count = len(self.players) or 1
        return TeamStats(
            pitching=sum(p.pitching for p in self.players) / count,
            batting=sum(p.batting for p in self.players) / count,
            fielding=sum(p.fielding for p in self.players) / count,
            running=sum(p.running for p in self.players) / count,
        )

    def is_valid(self) -> bool:
        return len(self.players) == MAX_PLAYERS and self.captain is not None
