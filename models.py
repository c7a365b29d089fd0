# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for the drafting-agent evolution simulator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Player data models
# ---------------------------------------------------------------------------

class Player(BaseModel):
    """A draftable player. Immutable once loaded from the roster."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    pitching: int = Field(ge=0, le=10, description="Pitching skill (0-10)")
    batting: int = Field(ge=0, le=10, description="Batting skill (0-10)")
    fielding: int = Field(ge=0, le=10, description="Fielding skill (0-10)")
    running: int = Field(ge=0, le=10, description="Running skill (0-10)")
    image: str = ""
    is_captain: bool = Field(default=False, alias="isCaptain")


class TeamStats(BaseModel):
    """Average skill ratings across a team's roster."""
    model_config = ConfigDict(frozen=True)

    pitching: float = 0.0
    batting: float = 0.0
    fielding: float = 0.0
    running: float = 0.0


# ---------------------------------------------------------------------------
# Generation results
# ---------------------------------------------------------------------------

class AgentRanking(BaseModel):
    """One agent's line in a generation's standings."""
    model_config = ConfigDict(frozen=True)

    agent_id: int
    team_name: str
    wins: int = Field(ge=0)
    score: int = Field(ge=0)
    team_stats: TeamStats


class GenerationResult(BaseModel):
    """Snapshot of one completed generation, agents in ranked order."""
    model_config = ConfigDict(frozen=True)

    generation: int = Field(ge=1)
    rankings: tuple[AgentRanking, ...] = ()
