"""Request-scoped data types for the roast engine."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Caller-selected tone intensity."""

    LIGHT = "light"
    MEDIUM = "medium"
    BRUTAL = "brutal"


class PersonalityTag(str, Enum):
    """Shape of a library's play pattern."""

    HYPERFOCUS = "hyperfocus"
    COLLECTOR = "collector"
    BUTTERFLY = "butterfly"
    COMPLETIONIST = "completionist"
    CASUAL = "casual"
    EMPTY = "empty"


class GameRecord(BaseModel):
    """
    One owned game and its lifetime playtime.

    Accepts Steam's `playtime_forever` key, so GetOwnedGames entries validate
    without renaming.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    playtime_minutes: int = Field(ge=0, alias="playtime_forever")


class LibraryStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_games: int = 0
    played_games: int = 0
    backlog_games: int = 0
    total_playtime_minutes: int = 0
    most_played_game: Optional[GameRecord] = None
    top_games: Tuple[GameRecord, ...] = ()
    average_playtime_minutes: float = 0.0
    most_played_share_percent: int = 0
    played_percent: int = 0

    @property
    def unplayed_percent(self) -> int:
        if self.total_games == 0:
            return 0
        return 100 - self.played_percent


class RoastResult(BaseModel):
    """Outcome handed back to the request handler."""

    model_config = ConfigDict(frozen=True)

    success: bool
    roast: Optional[str] = None
    tier: Optional[Tier] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, roast: str, tier: Tier) -> "RoastResult":
        return cls(success=True, roast=roast, tier=tier)

    @classmethod
    def failure(cls, error: str) -> "RoastResult":
        return cls(success=False, error=error)
