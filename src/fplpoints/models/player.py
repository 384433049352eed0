"""Canonical player models shared across ingestion and scoring layers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Position(str, Enum):
    GOALKEEPER = "GK"
    DEFENDER = "DEF"
    MIDFIELDER = "MID"
    FORWARD = "FWD"

    @classmethod
    def from_code(cls, code: int) -> "Position":
        """Resolve a provider element-type code (1-4) to a position."""

        try:
            return _POSITION_CODES[code]
        except KeyError:
            raise ValueError(
                f"Unexpected position id {code!r}, could not map to GK/DEF/MID/FWD"
            ) from None


_POSITION_CODES = {
    1: Position.GOALKEEPER,
    2: Position.DEFENDER,
    3: Position.MIDFIELDER,
    4: Position.FORWARD,
}


class PositionInfo(BaseModel):
    """Squad selection rules the provider attaches to each position."""

    id: int
    position: Position
    squad_select: int = Field(..., ge=0)
    squad_min_play: int = Field(..., ge=0)
    squad_max_play: int = Field(..., ge=0)
    element_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class PlayerName(BaseModel):
    first_name: str
    second_name: str
    display_name: str

    model_config = ConfigDict(frozen=True)


class StatsPer90(BaseModel):
    starts: float = 0.0
    goals: float = 0.0
    goals_conceded: float = 0.0
    clean_sheets: float = 0.0

    model_config = ConfigDict(frozen=True)


class PlayerStats(BaseModel):
    """Season-to-date counters as reported by the provider."""

    minutes: int = Field(default=0, ge=0)
    goals_scored: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    clean_sheets: int = Field(default=0, ge=0)
    goals_conceded: int = Field(default=0, ge=0)
    own_goals: int = Field(default=0, ge=0)
    yellow_cards: int = Field(default=0, ge=0)
    red_cards: int = Field(default=0, ge=0)
    saves: int = Field(default=0, ge=0)
    starts: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    def per_90(self) -> StatsPer90:
        """Scale the rate-style counters to a per-90-minutes basis.

        Every rate is zero for a player with no minutes; otherwise each one is
        ``count * 90 / minutes``.
        """

        if self.minutes == 0:
            return StatsPer90()
        nineties = self.minutes / 90.0
        return StatsPer90(
            starts=self.starts / nineties,
            goals=self.goals_scored / nineties,
            goals_conceded=self.goals_conceded / nineties,
            clean_sheets=self.clean_sheets / nineties,
        )


class PlayerExpectations(BaseModel):
    expected_goals: float = 0.0
    expected_assists: float = 0.0
    expected_goal_involvements: float = 0.0
    expected_goals_conceded: float = 0.0

    model_config = ConfigDict(frozen=True)


class PlayerPointsRecord(BaseModel):
    """Points figures reported by the provider, kept for cross-checking."""

    total_points: int = 0
    bps: int = 0
    event_points: int = 0

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    """Normalized player record owned by a :class:`PlayerRegistry`."""

    id: int
    name: PlayerName
    position: Position
    team_id: int | None = None
    stats: PlayerStats = Field(default_factory=PlayerStats)
    expected_stats: PlayerExpectations = Field(default_factory=PlayerExpectations)
    points_record: PlayerPointsRecord = Field(default_factory=PlayerPointsRecord)

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        return self.name.display_name

    def stats_per_90(self) -> StatsPer90:
        return self.stats.per_90()
