"""Domain models shared by ingestion and scoring."""

from .fixture import Fixture, FixturePoints, FixtureStatTable, MatchScore
from .player import (
    Player,
    PlayerExpectations,
    PlayerName,
    PlayerPointsRecord,
    PlayerStats,
    Position,
    PositionInfo,
    StatsPer90,
)
from .statistics import StatisticKind, known_identifiers, parse_statistic
from .team import Team, TeamStrength, TeamTableData

__all__ = [
    "Fixture",
    "FixturePoints",
    "FixtureStatTable",
    "MatchScore",
    "Player",
    "PlayerExpectations",
    "PlayerName",
    "PlayerPointsRecord",
    "PlayerStats",
    "Position",
    "PositionInfo",
    "StatisticKind",
    "StatsPer90",
    "Team",
    "TeamStrength",
    "TeamTableData",
    "known_identifiers",
    "parse_statistic",
]
