"""Fantasy points scoring engine for provider fixture statistics."""

from fplpoints.exceptions import (
    FplPointsError,
    MalformedNumericField,
    ProviderDataError,
    UnknownPlayer,
    UnrecognizedStatistic,
)
from fplpoints.registry import PlayerRegistry, TeamRegistry
from fplpoints.scoring import FixtureScorer, SeasonAggregator, fold, score_fixture, score_fixtures

__all__ = [
    "FixtureScorer",
    "FplPointsError",
    "MalformedNumericField",
    "PlayerRegistry",
    "ProviderDataError",
    "SeasonAggregator",
    "TeamRegistry",
    "UnknownPlayer",
    "UnrecognizedStatistic",
    "fold",
    "score_fixture",
    "score_fixtures",
]
