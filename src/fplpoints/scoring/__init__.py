"""Scoring engine: bonus allocation, fixture scoring and season totals."""

from .bonus import BONUS_BY_RANK, allocate_bonus, bonus_for_rank, rank_scores
from .reconcile import PointsDiscrepancy, ReconcileReport, reconcile
from .season import SeasonAggregator, fold
from .service import BatchOutput, FixtureScorer, ScoringFailure, score_fixture, score_fixtures

__all__ = [
    "BONUS_BY_RANK",
    "BatchOutput",
    "FixtureScorer",
    "PointsDiscrepancy",
    "ReconcileReport",
    "ScoringFailure",
    "SeasonAggregator",
    "allocate_bonus",
    "bonus_for_rank",
    "fold",
    "rank_scores",
    "reconcile",
    "score_fixture",
    "score_fixtures",
]
