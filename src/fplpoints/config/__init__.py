"""Configuration helpers for scoring rules and runtime settings."""

from .scoring import DEFAULT_RULES, ScoringRules, multiplier, normalize, points_for
from .settings import DEFAULT_BASE_URL, Settings

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_RULES",
    "ScoringRules",
    "Settings",
    "multiplier",
    "normalize",
    "points_for",
]
