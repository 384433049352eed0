"""Points multipliers and value normalization for match statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple, Union

from fplpoints.models import Position, StatisticKind

Weight = Union[int, Mapping[Position, int]]


_GOAL_POINTS: Dict[Position, int] = {
    Position.GOALKEEPER: 6,
    Position.DEFENDER: 6,
    Position.MIDFIELDER: 5,
    Position.FORWARD: 4,
}

# bps carries no points of its own; it only feeds the bonus ranking.
_MULTIPLIERS: Dict[StatisticKind, Weight] = {
    StatisticKind.GOALS_SCORED: _GOAL_POINTS,
    StatisticKind.ASSISTS: 3,
    StatisticKind.OWN_GOALS: -2,
    StatisticKind.PENALTIES_SAVED: 5,
    StatisticKind.PENALTIES_MISSED: -2,
    StatisticKind.YELLOW_CARDS: -1,
    StatisticKind.RED_CARDS: -3,
    StatisticKind.SAVES: 3,
    StatisticKind.BONUS: 1,
    StatisticKind.BPS: 0,
    StatisticKind.MINUTES: 1,
}


@dataclass(frozen=True)
class ScoringRules:
    """Weight table plus the value transforms applied before weighting."""

    multipliers: Mapping[StatisticKind, Weight] = field(default_factory=lambda: dict(_MULTIPLIERS))
    saves_per_unit: int = 3
    full_appearance_minutes: int = 60

    def multiplier(self, stat: StatisticKind, position: Position) -> int:
        weight = self.multipliers[stat]
        if isinstance(weight, Mapping):
            return weight[position]
        return weight

    def normalize(self, stat: StatisticKind, raw_value: int) -> int:
        """Convert a raw counted value into scoring units."""

        if stat is StatisticKind.SAVES:
            # Truncate toward zero, also for (unexpected) negative counts.
            units = abs(raw_value) // self.saves_per_unit
            return units if raw_value >= 0 else -units
        if stat is StatisticKind.MINUTES:
            if raw_value <= 0:
                return 0
            return 1 if raw_value <= self.full_appearance_minutes else 2
        if stat is StatisticKind.BPS:
            return 0
        return raw_value

    def points_for(self, stat: StatisticKind, position: Position, raw_value: int) -> int:
        return self.multiplier(stat, position) * self.normalize(stat, raw_value)

    def table(self) -> Tuple[Tuple[StatisticKind, Tuple[int, ...]], ...]:
        """Return every kind with its multiplier for GK, DEF, MID, FWD."""

        return tuple(
            (stat, tuple(self.multiplier(stat, position) for position in Position))
            for stat in StatisticKind
        )


DEFAULT_RULES = ScoringRules()


def multiplier(stat: StatisticKind, position: Position) -> int:
    """Per-unit point weight of ``stat`` for a player in ``position``."""

    return DEFAULT_RULES.multiplier(stat, position)


def normalize(stat: StatisticKind, raw_value: int) -> int:
    return DEFAULT_RULES.normalize(stat, raw_value)


def points_for(
    stat: StatisticKind,
    position: Position,
    raw_value: int,
    rules: ScoringRules = DEFAULT_RULES,
) -> int:
    return rules.points_for(stat, position, raw_value)


__all__ = [
    "DEFAULT_RULES",
    "ScoringRules",
    "multiplier",
    "normalize",
    "points_for",
]
