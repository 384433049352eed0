"""Season-long accumulation of per-fixture points."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from fplpoints.models import FixturePoints


def fold(existing_totals: Mapping[int, int], fixture_points: FixturePoints) -> Dict[int, int]:
    """Return new totals with one fixture's points added; inputs are untouched."""

    updated = dict(existing_totals)
    for player_id, points in fixture_points.items():
        updated[player_id] = updated.get(player_id, 0) + points
    return updated


class SeasonAggregator:
    """Running player -> cumulative points map.

    One aggregator has a single writer. Parallel workers each fold into their
    own instance and the results are combined with :meth:`merge`.
    """

    def __init__(self, totals: Mapping[int, int] | None = None):
        self._totals: Dict[int, int] = dict(totals or {})
        self._fixture_ids: list[int] = []

    @property
    def totals(self) -> Mapping[int, int]:
        return MappingProxyType(self._totals)

    @property
    def fixtures_folded(self) -> int:
        return len(self._fixture_ids)

    @property
    def fixture_ids(self) -> tuple[int, ...]:
        return tuple(self._fixture_ids)

    def add(self, fixture_points: FixturePoints) -> None:
        for player_id, points in fixture_points.items():
            self._totals[player_id] = self._totals.get(player_id, 0) + points
        self._fixture_ids.append(fixture_points.fixture_id)

    def merge(self, other: "SeasonAggregator") -> None:
        for player_id, points in other._totals.items():
            self._totals[player_id] = self._totals.get(player_id, 0) + points
        self._fixture_ids.extend(other._fixture_ids)

    def points_for(self, player_id: int) -> int:
        return self._totals.get(player_id, 0)

    def ranking(self) -> list[tuple[int, int]]:
        """Return ``(player_id, points)`` pairs, highest total first."""

        return sorted(self._totals.items(), key=lambda item: (-item[1], item[0]))


__all__ = ["SeasonAggregator", "fold"]
