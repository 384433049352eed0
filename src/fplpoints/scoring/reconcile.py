"""Cross-check computed season totals against provider-reported totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from fplpoints.registry import PlayerRegistry


@dataclass(frozen=True)
class PointsDiscrepancy:
    player_id: int
    name: str
    computed: int
    reported: int

    @property
    def difference(self) -> int:
        return self.computed - self.reported


@dataclass(frozen=True)
class ReconcileReport:
    checked: int
    matched: int
    discrepancies: List[PointsDiscrepancy]

    @property
    def mismatched(self) -> int:
        return len(self.discrepancies)

    def as_dict(self) -> dict:
        return {
            "checked": self.checked,
            "matched": self.matched,
            "mismatched": self.mismatched,
            "discrepancies": [
                {
                    "player_id": item.player_id,
                    "name": item.name,
                    "computed": item.computed,
                    "reported": item.reported,
                    "difference": item.difference,
                }
                for item in self.discrepancies
            ],
        }


def reconcile(totals: Mapping[int, int], registry: PlayerRegistry) -> ReconcileReport:
    """Compare ``totals`` with each registered player's reported total points.

    Registered players that never appear in ``totals`` count as zero computed
    points. Discrepancies are ordered by the size of the gap, largest first.
    """

    discrepancies: List[PointsDiscrepancy] = []
    checked = 0
    for player in registry:
        checked += 1
        computed = totals.get(player.id, 0)
        reported = player.points_record.total_points
        if computed != reported:
            discrepancies.append(
                PointsDiscrepancy(
                    player_id=player.id,
                    name=player.display_name,
                    computed=computed,
                    reported=reported,
                )
            )
    discrepancies.sort(key=lambda item: (-abs(item.difference), item.player_id))
    return ReconcileReport(
        checked=checked,
        matched=checked - len(discrepancies),
        discrepancies=discrepancies,
    )


__all__ = ["PointsDiscrepancy", "ReconcileReport", "reconcile"]
