"""Fixture records and the per-fixture statistics table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, Literal, Mapping, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .statistics import StatisticKind, parse_statistic

if TYPE_CHECKING:
    from fplpoints.registry import TeamRegistry


class FixtureStatTable:
    """Per-fixture statistics keyed by player id, then by statistic kind.

    A player only has an entry once at least one statistic was recorded for
    them. There is at most one value per (player, kind); a later write for the
    same key replaces the earlier one.
    """

    def __init__(self, entries: Mapping[int, Mapping[StatisticKind, int]] | None = None):
        self._stats: Dict[int, Dict[StatisticKind, int]] = {}
        self._frozen = False
        for player_id, stats in (entries or {}).items():
            for kind, value in stats.items():
                self.record(player_id, kind, value)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "FixtureStatTable":
        self._frozen = True
        return self

    def record(self, player_id: int, kind: StatisticKind, value: int) -> None:
        if self._frozen:
            raise RuntimeError("Cannot record statistics on a frozen table")
        self._stats.setdefault(int(player_id), {})[StatisticKind(kind)] = int(value)

    def record_raw(self, player_id: int, identifier: str, value: int) -> StatisticKind:
        """Validate a provider identifier and record its value."""

        kind = parse_statistic(identifier)
        self.record(player_id, kind, value)
        return kind

    def write_bonus(self, awards: Mapping[int, int], *, reset: Iterable[int] = ()) -> None:
        """Store awarded bonus points, replacing any earlier bonus value.

        ``reset`` names players whose existing bonus entry is set back to zero.
        This is the only write permitted once the table is frozen, and it never
        introduces players that are not already in the table.
        """

        for player_id, points in awards.items():
            if player_id in self._stats:
                self._stats[player_id][StatisticKind.BONUS] = int(points)
        for player_id in reset:
            stats = self._stats.get(player_id)
            if stats is not None and StatisticKind.BONUS in stats:
                stats[StatisticKind.BONUS] = 0

    def get(self, player_id: int, kind: StatisticKind, default: int | None = None) -> int | None:
        return self._stats.get(player_id, {}).get(kind, default)

    def stats_for(self, player_id: int) -> Mapping[StatisticKind, int]:
        return MappingProxyType(self._stats.get(player_id, {}))

    def player_ids(self) -> Tuple[int, ...]:
        return tuple(self._stats)

    def items(self) -> Iterator[Tuple[int, Mapping[StatisticKind, int]]]:
        for player_id, stats in self._stats.items():
            yield player_id, MappingProxyType(stats)

    def values_of(self, kind: StatisticKind) -> Dict[int, int]:
        """Return ``player_id -> value`` for players that recorded ``kind``."""

        return {
            player_id: stats[kind]
            for player_id, stats in self._stats.items()
            if kind in stats
        }

    def as_dict(self) -> Dict[int, Dict[str, int]]:
        return {
            player_id: {kind.value: value for kind, value in stats.items()}
            for player_id, stats in self._stats.items()
        }

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._stats

    def __iter__(self) -> Iterator[int]:
        return iter(self._stats)

    def __len__(self) -> int:
        return len(self._stats)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixtureStatTable):
            return NotImplemented
        return self._stats == other._stats

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"FixtureStatTable({len(self._stats)} players, {state})"


class MatchScore(BaseModel):
    home: int = Field(..., ge=0)
    away: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def result(self) -> Literal["H", "D", "A"]:
        if self.home > self.away:
            return "H"
        if self.home < self.away:
            return "A"
        return "D"


class Fixture(BaseModel):
    """One scheduled match between two teams."""

    id: int
    code: int = 0
    event: int | None = None
    kickoff_time: datetime | None = None
    minutes: int = Field(default=0, ge=0)
    finished: bool = False
    finished_provisional: bool = False
    started: bool = False
    provisional_start_time: bool = False
    home_team_id: int
    away_team_id: int
    score: MatchScore | None = None
    stats: FixtureStatTable = Field(default_factory=FixtureStatTable)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def is_complete(self) -> bool:
        return self.finished or self.finished_provisional

    def home_team_name(self, teams: "TeamRegistry") -> str:
        return teams.name_of(self.home_team_id)

    def away_team_name(self, teams: "TeamRegistry") -> str:
        return teams.name_of(self.away_team_id)

    def label(self, teams: "TeamRegistry") -> str:
        home = self.home_team_name(teams)
        away = self.away_team_name(teams)
        if self.score is None:
            return f"{home} v {away}"
        return f"{home} {self.score.home}-{self.score.away} {away}"


@dataclass(frozen=True)
class FixturePoints:
    """Points awarded per player for one fixture; immutable once built."""

    fixture_id: int
    entries: Tuple[Tuple[int, int], ...]

    @classmethod
    def from_mapping(cls, fixture_id: int, points: Mapping[int, int]) -> "FixturePoints":
        return cls(
            fixture_id=fixture_id,
            entries=tuple(sorted((int(pid), int(value)) for pid, value in points.items())),
        )

    @property
    def points(self) -> Mapping[int, int]:
        return MappingProxyType(dict(self.entries))

    def get(self, player_id: int, default: int = 0) -> int:
        for pid, value in self.entries:
            if pid == player_id:
                return value
        return default

    def __getitem__(self, player_id: int) -> int:
        for pid, value in self.entries:
            if pid == player_id:
                return value
        raise KeyError(player_id)

    def __iter__(self) -> Iterator[int]:
        return (pid for pid, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def items(self) -> Iterator[Tuple[int, int]]:
        return iter(self.entries)
