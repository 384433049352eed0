"""Pydantic models for the provider's raw JSON records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from fplpoints.exceptions import ProviderDataError

NumericText = Union[str, float, int, None]


class _ApiRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ApiTeam(_ApiRecord):
    id: int
    code: int = 0
    name: str
    short_name: str
    strength: int = 0
    played: int = 0
    win: int = 0
    draw: int = 0
    loss: int = 0
    points: int = 0
    position: int = 0
    strength_overall_home: int = 0
    strength_overall_away: int = 0
    strength_attack_home: int = 0
    strength_attack_away: int = 0
    strength_defence_home: int = 0
    strength_defence_away: int = 0


class ApiPlayer(_ApiRecord):
    id: int
    code: int = 0
    first_name: str = ""
    second_name: str = ""
    web_name: str
    element_type: int
    team: int
    status: str = "a"
    now_cost: int = 0
    minutes: int = 0
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    goals_conceded: int = 0
    own_goals: int = 0
    penalties_saved: int = 0
    penalties_missed: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    saves: int = 0
    bonus: int = 0
    bps: int = 0
    starts: int = 0
    total_points: int = 0
    event_points: int = 0
    form: NumericText = None
    points_per_game: NumericText = None
    selected_by_percent: NumericText = None
    expected_goals: NumericText = "0.0"
    expected_assists: NumericText = "0.0"
    expected_goal_involvements: NumericText = "0.0"
    expected_goals_conceded: NumericText = "0.0"
    starts_per_90: float = 0.0
    clean_sheets_per_90: float = 0.0
    goals_conceded_per_90: float = 0.0


class ApiPosition(_ApiRecord):
    id: int
    plural_name: str = ""
    plural_name_short: str = ""
    singular_name: str = ""
    singular_name_short: str = ""
    squad_select: int = 0
    squad_min_play: int = 0
    squad_max_play: int = 0
    element_count: int = 0


class ApiGameweek(_ApiRecord):
    id: int
    name: str = ""
    deadline_time: Optional[str] = None
    finished: bool = False
    data_checked: bool = False
    is_previous: bool = False
    is_current: bool = False
    is_next: bool = False
    average_entry_score: int = 0
    highest_score: Optional[int] = None


class ApiFixturePlayerStat(_ApiRecord):
    element: int
    value: int


class ApiFixtureStat(_ApiRecord):
    identifier: str
    h: List[ApiFixturePlayerStat] = Field(default_factory=list)
    a: List[ApiFixturePlayerStat] = Field(default_factory=list)


class ApiFixture(_ApiRecord):
    id: int
    code: int = 0
    event: Optional[int] = None
    finished: bool = False
    finished_provisional: bool = False
    kickoff_time: Optional[datetime] = None
    minutes: int = 0
    provisional_start_time: bool = False
    started: Optional[bool] = False
    team_h: int
    team_a: int
    team_h_score: Optional[int] = None
    team_a_score: Optional[int] = None
    stats: List[ApiFixtureStat] = Field(default_factory=list)


@dataclass(frozen=True)
class BootstrapData:
    players: List[ApiPlayer]
    teams: List[ApiTeam]
    positions: List[ApiPosition]
    events: List[ApiGameweek]


R = TypeVar("R", bound=_ApiRecord)


def _parse_list(model: Type[R], values: Any, field: str) -> List[R]:
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise ProviderDataError(f"Expected {field} to be a json array")
    records: List[R] = []
    for index, value in enumerate(values):
        try:
            records.append(model.model_validate(value))
        except ValidationError as exc:
            raise ProviderDataError(f"Failed to convert {field}[{index}]: {exc}") from exc
    return records


def _section(payload: Mapping[str, Any], field: str) -> Any:
    if field not in payload:
        raise ProviderDataError(f"Field {field} not found in json object")
    return payload[field]


def parse_bootstrap(payload: Any) -> BootstrapData:
    """Split the ``bootstrap-static`` payload into typed record lists."""

    if not isinstance(payload, Mapping):
        raise ProviderDataError("Expected bootstrap data to be a json object")
    return BootstrapData(
        players=_parse_list(ApiPlayer, _section(payload, "elements"), "elements"),
        teams=_parse_list(ApiTeam, _section(payload, "teams"), "teams"),
        positions=_parse_list(ApiPosition, _section(payload, "element_types"), "element_types"),
        events=_parse_list(ApiGameweek, payload.get("events", []), "events"),
    )


def parse_fixtures(payload: Any) -> List[ApiFixture]:
    return _parse_list(ApiFixture, payload, "fixtures")


__all__ = [
    "ApiFixture",
    "ApiFixturePlayerStat",
    "ApiFixtureStat",
    "ApiGameweek",
    "ApiPlayer",
    "ApiPosition",
    "ApiTeam",
    "BootstrapData",
    "parse_bootstrap",
    "parse_fixtures",
]
