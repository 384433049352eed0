"""Conversion of raw provider records into the domain model."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from fplpoints.exceptions import MalformedNumericField
from fplpoints.models import (
    Fixture,
    FixtureStatTable,
    MatchScore,
    Player,
    PlayerExpectations,
    PlayerName,
    PlayerPointsRecord,
    PlayerStats,
    Position,
    PositionInfo,
    Team,
    TeamStrength,
    TeamTableData,
)
from fplpoints.registry import PlayerRegistry, TeamRegistry

from .raw import ApiFixture, ApiPlayer, ApiPosition, ApiTeam, BootstrapData


logger = logging.getLogger(__name__)


def _parse_numeric(value: object, *, field: str, player_id: int | None = None) -> float:
    if value is None:
        raise MalformedNumericField(field, value, player_id)
    if isinstance(value, bool):
        raise MalformedNumericField(field, value, player_id)
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    try:
        return float(text)
    except ValueError:
        raise MalformedNumericField(field, value, player_id) from None


def _kickoff_utc(kickoff: Optional[datetime]) -> Optional[datetime]:
    if kickoff is None:
        return None
    if kickoff.tzinfo is None:
        kickoff = kickoff.replace(tzinfo=timezone.utc)
    return kickoff.astimezone(timezone.utc)


def convert_position(api_position: ApiPosition) -> PositionInfo:
    return PositionInfo(
        id=api_position.id,
        position=Position.from_code(api_position.id),
        squad_select=api_position.squad_select,
        squad_min_play=api_position.squad_min_play,
        squad_max_play=api_position.squad_max_play,
        element_count=api_position.element_count,
    )


def convert_player(api_player: ApiPlayer) -> Player:
    """Build a :class:`Player`, parsing the expected-stat strings.

    Raises :class:`MalformedNumericField` when any expected-stat field does
    not parse as a number.
    """

    expectations = PlayerExpectations(
        **{
            name: _parse_numeric(getattr(api_player, name), field=name, player_id=api_player.id)
            for name in (
                "expected_goals",
                "expected_assists",
                "expected_goal_involvements",
                "expected_goals_conceded",
            )
        }
    )
    return Player(
        id=api_player.id,
        name=PlayerName(
            first_name=api_player.first_name,
            second_name=api_player.second_name,
            display_name=api_player.web_name,
        ),
        position=Position.from_code(api_player.element_type),
        team_id=api_player.team,
        stats=PlayerStats(
            minutes=api_player.minutes,
            goals_scored=api_player.goals_scored,
            assists=api_player.assists,
            clean_sheets=api_player.clean_sheets,
            goals_conceded=api_player.goals_conceded,
            own_goals=api_player.own_goals,
            yellow_cards=api_player.yellow_cards,
            red_cards=api_player.red_cards,
            saves=api_player.saves,
            starts=api_player.starts,
        ),
        expected_stats=expectations,
        points_record=PlayerPointsRecord(
            total_points=api_player.total_points,
            bps=api_player.bps,
            event_points=api_player.event_points,
        ),
    )


def convert_team(api_team: ApiTeam) -> Team:
    return Team(
        id=api_team.id,
        name=api_team.name,
        short_name=api_team.short_name,
        table_data=TeamTableData(
            played=api_team.played,
            win=api_team.win,
            draw=api_team.draw,
            loss=api_team.loss,
            points=api_team.points,
            position=api_team.position,
        ),
        strength=TeamStrength(
            overall_home=api_team.strength_overall_home,
            overall_away=api_team.strength_overall_away,
            attack_home=api_team.strength_attack_home,
            attack_away=api_team.strength_attack_away,
            defence_home=api_team.strength_defence_home,
            defence_away=api_team.strength_defence_away,
        ),
    )


def convert_fixture(api_fixture: ApiFixture) -> Fixture:
    """Build a :class:`Fixture` with a frozen statistics table.

    Every home and away stat entry goes through the statistic catalog, so an
    unknown identifier raises :class:`UnrecognizedStatistic` for the fixture.
    """

    score = None
    if api_fixture.team_h_score is not None and api_fixture.team_a_score is not None:
        score = MatchScore(home=api_fixture.team_h_score, away=api_fixture.team_a_score)

    table = FixtureStatTable()
    for stat in api_fixture.stats:
        for entry in (*stat.h, *stat.a):
            table.record_raw(entry.element, stat.identifier, entry.value)
    table.freeze()

    return Fixture(
        id=api_fixture.id,
        code=api_fixture.code,
        event=api_fixture.event,
        kickoff_time=_kickoff_utc(api_fixture.kickoff_time),
        minutes=api_fixture.minutes,
        finished=api_fixture.finished,
        finished_provisional=api_fixture.finished_provisional,
        started=bool(api_fixture.started),
        provisional_start_time=api_fixture.provisional_start_time,
        home_team_id=api_fixture.team_h,
        away_team_id=api_fixture.team_a,
        score=score,
        stats=table,
    )


def convert_players(api_players: Iterable[ApiPlayer], *, skip_malformed: bool = False) -> Tuple[List[Player], List[MalformedNumericField]]:
    """Convert every player; with ``skip_malformed`` bad records are set aside."""

    players: List[Player] = []
    skipped: List[MalformedNumericField] = []
    for api_player in api_players:
        try:
            players.append(convert_player(api_player))
        except MalformedNumericField as exc:
            if not skip_malformed:
                raise
            logger.warning("Skipping player %s: %s", api_player.id, exc)
            skipped.append(exc)
    return players, skipped


def convert_fixtures(api_fixtures: Iterable[ApiFixture]) -> List[Fixture]:
    return [convert_fixture(api_fixture) for api_fixture in api_fixtures]


def build_registry(bootstrap: BootstrapData, *, skip_malformed: bool = False) -> PlayerRegistry:
    players, skipped = convert_players(bootstrap.players, skip_malformed=skip_malformed)
    logger.info(
        "Loaded %s players (%s skipped)",
        len(players),
        len(skipped),
    )
    return PlayerRegistry(players)


def build_team_registry(bootstrap: BootstrapData) -> TeamRegistry:
    return TeamRegistry(convert_team(team) for team in bootstrap.teams)


__all__ = [
    "build_registry",
    "build_team_registry",
    "convert_fixture",
    "convert_fixtures",
    "convert_player",
    "convert_players",
    "convert_position",
    "convert_team",
]
