from datetime import datetime, timezone

import pytest

from fplpoints.exceptions import MalformedNumericField, ProviderDataError, UnrecognizedStatistic
from fplpoints.ingest import (
    ApiFixture,
    ApiPlayer,
    ApiPosition,
    build_registry,
    build_team_registry,
    convert_fixture,
    convert_player,
    convert_players,
    convert_position,
    parse_bootstrap,
    parse_fixtures,
)
from fplpoints.models import Position, StatisticKind


def _player_payload(**overrides) -> dict:
    payload = {
        "id": 3,
        "code": 1000,
        "first_name": "Fábio",
        "second_name": "Vieira",
        "web_name": "Fábio Vieira",
        "element_type": 3,
        "team": 1,
        "minutes": 180,
        "goals_scored": 1,
        "assists": 2,
        "clean_sheets": 1,
        "goals_conceded": 2,
        "starts": 2,
        "total_points": 14,
        "bps": 40,
        "event_points": 6,
        "expected_goals": "0.45",
        "expected_assists": "0.30",
        "expected_goal_involvements": "0.75",
        "expected_goals_conceded": "2.10",
        "news": "ignored",
    }
    payload.update(overrides)
    return payload


def _team_payload(team_id: int, name: str, short_name: str) -> dict:
    return {
        "id": team_id,
        "code": team_id * 10,
        "name": name,
        "short_name": short_name,
        "played": 0,
        "strength_overall_home": 1300,
        "strength_attack_away": 1250,
    }


def _fixture_payload(**overrides) -> dict:
    payload = {
        "code": 2367538,
        "event": 1,
        "finished": True,
        "finished_provisional": True,
        "id": 1,
        "kickoff_time": "2023-08-11T19:00:00Z",
        "minutes": 90,
        "provisional_start_time": False,
        "started": True,
        "team_a": 13,
        "team_a_score": 3,
        "team_h": 6,
        "team_h_score": 0,
        "stats": [
            {"identifier": "goals_scored", "a": [{"value": 2, "element": 355}], "h": []},
            {"identifier": "assists", "a": [{"value": 1, "element": 360}], "h": []},
            {
                "identifier": "bps",
                "a": [{"value": 53, "element": 355}, {"value": 24, "element": 360}],
                "h": [{"value": 12, "element": 77}],
            },
        ],
    }
    payload.update(overrides)
    return payload


def test_convert_player_maps_fields():
    player = convert_player(ApiPlayer.model_validate(_player_payload()))

    assert player.id == 3
    assert player.display_name == "Fábio Vieira"
    assert player.position is Position.MIDFIELDER
    assert player.team_id == 1
    assert player.stats.minutes == 180
    assert player.expected_stats.expected_goals == pytest.approx(0.45)
    assert player.points_record.total_points == 14
    assert player.stats_per_90().goals == pytest.approx(0.5)


def test_convert_player_rejects_malformed_numeric_string():
    api_player = ApiPlayer.model_validate(_player_payload(expected_assists="n/a"))

    with pytest.raises(MalformedNumericField) as excinfo:
        convert_player(api_player)

    assert excinfo.value.field == "expected_assists"
    assert excinfo.value.player_id == 3


def test_convert_players_can_skip_malformed_records():
    api_players = [
        ApiPlayer.model_validate(_player_payload()),
        ApiPlayer.model_validate(_player_payload(id=4, expected_goals="")),
    ]

    players, skipped = convert_players(api_players, skip_malformed=True)

    assert [player.id for player in players] == [3]
    assert skipped[0].player_id == 4
    with pytest.raises(MalformedNumericField):
        convert_players(api_players)


def test_convert_position_from_element_type():
    info = convert_position(
        ApiPosition(id=1, squad_select=2, squad_min_play=1, squad_max_play=1, element_count=80)
    )
    assert info.position is Position.GOALKEEPER
    assert info.squad_select == 2

    with pytest.raises(ValueError):
        convert_position(ApiPosition(id=9))


def test_convert_fixture_builds_frozen_table():
    fixture = convert_fixture(ApiFixture.model_validate(_fixture_payload()))

    assert fixture.id == 1
    assert fixture.home_team_id == 6
    assert fixture.away_team_id == 13
    assert fixture.kickoff_time == datetime(2023, 8, 11, 19, 0, tzinfo=timezone.utc)
    assert fixture.score is not None
    assert (fixture.score.home, fixture.score.away) == (0, 3)
    assert fixture.stats.frozen
    assert fixture.stats.get(355, StatisticKind.GOALS_SCORED) == 2
    assert fixture.stats.get(77, StatisticKind.BPS) == 12
    assert set(fixture.stats.player_ids()) == {355, 360, 77}


def test_convert_fixture_without_score_or_stats():
    fixture = convert_fixture(
        ApiFixture.model_validate(
            _fixture_payload(
                finished=False,
                finished_provisional=False,
                started=None,
                team_h_score=None,
                team_a_score=2,
                kickoff_time=None,
                stats=[],
            )
        )
    )

    assert fixture.score is None
    assert fixture.kickoff_time is None
    assert not fixture.started
    assert len(fixture.stats) == 0


def test_convert_fixture_rejects_unknown_statistic():
    payload = _fixture_payload(
        stats=[{"identifier": "tackles", "a": [], "h": [{"value": 3, "element": 1}]}]
    )
    with pytest.raises(UnrecognizedStatistic):
        convert_fixture(ApiFixture.model_validate(payload))


def test_parse_bootstrap_and_registries():
    payload = {
        "elements": [_player_payload(), _player_payload(id=4, element_type=4, web_name="Nine")],
        "teams": [_team_payload(1, "Arsenal", "ARS"), _team_payload(2, "Aston Villa", "AVL")],
        "element_types": [{"id": 1, "squad_select": 2, "squad_min_play": 1, "squad_max_play": 1}],
        "events": [{"id": 1, "name": "Gameweek 1", "finished": True}],
        "total_players": 10_000_000,
    }

    bootstrap = parse_bootstrap(payload)
    registry = build_registry(bootstrap)
    teams = build_team_registry(bootstrap)

    assert len(registry) == 2
    assert registry.position_of(4) is Position.FORWARD
    assert teams.name_of(1) == "Arsenal"
    assert teams.get(2).strength.overall_home == 1300
    assert bootstrap.events[0].finished


def test_parse_bootstrap_missing_section():
    with pytest.raises(ProviderDataError, match="elements"):
        parse_bootstrap({"teams": [], "element_types": []})

    with pytest.raises(ProviderDataError):
        parse_bootstrap([])


def test_parse_fixtures_requires_array():
    assert len(parse_fixtures([_fixture_payload()])) == 1
    with pytest.raises(ProviderDataError):
        parse_fixtures({"fixtures": []})
    with pytest.raises(ProviderDataError):
        parse_fixtures([{"id": 1}])


def test_kickoff_time_with_offset_is_stored_in_utc():
    fixture = convert_fixture(
        ApiFixture.model_validate(_fixture_payload(kickoff_time="2023-08-12T16:30:00+02:00"))
    )
    assert fixture.kickoff_time == datetime(2023, 8, 12, 14, 30, tzinfo=timezone.utc)
    assert fixture.kickoff_time.utcoffset().total_seconds() == 0


def test_naive_kickoff_time_is_treated_as_utc():
    fixture = convert_fixture(ApiFixture.model_validate(_fixture_payload(kickoff_time="2023-08-12T14:00:00")))
    assert fixture.kickoff_time == datetime(2023, 8, 12, 14, 0, tzinfo=timezone.utc)


def test_unparseable_kickoff_time_is_a_provider_error():
    with pytest.raises(ProviderDataError, match="fixtures\\[0\\]"):
        parse_fixtures([_fixture_payload(kickoff_time="next saturday")])
