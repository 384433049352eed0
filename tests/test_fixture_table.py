import pytest

from fplpoints.exceptions import UnrecognizedStatistic
from fplpoints.models import Fixture, FixtureStatTable, MatchScore, StatisticKind, Team
from fplpoints.registry import TeamRegistry


def test_record_overwrites_same_key():
    table = FixtureStatTable()
    table.record(10, StatisticKind.GOALS_SCORED, 1)
    table.record(10, StatisticKind.GOALS_SCORED, 2)
    assert table.get(10, StatisticKind.GOALS_SCORED) == 2
    assert len(table) == 1


def test_only_players_with_stats_have_entries():
    table = FixtureStatTable()
    table.record(10, StatisticKind.ASSISTS, 1)
    assert 10 in table
    assert 11 not in table
    assert table.stats_for(11) == {}
    assert table.player_ids() == (10,)


def test_record_raw_validates_identifier():
    table = FixtureStatTable()
    assert table.record_raw(4, "saves", 5) is StatisticKind.SAVES
    with pytest.raises(UnrecognizedStatistic):
        table.record_raw(4, "tackles", 2)
    assert table.as_dict() == {4: {"saves": 5}}


def test_frozen_table_rejects_records_but_accepts_bonus():
    table = FixtureStatTable({1: {StatisticKind.BPS: 20}, 2: {StatisticKind.BONUS: 2}}).freeze()
    with pytest.raises(RuntimeError):
        table.record(1, StatisticKind.GOALS_SCORED, 1)

    table.write_bonus({1: 3, 99: 1}, reset=[2])
    assert table.get(1, StatisticKind.BONUS) == 3
    assert table.get(2, StatisticKind.BONUS) == 0
    assert 99 not in table


def test_stats_view_is_read_only():
    table = FixtureStatTable({1: {StatisticKind.ASSISTS: 1}})
    with pytest.raises(TypeError):
        table.stats_for(1)[StatisticKind.ASSISTS] = 4  # type: ignore[index]


def test_values_of_collects_one_kind():
    table = FixtureStatTable(
        {
            1: {StatisticKind.BPS: 12, StatisticKind.MINUTES: 90},
            2: {StatisticKind.MINUTES: 30},
            3: {StatisticKind.BPS: 4},
        }
    )
    assert table.values_of(StatisticKind.BPS) == {1: 12, 3: 4}


def test_fixture_team_names_and_label():
    teams = TeamRegistry([Team(id=1, name="Arsenal", short_name="ARS")])
    fixture = Fixture(id=5, home_team_id=1, away_team_id=2, score=MatchScore(home=2, away=1))

    assert fixture.home_team_name(teams) == "Arsenal"
    assert fixture.away_team_name(teams) == "N/A"
    assert fixture.label(teams) == "Arsenal 2-1 N/A"
    assert fixture.score.result == "H"


def test_fixture_completion_flags():
    assert not Fixture(id=1, home_team_id=1, away_team_id=2).is_complete
    assert Fixture(id=1, home_team_id=1, away_team_id=2, finished_provisional=True).is_complete
