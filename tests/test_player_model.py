import pytest
from pydantic import ValidationError

from fplpoints.models import Player, PlayerName, PlayerStats, Position


def _player(**stats) -> Player:
    return Player(
        id=7,
        name=PlayerName(first_name="Test", second_name="Player", display_name="Player"),
        position=Position.MIDFIELDER,
        team_id=3,
        stats=PlayerStats(**stats),
    )


def test_player_record_is_frozen():
    player = _player(minutes=90)

    assert player.id == 7
    assert player.display_name == "Player"

    with pytest.raises((TypeError, ValidationError)):
        player.id = 8  # type: ignore[misc]


def test_per_90_is_zero_without_minutes():
    per_90 = _player(minutes=0, goals_scored=0, starts=0).stats_per_90()
    assert per_90.starts == 0.0
    assert per_90.goals == 0.0
    assert per_90.goals_conceded == 0.0
    assert per_90.clean_sheets == 0.0


def test_per_90_scales_counts_by_minutes():
    per_90 = _player(
        minutes=1800,
        starts=20,
        goals_scored=8,
        goals_conceded=15,
        clean_sheets=6,
    ).stats_per_90()
    assert per_90.starts == pytest.approx(1.0)
    assert per_90.goals == pytest.approx(0.4)
    assert per_90.goals_conceded == pytest.approx(0.75)
    assert per_90.clean_sheets == pytest.approx(0.3)


def test_per_90_for_partial_match():
    per_90 = _player(minutes=45, goals_scored=1, starts=1).stats_per_90()
    assert per_90.goals == pytest.approx(2.0)
    assert per_90.starts == pytest.approx(2.0)


def test_position_from_provider_code():
    assert Position.from_code(1) is Position.GOALKEEPER
    assert Position.from_code(2) is Position.DEFENDER
    assert Position.from_code(3) is Position.MIDFIELDER
    assert Position.from_code(4) is Position.FORWARD
    with pytest.raises(ValueError):
        Position.from_code(5)


def test_negative_counters_rejected():
    with pytest.raises(ValidationError):
        PlayerStats(minutes=-1)
