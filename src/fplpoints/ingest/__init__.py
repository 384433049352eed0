"""Input adapters that normalize raw provider data."""

from .convert import (
    build_registry,
    build_team_registry,
    convert_fixture,
    convert_fixtures,
    convert_player,
    convert_players,
    convert_position,
    convert_team,
)
from .raw import (
    ApiFixture,
    ApiFixturePlayerStat,
    ApiFixtureStat,
    ApiGameweek,
    ApiPlayer,
    ApiPosition,
    ApiTeam,
    BootstrapData,
    parse_bootstrap,
    parse_fixtures,
)

__all__ = [
    "ApiFixture",
    "ApiFixturePlayerStat",
    "ApiFixtureStat",
    "ApiGameweek",
    "ApiPlayer",
    "ApiPosition",
    "ApiTeam",
    "BootstrapData",
    "build_registry",
    "build_team_registry",
    "convert_fixture",
    "convert_fixtures",
    "convert_player",
    "convert_players",
    "convert_position",
    "convert_team",
    "parse_bootstrap",
    "parse_fixtures",
]
