"""Identifier lookups for players and teams."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from fplpoints.exceptions import UnknownPlayer
from fplpoints.models import Player, Position, Team


class PlayerRegistry:
    """Canonical player records keyed by provider identifier."""

    def __init__(self, players: Iterable[Player] = ()):
        self._players: Dict[int, Player] = {}
        for player in players:
            if player.id in self._players:
                raise ValueError(f"Duplicate player id {player.id}")
            self._players[player.id] = player

    def get(self, player_id: int) -> Player:
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayer(player_id) from None

    def position_of(self, player_id: int) -> Position:
        return self.get(player_id).position

    def find(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    def __len__(self) -> int:
        return len(self._players)


class TeamRegistry:
    """Team records keyed by provider identifier."""

    def __init__(self, teams: Iterable[Team] = ()):
        self._teams: Dict[int, Team] = {team.id: team for team in teams}

    def get(self, team_id: int) -> Optional[Team]:
        return self._teams.get(team_id)

    def name_of(self, team_id: int, default: str = "N/A") -> str:
        team = self._teams.get(team_id)
        return team.name if team is not None else default

    def __contains__(self, team_id: object) -> bool:
        return team_id in self._teams

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams.values())

    def __len__(self) -> int:
        return len(self._teams)


__all__ = ["PlayerRegistry", "TeamRegistry"]
