"""Error types raised by the scoring engine and its ingestion helpers."""

from __future__ import annotations


class FplPointsError(Exception):
    """Base class for all fplpoints errors."""


class UnrecognizedStatistic(FplPointsError, ValueError):
    """Raised when a provider statistic identifier is outside the catalog."""

    def __init__(self, identifier: str):
        super().__init__(f"Unrecognized statistic identifier {identifier!r}")
        self.identifier = identifier

    def __reduce__(self):
        return (self.__class__, (self.identifier,))


class UnknownPlayer(FplPointsError, LookupError):
    """Raised when a stat table references a player missing from the registry."""

    def __init__(self, player_id: int, fixture_id: int | None = None):
        if fixture_id is None:
            message = f"Unknown player id {player_id}"
        else:
            message = f"Unknown player id {player_id} in fixture {fixture_id}"
        super().__init__(message)
        self.player_id = player_id
        self.fixture_id = fixture_id

    def __reduce__(self):
        return (self.__class__, (self.player_id, self.fixture_id))


class MalformedNumericField(FplPointsError, ValueError):
    """Raised when a numeric-as-string provider field does not parse."""

    def __init__(self, field: str, value: object, player_id: int | None = None):
        owner = f" for player {player_id}" if player_id is not None else ""
        super().__init__(f"Field {field!r}{owner} is not numeric: {value!r}")
        self.field = field
        self.value = value
        self.player_id = player_id

    def __reduce__(self):
        return (self.__class__, (self.field, self.value, self.player_id))


class ProviderDataError(FplPointsError):
    """Raised when a provider payload does not have the expected shape."""


__all__ = [
    "FplPointsError",
    "MalformedNumericField",
    "ProviderDataError",
    "UnknownPlayer",
    "UnrecognizedStatistic",
]
