"""Closed catalog of match-event statistics reported per fixture."""

from __future__ import annotations

from enum import Enum

from fplpoints.exceptions import UnrecognizedStatistic


class StatisticKind(str, Enum):
    """Statistic kinds, valued by the provider's identifier string."""

    GOALS_SCORED = "goals_scored"
    ASSISTS = "assists"
    OWN_GOALS = "own_goals"
    PENALTIES_SAVED = "penalties_saved"
    PENALTIES_MISSED = "penalties_missed"
    YELLOW_CARDS = "yellow_cards"
    RED_CARDS = "red_cards"
    SAVES = "saves"
    BPS = "bps"
    BONUS = "bonus"
    MINUTES = "minutes"


_BY_IDENTIFIER: dict[str, StatisticKind] = {kind.value: kind for kind in StatisticKind}


def parse_statistic(identifier: str) -> StatisticKind:
    """Map a provider identifier (e.g. ``"goals_scored"``) to its kind."""

    try:
        return _BY_IDENTIFIER[identifier]
    except (KeyError, TypeError):
        raise UnrecognizedStatistic(identifier) from None


def known_identifiers() -> tuple[str, ...]:
    return tuple(_BY_IDENTIFIER)


__all__ = ["StatisticKind", "known_identifiers", "parse_statistic"]
