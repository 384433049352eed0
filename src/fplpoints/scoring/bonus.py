"""Bonus-point allocation from raw bonus performance scores."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Mapping, Tuple, TypeVar, Union

P = TypeVar("P", bound=Hashable)

ScoreInput = Union[Mapping[P, int], Iterable[Tuple[P, int]]]

BONUS_BY_RANK: Mapping[int, int] = {1: 3, 2: 2, 3: 1}


def _pairs(scores: ScoreInput) -> list[Tuple[P, int]]:
    if isinstance(scores, Mapping):
        return list(scores.items())
    return list(scores)


def rank_scores(scores: ScoreInput) -> Dict[P, int]:
    """Rank players by score, highest first, using standard competition ranking.

    Tied players share the rank of the first of them and the next distinct
    score takes its 1-based position, so ``[10, 8, 8, 5]`` ranks as
    ``[1, 2, 2, 4]``. Ties are ordered stably by input order.
    """

    ordered = sorted(_pairs(scores), key=lambda item: item[1], reverse=True)
    ranks: Dict[P, int] = {}
    previous_score: int | None = None
    previous_rank = 0
    for position, (player, score) in enumerate(ordered, start=1):
        rank = previous_rank if previous_score is not None and score == previous_score else position
        ranks[player] = rank
        previous_score = score
        previous_rank = rank
    return ranks


def bonus_for_rank(rank: int) -> int:
    return BONUS_BY_RANK.get(rank, 0)


def allocate_bonus(scores: ScoreInput) -> Dict[P, int]:
    """Return the 3/2/1 bonus award for every player that has a score.

    A rank only earns its award when no tie above pushed the player down to
    it: ``[10, 10, 8]`` ranks the third player 3 but awards 0, while
    ``[10, 9, 8]`` awards the third player 1.

    Players without a score must simply be left out of ``scores``; they are
    not ranked and receive nothing.
    """

    pairs = _pairs(scores)
    by_player = dict(pairs)
    # index of each score among the distinct scores, highest first
    distinct_above = {
        score: index for index, score in enumerate(sorted(set(by_player.values()), reverse=True))
    }
    awards: Dict[P, int] = {}
    for player, rank in rank_scores(pairs).items():
        pushed_down = rank != distinct_above[by_player[player]] + 1
        awards[player] = 0 if pushed_down else bonus_for_rank(rank)
    return awards


__all__ = ["BONUS_BY_RANK", "allocate_bonus", "bonus_for_rank", "rank_scores"]
