"""Fixture scoring and batch orchestration across worker processes."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import multiprocessing as mp
import time
from typing import Dict, List, Optional, Sequence

from fplpoints.config.scoring import DEFAULT_RULES, ScoringRules
from fplpoints.exceptions import FplPointsError, UnknownPlayer
from fplpoints.models import Fixture, FixturePoints, Position, StatisticKind
from fplpoints.registry import PlayerRegistry

from .bonus import allocate_bonus
from .season import SeasonAggregator


logger = logging.getLogger(__name__)


class FixtureScorer:
    """Turns a fixture's statistics table into per-player fantasy points."""

    def __init__(self, rules: ScoringRules = DEFAULT_RULES):
        self.rules = rules

    def _resolve_positions(self, fixture: Fixture, registry: PlayerRegistry) -> Dict[int, Position]:
        positions: Dict[int, Position] = {}
        for player_id in fixture.stats:
            if player_id not in registry:
                raise UnknownPlayer(player_id, fixture.id)
            positions[player_id] = registry.position_of(player_id)
        return positions

    def award_bonus(self, fixture: Fixture) -> Dict[int, int]:
        """Rank the fixture's bps values and write the awards into its table."""

        table = fixture.stats
        bps = table.values_of(StatisticKind.BPS)
        awards = allocate_bonus(bps)
        unranked = [player_id for player_id in table if player_id not in bps]
        table.write_bonus(awards, reset=unranked)
        return awards

    def score(self, fixture: Fixture, registry: PlayerRegistry) -> FixturePoints:
        # Every player is resolved before the table is touched so that a failed
        # fixture leaves no partial bonus write-back behind.
        positions = self._resolve_positions(fixture, registry)
        awards = self.award_bonus(fixture)

        points: Dict[int, int] = {}
        for player_id, stats in fixture.stats.items():
            position = positions[player_id]
            points[player_id] = sum(
                self.rules.points_for(stat, position, value) for stat, value in stats.items()
            )
        logger.debug(
            "Scored fixture %s – %s players, %s bonus awards",
            fixture.id,
            len(points),
            sum(1 for value in awards.values() if value),
        )
        return FixturePoints.from_mapping(fixture.id, points)


def score_fixture(
    fixture: Fixture,
    registry: PlayerRegistry,
    *,
    rules: ScoringRules = DEFAULT_RULES,
) -> FixturePoints:
    return FixtureScorer(rules).score(fixture, registry)


@dataclass(frozen=True)
class ScoringFailure:
    fixture_id: int
    error: FplPointsError

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class BatchOutput:
    points: List[FixturePoints]
    totals: SeasonAggregator
    failures: List[ScoringFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures


class ScoringJobConfig:
    def __init__(self, job_id: int, fixtures: list[Fixture], registry: PlayerRegistry,
                 rules: ScoringRules, strict: bool = False):
        self.job_id = job_id
        self.fixtures = fixtures
        self.registry = registry
        self.rules = rules
        self.strict = strict


class ScoringJobResult:
    def __init__(self, job_id: int, points: list[FixturePoints], totals: SeasonAggregator,
                 failures: list[ScoringFailure]):
        self.job_id = job_id
        self.points = points
        self.totals = totals
        self.failures = failures


def _run_scoring_job(config: ScoringJobConfig) -> ScoringJobResult:
    scorer = FixtureScorer(config.rules)
    totals = SeasonAggregator()
    points: list[FixturePoints] = []
    failures: list[ScoringFailure] = []
    for fixture in config.fixtures:
        try:
            fixture_points = scorer.score(fixture, config.registry)
        except FplPointsError as exc:
            failures.append(ScoringFailure(fixture.id, exc))
            if config.strict:
                break
            continue
        points.append(fixture_points)
        totals.add(fixture_points)
    return ScoringJobResult(config.job_id, points, totals, failures)


def _scoring_worker(config: ScoringJobConfig, queue: mp.Queue) -> None:
    try:
        queue.put(_run_scoring_job(config))
    except Exception as exc:  # pragma: no cover - worker errors bubble to parent
        queue.put(exc)


def _chunk(fixtures: Sequence[Fixture], size: int) -> list[list[Fixture]]:
    return [list(fixtures[start:start + size]) for start in range(0, len(fixtures), size)]


def score_fixtures(
    fixtures: Sequence[Fixture],
    registry: PlayerRegistry,
    *,
    workers: int = 1,
    fixtures_per_job: Optional[int] = None,
    rules: ScoringRules = DEFAULT_RULES,
    strict: bool = False,
) -> BatchOutput:
    """Score every fixture and fold the results into season totals.

    Fixtures are independent, so with ``workers > 1`` batches of fixtures are
    scored in separate processes and only the parent folds their totals. A
    fixture that fails is recorded in ``failures`` and the rest still count;
    with ``strict=True`` the first failure is raised instead.

    Bonus awards are written back into the parent's fixtures only when
    scoring runs in-process (``workers == 1``).
    """

    fixture_list = list(fixtures)
    order = {fixture.id: index for index, fixture in enumerate(fixture_list)}
    workers = max(1, workers)
    per_job = fixtures_per_job or max(1, math.ceil(len(fixture_list) / workers))
    per_job = max(1, per_job)

    points: list[FixturePoints] = []
    totals = SeasonAggregator()
    failures: list[ScoringFailure] = []

    def apply_outcome(outcome: ScoringJobResult) -> None:
        points.extend(outcome.points)
        totals.merge(outcome.totals)
        for failure in outcome.failures:
            logger.warning(
                "Fixture %s could not be scored (%s): %s",
                failure.fixture_id,
                failure.kind,
                failure.message,
            )
        failures.extend(outcome.failures)

    def finish() -> BatchOutput:
        if strict and failures:
            raise failures[0].error
        points.sort(key=lambda item: order.get(item.fixture_id, len(order)))
        failures.sort(key=lambda item: order.get(item.fixture_id, len(order)))
        logger.info(
            "Scored %s/%s fixtures (%s failed) in %.2fs; %s players with points",
            len(points),
            len(fixture_list),
            len(failures),
            time.perf_counter() - run_start,
            len(totals.totals),
        )
        return BatchOutput(points=points, totals=totals, failures=failures)

    run_start = time.perf_counter()
    if not fixture_list:
        return finish()

    jobs = [
        ScoringJobConfig(job_id, chunk, registry, rules, strict)
        for job_id, chunk in enumerate(_chunk(fixture_list, per_job))
    ]

    logger.info(
        "Starting fixture scoring – fixtures=%s, workers=%s, per_job=%s",
        len(fixture_list),
        workers,
        per_job,
    )

    if workers == 1 or len(jobs) == 1:
        for config in jobs:
            outcome = _run_scoring_job(config)
            apply_outcome(outcome)
            if strict and outcome.failures:
                break
        return finish()

    ctx = mp.get_context("spawn")
    queue: mp.Queue = ctx.Queue()
    processes: dict[int, mp.Process] = {}
    pending = list(jobs)

    def start_job() -> None:
        config = pending.pop(0)
        logger.info(
            "Dispatching batch %s – %s fixtures (total %.2fs)",
            config.job_id,
            len(config.fixtures),
            time.perf_counter() - run_start,
        )
        proc = ctx.Process(target=_scoring_worker, args=(config, queue))
        proc.start()
        processes[config.job_id] = proc

    try:
        while len(processes) < workers and pending:
            start_job()

        while processes:
            outcome = queue.get()
            if isinstance(outcome, Exception):
                raise outcome

            proc = processes.pop(outcome.job_id, None)
            if proc is not None:
                proc.join()

            apply_outcome(outcome)
            logger.info(
                "Batch %s completed – %s fixtures scored, %s failed (total %.2fs)",
                outcome.job_id,
                len(outcome.points),
                len(outcome.failures),
                time.perf_counter() - run_start,
            )
            if strict and outcome.failures:
                break

            while len(processes) < workers and pending:
                start_job()
    finally:
        for proc in processes.values():
            if proc.is_alive():
                proc.terminate()
            proc.join()

    return finish()


__all__ = [
    "BatchOutput",
    "FixtureScorer",
    "ScoringFailure",
    "score_fixture",
    "score_fixtures",
]
