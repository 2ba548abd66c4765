"""Concurrent multi-quarter loading.

This module fans out one load task per requested quarter and merges
their batches and failures once every task has finished.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Sequence

from core.config import TransparenzConfig
from core.errors import NoQuartersSpecifiedError, TransparenzError
from core.logging_config import get_logger
from core.types import LoadOutcome, QuarterBatch, Transaction
from ingest.quarter_loader import load_quarter

_LOGGER = get_logger(__name__)

QuarterLoader = Callable[[str, TransparenzConfig], Sequence[Transaction]]


def load_quarters(
    quarters: Sequence[str],
    config: TransparenzConfig,
    loader: QuarterLoader = load_quarter,
) -> LoadOutcome:
    """Load several quarters concurrently.

    A failing quarter contributes one failure and no records; it never
    aborts the other loads. The call returns once every load finished.

    Args:
        quarters: Quarter codes to load, one task each.
        config: Runtime configuration passed to the loader.
        loader: Single-quarter loader, replaceable for tests.

    Returns:
        Successful batches and per-quarter failures, in request order.

    Raises:
        NoQuartersSpecifiedError: If no quarter was requested.
    """
    if not quarters:
        raise NoQuartersSpecifiedError()
    with ThreadPoolExecutor(max_workers=len(quarters)) as executor:
        futures = [
            (quarter, executor.submit(_load_batch, loader, quarter, config))
            for quarter in quarters
        ]
    batches: list[QuarterBatch] = []
    failures: list[Exception] = []
    for quarter, future in futures:
        batch = _collect(quarter, future, failures)
        if batch is not None:
            batches.append(batch)
    _LOGGER.info(
        "quarters_loaded",
        requested=len(quarters),
        loaded=len(batches),
        failed=len(failures),
        record_count=sum(len(batch.transactions) for batch in batches),
    )
    return LoadOutcome(batches=tuple(batches), failures=tuple(failures))


def _load_batch(loader: QuarterLoader, quarter: str, config: TransparenzConfig) -> QuarterBatch:
    return QuarterBatch(quarter=quarter, transactions=tuple(loader(quarter, config)))


def _collect(
    quarter: str,
    future: Future[QuarterBatch],
    failures: list[Exception],
) -> QuarterBatch | None:
    """Return a finished batch or record its domain failure.

    Unexpected exceptions are re-raised by ``future.result()``.
    """
    try:
        return future.result()
    except TransparenzError as error:
        _LOGGER.warning("quarter_skipped", quarter=quarter, reason=str(error))
        failures.append(error)
        return None
