"""Unit tests for concurrent multi-quarter loading."""

from __future__ import annotations

import threading
import time

import pytest

from core.errors import InvalidQuarterFormatError, NoQuartersSpecifiedError, QuarterLoadError
from core.types import Transaction
from ingest.fetch_coordinator import load_quarters


def _records(quarter: str, count: int) -> list[Transaction]:
    return [
        Transaction(
            payer=f"payer-{index}",
            recipient="R",
            quarter=quarter,
            paragraph=2,
            amount=float(index),
        )
        for index in range(count)
    ]


def _fake_loader(quarter: str, config) -> list[Transaction]:
    if quarter.startswith("9"):
        raise QuarterLoadError(quarter, "upstream unavailable")
    # Later quarters finish first to scramble completion order.
    time.sleep((30000 - int(quarter) % 30000) / 1_000_000)
    return _records(quarter, int(quarter[-1]))


def test_load_quarters_raises_for_empty_request(offline_config) -> None:
    """Coordinator should reject an empty quarter list."""
    with pytest.raises(NoQuartersSpecifiedError):
        load_quarters([], offline_config, _fake_loader)


def test_load_quarters_merges_successes_and_failures(offline_config) -> None:
    """Failures should be collected while successes keep all records."""
    quarters = ["20231", "90001", "20232", "90002", "20233"]

    outcome = load_quarters(quarters, offline_config, _fake_loader)

    assert (
        [batch.quarter for batch in outcome.batches] == ["20231", "20232", "20233"]
        and len(outcome.transactions) == 1 + 2 + 3
        and len(outcome.error.exceptions) == 2
    )


def test_load_quarters_keeps_each_quarter_contiguous(offline_config) -> None:
    """Records of one quarter should form one contiguous block."""
    outcome = load_quarters(["20233", "20234"], offline_config, _fake_loader)

    quarters = [transaction.quarter for transaction in outcome.transactions]

    assert quarters == ["20233"] * 3 + ["20234"] * 4


def test_load_quarters_collects_invalid_quarter_codes(offline_config) -> None:
    """Format errors from the loader count as per-quarter failures."""

    def _validating_loader(quarter: str, config) -> list[Transaction]:
        raise InvalidQuarterFormatError(quarter)

    outcome = load_quarters(["abc", "20231x"], offline_config, _validating_loader)

    assert outcome.batches == () and len(outcome.failures) == 2


def test_load_quarters_runs_loads_concurrently(offline_config) -> None:
    """Every quarter load should be in flight at the same time."""
    barrier = threading.Barrier(3, timeout=5)

    def _barrier_loader(quarter: str, config) -> list[Transaction]:
        barrier.wait()
        return _records(quarter, 1)

    outcome = load_quarters(["20231", "20232", "20233"], offline_config, _barrier_loader)

    assert outcome.error is None and len(outcome.transactions) == 3


def test_load_quarters_propagates_unexpected_errors(offline_config) -> None:
    """Programming errors in a loader should not be swallowed."""

    def _broken_loader(quarter: str, config) -> list[Transaction]:
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        load_quarters(["20231"], offline_config, _broken_loader)
