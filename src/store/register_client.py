"""Python SDK for register exploration.

This module exposes high-level APIs for loading quarters and running
listing, ranking and search queries against the record store.
"""

from __future__ import annotations

from typing import Sequence

from core.config import TransparenzConfig
from core.errors import NoQuartersSpecifiedError
from core.logging_config import get_logger
from core.types import (
    DetailsQuery,
    DetailsReport,
    LoadOutcome,
    RankedEntry,
    SearchQuery,
    TopQuery,
    Transaction,
)
from ingest.fetch_coordinator import QuarterLoader, load_quarters
from ingest.quarter_loader import load_quarter
from query.accessors import payer_of, quarter_of, recipient_of
from query.aggregation import details_report, top_entries
from query.search import distinct_values, search_names
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)


class RegisterClient:
    """Primary SDK entry point for one exploration session."""

    def __init__(
        self,
        config: TransparenzConfig | None = None,
        loader: QuarterLoader = load_quarter,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            loader: Single-quarter loader, replaceable for offline use.
        """
        self._config = config or TransparenzConfig.from_env()
        self._loader = loader
        self._store = RecordStore()

    @property
    def config(self) -> TransparenzConfig:
        """Runtime configuration used for loads."""
        return self._config

    def load(self, quarters: Sequence[str]) -> LoadOutcome:
        """Load quarters and append their records to the store.

        Args:
            quarters: Quarter codes to load concurrently.

        Returns:
            Load outcome; ``outcome.error`` joins every failed quarter.

        Raises:
            NoQuartersSpecifiedError: If ``quarters`` is empty.
        """
        outcome = load_quarters(quarters, self._config, self._loader)
        self._store.append_batches(outcome.batches)
        return outcome

    def reload(self, quarters: Sequence[str] = ()) -> LoadOutcome:
        """Replace the store contents with a fresh load.

        Args:
            quarters: Quarter codes to load. Empty reloads every quarter
                that loaded successfully, including ones without records.

        Returns:
            Load outcome of the fresh load.

        Raises:
            NoQuartersSpecifiedError: If no quarter is given or loaded.
        """
        targets = list(quarters) or self._store.loaded_quarters()
        if not targets:
            raise NoQuartersSpecifiedError()
        outcome = load_quarters(targets, self._config, self._loader)
        self._store.clear()
        self._store.append_batches(outcome.batches)
        _LOGGER.info("store_reloaded", quarters=targets, record_count=len(self._store))
        return outcome

    def transactions(self) -> tuple[Transaction, ...]:
        """Return a snapshot of every loaded transaction."""
        return self._store.snapshot()

    def payers(self) -> list[str]:
        """Return distinct payers in case-insensitive order."""
        return distinct_values(self._store.snapshot(), payer_of)

    def recipients(self) -> list[str]:
        """Return distinct recipients in case-insensitive order."""
        return distinct_values(self._store.snapshot(), recipient_of)

    def quarters(self) -> list[str]:
        """Return distinct loaded quarter codes."""
        return distinct_values(self._store.snapshot(), quarter_of)

    def top(self, query: TopQuery) -> list[RankedEntry]:
        """Rank every group of the queried paragraph.

        The result is not truncated; render it with ``limit=query.count``.
        """
        return top_entries(self._store.snapshot(), query)

    def search(self, query: SearchQuery) -> list[str]:
        """Return distinct names containing the search term."""
        return search_names(self._store.snapshot(), query)

    def details(self, query: DetailsQuery) -> DetailsReport:
        """Return per-paragraph counterparty rankings of one organization."""
        return details_report(self._store.snapshot(), query)
