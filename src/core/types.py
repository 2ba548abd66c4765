"""Shared typed models.

This module defines immutable data models used by ingest, store,
query and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.constants import ROLE_PAYERS, ROLE_RECIPIENTS


@dataclass(frozen=True)
class Transaction:
    """One published media-funding transaction.

    Attributes:
        payer: Paying legal entity (Rechtsträger).
        recipient: Receiving media holder (Medieninhaber).
        quarter: Reporting quarter code in ``YYYYQ`` form.
        paragraph: Legal-basis code, one of 2, 4 or 31.
        amount: Euro value of the transaction.
    """

    payer: str
    recipient: str
    quarter: str
    paragraph: int
    amount: float


class Role(str, Enum):
    """Side of a transaction a query is about."""

    PAYERS = ROLE_PAYERS
    RECIPIENTS = ROLE_RECIPIENTS


@dataclass(frozen=True)
class RankedEntry:
    """Group name with its summed amount, in ranked position."""

    name: str
    amount: float


@dataclass(frozen=True)
class QuarterBatch:
    """All transactions decoded for one successfully loaded quarter."""

    quarter: str
    transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class LoadOutcome:
    """Merged result of a multi-quarter load.

    Attributes:
        batches: Successful quarter batches, in request order.
        failures: One exception per failed quarter, in request order.
    """

    batches: tuple[QuarterBatch, ...] = ()
    failures: tuple[Exception, ...] = ()

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """All loaded transactions with each quarter kept contiguous."""
        return tuple(
            transaction for batch in self.batches for transaction in batch.transactions
        )

    @property
    def error(self) -> ExceptionGroup | None:
        """Joined error of every failure, or ``None`` when all quarters loaded."""
        if not self.failures:
            return None
        return ExceptionGroup(
            f"failed to load {len(self.failures)} quarter(s)", list(self.failures)
        )


@dataclass(frozen=True)
class TopQuery:
    """Parsed arguments of the ``top`` command."""

    count: int
    role: Role
    paragraph: int


@dataclass(frozen=True)
class SearchQuery:
    """Parsed arguments of the ``search`` command."""

    role: Role
    term: str


@dataclass(frozen=True)
class DetailsQuery:
    """Parsed arguments of the ``details`` command."""

    role: Role
    organization: str


@dataclass(frozen=True)
class DetailsReport:
    """Counterparty rankings of one organization, per paragraph.

    Attributes:
        organization: Exact organization name that was matched.
        role: Side the organization was matched on.
        sections: Paragraph code mapped to ranked counterparties.
    """

    organization: str
    role: Role
    sections: dict[int, list[RankedEntry]] = field(default_factory=dict)
