"""Grouping, summation and ranking of transactions.

This module powers the ``top`` and ``details`` reports. Groups are
ranked by descending summed amount; equal sums fall back to the
case-insensitive name order so reports are reproducible.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import PARAGRAPH_CODES
from core.types import DetailsQuery, DetailsReport, RankedEntry, TopQuery, Transaction
from query.accessors import FieldAccessor, counterparty_accessor, role_accessor
from query.ordering import case_insensitive_key


def group_amounts(
    transactions: Iterable[Transaction],
    key: FieldAccessor,
) -> dict[str, float]:
    """Sum transaction amounts per group key.

    Args:
        transactions: Transactions to group.
        key: Accessor producing the group key.

    Returns:
        Group key mapped to summed Euro amount.
    """
    groups: dict[str, float] = {}
    for transaction in transactions:
        group = key(transaction)
        groups[group] = groups.get(group, 0.0) + transaction.amount
    return groups


def rank_groups(groups: dict[str, float]) -> list[RankedEntry]:
    """Rank groups by descending amount, then case-insensitive name."""
    ordered = sorted(
        groups.items(),
        key=lambda item: (-item[1], case_insensitive_key(item[0])),
    )
    return [RankedEntry(name=name, amount=amount) for name, amount in ordered]


def top_entries(transactions: Iterable[Transaction], query: TopQuery) -> list[RankedEntry]:
    """Rank every group of one paragraph for the ``top`` report.

    Callers truncate to ``query.count`` when rendering; the full ranking
    is returned so column widths cover every group.

    Args:
        transactions: Store snapshot.
        query: Parsed ``top`` arguments.

    Returns:
        All ranked groups of the paragraph; empty when nothing matches.
    """
    in_paragraph = (
        transaction for transaction in transactions if transaction.paragraph == query.paragraph
    )
    return rank_groups(group_amounts(in_paragraph, role_accessor(query.role)))


def details_report(transactions: Iterable[Transaction], query: DetailsQuery) -> DetailsReport:
    """Rank the counterparties of one organization per paragraph.

    Args:
        transactions: Store snapshot.
        query: Parsed ``details`` arguments; the organization matches exactly.

    Returns:
        Report with one section per paragraph code, empty sections included.
    """
    own_side = role_accessor(query.role)
    other_side = counterparty_accessor(query.role)
    buckets: dict[int, list[Transaction]] = {paragraph: [] for paragraph in PARAGRAPH_CODES}
    for transaction in transactions:
        if own_side(transaction) != query.organization:
            continue
        bucket = buckets.get(transaction.paragraph)
        if bucket is not None:
            bucket.append(transaction)
    sections = {
        paragraph: rank_groups(group_amounts(bucket, other_side))
        for paragraph, bucket in buckets.items()
    }
    return DetailsReport(organization=query.organization, role=query.role, sections=sections)
