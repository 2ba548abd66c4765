"""Distinct listings and substring search.

This module backs the ``payers``, ``recipients``, ``quarters`` and
``search`` commands.
"""

from __future__ import annotations

from typing import Iterable

from core.types import SearchQuery, Transaction
from query.accessors import FieldAccessor, role_accessor
from query.ordering import sorted_case_insensitive


def distinct_values(transactions: Iterable[Transaction], accessor: FieldAccessor) -> list[str]:
    """Project, deduplicate and sort case-insensitively.

    Args:
        transactions: Store snapshot.
        accessor: Field to project each transaction onto.

    Returns:
        Distinct values in case-insensitive order.
    """
    return sorted_case_insensitive({accessor(transaction) for transaction in transactions})


def search_names(transactions: Iterable[Transaction], query: SearchQuery) -> list[str]:
    """Find distinct names on one side containing a search term.

    Args:
        transactions: Store snapshot.
        query: Role and already lowercased search term.

    Returns:
        Matching names in case-insensitive order.
    """
    accessor = role_accessor(query.role)
    term = query.term.lower()
    matches = {
        name
        for name in (accessor(transaction) for transaction in transactions)
        if term in name.lower()
    }
    return sorted_case_insensitive(matches)
