"""Column-aligned report rendering.

This module turns ranked entries into text rows with a padded name
column and a right-aligned two-decimal Euro column.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.constants import AMOUNT_DECIMALS, CURRENCY_SYMBOL, RANK_WIDTH
from core.types import RankedEntry


def format_ranked_rows(
    entries: Sequence[RankedEntry],
    limit: int | None = None,
) -> list[str]:
    """Render ranked entries as aligned report rows.

    Column widths are computed over all entries even when ``limit``
    truncates the output, so truncated reports align with full ones.

    Args:
        entries: Entries in ranked order, largest amount first.
        limit: Optional maximum number of rows, clamped to ``len(entries)``.

    Returns:
        One row per shown entry; empty when there are no entries.
    """
    if not entries:
        return []
    name_width = max(len(entry.name) for entry in entries)
    amount_width = amount_column_width(max(entry.amount for entry in entries))
    shown = entries if limit is None else entries[: max(limit, 0)]
    return [
        f"{rank:{RANK_WIDTH}d}. {entry.name:<{name_width}} - "
        f"{entry.amount:>{amount_width}.{AMOUNT_DECIMALS}f}{CURRENCY_SYMBOL}"
        for rank, entry in enumerate(shown, 1)
    ]


def amount_column_width(max_amount: float) -> int:
    """Return the amount column width for the largest amount.

    Integer digits are ``floor(log10(max_amount)) + 1``, at least one,
    plus the decimal point and the fixed decimals.

    Args:
        max_amount: Largest amount in the report.

    Returns:
        Total character width of the amount column.
    """
    integer_digits = 1
    if max_amount >= 1 and math.isfinite(max_amount):
        integer_digits = math.floor(math.log10(max_amount)) + 1
    return integer_digits + 1 + AMOUNT_DECIMALS
