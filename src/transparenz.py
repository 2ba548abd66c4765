"""Public SDK surface for Transparenz.

This module provides a stable import path for notebook and script users.
It re-exports the primary client and typed query models.
"""

from __future__ import annotations

from core.config import TransparenzConfig
from core.types import (
    DetailsQuery,
    DetailsReport,
    LoadOutcome,
    RankedEntry,
    Role,
    SearchQuery,
    TopQuery,
    Transaction,
)
from ingest.quarter_loader import is_valid_quarter
from query.report import format_ranked_rows
from store.register_client import RegisterClient

__all__ = [
    "DetailsQuery",
    "DetailsReport",
    "LoadOutcome",
    "RankedEntry",
    "RegisterClient",
    "Role",
    "SearchQuery",
    "TopQuery",
    "TransparenzConfig",
    "Transaction",
    "format_ranked_rows",
    "is_valid_quarter",
]
