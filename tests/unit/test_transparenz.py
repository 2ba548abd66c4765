"""Unit tests for the public SDK surface."""

from __future__ import annotations

import transparenz
from core.types import Transaction


def test_sdk_surface_runs_offline_top_report(offline_config) -> None:
    """Re-exported client and formatter should work together."""
    register = [
        Transaction("Bund", "Heute", "20231", 2, 10.0),
        Transaction("Land Wien", "Heute", "20231", 2, 12.0),
    ]
    client = transparenz.RegisterClient(offline_config, loader=lambda quarter, config: register)
    client.load(["20231"])
    query = transparenz.TopQuery(count=1, role=transparenz.Role.PAYERS, paragraph=2)

    rows = transparenz.format_ranked_rows(client.top(query), limit=query.count)

    assert rows == ["  1. Land Wien - 12.00€"] and transparenz.is_valid_quarter("20231")
