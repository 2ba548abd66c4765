"""Unit tests for grouping, ranking and the aggregate reports."""

from __future__ import annotations

from core.types import DetailsQuery, RankedEntry, Role, TopQuery, Transaction
from query.accessors import payer_of
from query.aggregation import details_report, group_amounts, rank_groups, top_entries
from query.report import format_ranked_rows


def test_group_amounts_sums_per_key(small_register) -> None:
    """Amounts should be summed per payer."""
    assert group_amounts(small_register, payer_of) == {"A": 15.0, "B": 30.0}


def test_rank_groups_breaks_ties_by_name() -> None:
    """Equal sums should be ordered case-insensitively by name."""
    ranked = rank_groups({"zeit": 5.0, "Alpha": 5.0, "big": 9.0, "beta": 5.0})

    assert [entry.name for entry in ranked] == ["big", "Alpha", "beta", "zeit"]


def test_top_entries_filters_paragraph(small_register) -> None:
    """Top should rank only the requested paragraph."""
    entries = top_entries(small_register, TopQuery(count=2, role=Role.PAYERS, paragraph=2))

    assert entries == [RankedEntry("B", 30.0), RankedEntry("A", 10.0)]


def test_top_one_renders_single_row(small_register) -> None:
    """Top 1 should render only the leading payer."""
    query = TopQuery(count=1, role=Role.PAYERS, paragraph=2)

    rows = format_ranked_rows(top_entries(small_register, query), limit=query.count)

    assert [row.strip() for row in rows] == ["1. B - 30.00€"]


def test_top_entries_groups_by_recipient(small_register) -> None:
    """Recipient role should group on the media holder."""
    entries = top_entries(small_register, TopQuery(count=5, role=Role.RECIPIENTS, paragraph=4))

    assert entries == [RankedEntry("Profil", 5.0)]


def test_top_entries_empty_paragraph_yields_no_rows(small_register) -> None:
    """A paragraph without records should produce an empty ranking."""
    entries = top_entries(small_register, TopQuery(count=3, role=Role.PAYERS, paragraph=31))

    assert entries == [] and format_ranked_rows(entries, limit=3) == []


def test_details_report_partitions_by_paragraph(small_register) -> None:
    """Details should rank counterparties per paragraph, keeping empty ones."""
    report = details_report(small_register, DetailsQuery(role=Role.PAYERS, organization="A"))

    assert report.sections == {
        2: [RankedEntry("Kurier", 10.0)],
        4: [RankedEntry("Profil", 5.0)],
        31: [],
    }


def test_details_report_matches_organization_exactly() -> None:
    """Organization names should match case-sensitively and in full."""
    register = (
        Transaction("Stadt Wien", "Heute", "20231", 2, 100.0),
        Transaction("stadt wien", "Heute", "20231", 2, 1.0),
        Transaction("Stadt Wiener Neustadt", "Heute", "20231", 2, 7.0),
        Transaction("Stadt Wien", "Heute", "20232", 2, 50.0),
    )

    report = details_report(register, DetailsQuery(role=Role.PAYERS, organization="Stadt Wien"))

    assert report.sections[2] == [RankedEntry("Heute", 150.0)]


def test_details_report_for_recipient_groups_by_payer(small_register) -> None:
    """Recipient details should rank the paying entities."""
    report = details_report(
        small_register, DetailsQuery(role=Role.RECIPIENTS, organization="Falter")
    )

    assert report.sections[2] == [RankedEntry("B", 30.0)] and report.sections[4] == []
