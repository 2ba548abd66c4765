"""Unit tests for the CLI entry point."""

from __future__ import annotations

import io
from typing import Any

import pytest
import requests

from cli.main import main
from ingest import quarter_loader
from tests.fixture_paths import load_fixture_json


class _FixtureResponse:
    def raise_for_status(self) -> None:
        return None

    def json(self) -> Any:
        return load_fixture_json("rtr/quarter_20231.json")


def _fake_get(url, params=None, timeout=None):
    if params["quartal"] != "20231":
        raise requests.ConnectionError("connection refused")
    return _FixtureResponse()


def test_cli_loads_startup_quarters_and_answers_queries(monkeypatch, capsys) -> None:
    """Startup quarters should be queryable at the prompt."""
    monkeypatch.setattr(quarter_loader.requests, "get", _fake_get)
    stdin = io.StringIO("top 1 recipients 2\nquit\n")

    exit_code = main(["20231"], stdin=stdin)
    output = capsys.readouterr().out

    assert exit_code == 0 and "1. Mediaprint - 1500.75€" in output and "Bye!" in output


def test_cli_reports_startup_failures_and_still_prompts(monkeypatch, capsys) -> None:
    """Failed startup quarters should be reported before the prompt."""
    monkeypatch.setattr(quarter_loader.requests, "get", _fake_get)
    stdin = io.StringIO("quarters\nexit\n")

    exit_code = main(["20231", "20232", "bad"], stdin=stdin)
    output = capsys.readouterr().out

    assert (
        exit_code == 0
        and "(2 failed)" in output
        and "bad is not a valid quarter" in output
        and "\t20231\n" in output
    )


def test_cli_ends_on_end_of_input(capsys) -> None:
    """Reaching end of input should end the session normally."""
    exit_code = main([], stdin=io.StringIO("help\n"))
    output = capsys.readouterr().out

    assert exit_code == 0 and output.rstrip().endswith("Bye!")


def test_cli_api_url_override_is_used(monkeypatch, capsys) -> None:
    """The --api-url flag should replace the configured endpoint."""
    requested: list[str] = []

    def _recording_get(url, params=None, timeout=None):
        requested.append(url)
        return _FixtureResponse()

    monkeypatch.setattr(quarter_loader.requests, "get", _recording_get)

    main(["--api-url", "https://mirror.example/rtr.json", "20231"], stdin=io.StringIO(""))
    _ = capsys.readouterr()

    assert requested == ["https://mirror.example/rtr.json"]


def test_cli_rejects_non_http_api_url_before_loading(monkeypatch, capsys) -> None:
    """An invalid --api-url should stop startup before any quarter is fetched."""
    requested: list[str] = []
    monkeypatch.setattr(
        quarter_loader.requests, "get", lambda url, **kwargs: requested.append(url)
    )

    with pytest.raises(SystemExit) as exit_info:
        main(["--api-url", "ftp://mirror.example/rtr.json", "20231"], stdin=io.StringIO(""))
    error_output = capsys.readouterr().err

    assert exit_info.value.code == 2 and "--api-url" in error_output and requested == []
