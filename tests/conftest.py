"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def offline_config():
    """Config pointing at a placeholder endpoint with a short timeout."""
    from core.config import TransparenzConfig

    return TransparenzConfig(
        api_url="https://register.invalid/api.json",
        request_timeout=5.0,
        log_level="warning",
    )


@pytest.fixture
def small_register():
    """Three transactions: A pays 10 and 5, B pays 30."""
    from core.types import Transaction

    return (
        Transaction(payer="A", recipient="Kurier", quarter="20231", paragraph=2, amount=10.0),
        Transaction(payer="B", recipient="Falter", quarter="20231", paragraph=2, amount=30.0),
        Transaction(payer="A", recipient="Profil", quarter="20232", paragraph=4, amount=5.0),
    )
