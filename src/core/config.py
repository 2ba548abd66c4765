"""Runtime configuration model for Transparenz.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_API_URL, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import TransparenzConfigError


@dataclass(frozen=True)
class TransparenzConfig:
    """Validated runtime configuration.

    Attributes:
        api_url: Register dataset endpoint queried once per quarter.
        request_timeout: Optional per-request timeout in seconds. ``None`` waits forever.
        log_level: Minimum structured log level.
    """

    api_url: str
    request_timeout: float | None
    log_level: str

    @classmethod
    def from_env(cls) -> "TransparenzConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TransparenzConfigError: If environment values are invalid.
        """
        api_url = os.getenv("TRANSPARENZ_API_URL", DEFAULT_API_URL)
        timeout_value = os.getenv("TRANSPARENZ_REQUEST_TIMEOUT")
        log_level_value = os.getenv("TRANSPARENZ_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            api_url=parse_api_url(api_url),
            request_timeout=_parse_request_timeout(timeout_value),
            log_level=_parse_log_level(log_level_value),
        )


def parse_api_url(raw_value: str, source: str = "TRANSPARENZ_API_URL") -> str:
    """Validate the dataset endpoint URL.

    Args:
        raw_value: Raw URL string.
        source: Environment variable or flag the value came from.

    Returns:
        Endpoint URL without surrounding whitespace.

    Raises:
        TransparenzConfigError: If the value is not an http(s) URL.
    """
    value = raw_value.strip()
    if not value.startswith(("http://", "https://")):
        raise TransparenzConfigError(
            f"Invalid {source} value: "
            f"expected an http(s) URL, got '{raw_value}'. "
            "Omit it to use the public register endpoint."
        )
    return value


def _parse_request_timeout(raw_value: str | None) -> float | None:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment, or ``None`` when unset.

    Returns:
        Positive timeout in seconds, or ``None`` for no timeout.

    Raises:
        TransparenzConfigError: If value is not a positive number.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise TransparenzConfigError(
            "Invalid TRANSPARENZ_REQUEST_TIMEOUT value: "
            f"expected seconds as a number, got '{raw_value}'. "
            "Set TRANSPARENZ_REQUEST_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise TransparenzConfigError(
            "Invalid TRANSPARENZ_REQUEST_TIMEOUT value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TransparenzConfigError(
            "Invalid TRANSPARENZ_LOG_LEVEL value: "
            f"expected one of {SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level
