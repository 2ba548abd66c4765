"""Transparenz exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Ingest failures and query argument failures have separate roots.
"""

from __future__ import annotations


class TransparenzError(Exception):
    """Base exception for all Transparenz failures."""


class TransparenzConfigError(TransparenzError):
    """Raised for invalid runtime configuration."""


class TransparenzIngestError(TransparenzError):
    """Raised for quarter fetch and decode failures."""


class InvalidQuarterFormatError(TransparenzIngestError):
    """Raised when a quarter code is not five decimal digits."""

    def __init__(self, quarter: str) -> None:
        super().__init__(
            f"{quarter} is not a valid quarter: expected five digits in YYYYQ form, e.g. 20231."
        )
        self.quarter = quarter


class NoQuartersSpecifiedError(TransparenzIngestError):
    """Raised when a load is requested without any quarter."""

    def __init__(self) -> None:
        super().__init__("At least one quarter to be loaded must be specified.")


class QuarterLoadError(TransparenzIngestError):
    """Raised when fetching or decoding one quarter fails."""

    def __init__(self, quarter: str, cause: BaseException | str) -> None:
        super().__init__(f"Failed to load quarter {quarter}: {cause}")
        self.quarter = quarter
        self.cause = cause


class TransparenzQueryError(TransparenzError):
    """Raised for invalid query command arguments."""


class CommandSyntaxError(TransparenzQueryError):
    """Raised when a command receives the wrong number of arguments."""


class InvalidAmountError(TransparenzQueryError):
    """Raised when a row count is not a positive integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"{value} is not a valid amount: expected a positive integer.")
        self.value = value


class InvalidParagraphError(TransparenzQueryError):
    """Raised when a paragraph is not one of the published legal bases."""

    def __init__(self, value: str) -> None:
        super().__init__(f"{value} is not a valid paragraph: allowed values are 2, 4 and 31.")
        self.value = value


class InvalidRoleError(TransparenzQueryError):
    """Raised when a role token is neither payers nor recipients."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{value} is not a valid role: allowed values are ['payers', 'recipients']."
        )
        self.value = value
