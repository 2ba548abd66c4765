"""Quarter loading from the transparency register API.

This module validates quarter codes, fetches one quarter over HTTP
and decodes the JSON envelope into typed transactions.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

import requests

from core.config import TransparenzConfig
from core.constants import EMPTY_REPORTS_FLAG, QUARTER_CODE_LENGTH, UNPAGED_SIZE
from core.errors import InvalidQuarterFormatError, QuarterLoadError
from core.logging_config import get_logger
from core.types import Transaction

_LOGGER = get_logger(__name__)
_DECIMAL_DIGITS = frozenset("0123456789")


def is_valid_quarter(quarter: str) -> bool:
    """Return whether a quarter code has ``YYYYQ`` shape.

    Args:
        quarter: Raw quarter code.

    Returns:
        True iff the code has five characters and all are decimal digits.
    """
    return len(quarter) == QUARTER_CODE_LENGTH and all(
        char in _DECIMAL_DIGITS for char in quarter
    )


def load_quarter(quarter: str, config: TransparenzConfig) -> list[Transaction]:
    """Fetch and decode all transactions of one quarter.

    Args:
        quarter: Quarter code in ``YYYYQ`` form.
        config: Runtime configuration with endpoint and timeout.

    Returns:
        Decoded transactions of the quarter.

    Raises:
        InvalidQuarterFormatError: If the quarter code is malformed.
        QuarterLoadError: If transport or decoding fails.
    """
    if not is_valid_quarter(quarter):
        raise InvalidQuarterFormatError(quarter)
    _LOGGER.info("quarter_load_started", quarter=quarter)
    payload = _fetch_payload(quarter, config)
    try:
        transactions = decode_transactions(payload)
    except (KeyError, OverflowError, TypeError, ValueError) as error:
        _LOGGER.error("quarter_load_failed", quarter=quarter, reason=str(error))
        raise QuarterLoadError(quarter, f"malformed response: {error}") from error
    _LOGGER.info("quarter_load_completed", quarter=quarter, record_count=len(transactions))
    return transactions


def decode_transactions(payload: Any) -> list[Transaction]:
    """Decode the register response envelope.

    Args:
        payload: Parsed JSON document with a ``Data`` array.

    Returns:
        Transactions in response order.

    Raises:
        KeyError: If the envelope or an item misses a field.
        TypeError: If the envelope or a field has the wrong type.
        ValueError: If a numeric field cannot be parsed.
    """
    if not isinstance(payload, Mapping):
        raise TypeError("expected a JSON object envelope")
    rows = _field(payload, "Data")
    if not isinstance(rows, list):
        raise TypeError("expected 'Data' to be an array")
    return [_decode_transaction(row) for row in rows]


def _fetch_payload(quarter: str, config: TransparenzConfig) -> Any:
    """Request one quarter and parse the JSON body.

    Args:
        quarter: Valid quarter code.
        config: Runtime configuration.

    Returns:
        Parsed JSON document.

    Raises:
        QuarterLoadError: If the request fails or the body is not JSON.
    """
    params = {"quartal": quarter, "leermeldung": EMPTY_REPORTS_FLAG, "size": UNPAGED_SIZE}
    try:
        response = requests.get(config.api_url, params=params, timeout=config.request_timeout)
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError) as error:
        _LOGGER.error("quarter_load_failed", quarter=quarter, reason=str(error))
        raise QuarterLoadError(quarter, error) from error


def _decode_transaction(row: Any) -> Transaction:
    if not isinstance(row, Mapping):
        raise TypeError("expected each 'Data' entry to be an object")
    return Transaction(
        payer=_text_field(row, "Rechtstraeger"),
        recipient=_text_field(row, "mediumMedieninhaber"),
        quarter=_text_field(row, "Quartal"),
        paragraph=_integer_field(row, "Bekanntgabe"),
        amount=_amount_field(row, "Euro"),
    )


def _text_field(row: Mapping[str, Any], name: str) -> str:
    value = _field(row, name)
    if not isinstance(value, str):
        raise TypeError(f"expected string field '{name}', got {type(value).__name__}")
    return value


def _integer_field(row: Mapping[str, Any], name: str) -> int:
    value = _field(row, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer field '{name}', got {value!r}")
    return value


def _amount_field(row: Mapping[str, Any], name: str) -> float:
    value = _field(row, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected numeric field '{name}', got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"expected finite field '{name}', got {value!r}")
    return float(value)


def _field(document: Mapping[str, Any], name: str) -> Any:
    """Look up a field by name, ignoring case like the upstream encoder does."""
    if name in document:
        return document[name]
    lowered = name.lower()
    for key, value in document.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    raise KeyError(f"missing field '{name}'")
