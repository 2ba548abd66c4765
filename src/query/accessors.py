"""Transaction field accessors.

This module maps query roles onto the transaction field they read.
"""

from __future__ import annotations

from typing import Callable

from core.constants import ROLE_PAYERS, ROLE_RECIPIENTS
from core.errors import InvalidRoleError
from core.types import Role, Transaction

FieldAccessor = Callable[[Transaction], str]


def payer_of(transaction: Transaction) -> str:
    """Return the paying legal entity."""
    return transaction.payer


def recipient_of(transaction: Transaction) -> str:
    """Return the receiving media holder."""
    return transaction.recipient


def quarter_of(transaction: Transaction) -> str:
    """Return the reporting quarter code."""
    return transaction.quarter


def parse_role(value: str) -> Role:
    """Parse a role token case-insensitively.

    Args:
        value: Raw ``payers`` or ``recipients`` token.

    Returns:
        Parsed role.

    Raises:
        InvalidRoleError: If the token names no role.
    """
    normalized = value.lower()
    if normalized == ROLE_PAYERS:
        return Role.PAYERS
    if normalized == ROLE_RECIPIENTS:
        return Role.RECIPIENTS
    raise InvalidRoleError(value)


def role_accessor(role: Role) -> FieldAccessor:
    """Return the accessor for the role's own side."""
    return payer_of if role is Role.PAYERS else recipient_of


def counterparty_accessor(role: Role) -> FieldAccessor:
    """Return the accessor for the opposite side of the role."""
    return recipient_of if role is Role.PAYERS else payer_of
