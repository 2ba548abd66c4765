"""Core constants used across Transparenz modules.

This module centralizes endpoint, register and formatting constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_API_URL = "https://data.rtr.at/api/v1/tables/MedKFTGBekanntgabe.json"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
QUARTER_CODE_LENGTH = 5
EMPTY_REPORTS_FLAG = 0
UNPAGED_SIZE = 0
PARAGRAPH_CODES = (2, 4, 31)
PARAGRAPH_SIGN = "§"
ROLE_PAYERS = "payers"
ROLE_RECIPIENTS = "recipients"
CURRENCY_SYMBOL = "€"
AMOUNT_DECIMALS = 2
RANK_WIDTH = 3
PROMPT_TEXT = "> "
PROMPT_HINT = "Please enter a command or type 'help' for more information"
WELCOME_MESSAGE = "Welcome to the Transparenz register explorer!"
FAREWELL_MESSAGE = "Bye!"
