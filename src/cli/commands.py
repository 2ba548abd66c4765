"""Prompt command parsing and handlers.

This module maps typed command names onto handler functions. Each
handler receives the session explicitly and prints its report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from core.constants import PARAGRAPH_CODES, PARAGRAPH_SIGN
from core.errors import (
    CommandSyntaxError,
    InvalidAmountError,
    InvalidParagraphError,
    TransparenzError,
)
from core.types import DetailsQuery, LoadOutcome, SearchQuery, TopQuery
from query.accessors import parse_role
from query.report import format_ranked_rows
from store.register_client import RegisterClient

HELP_LINES = (
    "quit | exit ... quits the program",
    "help ... shows this message",
    "payers ... prints a sorted list of all payers",
    "recipients ... prints a sorted list of all recipients",
    "quarters ... prints a list of loaded quarters",
    "load <quarter>... ... loads the given quarters, e.g. load 20231 20232",
    "reload [<quarter>...] ... clears all data and loads the given or currently loaded quarters",
    "top n <payers|recipients> <§2|§4|§31> ... prints the top n payers/recipients for given paragraph",
    "search <payers|recipients> searchTerm ... prints a list of payers/recipients containing the given search term",
    "details <payers|recipients> organization ... prints a list of all payments payed or received by the given payer/recipient",
)


@dataclass
class Session:
    """Mutable state of one prompt session.

    Attributes:
        client: SDK client owning the record store.
        running: False once the user asked to quit.
    """

    client: RegisterClient
    running: bool = True


CommandHandler = Callable[[Session, Sequence[str]], None]


def run_command(session: Session, line: str) -> None:
    """Tokenize and execute one prompt line.

    Argument errors are printed and never stop the session.

    Args:
        session: Current session.
        line: Raw input line.
    """
    tokens = line.split()
    if not tokens:
        return
    handler = COMMAND_HANDLERS.get(tokens[0].lower(), _unknown_command)
    try:
        handler(session, tokens[1:])
    except TransparenzError as error:
        print(error)


def print_load_outcome(outcome: LoadOutcome) -> None:
    """Print one line per failed quarter of a load."""
    error = outcome.error
    if error is None:
        return
    print(f"An error occurred while loading data ({len(error.exceptions)} failed):")
    for failure in error.exceptions:
        print(f"\t{failure}")


def parse_top_arguments(arguments: Sequence[str]) -> TopQuery:
    """Parse ``top n <payers|recipients> <paragraph>`` arguments.

    Args:
        arguments: Tokens after the command name.

    Returns:
        Validated top query.

    Raises:
        CommandSyntaxError: If not exactly three arguments are given.
        InvalidAmountError: If ``n`` is not a positive integer.
        InvalidRoleError: If the role is unknown.
        InvalidParagraphError: If the paragraph is not 2, 4 or 31.
    """
    if len(arguments) != 3:
        raise CommandSyntaxError(
            "Wrong syntax for command top: expected top n <payers|recipients> <paragraph>."
        )
    count_value, role_value, paragraph_value = arguments
    return TopQuery(
        count=_parse_count(count_value),
        role=parse_role(role_value),
        paragraph=parse_paragraph(paragraph_value),
    )


def parse_search_arguments(arguments: Sequence[str]) -> SearchQuery:
    """Parse ``search <payers|recipients> <term...>`` arguments."""
    if len(arguments) < 2:
        raise CommandSyntaxError("At least two parameters need to be provided.")
    return SearchQuery(role=parse_role(arguments[0]), term=" ".join(arguments[1:]).lower())


def parse_details_arguments(arguments: Sequence[str]) -> DetailsQuery:
    """Parse ``details <payers|recipients> <organization...>`` arguments."""
    if len(arguments) < 2:
        raise CommandSyntaxError("At least two parameters need to be provided.")
    return DetailsQuery(role=parse_role(arguments[0]), organization=" ".join(arguments[1:]))


def parse_paragraph(value: str) -> int:
    """Parse a paragraph code, accepting an optional leading ``§``.

    Raises:
        InvalidParagraphError: If the value is not 2, 4 or 31.
    """
    digits = value[len(PARAGRAPH_SIGN):] if value.startswith(PARAGRAPH_SIGN) else value
    if not _is_ascii_number(digits) or int(digits) not in PARAGRAPH_CODES:
        raise InvalidParagraphError(value)
    return int(digits)


def _parse_count(value: str) -> int:
    if not _is_ascii_number(value):
        raise InvalidAmountError(value)
    count = int(value)
    if count < 1:
        raise InvalidAmountError(value)
    return count


def _is_ascii_number(value: str) -> bool:
    """Return whether a token is made only of ASCII decimal digits."""
    return value.isascii() and value.isdigit()


def _help_command(session: Session, arguments: Sequence[str]) -> None:
    for line in HELP_LINES:
        print(f"\t{line}")


def _exit_command(session: Session, arguments: Sequence[str]) -> None:
    session.running = False


def _payers_command(session: Session, arguments: Sequence[str]) -> None:
    _print_listing(session.client.payers())


def _recipients_command(session: Session, arguments: Sequence[str]) -> None:
    _print_listing(session.client.recipients())


def _quarters_command(session: Session, arguments: Sequence[str]) -> None:
    _print_listing(session.client.quarters())


def _load_command(session: Session, arguments: Sequence[str]) -> None:
    print_load_outcome(session.client.load(arguments))


def _reload_command(session: Session, arguments: Sequence[str]) -> None:
    print_load_outcome(session.client.reload(arguments))


def _top_command(session: Session, arguments: Sequence[str]) -> None:
    query = parse_top_arguments(arguments)
    entries = session.client.top(query)
    for row in format_ranked_rows(entries, limit=query.count):
        print(f"\t{row}")


def _search_command(session: Session, arguments: Sequence[str]) -> None:
    query = parse_search_arguments(arguments)
    for rank, name in enumerate(session.client.search(query), 1):
        print(f"\t{rank}. {name}")


def _details_command(session: Session, arguments: Sequence[str]) -> None:
    report = session.client.details(parse_details_arguments(arguments))
    for paragraph, entries in report.sections.items():
        print(f"\tPayments {PARAGRAPH_SIGN}{paragraph}:")
        for row in format_ranked_rows(entries):
            print(f"\t{row}")


def _unknown_command(session: Session, arguments: Sequence[str]) -> None:
    print("Unknown command")


def _print_listing(values: Sequence[str]) -> None:
    for value in values:
        print(f"\t{value}")


COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "help": _help_command,
    "exit": _exit_command,
    "quit": _exit_command,
    "payers": _payers_command,
    "recipients": _recipients_command,
    "quarters": _quarters_command,
    "load": _load_command,
    "reload": _reload_command,
    "top": _top_command,
    "search": _search_command,
    "details": _details_command,
}
