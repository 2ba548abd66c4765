"""Transparenz CLI entry point.

This module parses process arguments, loads the startup quarters
and hands control to the interactive prompt.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence, TextIO

from cli.commands import Session, print_load_outcome
from cli.repl import run_repl
from core.config import TransparenzConfig, parse_api_url
from core.errors import TransparenzConfigError
from core.logging_config import configure_logging
from store.register_client import RegisterClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="transparenz",
        description="Explore media-transparency register data at an interactive prompt",
    )
    parser.add_argument(
        "quarters",
        nargs="*",
        help="Quarter codes to load before the prompt appears, e.g. 20231",
    )
    parser.add_argument("--api-url", help="Override TRANSPARENZ_API_URL for this session")
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    """Run the Transparenz CLI.

    Args:
        argv: Optional argument vector.
        stdin: Optional prompt input stream.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.api_url)
    except TransparenzConfigError as error:
        parser.error(str(error))
    session = Session(client=client)
    if args.quarters:
        print_load_outcome(client.load(args.quarters))
    run_repl(session, stdin)
    return 0


def _build_client(api_url: str | None) -> RegisterClient:
    """Build SDK client with optional endpoint override.

    Args:
        api_url: Optional override URL.

    Returns:
        Configured SDK client.
    """
    config = TransparenzConfig.from_env()
    if api_url:
        config = replace(config, api_url=parse_api_url(api_url, source="--api-url"))
    configure_logging(config.log_level)
    return RegisterClient(config)
