"""Line-oriented prompt loop.

This module reads commands until the user quits or input ends.
"""

from __future__ import annotations

import sys
from typing import TextIO

from cli.commands import Session, run_command
from core.constants import FAREWELL_MESSAGE, PROMPT_HINT, PROMPT_TEXT, WELCOME_MESSAGE


def run_repl(session: Session, stdin: TextIO | None = None) -> None:
    """Run the prompt loop for a session.

    Args:
        session: Session whose ``running`` flag ends the loop.
        stdin: Optional input stream, defaults to ``sys.stdin``.
    """
    stream = stdin or sys.stdin
    print(WELCOME_MESSAGE)
    while session.running:
        print(PROMPT_HINT)
        print(PROMPT_TEXT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            break
        run_command(session, line)
    print(FAREWELL_MESSAGE)
