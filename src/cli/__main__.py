"""Run the interactive explorer with ``python -m cli <quarter>...``."""

from __future__ import annotations

import sys

from cli.main import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
