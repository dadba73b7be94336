"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console

from . import cli
from .keymap import key_events
from .report import results_table

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="pyskk", description="Parse key chord notation.")
    parser.add_argument("notation", nargs="*", help="notation strings, e.g. 'C-S-r'")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not args.notation:
        cli.main()
        return

    console = Console()
    for notation in args.notation:
        console.print(results_table(notation, key_events(notation)))
