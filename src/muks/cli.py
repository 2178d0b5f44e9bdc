"""Command-line entry point."""

from __future__ import annotations

import argparse
import signal
from typing import Optional, Sequence

from muks import __version__
from muks.adapters.textual.app import run_app
from muks.config import load_config
from muks.runtime import telemetry
from muks.session import EditorSession

IGNORED_SIGNALS = ("SIGINT", "SIGTSTP", "SIGQUIT")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="muks",
        description="Modal terminal text editor with C syntax highlighting.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=None,
        help="File to open; omit to start an unnamed empty buffer",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (default: $MUKS_LOG_FILE, or no logging)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (default: $MUKS_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def ignore_signals() -> None:
    """Keep terminal job-control keys from ending or suspending the editor."""

    for name in IGNORED_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, signal.SIG_IGN)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_file or args.log_level:
        telemetry.configure(level=args.log_level, log_file=args.log_file)
    ignore_signals()

    session = EditorSession.open(args.filename, config=load_config())
    telemetry.record_event(
        "session.start",
        data={"filename": args.filename or "", "lines": session.buffer.num_lines},
    )

    return run_app(session)


__all__ = ["build_parser", "ignore_signals", "main"]
