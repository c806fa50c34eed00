"""Console entry point: replay recorded board readings through a session.

Each input line holds one placement (the piece-placement field of FEN).
Blank lines and lines starting with ``#`` are skipped::

    boardwatch readings.txt
    cat readings.txt | boardwatch --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO, assert_never

from boardwatch.core.errors import ParseError
from boardwatch.core.placement import PiecesPlacement
from boardwatch.game.session import BoardSession, InProgress, SessionState, SettingUp
from boardwatch.game.settings import SessionSettings
from boardwatch.game.status import Errors, Lifted, Moved, PositionStatus, Ready
from boardwatch.render.ascii_board import AsciiBoard

_LOGGER = logging.getLogger("boardwatch")


def describe_status(status: PositionStatus) -> str:
    """One-line human description of a position status."""
    if isinstance(status, Ready):
        return "ready"
    if isinstance(status, Lifted):
        return f"lifted {status.piece} from {status.square}"
    if isinstance(status, Errors):
        squares = ", ".join(str(target.square) for target in status.targets)
        return f"errors on {squares}"
    if isinstance(status, Moved):
        return "moved"
    assert_never(status)


def _print_state(state: SessionState, out: TextIO) -> None:
    if isinstance(state, SettingUp):
        print(f"setting up: {state.placement.to_fen()}", file=out)
        return
    if isinstance(state, InProgress):
        position = state.position
        print(AsciiBoard.from_position(position).render(), file=out)
        print(
            f"{describe_status(position.status)} "
            f"({position.turn_side.color} to move)",
            file=out,
        )
        print(file=out)
        return
    assert_never(state)


def replay(
    lines: Iterable[str], session: BoardSession, *, start_immediately: bool = False
) -> int:
    """Feed every reading in *lines* to *session*; returns the number of bad lines.

    With *start_immediately* the first valid reading is committed as the
    starting placement instead of waiting for the standard one.
    """
    rejected = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            placement = PiecesPlacement.from_fen(line)
        except ParseError as exc:
            _LOGGER.error("Line %d skipped: %s", number, exc)
            rejected += 1
            continue
        session.observe(placement)
        if start_immediately and isinstance(session.state, SettingUp):
            session.start()
    return rejected


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boardwatch",
        description="Reconcile recorded board placements into a chess game.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="file with one FEN placement per line (default: stdin)",
    )
    parser.add_argument(
        "--no-auto-start",
        action="store_true",
        help="start from the first reading instead of the standard placement",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log every classification"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the replay tool and return its exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    session = BoardSession(SessionSettings(auto_start=not args.no_auto_start))
    session.on_state_change(lambda state: _print_state(state, sys.stdout))

    if args.file is None:
        rejected = replay(sys.stdin, session, start_immediately=args.no_auto_start)
    else:
        with args.file.open(encoding="utf-8") as fh:
            rejected = replay(fh, session, start_immediately=args.no_auto_start)

    position = session.position
    if position is not None:
        ending = position.game_ending()
        if ending is not None:
            print(f"game over: {ending.name.lower().replace('_', ' ')}")
        print(position.to_fen())
        print(position.to_pgn())
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
