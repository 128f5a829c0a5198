from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .board import Board
from .game import ApplyMarkError, Game
from .square import Square
from .symmetry import symmetry_info

STYLES = ("ascii", "emoji")


def _default_style() -> str:
    style = os.getenv("XO_STYLE", "ascii")
    return style if style in STYLES else "ascii"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xo", description="Tic-tac-toe board tools")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_show = sub.add_parser(
        "show",
        help="Show a board and its state (9 digits, 0=empty,1=X,2=O)",
    )
    p_show.add_argument("--board", required=True, help="Board string, e.g., 100020000")
    p_show.add_argument(
        "--style",
        choices=STYLES,
        default=_default_style(),
        help="Rendering style (default: $XO_STYLE or ascii)",
    )

    p_sym = sub.add_parser(
        "symmetry",
        help="Show symmetry info for a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_sym.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sym.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_rep = sub.add_parser("replay", help="Replay a comma-separated list of moves from an empty board")
    p_rep.add_argument("--moves", required=True, help='Squares by name or index, e.g. "bb,aa,cc"')
    p_rep.add_argument(
        "--unchecked", action="store_true", help="Skip legality checks while replaying"
    )
    p_rep.add_argument(
        "--style",
        choices=STYLES,
        default=_default_style(),
        help="Rendering style (default: $XO_STYLE or ascii)",
    )

    return p


def _parse_board(raw: Optional[str]) -> Optional[Board]:
    try:
        return Board.from_string(raw or "")
    except ValueError as exc:
        logging.error("%s", exc)
        return None


def _parse_moves(raw: str) -> Optional[List[Square]]:
    squares = []
    for part in raw.split(","):
        if not part.strip():
            continue
        square = Square.parse(part)
        if square is None:
            logging.error("Invalid square: %r", part.strip())
            return None
        squares.append(square)
    return squares


def _render(board: Board, style: str) -> str:
    return board.emoji if style == "emoji" else board.ascii


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("xo"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "show":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        logging.info(
            "winner=%s valid=%s finished=%s hash=%d",
            b.winner,
            b.is_valid,
            b.is_finished,
            b.hash_value,
        )
        print(_render(b, ns.style))
        return 0

    if ns.cmd == "symmetry":
        import sys as _sys
        if ns.stdin:
            import csv as _csv
            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "canonical_form", "orbit_size", "canonical_op"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    b = Board.from_string(raw)
                except ValueError:
                    continue
                if not b.is_valid:
                    continue
                info = symmetry_info(b)
                w.writerow([raw, info['canonical_form'], info['orbit_size'], info['canonical_op']])
            return 0
        b = _parse_board(ns.board)
        if b is None:
            return 2
        if not b.is_valid:
            logging.error("Board does not have valid mark counts.")
            return 2
        info = symmetry_info(b)
        logging.info(
            "canonical_form=%s orbit_size=%d op=%s",
            info['canonical_form'],
            info['orbit_size'],
            info['canonical_op'],
        )
        return 0

    if ns.cmd == "replay":
        squares = _parse_moves(ns.moves)
        if squares is None:
            return 2
        if ns.unchecked:
            game = Game.from_unchecked_history(squares)
        else:
            try:
                game = Game.from_history(squares)
            except ApplyMarkError as exc:
                logging.error("Illegal move: %s", exc)
                return 2
        logging.info(
            "moves=%d winner=%s finished=%s next=%s",
            len(game.undo_history),
            game.winner,
            game.is_finished,
            game.current_mark,
        )
        print(_render(game.board, ns.style))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
