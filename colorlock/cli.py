from __future__ import annotations

import argparse
import json
import logging
from typing import Any, List, Tuple

from .autocomplete import autocomplete, can_autocomplete
from .config import Difficulty, GameConfig
from .errors import PuzzleDefinitionError
from .grid import Color, parse_color
from .io import load_puzzle
from .session import PuzzleSession


def parse_moves(text: str) -> List[Tuple[int, int, Color]]:
    """Parse "r,c,color;r,c,color" into move triples."""
    moves = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(",")]
        if len(parts) != 3:
            raise argparse.ArgumentTypeError(f"bad move {chunk!r}, expected row,col,color")
        try:
            color = parse_color(parts[2], field="moves")
        except PuzzleDefinitionError as e:
            raise argparse.ArgumentTypeError(f"bad move {chunk!r}: {e}") from e
        moves.append((int(parts[0]), int(parts[1]), color))
    return moves


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Play a color-lock puzzle from the command line")
    parser.add_argument("--json", required=True, help="Path to puzzle JSON file")
    parser.add_argument("--date", default=None, help="Puzzle date key in the JSON file")
    parser.add_argument("--moves", type=parse_moves, default=[], help="Moves to replay, e.g. '0,1,red;2,2,blue'")
    parser.add_argument("--hint", action="store_true", help="Print a hint for the resulting position")
    parser.add_argument("--autocomplete", action="store_true", help="Finish the board when it is practically won")
    parser.add_argument("--difficulty", type=str, default=None, choices=[d.value for d in Difficulty])
    parser.add_argument("--seed", type=int, default=None, help="Seed for hint tie-breaking")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    puzzle = load_puzzle(args.json, args.date)
    config = GameConfig(
        difficulty=Difficulty(args.difficulty) if args.difficulty else None,
        seed=args.seed,
    )
    session = PuzzleSession(puzzle, config)

    declined = []
    for row, col, color in args.moves:
        result = session.move(row, col, color)
        if not result.accepted:
            declined.append({"move": [row, col, color.value], "reason": result.reason.value})

    out = {"declined": declined}
    if args.autocomplete:
        out["autocomplete_moves"] = autocomplete(session) if can_autocomplete(session) else None
    if args.hint:
        hint = session.hint()
        out["hint"] = hint.to_dict() if hint is not None else None
    out["state"] = session.state().to_dict()
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
