from __future__ import annotations

import argparse
import json
import logging
import random
from typing import Any, Dict, List

from tqdm import tqdm

from colorlock.config import Difficulty, GameConfig
from colorlock.io import load_puzzles
from colorlock.regions import GameStatus
from colorlock.session import PuzzleSession


def run_hint_eval(
    puzzles_path: str,
    sample_size: int = 20,
    seed: int = 0,
    max_moves: int = 50,
    difficulty: str | None = None,
    progress: bool = True,
) -> Dict[str, Any]:
    """Play sampled puzzles by always following the hint and summarize how it went."""
    puzzles = load_puzzles(puzzles_path)
    keys = sorted(puzzles.keys())
    rnd = random.Random(seed)
    rnd.shuffle(keys)
    sample = keys[: max(1, min(sample_size, len(keys)))]

    config = GameConfig(difficulty=Difficulty(difficulty) if difficulty else None, seed=seed)

    solved = 0
    lost = 0
    per_puzzle: List[Dict[str, Any]] = []
    for key in tqdm(sample, desc="Playing by hints", disable=not progress):
        puzzle = puzzles[key]
        session = PuzzleSession(puzzle, config)
        trace_hints = 0
        solver_hints = 0
        stuck = False
        while not session.status.is_terminal and session.move_count < max_moves:
            hint = session.hint()
            if hint is None:
                stuck = True
                break
            if hint.source == "trace":
                trace_hints += 1
            else:
                solver_hints += 1
            result = session.move(hint.row, hint.col, hint.color)
            if not result.accepted:
                stuck = True
                break

        if session.status is GameStatus.SOLVED:
            solved += 1
        elif session.status is GameStatus.LOST:
            lost += 1
        over_algo = None
        if puzzle.algo_score is not None and session.status is GameStatus.SOLVED:
            over_algo = session.move_count - puzzle.algo_score
        per_puzzle.append(
            {
                "puzzle": key,
                "status": session.status.value,
                "moves": session.move_count,
                "algo_score": puzzle.algo_score,
                "moves_over_algo": over_algo,
                "trace_hints": trace_hints,
                "solver_hints": solver_hints,
                "stuck": stuck,
            }
        )

    summary = {
        "num_puzzles": len(sample),
        "solved": solved,
        "lost": lost,
        "solve_rate": (solved / len(sample)) if sample else 0.0,
        "details": per_puzzle,
    }
    return summary


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Play puzzles by following hints and report the outcome")
    parser.add_argument("--puzzles", required=True, help="JSON file of puzzles keyed by date")
    parser.add_argument("--sample_size", type=int, default=20)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max_moves", type=int, default=50)
    parser.add_argument("--difficulty", type=str, default=None, choices=[d.value for d in Difficulty])
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    summary = run_hint_eval(
        puzzles_path=args.puzzles,
        sample_size=args.sample_size,
        seed=args.seed,
        max_moves=args.max_moves,
        difficulty=args.difficulty,
    )
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
