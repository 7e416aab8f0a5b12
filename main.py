from __future__ import annotations

import argparse
import logging
import random
from functools import partial
from typing import Callable, List, Optional, Sequence, Tuple

import pygame

from constraints import Triple, symbols
from dlx import Knowing
from generator import best_of, generate_puzzle
from render import format_grid, puzzle_string
from solver import construct, solve
from gui import BG, draw_grid, draw_top_bar, window_size
from ui_state import AppState, View

logger = logging.getLogger(__name__)


def parse_clue(text: str) -> Triple:
    """'r,c,n' -> (r, c, n)"""
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected ROW,COL,SYMBOL, got {text!r}")
    try:
        r, c, n = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"clue values must be integers, got {text!r}")
    return r, c, n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve and generate Sudoku puzzles with Dancing Links.")
    parser.add_argument("--belts", type=int, default=3, help="rows of blocks (default 3)")
    parser.add_argument("--curtains", type=int, default=3, help="columns of blocks (default 3)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--gui", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="count", default=0)

    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="generate puzzles and keep the one with fewest clues")
    gen.add_argument("--trials", type=int, default=100)

    sol = sub.add_parser("solve", help="solve from given clues")
    sol.add_argument("clues", nargs="*", type=parse_clue, metavar="ROW,COL,SYMBOL")
    sol.add_argument("--seek", type=int, default=2, help="stop after this many solutions")
    sol.add_argument("--all", action="store_true", help="print every solution found")
    return parser


def run_generate(args: argparse.Namespace, rng: random.Random) -> Tuple[List[Triple], List[Triple]]:
    logger.info("generating %d puzzles (%dx%d blocks)", args.trials, args.belts, args.curtains)
    matrix = construct(args.belts, args.curtains)

    def show(trial: int, puzzle: List[Triple]):
        print(f"Puzzle {trial}: {puzzle_string(puzzle, args.belts, args.curtains)}")

    report = best_of(matrix, args.trials, rng, on_puzzle=show)
    best = report.best
    print(f"Best: {puzzle_string(best, args.belts, args.curtains)}")
    print(f"Min hints: {len(best)}")

    outcome = solve(matrix, best, seek=2)
    print(format_grid(best, args.belts, args.curtains))
    print(format_grid(outcome.found_solution, args.belts, args.curtains))
    print(f"Counts: {report.counts}")
    return best, outcome.found_solution


def run_solve(args: argparse.Namespace) -> Tuple[int, List[Triple], List[Triple]]:
    logger.info("solving from %d clues", len(args.clues))
    matrix = construct(args.belts, args.curtains)
    outcome = solve(matrix, args.clues, seek=args.seek, collect=args.all)

    print(format_grid(args.clues, args.belts, args.curtains))
    if outcome.feasibility is Knowing.NO:
        print("No solution.")
        return 1, args.clues, []

    if args.all:
        for i, found in enumerate(outcome.solutions, start=1):
            print(f"[{i}]: Solution found:")
            print(format_grid(found, args.belts, args.curtains))
    else:
        print(format_grid(outcome.found_solution, args.belts, args.curtains))
    print(f"Solutions: {outcome.solution_count}, unique: {outcome.uniqueness.value}")
    return 0, args.clues, outcome.found_solution


def run_viewer(
    belts: int,
    curtains: int,
    puzzle: List[Triple],
    solution: List[Triple],
    regenerate: Optional[Callable[[], Tuple[List[Triple], List[Triple]]]] = None,
):
    pygame.init()
    screen = pygame.display.set_mode(window_size(belts, curtains))
    pygame.display.set_caption("Sudoku")

    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 20)
    cell_font = pygame.font.SysFont("SF Pro Text", 24, bold=True)

    clock = pygame.time.Clock()
    app_state = AppState(puzzle, solution)

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    app_state.toggle()
                elif event.key == pygame.K_n and regenerate is not None:
                    app_state = AppState(*regenerate())
            elif event.type == pygame.MOUSEBUTTONDOWN:
                app_state.toggle()

        screen.fill(BG)
        if app_state.current_view == View.PUZZLE:
            subtitle = f"{len(app_state.puzzle)} clues - space shows solution"
        else:
            subtitle = "Solution - space shows puzzle"
        draw_top_bar(screen, title_font, label_font, f"{symbols(belts, curtains)}x{symbols(belts, curtains)} Sudoku", subtitle)
        draw_grid(screen, cell_font, app_state.shown(), belts, curtains, givens=app_state.puzzle)

        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.belts < 1 or args.curtains < 1:
        parser.error("--belts and --curtains must be positive")
    nums = symbols(args.belts, args.curtains)

    rng = random.Random(args.seed)

    if args.command == "generate":
        if args.trials < 1:
            parser.error("--trials must be positive")
        puzzle, solution = run_generate(args, rng)
        status = 0
        regenerate = partial(_fresh, args.belts, args.curtains, rng)
    else:
        if args.seek < 1:
            parser.error("--seek must be positive")
        for clue in args.clues:
            if not all(1 <= v <= nums for v in clue):
                parser.error(f"clue {clue} is outside a {nums}x{nums} grid")
        status, puzzle, solution = run_solve(args)
        regenerate = None

    if args.gui:
        run_viewer(args.belts, args.curtains, puzzle, solution, regenerate)
    return status


def _fresh(belts: int, curtains: int, rng: random.Random) -> Tuple[List[Triple], List[Triple]]:
    matrix = construct(belts, curtains)
    puzzle = generate_puzzle(matrix, rng)
    return puzzle, solve(matrix, puzzle, seek=1).found_solution


if __name__ == "__main__":
    raise SystemExit(main())
