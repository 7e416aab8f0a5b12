# generator.py
# Random puzzles with a locally minimal set of clues

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from constraints import Triple
from dlx import DancingLinks, Knowing
from solver import solve

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    best: List[Triple]
    counts: List[int]


def generate_puzzle(matrix: DancingLinks, rng: Optional[random.Random] = None) -> List[Triple]:
    """
    Fill a random grid, then drop clues one at a time in random order,
    keeping each clue whose removal would allow a second solution.
    """
    rng = rng if rng is not None else random.Random()

    full = solve(matrix, seek=1, randomized=True, rng=rng)
    clues = list(full.found_solution)
    rng.shuffle(clues)

    for i in reversed(range(len(clues))):
        gone = clues.pop(i)
        outcome = solve(matrix, clues, seek=2)
        if outcome.uniqueness is Knowing.NO:
            clues.append(gone)

    logger.debug("generated puzzle with %d clues", len(clues))
    return clues


def best_of(
    matrix: DancingLinks,
    trials: int,
    rng: Optional[random.Random] = None,
    on_puzzle: Optional[Callable[[int, List[Triple]], None]] = None,
) -> GenerationReport:
    """
    Generate `trials` puzzles and keep the one with the fewest clues.
    on_puzzle, if given, is called with the trial number and each puzzle as it is made.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")
    rng = rng if rng is not None else random.Random()

    best: List[Triple] = []
    counts: List[int] = []
    for trial in range(trials):
        puzzle = generate_puzzle(matrix, rng)
        counts.append(len(puzzle))
        if on_puzzle is not None:
            on_puzzle(trial + 1, puzzle)
        if trial == 0 or len(puzzle) < len(best):
            best = puzzle
            logger.info("trial %d: new minimum of %d clues", trial + 1, len(puzzle))

    return GenerationReport(best=best, counts=counts)
