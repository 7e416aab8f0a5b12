# solver.py
# Combines everything; solves a Sudoku from a list of given clues

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from constraints import Triple
from dlx import DancingLinks, Knowing, RandomTieBreak, SearchContext, choose_column_well

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveOutcome:
    found_solution: List[Triple]
    solution_count: int
    uniqueness: Knowing
    feasibility: Knowing
    solutions: List[List[Triple]] = field(default_factory=list)  # only with collect=True


def construct(belts: int, curtains: int) -> DancingLinks:
    """Build the exact-cover matrix for a Sudoku with belts x curtains blocks."""
    return DancingLinks(belts, curtains)


def solve(
    matrix: DancingLinks,
    clues: Iterable[Triple] = (),
    seek: int = 1,
    randomized: bool = False,
    collect: bool = False,
    rng: Optional[random.Random] = None,
) -> SolveOutcome:
    """
    Apply the clues, search for up to `seek` completions, then restore the matrix.

    With seek=2 the outcome tells whether the clues determine a unique grid.
    """
    if seek < 1:
        raise ValueError(f"seek must be at least 1, got {seek}")

    given: List[Triple] = [tuple(clue) for clue in clues]  # type: ignore[misc]
    policy = RandomTieBreak(rng) if randomized else choose_column_well
    ctx = SearchContext(seek=seek, policy=policy, collect=collect, proposed=list(given))

    if matrix.pre_dance(given):
        matrix.search(ctx)
        matrix.post_dance(given)
    else:
        ctx.feasibility = Knowing.NO

    logger.debug(
        "solve: %d clues, seek=%d -> %d solution(s), unique=%s, feasible=%s",
        len(given),
        seek,
        ctx.count,
        ctx.uniqueness.value,
        ctx.feasibility.value,
    )
    return SolveOutcome(
        found_solution=ctx.solution,
        solution_count=ctx.count,
        uniqueness=ctx.uniqueness,
        feasibility=ctx.feasibility,
        solutions=ctx.solutions,
    )
