# constraints.py
# Grid geometry and constraint column numbering for generalized Sudoku

from __future__ import annotations

from typing import Iterator

# (row, column, symbol), all 1-based
Triple = tuple[int, int, int]

# Constraint families in the order their columns are numbered.
FAMILIES: tuple[str, ...] = ("cell", "row", "column", "block")


def symbols(belts: int, curtains: int) -> int:
    """Side length of the grid (and number of distinct symbols)."""
    return belts * curtains


def constraint_count(belts: int, curtains: int) -> int:
    nums = symbols(belts, curtains)
    return len(FAMILIES) * nums * nums


def possibility_count(belts: int, curtains: int) -> int:
    nums = symbols(belts, curtains)
    return nums * nums * nums


def node_count(belts: int, curtains: int) -> int:
    return len(FAMILIES) * possibility_count(belts, curtains)


def capacity(belts: int, curtains: int) -> int:
    """Root + one header per constraint + one node per incidence."""
    return 1 + constraint_count(belts, curtains) + node_count(belts, curtains)


def block_of(r: int, c: int, belts: int, curtains: int) -> int:
    # Blocks are numbered left to right, top to bottom, starting at 1.
    return ((r - 1) // curtains) * curtains + ((c - 1) // belts) + 1


def constraint_indices(r: int, c: int, n: int, belts: int, curtains: int) -> tuple[int, int, int, int]:
    """Column numbers (cell, row, column, block) satisfied by placing n at (r, c)."""
    nums = symbols(belts, curtains)
    area = nums * nums
    b = block_of(r, c, belts, curtains)

    cell = (r - 1) * nums + c
    row = area + (r - 1) * nums + n
    col = 2 * area + (c - 1) * nums + n
    block = 3 * area + (b - 1) * nums + n
    return cell, row, col, block


def candidates(belts: int, curtains: int) -> Iterator[Triple]:
    """Every (r, c, n) placement, row-major then by symbol."""
    nums = symbols(belts, curtains)
    for r in range(1, nums + 1):
        for c in range(1, nums + 1):
            for n in range(1, nums + 1):
                yield (r, c, n)
