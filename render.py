# render.py
# Text output for clue lists and solutions

from __future__ import annotations

from typing import Iterable, List

from constraints import Triple, symbols


def _cells(triples: Iterable[Triple], belts: int, curtains: int) -> List[List[str]]:
    nums = symbols(belts, curtains)
    grid = [["" for _ in range(nums)] for _ in range(nums)]
    for r, c, n in triples:
        grid[r - 1][c - 1] = str(n)
    return grid


def puzzle_string(triples: Iterable[Triple], belts: int, curtains: int) -> str:
    """Row-major, one character per cell, '.' where nothing is given."""
    return "".join(cell or "." for row in _cells(triples, belts, curtains) for cell in row)


def _rule(left: str, right: str, heavy: str, light: str, fill: str, belts: int, curtains: int, width: int) -> str:
    block = light.join([fill * width] * belts)
    return left + heavy.join([block] * curtains) + right


def format_grid(triples: Iterable[Triple], belts: int, curtains: int) -> str:
    """
    Box-drawing picture of the grid.

    Heavy lines separate blocks: every `curtains` rows and every `belts` columns.
    """
    grid = _cells(triples, belts, curtains)
    width = max([2] + [len(cell) for row in grid for cell in row])

    lines: List[str] = []
    for r_i, row in enumerate(grid):
        if r_i == 0:
            lines.append(_rule("╔", "╗", "╦", "╤", "═", belts, curtains, width))
        elif r_i % curtains == 0:
            lines.append(_rule("╠", "╣", "╬", "╪", "═", belts, curtains, width))
        else:
            lines.append(_rule("╟", "╢", "╫", "┼", "─", belts, curtains, width))

        line = ""
        for c_i, cell in enumerate(row):
            line += "║" if c_i % belts == 0 else "│"
            line += cell.rjust(width)
        lines.append(line + "║")

    lines.append(_rule("╚", "╝", "╩", "╧", "═", belts, curtains, width))
    return "\n".join(lines)
