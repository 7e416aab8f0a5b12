# dlx.py
# Algorithm X (Dancing Links) over the Sudoku exact-cover matrix

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional, Sequence

from constraints import (
    Triple,
    candidates,
    constraint_count,
    constraint_indices,
)

logger = logging.getLogger(__name__)

# Handle of the header list root. Column headers follow it, so header n has handle n.
ROOT = 0

NO_TAG: Triple = (0, 0, 0)


class Knowing(Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class Node:
    """One link record. Every neighbour is a handle into the arena."""

    def __init__(
        self,
        index: int,
        left: int,
        right: int,
        up: int,
        down: int,
        column: int,
        tag: Triple = NO_TAG,
    ):
        self.index = index
        self.left = left
        self.right = right
        self.up = up
        self.down = down
        self.column = column
        self.size = 0  # headers only
        self.tag = tag

    def __repr__(self) -> str:
        return (
            f"Node({self.index}, l={self.left}, r={self.right}, u={self.up}, "
            f"d={self.down}, c={self.column}, size={self.size}, tag={self.tag})"
        )


ColumnPolicy = Callable[["DancingLinks"], int]


def choose_column_well(links: DancingLinks) -> int:
    # Heuristic: choose column with smallest size, first one wins ties.
    nodes = links.nodes
    best = nodes[ROOT].right
    smallest = nodes[best].size
    c = nodes[best].right
    while c != ROOT:
        if nodes[c].size < smallest:
            smallest = nodes[c].size
            best = c
        c = nodes[c].right
    return best


class RandomTieBreak:
    """Smallest-column heuristic, choosing uniformly among the tied columns."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, links: DancingLinks) -> int:
        nodes = links.nodes
        smallest: Optional[int] = None
        tied: list[int] = []
        c = nodes[ROOT].right
        while c != ROOT:
            size = nodes[c].size
            if smallest is None or size < smallest:
                smallest = size
                tied = [c]
            elif size == smallest:
                tied.append(c)
            c = nodes[c].right
        return self.rng.choice(tied)


@dataclass
class SearchContext:
    """State owned by a single search: the bound, the policy and what was found."""

    seek: int
    policy: ColumnPolicy = choose_column_well
    collect: bool = False
    proposed: list[Triple] = field(default_factory=list)
    solution: list[Triple] = field(default_factory=list)
    solutions: list[list[Triple]] = field(default_factory=list)
    count: int = 0
    uniqueness: Knowing = Knowing.UNKNOWN
    feasibility: Knowing = Knowing.UNKNOWN

    def record(self, depth: int) -> None:
        self.count += 1
        self.feasibility = Knowing.YES
        self.solution = list(self.proposed)
        if self.count > 1:
            self.uniqueness = Knowing.NO
        if self.collect:
            self.solutions.append(self.solution)
            logger.debug("solution %d found at depth %d", self.count, depth)

    def finish(self) -> None:
        if self.count == 1 and self.seek > 1:
            self.uniqueness = Knowing.YES
        elif self.count == 0:
            self.feasibility = Knowing.NO


class DancingLinks:
    """
    Toroidal sparse matrix for a belts x curtains Sudoku.

    The arena layout is fixed: the root at handle 0, then the column headers
    at handles 1..constraints, then four nodes per candidate placement.
    Nodes are never removed from the arena; covering only rewires links.
    """

    def __init__(self, belts: int, curtains: int):
        for name, value in (("belts", belts), ("curtains", curtains)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self.belts = belts
        self.curtains = curtains
        self.nodes: list[Node] = []

        self._insert(Node(ROOT, ROOT, ROOT, ROOT, ROOT, ROOT))
        self._populate_headers()
        self._populate_rows()
        logger.debug(
            "built %dx%d matrix: %d columns, %d nodes",
            belts,
            curtains,
            self.constraints,
            len(self.nodes),
        )

    @property
    def constraints(self) -> int:
        return constraint_count(self.belts, self.curtains)

    def __len__(self) -> int:
        return len(self.nodes)

    # -- construction -------------------------------------------------------

    def _insert(self, node: Node) -> int:
        self.nodes.append(node)
        return node.index

    def _link_new(self, key: int) -> None:
        # Make the neighbours of a freshly inserted node point back at it.
        nodes = self.nodes
        node = nodes[key]
        nodes[node.left].right = key
        nodes[node.right].left = key
        nodes[node.up].down = key
        nodes[node.down].up = key
        if key != node.column:
            nodes[node.column].size += 1

    def _populate_headers(self) -> None:
        # Header n sits at handle n and is appended at the end of the header list.
        for n in range(1, self.constraints + 1):
            self._link_new(self._insert(Node(n, n - 1, ROOT, n, n, n)))

    def _populate_rows(self) -> None:
        for tag in candidates(self.belts, self.curtains):
            self._insert_row(tag)

    def _insert_row(self, tag: Triple) -> None:
        nodes = self.nodes
        first: Optional[int] = None
        for column in self.indices(tag):
            key = len(nodes)
            if first is None:
                node = Node(key, key, key, nodes[column].up, column, column, tag)
                first = key
            else:
                # Insert at the end of the row, just left of the first node.
                node = Node(key, nodes[first].left, first, nodes[column].up, column, column, tag)
            self._insert(node)
            self._link_new(key)

    def indices(self, tag: Triple) -> tuple[int, int, int, int]:
        r, c, n = tag
        return constraint_indices(r, c, n, self.belts, self.curtains)

    # -- inspection ---------------------------------------------------------

    def live_headers(self) -> Iterator[int]:
        nodes = self.nodes
        c = nodes[ROOT].right
        while c != ROOT:
            yield c
            c = nodes[c].right

    def header_is_live(self, column: int) -> bool:
        return any(c == column for c in self.live_headers())

    def column_rows(self, column: int) -> Iterator[int]:
        nodes = self.nodes
        i = nodes[column].down
        while i != column:
            yield i
            i = nodes[i].down

    def snapshot(self) -> tuple[tuple[int, int, int, int, int, int], ...]:
        """Every link and size in the arena, for before/after comparisons."""
        return tuple(
            (node.left, node.right, node.up, node.down, node.column, node.size)
            for node in self.nodes
        )

    # -- cover / uncover ----------------------------------------------------

    def cover(self, column: int) -> None:
        nodes = self.nodes
        col = nodes[column]
        nodes[col.right].left = col.left
        nodes[col.left].right = col.right
        i = col.down
        while i != column:
            j = nodes[i].right
            while j != i:
                node = nodes[j]
                nodes[node.down].up = node.up
                nodes[node.up].down = node.down
                nodes[node.column].size -= 1
                j = node.right
            i = nodes[i].down

    def uncover(self, column: int) -> None:
        nodes = self.nodes
        col = nodes[column]
        i = col.up
        while i != column:
            j = nodes[i].left
            while j != i:
                node = nodes[j]
                nodes[node.column].size += 1
                nodes[node.down].up = j
                nodes[node.up].down = j
                j = node.left
            i = nodes[i].up
        nodes[col.right].left = column
        nodes[col.left].right = column

    # -- search -------------------------------------------------------------

    def search(self, ctx: SearchContext) -> SearchContext:
        self._dance(ctx)
        ctx.finish()
        return ctx

    def _dance(self, ctx: SearchContext) -> None:
        # One frame per chosen column: [column, row being tried or None before the first].
        nodes = self.nodes
        frames: list[list] = []
        entering = True

        while True:
            if entering:
                entering = False
                if nodes[ROOT].right == ROOT:
                    ctx.record(len(frames))
                else:
                    column = ctx.policy(self)
                    if nodes[column].size > 0:
                        self.cover(column)
                        frames.append([column, None])

            if not frames:
                return

            frame = frames[-1]
            column, r = frame
            if r is None:
                r = nodes[column].down
            else:
                # Back from the row tried last: undo it before moving down.
                ctx.proposed.pop()
                j = nodes[r].left
                while j != r:
                    self.uncover(nodes[j].column)
                    j = nodes[j].left
                r = nodes[r].down

            if r != column and ctx.count < ctx.seek:
                frame[1] = r
                row = nodes[r]
                ctx.proposed.append(row.tag)

                j = row.right
                while j != r:
                    self.cover(nodes[j].column)
                    j = nodes[j].right
                entering = True
            else:
                self.uncover(column)
                frames.pop()

    # -- given clues --------------------------------------------------------

    def pre_dance(self, clues: Sequence[Triple]) -> bool:
        """
        Cover the columns of every clue as if it had been chosen by the search.

        Returns False when a clue needs a column an earlier clue already
        covered; in that case everything done so far is rolled back.
        """
        for done, clue in enumerate(clues):
            indices = self.indices(clue)
            for pos, column in enumerate(indices):
                if self.header_is_live(column):
                    self.cover(column)
                    continue
                for covered in reversed(indices[:pos]):
                    self.uncover(covered)
                self.post_dance(clues[:done])
                logger.debug("clue %s conflicts with an earlier clue (column %d)", clue, column)
                return False
        return True

    def post_dance(self, clues: Sequence[Triple]) -> None:
        for clue in reversed(clues):
            for column in reversed(self.indices(clue)):
                self.uncover(column)
