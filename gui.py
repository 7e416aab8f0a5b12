# gui.py

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from constraints import Triple, symbols

CELL_SIZE = 48
TOP_BAR_HEIGHT = 120
MIN_WIDTH = 360

# Colors – same dark palette as the rest of the app
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
BLOCK_LINE = (200, 200, 205)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
FILLED = (45, 140, 255)  # symbols the solver placed


def board_size(belts: int, curtains: int) -> int:
    return symbols(belts, curtains) * CELL_SIZE


def window_size(belts: int, curtains: int) -> Tuple[int, int]:
    side = board_size(belts, curtains)
    return max(side, MIN_WIDTH), side + TOP_BAR_HEIGHT


def board_origin(screen_width: int, belts: int, curtains: int) -> Tuple[int, int]:
    # Board is centred horizontally under the top bar.
    return (screen_width - board_size(belts, curtains)) // 2, TOP_BAR_HEIGHT


def cell_rect(r: int, c: int, origin: Tuple[int, int]) -> pygame.Rect:
    """Screen rectangle of 1-based cell (r, c)."""
    ox, oy = origin
    return pygame.Rect(ox + (c - 1) * CELL_SIZE, oy + (r - 1) * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    title: str,
    subtitle: str,
):
    width = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, width, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, width - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render(title, True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    sub_surf = label_font.render(subtitle, True, TEXT_SECONDARY)
    screen.blit(sub_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    triples: Iterable[Triple],
    belts: int,
    curtains: int,
    givens: Optional[Iterable[Triple]] = None,
) -> Dict[Tuple[int, int], int]:
    """
    Draws the grid and its symbols.
    givens: clues drawn in the main text colour; other symbols are drawn highlighted.
    If None, every symbol counts as given.
    Returns the (row, col) -> symbol map that was drawn.
    """
    nums = symbols(belts, curtains)
    origin = board_origin(screen.get_width(), belts, curtains)

    cells: Dict[Tuple[int, int], int] = {(r, c): n for r, c, n in triples}
    given_cells = None if givens is None else {(r, c) for r, c, _ in givens}

    for r in range(1, nums + 1):
        for c in range(1, nums + 1):
            rect = cell_rect(r, c, origin)
            pygame.draw.rect(screen, BG, rect)
            pygame.draw.rect(screen, GRID, rect, width=1)

            if (r, c) not in cells:
                continue
            color = TEXT_MAIN if given_cells is None or (r, c) in given_cells else FILLED
            text_surf = cell_font.render(str(cells[(r, c)]), True, color)
            screen.blit(
                text_surf,
                (
                    rect.x + (CELL_SIZE - text_surf.get_width()) // 2,
                    rect.y + (CELL_SIZE - text_surf.get_height()) // 2,
                ),
            )

    # Block borders: every `belts` columns and every `curtains` rows.
    ox, oy = origin
    side = board_size(belts, curtains)
    for c in range(0, nums + 1, belts):
        x = ox + c * CELL_SIZE
        pygame.draw.line(screen, BLOCK_LINE, (x, oy), (x, oy + side), 3)
    for r in range(0, nums + 1, curtains):
        y = oy + r * CELL_SIZE
        pygame.draw.line(screen, BLOCK_LINE, (ox, y), (ox + side, y), 3)

    return cells
