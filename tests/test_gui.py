import pygame
import pytest

from gui import (
    BG,
    BLOCK_LINE,
    CARD_BG,
    CELL_SIZE,
    TOP_BAR_HEIGHT,
    board_origin,
    cell_rect,
    draw_grid,
    draw_top_bar,
    window_size,
)
from ui_state import AppState, View


@pytest.fixture
def fonts():
    pygame.font.init()
    yield pygame.font.Font(None, 24)
    pygame.font.quit()


def test_window_size():
    assert window_size(3, 3) == (9 * CELL_SIZE, 9 * CELL_SIZE + TOP_BAR_HEIGHT)
    # Small boards keep a minimum width for the top bar.
    width, height = window_size(2, 2)
    assert width >= 4 * CELL_SIZE
    assert height == 4 * CELL_SIZE + TOP_BAR_HEIGHT


def test_cell_rect_is_one_based():
    assert cell_rect(1, 1, (10, 120)) == pygame.Rect(10, 120, CELL_SIZE, CELL_SIZE)
    assert cell_rect(2, 3, (0, 0)) == pygame.Rect(2 * CELL_SIZE, CELL_SIZE, CELL_SIZE, CELL_SIZE)


def test_draw_grid_off_screen(fonts):
    screen = pygame.Surface(window_size(3, 3))
    drawn = draw_grid(screen, fonts, [(1, 1, 5), (9, 9, 3)], 3, 3, givens=[(1, 1, 5)])

    assert drawn == {(1, 1): 5, (9, 9): 3}
    ox, oy = board_origin(screen.get_width(), 3, 3)
    # Block borders: left edge and the line after the third column.
    assert tuple(screen.get_at((ox, oy + CELL_SIZE // 2)))[:3] == BLOCK_LINE
    assert tuple(screen.get_at((ox + 3 * CELL_SIZE, oy + CELL_SIZE // 2)))[:3] == BLOCK_LINE


def test_draw_top_bar_off_screen(fonts):
    screen = pygame.Surface(window_size(2, 2))
    draw_top_bar(screen, fonts, fonts, "4x4 Sudoku", "6 clues")

    width = screen.get_width()
    assert tuple(screen.get_at((2, 2)))[:3] == BG
    # Right end of the card, clear of the text and the rounded corners.
    assert tuple(screen.get_at((width - 50, TOP_BAR_HEIGHT - 24)))[:3] == CARD_BG


def test_app_state_toggles_view():
    state = AppState(["puzzle"], ["solution"])
    assert state.current_view == View.PUZZLE
    assert state.shown() == ["puzzle"]
    state.toggle()
    assert state.current_view == View.SOLUTION
    assert state.shown() == ["solution"]
    state.toggle()
    assert state.current_view == View.PUZZLE
