from enum import Enum, auto


class View(Enum):
    PUZZLE = auto()
    SOLUTION = auto()


class AppState:
    def __init__(self, puzzle, solution):
        self.current_view = View.PUZZLE
        self.puzzle = puzzle  # clue triples
        self.solution = solution  # full grid triples

    def toggle(self):
        if self.current_view == View.PUZZLE:
            self.current_view = View.SOLUTION
        else:
            self.current_view = View.PUZZLE

    def shown(self):
        """Triples to draw for the current view."""
        if self.current_view == View.PUZZLE:
            return self.puzzle
        return self.solution
