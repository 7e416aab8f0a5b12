# tests/conftest.py
import os
import random
import sys
from pathlib import Path

import pytest

# Render off-screen; must be set before pygame opens a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add project root to sys.path so the top-level modules can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from constraints import constraint_count, constraint_indices  # noqa: E402
from dlx import DancingLinks  # noqa: E402


@pytest.fixture
def standard():
    return DancingLinks(3, 3)


@pytest.fixture
def small():
    return DancingLinks(2, 2)


@pytest.fixture
def rng():
    return random.Random(20240229)


@pytest.fixture
def assert_exact_cover():
    """Every constraint column is hit exactly once by the given triples."""

    def check(triples, belts, curtains):
        hits = [i for r, c, n in triples for i in constraint_indices(r, c, n, belts, curtains)]
        assert sorted(hits) == list(range(1, constraint_count(belts, curtains) + 1))

    return check
