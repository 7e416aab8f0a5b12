import random

import pytest

from dlx import Knowing
from generator import best_of, generate_puzzle
from solver import construct, solve


def assert_minimal_and_unique(matrix, puzzle):
    outcome = solve(matrix, puzzle, seek=2)
    assert outcome.uniqueness is Knowing.YES
    for i in range(len(puzzle)):
        fewer = puzzle[:i] + puzzle[i + 1:]
        assert solve(matrix, fewer, seek=2).uniqueness is Knowing.NO


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_small_puzzles_are_minimal(small, seed):
    puzzle = generate_puzzle(small, random.Random(seed))
    assert 0 < len(puzzle) < 16
    assert_minimal_and_unique(small, puzzle)


def test_standard_puzzle_is_minimal(standard, rng):
    before = standard.snapshot()
    puzzle = generate_puzzle(standard, rng)

    assert 17 <= len(puzzle) < 81
    assert len({(r, c) for r, c, _ in puzzle}) == len(puzzle)
    assert_minimal_and_unique(standard, puzzle)
    assert standard.snapshot() == before


def test_rectangular_puzzle_is_minimal(rng):
    matrix = construct(2, 3)
    puzzle = generate_puzzle(matrix, rng)
    assert_minimal_and_unique(matrix, puzzle)


def test_puzzle_clues_agree_with_its_solution(small, rng):
    puzzle = generate_puzzle(small, rng)
    solution = solve(small, puzzle).found_solution
    assert set(puzzle) <= set(solution)


def test_same_seed_same_puzzle(small):
    assert generate_puzzle(small, random.Random(99)) == generate_puzzle(small, random.Random(99))


def test_best_of_keeps_fewest_clues(small, rng):
    report = best_of(small, 5, rng)
    assert len(report.counts) == 5
    assert len(report.best) == min(report.counts)
    assert_minimal_and_unique(small, report.best)


def test_best_of_needs_a_trial(small):
    with pytest.raises(ValueError):
        best_of(small, 0)


def test_best_of_reports_every_trial(small, rng):
    seen = []
    report = best_of(small, 4, rng, on_puzzle=lambda trial, puzzle: seen.append((trial, len(puzzle))))
    assert [trial for trial, _ in seen] == [1, 2, 3, 4]
    assert [count for _, count in seen] == report.counts
