from constraints import (
    block_of,
    candidates,
    capacity,
    constraint_count,
    constraint_indices,
    node_count,
    possibility_count,
    symbols,
)


def test_standard_counts():
    assert symbols(3, 3) == 9
    assert constraint_count(3, 3) == 324
    assert possibility_count(3, 3) == 729
    assert node_count(3, 3) == 2916
    assert capacity(3, 3) == 1 + 324 + 2916


def test_blocks_of_standard_grid():
    assert block_of(1, 1, 3, 3) == 1
    assert block_of(1, 9, 3, 3) == 3
    assert block_of(5, 5, 3, 3) == 5
    assert block_of(9, 1, 3, 3) == 7
    assert block_of(9, 9, 3, 3) == 9


def test_blocks_of_rectangular_grid():
    # 2 rows of blocks, 3 columns of blocks; each block is 3 rows by 2 columns.
    blocks = {block_of(r, c, 2, 3) for r in range(1, 7) for c in range(1, 7)}
    assert blocks == set(range(1, 7))
    assert block_of(3, 2, 2, 3) == 1
    assert block_of(4, 1, 2, 3) == 4
    assert block_of(1, 6, 2, 3) == 3


def test_constraint_indices_first_and_last():
    assert constraint_indices(1, 1, 1, 3, 3) == (1, 82, 163, 244)
    assert constraint_indices(9, 9, 9, 3, 3) == (81, 162, 243, 324)


def test_each_family_occupies_its_own_range():
    area = 81
    for r, c, n in candidates(3, 3):
        cell, row, col, block = constraint_indices(r, c, n, 3, 3)
        assert 1 <= cell <= area
        assert area < row <= 2 * area
        assert 2 * area < col <= 3 * area
        assert 3 * area < block <= 4 * area


def test_candidates_are_row_major():
    found = list(candidates(2, 2))
    assert len(found) == 64
    assert found[:5] == [(1, 1, 1), (1, 1, 2), (1, 1, 3), (1, 1, 4), (1, 2, 1)]
    assert found[-1] == (4, 4, 4)
