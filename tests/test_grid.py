from __future__ import annotations

import numpy as np
import pytest

from PsQ_Grid import Grid
from conftest import SAMPLE


def test_sample_grid_is_valid_complete(sample_grid):
    assert sample_grid.is_valid(ignore_incomplete=False)
    assert sample_grid.is_initialized()
    assert sample_grid.serialize() == SAMPLE
    assert sample_grid.grid_toString() == SAMPLE


def test_get_and_row_major_indexing(sample_grid):
    assert sample_grid.get(0, 0) == 1
    assert sample_grid.get(1, 2) == 1
    assert sample_grid.get(3, 3) == 1
    assert sample_grid[5] == sample_grid.get(1, 1) == 4
    assert list(sample_grid) == [int(c) for c in SAMPLE]


def test_set_only_changes_one_cell():
    g = Grid()
    g.set(2, 1, 3)
    assert g.serialize() == "0000000003000000"
    g.set(2, 1, 0)
    assert g.serialize() == "0" * 16


@pytest.mark.parametrize("row, col, value", [(4, 0, 1), (0, -1, 1), (0, 0, 5), (0, 0, -1)])
def test_set_rejects_bad_input(row, col, value):
    with pytest.raises(ValueError):
        Grid().set(row, col, value)


def test_valid_line_rules():
    assert Grid.is_validLine([1, 2, 3, 4])
    assert Grid.is_validLine([4, 3, 2, 1], ignore_incomplete=False)
    # empty cells
    assert Grid.is_validLine([1, 0, 3, 0], ignore_incomplete=True)
    assert not Grid.is_validLine([1, 0, 3, 4], ignore_incomplete=False)
    # repeats among filled cells
    assert not Grid.is_validLine([1, 1, 0, 0], ignore_incomplete=True)
    assert not Grid.is_validLine([2, 3, 2, 4])
    # out of range
    assert not Grid.is_validLine([1, 2, 3, 5])
    assert not Grid.is_validLine([0, 0, 0, 7], ignore_incomplete=True)


def test_partial_grid_validity():
    g = Grid.from_grid("1200340000000000")
    assert g.is_valid(ignore_incomplete=True)
    assert not g.is_valid(ignore_incomplete=False)
    # box conflict: 1 twice in the top-left box
    g.set(1, 1, 1)
    assert not g.is_validBox(0, 0, ignore_incomplete=True)
    assert not g.is_valid(ignore_incomplete=True)


def test_row_col_box_checks_locate_conflicts():
    # a latin square that breaks the box rule
    g = Grid.from_grid("1234234134124123")
    assert all(g.is_validRow(r) for r in range(4))
    assert all(g.is_validCol(c) for c in range(4))
    assert not g.is_validBox(0, 0)
    assert not g.is_valid()


def test_box_accessor(sample_grid):
    assert sample_grid.gridBox(0, 1).tolist() == [3, 4, 1, 2]
    assert sample_grid.gridBox(1, 0).reshape(2, 2).tolist() == [[2, 1], [4, 3]]
    with pytest.raises(ValueError):
        sample_grid.gridBox(2, 0)


def test_from_grid_accepts_arrays_and_sequences(sample_grid):
    arr = sample_grid.grid_toArray((4, 4))
    assert Grid.from_grid(arr) == sample_grid
    assert Grid.from_grid([int(c) for c in SAMPLE]) == sample_grid
    assert Grid(SAMPLE) == sample_grid


@pytest.mark.parametrize("bad", ["123", "1" * 81, "12a4341221434321"])
def test_from_grid_rejects_wrong_shapes_and_chars(bad):
    with pytest.raises(ValueError):
        Grid.from_grid(bad)


def test_insert_with_check_rejects_invalid_and_keeps_state(sample_grid):
    with pytest.raises(ValueError):
        sample_grid.insert("1234123412341234")
    assert sample_grid.serialize() == SAMPLE


def test_insert_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        Grid().insert(np.full(16, 9), automatic_check=False)


def test_value_semantics(sample_grid):
    other = sample_grid.copy()
    assert other == sample_grid and other is not sample_grid
    assert hash(other) == hash(sample_grid)
    other.set(0, 0, 0)
    assert sample_grid.get(0, 0) == 1
    assert other < sample_grid
    assert len({sample_grid, Grid.from_grid(SAMPLE)}) == 1


def test_grid_toArray_is_a_copy(sample_grid):
    arr = sample_grid.grid_toArray((4, 4))
    arr[0, 0] = 4
    assert sample_grid.get(0, 0) == 1


def test_top_row_key(sample_grid):
    assert sample_grid.topRow_key() == SAMPLE
    relabeled = Grid.from_grid("4321214334121234")
    assert relabeled.topRow_key() == SAMPLE
    assert relabeled.is_relabel_identical(sample_grid)
    assert relabeled.is_relabel_identical(SAMPLE)


def test_top_row_key_requires_complete_grid():
    with pytest.raises(ValueError):
        Grid.from_grid("1200340000000000").topRow_key()


def test_show_grid_prints_every_row(sample_grid, capsys):
    sample_grid.showGrid()
    out = capsys.readouterr().out
    assert "| 1 2 | 3 4 |" in out
    assert "| 4 3 | 2 1 |" in out
