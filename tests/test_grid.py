import pytest

from udaan_puzzles.puzzle import Annotation, GridModel, ImmutableCellError, OutOfBoundsError


def test_from_values_marks_given_cells():
    grid = GridModel.from_values([[1, 0], [0, 4]], given=[[True, False], [False, True]])
    assert grid.shape == (2, 2)
    assert grid.get(0, 0).value == 1
    assert grid.get(0, 0).mutable is False
    assert grid.get(0, 1).mutable is True
    assert grid.get(1, 1).annotation is Annotation.UNSET


def test_set_changes_only_target_cell():
    grid = GridModel(2, 3, fill=0)
    grid.set(1, 2, 7)
    assert grid.values() == [[0, 0, 0], [0, 0, 7]]
    assert grid.row_values(1) == [0, 0, 7]
    assert grid.col_values(2) == [0, 7]


def test_set_on_given_cell_raises():
    grid = GridModel.from_values([[5]], given=[[True]])
    with pytest.raises(ImmutableCellError):
        grid.set(0, 0, 6)
    assert grid.get(0, 0).value == 5


def test_annotate_is_allowed_on_given_cell():
    grid = GridModel.from_values([[5]], given=[[True]])
    grid.annotate(0, 0, Annotation.CORRECT)
    assert grid.get(0, 0).annotation is Annotation.CORRECT


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds(row, col):
    grid = GridModel(3, 3)
    assert not grid.in_bounds(row, col)
    with pytest.raises(OutOfBoundsError):
        grid.get(row, col)
    with pytest.raises(OutOfBoundsError):
        grid.set(row, col, 1)


def test_out_of_bounds_is_an_index_error():
    with pytest.raises(IndexError):
        GridModel(1, 1).get(1, 1)


def test_iter_cells_is_row_major_and_restartable():
    grid = GridModel.from_values([[1, 2], [3, 4]])
    first = [(r, c, cell.value) for r, c, cell in grid.iter_cells()]
    second = [(r, c, cell.value) for r, c, cell in grid]
    assert first == [(0, 0, 1), (0, 1, 2), (1, 0, 3), (1, 1, 4)]
    assert first == second


def test_iter_cells_is_lazy():
    grid = GridModel(2, 2)
    cells = grid.iter_cells()
    assert next(cells)[:2] == (0, 0)
    assert next(cells)[:2] == (0, 1)


def test_invalid_construction():
    with pytest.raises(ValueError):
        GridModel(0, 3)
    with pytest.raises(ValueError):
        GridModel.from_values([[1, 2], [3]])
    with pytest.raises(ValueError):
        GridModel.from_values([])


def test_meta_is_per_cell():
    grid = GridModel(1, 2)
    grid.get(0, 0).meta["region"] = 1
    assert grid.get(0, 1).meta == {}
