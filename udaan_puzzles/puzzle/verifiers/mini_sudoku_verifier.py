import logging
from typing import Optional

from ..common import Annotation, SUDOKU_EMPTY, SUDOKU_SYMBOLS, Verdict
from ..errors import ImmutableCellError
from ..moves import FillCell
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance

logger = logging.getLogger(__name__)


def is_unique_placement(instance: PuzzleInstance, row: int, col: int, value: int) -> bool:
    """Checks row and column uniqueness of value, ignoring the cell being written."""
    grid = instance.grid
    for c in range(grid.cols):
        if c != col and grid.get(row, c).value == value:
            return False
    for r in range(grid.rows):
        if r != row and grid.get(r, col).value == value:
            return False
    return True


def validate_mini_sudoku_move(instance: PuzzleInstance, move: FillCell, scoring) -> MoveOutcome:
    cell = instance.grid.get(move.row, move.col)
    if not cell.mutable:
        raise ImmutableCellError(move.row, move.col)
    if move.value != SUDOKU_EMPTY and move.value not in SUDOKU_SYMBOLS:
        return MoveOutcome.rejected(f"{move.value} is not a valid number. Use 1-9, or 0 to clear.")

    if move.value == SUDOKU_EMPTY:
        # Clearing is neutral: no score, no validity flag
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            message="Cell cleared.",
            cell_changes=[CellChange(move.row, move.col, SUDOKU_EMPTY, Annotation.UNSET)],
        )

    if is_unique_placement(instance, move.row, move.col, move.value):
        logger.debug(f"Mini Sudoku: {move.value} at ({move.row}, {move.col}) is unique in its row and column.")
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            points=scoring.points["correct_fill"],
            message="Good move!",
            cell_changes=[CellChange(move.row, move.col, move.value, Annotation.CORRECT)],
        )

    logger.debug(f"Mini Sudoku: {move.value} at ({move.row}, {move.col}) repeats in its row or column.")
    return MoveOutcome(
        verdict=Verdict.ACCEPTED_INCORRECT,
        points=scoring.points["incorrect_fill"],
        message="Invalid move! Try again.",
        cell_changes=[CellChange(move.row, move.col, move.value, Annotation.INCORRECT)],
    )


def is_mini_sudoku_complete(instance: PuzzleInstance) -> bool:
    values = [cell.value for _, _, cell in instance.grid.iter_cells()]
    if any(value == SUDOKU_EMPTY for value in values):
        return False
    return sorted(values) == list(SUDOKU_SYMBOLS)


def mini_sudoku_hint(instance: PuzzleInstance) -> Optional[str]:
    """Reveals the solution value of the first empty or wrong editable cell."""
    for r, c, cell in instance.grid.iter_cells():
        if cell.mutable and cell.value != instance.solution[r][c]:
            return f"Try {instance.solution[r][c]} in row {r + 1}, column {c + 1}."
    return None
