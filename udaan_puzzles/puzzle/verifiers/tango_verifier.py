import logging
from typing import Optional

from ..common import Annotation, Verdict
from ..moves import PaintCell
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance

logger = logging.getLogger(__name__)


def validate_tango_move(instance: PuzzleInstance, move: PaintCell, scoring) -> MoveOutcome:
    instance.grid.get(move.row, move.col) # bounds
    if move.color not in instance.state.get("palette", ()):
        return MoveOutcome.rejected(f"{move.color} is not in the palette.")

    target = instance.solution[move.row][move.col]
    # Wrong colours are painted too, so the player sees the mistake
    if move.color == target:
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            points=scoring.points["correct_cell"],
            message="Great! That color is correct!",
            cell_changes=[CellChange(move.row, move.col, move.color, Annotation.CORRECT)],
        )
    logger.debug(f"Tango: {move.color} at ({move.row}, {move.col}) does not match target {target}.")
    return MoveOutcome(
        verdict=Verdict.ACCEPTED_INCORRECT,
        points=scoring.points["incorrect_cell"],
        message="Not quite right. Try again!",
        cell_changes=[CellChange(move.row, move.col, move.color, Annotation.INCORRECT)],
    )


def is_tango_complete(instance: PuzzleInstance) -> bool:
    return all(cell.value == instance.solution[r][c] for r, c, cell in instance.grid.iter_cells())


def tango_hint(instance: PuzzleInstance) -> Optional[str]:
    return instance.state.get("hint") or None
