import logging
from typing import List, Optional, Sequence, Tuple

from ..common import Annotation, Verdict, ZIP_EMPTY, ZIP_PATH
from ..moves import ExtendPath
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def is_adjacent(a: Position, b: Position) -> bool:
    """4-directional neighbours: Manhattan distance exactly 1."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def _clear_path_changes(instance: PuzzleInstance, path: Sequence[Position]) -> List[CellChange]:
    changes = []
    for r, c in set(path):
        if instance.grid.get(r, c).mutable:
            changes.append(CellChange(r, c, ZIP_EMPTY, Annotation.UNSET))
        else:
            changes.append(CellChange(r, c, annotation=Annotation.UNSET, write_value=False))
    return changes


def validate_zip_move(instance: PuzzleInstance, move: ExtendPath, scoring) -> MoveOutcome:
    target = (move.row, move.col)
    instance.grid.get(move.row, move.col) # bounds
    start, end = instance.solution["start"], instance.solution["end"]
    path: Tuple[Position, ...] = tuple(instance.state.get("path", ()))

    if not path:
        if target != start:
            return MoveOutcome.rejected("Start the path from the start cell!")
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            message="Path started! Continue to the next cell.",
            cell_changes=[CellChange(move.row, move.col, annotation=Annotation.CORRECT, write_value=False)],
            state_changes={"path": (start,)},
        )

    if target == start:
        return MoveOutcome.rejected("The path has already started.")

    last = path[-1]
    if target == end:
        if is_adjacent(last, end):
            return MoveOutcome(
                verdict=Verdict.ACCEPTED_CORRECT,
                message="Congratulations! Path completed successfully!",
                cell_changes=[CellChange(move.row, move.col, annotation=Annotation.CORRECT, write_value=False)],
                state_changes={"path": path + (end,)},
            )
        # A jump onto the end cell invalidates the whole attempt
        logger.debug(f"Zip: jump from {last} to end {end} rejected, clearing path of {len(path)} cells.")
        return MoveOutcome(
            verdict=Verdict.REJECTED,
            message="Invalid path! Try again.",
            cell_changes=_clear_path_changes(instance, path),
            state_changes={"path": ()},
        )

    if is_adjacent(last, target):
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            points=scoring.points["valid_extension"],
            message="Good move! Continue the path.",
            cell_changes=[CellChange(move.row, move.col, ZIP_PATH, Annotation.CORRECT)],
            state_changes={"path": path + (target,)},
        )

    logger.debug(f"Zip: {target} is not adjacent to {last}, step discarded.")
    return MoveOutcome(
        verdict=Verdict.ACCEPTED_INCORRECT,
        points=scoring.points["invalid_extension"],
        message="Invalid move! Try a different direction.",
    )


def is_zip_complete(instance: PuzzleInstance) -> bool:
    path = instance.state.get("path", ())
    if not path or path[0] != instance.solution["start"] or path[-1] != instance.solution["end"]:
        return False
    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))


def zip_hint(instance: PuzzleInstance) -> Optional[str]:
    """Suggests the next step along the reference path, or a step towards the end."""
    path = instance.state.get("path", ())
    if not path:
        return "Start from the top-left cell."
    reference = list(instance.solution["reference_path"])
    last = path[-1]
    if last in reference and reference.index(last) + 1 < len(reference):
        r, c = reference[reference.index(last) + 1]
    else:
        end = instance.solution["end"]
        r, c = (last[0], last[1] + 1) if last[1] < end[1] else (last[0] + 1, last[1])
        if not instance.grid.in_bounds(r, c):
            return None
    return f"Try row {r + 1}, column {c + 1} next."
