import logging
from typing import List, Optional, Sequence, Tuple

from ..common import Annotation, Verdict
from ..moves import ToggleToken
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance
from ..solvers.queens_solver import attacks

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def _annotation_changes(instance: PuzzleInstance, tokens: Sequence[Position]) -> List[CellChange]:
    """Token cells are CORRECT, cells attacked by any token BLOCKED, everything else UNSET."""
    changes = []
    token_set = set(tokens)
    for r, c, _ in instance.grid.iter_cells():
        if (r, c) in token_set:
            annotation = Annotation.CORRECT
        elif any(attacks((r, c), token) for token in tokens):
            annotation = Annotation.BLOCKED
        else:
            annotation = Annotation.UNSET
        changes.append(CellChange(r, c, annotation=annotation, write_value=False))
    return changes


def validate_queens_move(instance: PuzzleInstance, move: ToggleToken, scoring) -> MoveOutcome:
    position = (move.row, move.col)
    cell = instance.grid.get(move.row, move.col)
    tokens: Tuple[Position, ...] = tuple(instance.state.get("tokens", ()))

    if cell.value:
        remaining = tuple(token for token in tokens if token != position)
        logger.debug(f"Queens: token removed at {position}.")
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_CORRECT,
            points=scoring.points.get("removal", 0),
            message="Queen removed!",
            cell_changes=[CellChange(move.row, move.col, False)] + _annotation_changes(instance, remaining),
            state_changes={"tokens": remaining},
        )

    if any(attacks(position, token) for token in tokens):
        logger.debug(f"Queens: {position} is attacked, placement rejected.")
        return MoveOutcome.rejected("Cannot place queen here - it would be attacked!")

    region = cell.meta.get("region")
    if any(instance.grid.get(r, c).meta.get("region") == region for r, c in tokens):
        logger.debug(f"Queens: region {region} already holds a token, placement rejected.")
        return MoveOutcome.rejected("This region already has a queen!")

    placed = tokens + (position,)
    return MoveOutcome(
        verdict=Verdict.ACCEPTED_CORRECT,
        points=scoring.points["legal_placement"],
        message="Queen placed! Great move!",
        cell_changes=[CellChange(move.row, move.col, True)] + _annotation_changes(instance, placed),
        state_changes={"tokens": placed},
    )


def is_queens_complete(instance: PuzzleInstance) -> bool:
    return len(instance.state.get("tokens", ())) == instance.state["target_count"]


def queens_hint(instance: PuzzleInstance) -> Optional[str]:
    """Points at a token from the known placement whose region is still empty."""
    tokens = instance.state.get("tokens", ())
    filled_regions = {instance.grid.get(r, c).meta.get("region") for r, c in tokens}
    for region, (r, c) in instance.solution["placement"]:
        if region not in filled_regions:
            if any(attacks((r, c), token) for token in tokens):
                return "Your current queens block a solution. Try moving one of them."
            return f"A queen fits in row {r + 1}, column {c + 1}."
    return None
