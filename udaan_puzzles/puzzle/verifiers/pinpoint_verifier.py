import logging
from typing import Optional, Union

from ..common import Annotation, Verdict
from ..moves import ChooseCategory, ToggleItem
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance

logger = logging.getLogger(__name__)


def _item_column(instance: PuzzleInstance, item: str) -> Optional[int]:
    for _, c, cell in instance.grid.iter_cells():
        if cell.meta.get("item") == item:
            return c
    return None


def _toggle_item(instance: PuzzleInstance, move: ToggleItem) -> MoveOutcome:
    col = _item_column(instance, move.item)
    if col is None:
        return MoveOutcome.rejected(f"'{move.item}' is not one of the items.")

    selected = tuple(instance.state.get("selected", ()))
    if move.item in selected:
        selected = tuple(item for item in selected if item != move.item)
        now_selected = False
    else:
        selected = selected + (move.item,)
        now_selected = True

    # Toggling invalidates the previous evaluation; only a category choice evaluates
    return MoveOutcome(
        verdict=Verdict.ACCEPTED_CORRECT,
        message="Good! Now select the correct category.",
        cell_changes=[CellChange(0, col, now_selected, Annotation.UNSET)],
        state_changes={"selected": selected, "last_verdict": None},
    )


def _choose_category(instance: PuzzleInstance, move: ChooseCategory, scoring) -> MoveOutcome:
    if move.category not in instance.state.get("categories", ()):
        return MoveOutcome.rejected(f"'{move.category}' is not one of the categories.")

    selected = sorted(instance.state.get("selected", ()))
    items_correct = selected == sorted(instance.solution["correct_items"])
    category_correct = move.category == instance.solution["correct_category"]
    logger.debug(f"Pinpoint evaluation: items_correct={items_correct}, category_correct={category_correct}")

    if items_correct and category_correct:
        verdict, points, message = Verdict.ACCEPTED_CORRECT, scoring.points["fully_correct"], "Perfect! You got it right!"
    elif items_correct or category_correct:
        verdict, points, message = Verdict.ACCEPTED_PARTIAL, scoring.points["partially_correct"], "Partially correct! Try again."
    else:
        verdict, points, message = Verdict.ACCEPTED_INCORRECT, scoring.points["incorrect"], "Not quite right. Try again!"

    # Mark each selected item right or wrong so the host can show the feedback
    correct_items = set(instance.solution["correct_items"])
    changes = []
    for _, c, cell in instance.grid.iter_cells():
        if cell.value:
            annotation = Annotation.CORRECT if cell.meta.get("item") in correct_items else Annotation.INCORRECT
        else:
            annotation = Annotation.UNSET
        changes.append(CellChange(0, c, annotation=annotation, write_value=False))

    return MoveOutcome(
        verdict=verdict,
        points=points,
        message=message,
        cell_changes=changes,
        state_changes={"category": move.category, "last_verdict": verdict},
    )


def validate_pinpoint_move(instance: PuzzleInstance, move: Union[ToggleItem, ChooseCategory], scoring) -> MoveOutcome:
    if isinstance(move, ToggleItem):
        return _toggle_item(instance, move)
    return _choose_category(instance, move, scoring)


def is_pinpoint_complete(instance: PuzzleInstance) -> bool:
    return instance.state.get("last_verdict") is Verdict.ACCEPTED_CORRECT


def pinpoint_hint(instance: PuzzleInstance) -> Optional[str]:
    hint = instance.state.get("hint")
    return f"Hint: {hint}" if hint else None
