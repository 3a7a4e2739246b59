import dataclasses
import logging
from typing import Any, Union, get_args, get_origin, get_type_hints

from .catalog import PuzzleCatalog
from .common import Verdict
from .errors import InvalidMoveShape
from .puzzle_types import MoveOutcome, PuzzleInstance

logger = logging.getLogger(__name__)


def _check_field_types(move: Any) -> None:
    """Raises InvalidMoveShape when a move field does not hold its annotated type."""
    hints = get_type_hints(type(move))
    for f in dataclasses.fields(move):
        expected = hints[f.name]
        allowed = get_args(expected) if get_origin(expected) is Union else (expected,)
        value = getattr(move, f.name)
        # bool is an int subclass but never a valid coordinate, symbol or rung
        if isinstance(value, bool) or not isinstance(value, allowed):
            raise InvalidMoveShape(f"{type(move).__name__}.{f.name} must be {getattr(expected, '__name__', expected)}, "
                                   f"got {type(value).__name__}.")


class MoveVerifier:
    """Checks moves against the rules of the instance's kind and commits the resulting delta."""

    def __init__(self, catalog: PuzzleCatalog):
        self.catalog = catalog

    def check(self, instance: PuzzleInstance, move: Any) -> MoveOutcome:
        """
        Validates a move without changing the instance.

        Returns:
            MoveOutcome with the verdict, signed points and the delta to apply.

        Raises:
            InvalidMoveShape: move type, or one of its field types, does not fit the instance's kind
            OutOfBoundsError: move references a cell outside the grid
            ImmutableCellError: move writes a given cell
        """
        entry = self.catalog.entry(instance.kind)
        if not isinstance(move, entry.move_types):
            expected = ", ".join(t.__name__ for t in entry.move_types)
            raise InvalidMoveShape(f"{type(move).__name__} is not a {instance.kind.name} move (expected {expected}).")
        _check_field_types(move)

        outcome = entry.validate(instance, move, entry.scoring)
        logger.debug(f"{instance.kind.name} move {move} -> {outcome.verdict.name} ({outcome.points:+d})")
        return outcome

    def apply(self, instance: PuzzleInstance, outcome: MoveOutcome) -> None:
        """Commits the outcome's cell writes and state changes."""
        if outcome.verdict is Verdict.REJECTED and not outcome.has_delta:
            return
        for change in outcome.cell_changes:
            if change.write_value:
                instance.grid.set(change.row, change.col, change.value)
            if change.annotation is not None:
                instance.grid.annotate(change.row, change.col, change.annotation)
        instance.state.update(outcome.state_changes)
