import dataclasses
import logging
from typing import Optional

from ..common import Annotation, RungStatus, Verdict
from ..moves import SubmitAnswer
from ..puzzle_types import CellChange, MoveOutcome, PuzzleInstance, Rung

logger = logging.getLogger(__name__)


def normalize_answer(answer: str) -> str:
    return answer.strip().lower()


def validate_crossclimb_move(instance: PuzzleInstance, move: SubmitAnswer, scoring) -> MoveOutcome:
    current = instance.state.get("current_rung", 0)
    if move.rung is not None and move.rung != current:
        instance.grid.get(move.rung, 0) # bounds
        return MoveOutcome.rejected("Only the current rung can be answered.")

    rung: Rung = instance.grid.get(current, 0).value
    if rung.status is not RungStatus.CURRENT:
        # Each rung gets a single attempt
        return MoveOutcome.rejected("This rung has already been answered.")
    if not move.answer or not move.answer.strip():
        return MoveOutcome.rejected("Please enter an answer or select an option!")

    is_correct = normalize_answer(move.answer) == normalize_answer(rung.answer)
    answered = dataclasses.replace(rung, status=RungStatus.COMPLETED, user_answer=move.answer, is_correct=is_correct)
    changes = [CellChange(current, 0, answered, Annotation.CORRECT if is_correct else Annotation.INCORRECT)]
    streak = instance.state.get("streak", 0)

    if not is_correct:
        logger.debug(f"Crossclimb rung {current}: '{move.answer}' is incorrect, streak reset.")
        return MoveOutcome(
            verdict=Verdict.ACCEPTED_INCORRECT,
            points=scoring.points["incorrect"],
            message=f"Incorrect! The answer was: {rung.answer}",
            cell_changes=changes,
            state_changes={"streak": 0},
        )

    points = rung.points + scoring.points["streak_bonus"] * streak
    state_changes = {"streak": streak + 1}
    message = f"Correct! +{points} points! Streak: {streak + 1}"
    next_rung = current + 1
    if next_rung < instance.grid.rows:
        upcoming: Rung = instance.grid.get(next_rung, 0).value
        changes.append(CellChange(next_rung, 0, dataclasses.replace(upcoming, status=RungStatus.CURRENT)))
        state_changes["current_rung"] = next_rung
    else:
        message = "Congratulations! You completed the ladder!"

    return MoveOutcome(
        verdict=Verdict.ACCEPTED_CORRECT,
        points=points,
        message=message,
        cell_changes=changes,
        state_changes=state_changes,
    )


def is_crossclimb_complete(instance: PuzzleInstance) -> bool:
    last: Rung = instance.grid.get(instance.grid.rows - 1, 0).value
    return last.status is RungStatus.COMPLETED and bool(last.is_correct)


def crossclimb_hint(instance: PuzzleInstance) -> Optional[str]:
    rung: Rung = instance.grid.get(instance.state.get("current_rung", 0), 0).value
    if rung.status is not RungStatus.CURRENT:
        return None
    if rung.options:
        return f"{rung.difficulty} question worth {rung.points} points. Options: {', '.join(rung.options)}"
    return f"{rung.difficulty} question worth {rung.points} points."
