from typing import Any, Dict, Sequence
import logging
import random

from ..common import PuzzleKind, RungStatus
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance, Rung

logger = logging.getLogger(__name__)


def build_crossclimb_instance(questions: Sequence[Dict[str, Any]]) -> PuzzleInstance:
    """One rung per row; rung 0 starts current, the rest locked."""
    grid = GridModel(len(questions), 1)
    for index, question in enumerate(questions):
        grid.set(index, 0, Rung(
            question=question["question"],
            answer=question["answer"],
            options=tuple(question.get("options", ())),
            difficulty=question.get("difficulty", ""),
            points=int(question["points"]),
            status=RungStatus.CURRENT if index == 0 else RungStatus.LOCKED,
        ))

    solution = tuple(question["answer"] for question in questions)
    state = {"current_rung": 0, "streak": 0}
    return PuzzleInstance(kind=PuzzleKind.CROSSCLIMB, grid=grid, solution=solution, state=state)


def generate_crossclimb_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a CROSSCLIMB ladder from a shuffled copy of the trivia bank."""
    bank = list(generator_instance.CROSSCLIMB_TRIVIA)
    rung_count = entry.grid_shape[0]
    if len(bank) < rung_count:
        raise ValueError(f"Cannot generate crossclimb ladder: need {rung_count} questions, bank has {len(bank)}.")

    rng.shuffle(bank)
    ladder = bank[:rung_count]
    logger.info(f"Generated Crossclimb ladder with question ids {[q.get('id') for q in ladder]}.")
    return build_crossclimb_instance(ladder)
