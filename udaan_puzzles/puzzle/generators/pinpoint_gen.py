from typing import Any, Dict
import logging
import random

from ..common import PuzzleKind
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance

logger = logging.getLogger(__name__)


def build_pinpoint_instance(question: Dict[str, Any]) -> PuzzleInstance:
    """One row of item cells; value is the selected flag, meta['item'] the label."""
    items = question["items"]
    grid = GridModel(1, len(items), fill=False)
    for _, c, cell in grid.iter_cells():
        cell.meta["item"] = items[c]

    solution = {
        "correct_items": tuple(sorted(question["correct_items"])),
        "correct_category": question["correct_category"],
    }
    state = {
        "question_id": question.get("id"),
        "text": question["text"],
        "categories": tuple(question["categories"]),
        "hint": question.get("hint", ""),
        "selected": (),
        "category": None,
        "last_verdict": None,
    }
    return PuzzleInstance(kind=PuzzleKind.PINPOINT, grid=grid, solution=solution, state=state)


def generate_pinpoint_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a PINPOINT question drawn uniformly from the question bank."""
    questions = generator_instance.PINPOINT_QUESTIONS
    if not questions:
        raise ValueError("Cannot generate pinpoint puzzle: question bank is empty.")

    question = rng.choice(questions)
    if len(question["items"]) != entry.grid_shape[1]:
        raise ValueError(f"Pinpoint question {question.get('id')} has {len(question['items'])} items, "
                         f"catalog expects {entry.grid_shape[1]}.")

    logger.info(f"Generated Pinpoint question {question.get('id')}: {question['text']}")
    return build_pinpoint_instance(question)
