import logging
import random
from typing import List, Sequence

from ..common import PuzzleKind
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance

logger = logging.getLogger(__name__)


def palette_for_target(base_palette: Sequence[str], target: Sequence[Sequence[str]]) -> List[str]:
    """Base palette followed by any target colours it lacks, so every target can be painted."""
    palette = list(base_palette)
    for row in target:
        for color in row:
            if color not in palette:
                palette.append(color)
    return palette


def build_tango_instance(target: Sequence[Sequence[str]], start_colors: Sequence[Sequence[str]],
                         palette: Sequence[str], hint: str = "", pattern_id: str = "custom") -> PuzzleInstance:
    grid = GridModel.from_values(start_colors)
    solution = tuple(tuple(row) for row in target)
    state = {"palette": tuple(palette), "hint": hint, "pattern_id": pattern_id}
    return PuzzleInstance(kind=PuzzleKind.TANGO, grid=grid, solution=solution, state=state)


def generate_tango_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a TANGO puzzle: a random target and a randomly coloured starting grid."""
    patterns = generator_instance.TANGO_PATTERNS
    base_palette = generator_instance.TANGO_PALETTE
    hints = generator_instance.TANGO_HINTS
    if not patterns or not base_palette:
        raise ValueError("Cannot generate tango puzzle: patterns or palette missing.")

    chosen = rng.choice(patterns)
    target = chosen["target"]
    rows, cols = entry.grid_shape
    if len(target) != rows or any(len(row) != cols for row in target):
        raise ValueError(f"Tango pattern '{chosen['id']}' does not match the catalog shape {entry.grid_shape}.")

    # Start colours come from the base palette, independent per cell; they are not the target
    start_colors = [[rng.choice(base_palette) for _ in range(cols)] for _ in range(rows)]
    hint = rng.choice(hints) if hints else ""

    instance = build_tango_instance(target, start_colors, palette_for_target(base_palette, target),
                                    hint=hint, pattern_id=chosen["id"])
    logger.info(f"Generated Tango puzzle: pattern '{chosen['id']}'.")
    return instance
