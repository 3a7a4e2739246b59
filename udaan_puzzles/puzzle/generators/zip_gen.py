import logging
import random
from typing import List, Tuple

from ..common import PuzzleKind, ZIP_EMPTY, ZIP_END, ZIP_START
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def random_monotone_path(start: Position, end: Position, size: int, rng: random.Random) -> List[Position]:
    """
    Random right/down walk from start to end.

    Every step moves one cell closer to the bottom-right corner, so the walk
    always terminates at end.
    """
    path = [start]
    current = start
    while current != end:
        directions = []
        if current[1] < size - 1:
            directions.append((current[0], current[1] + 1)) # Right
        if current[0] < size - 1:
            directions.append((current[0] + 1, current[1])) # Down
        current = rng.choice(directions)
        path.append(current)
    return path


def build_zip_instance(size: int, reference_path: List[Position]) -> PuzzleInstance:
    start, end = (0, 0), (size - 1, size - 1)
    grid = GridModel(size, size, fill=ZIP_EMPTY)
    # Endpoints are fixed markers
    for (r, c), marker in ((start, ZIP_START), (end, ZIP_END)):
        cell = grid.get(r, c)
        cell.value = marker
        cell.mutable = False

    solution = {"start": start, "end": end, "reference_path": tuple(reference_path)}
    state = {"path": ()}
    return PuzzleInstance(kind=PuzzleKind.ZIP, grid=grid, solution=solution, state=state)


def generate_zip_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a ZIP puzzle with an advisory reference path."""
    rows, cols = entry.grid_shape
    if rows != cols:
        raise ValueError(f"Zip board must be square, got {entry.grid_shape}.")
    size = rows
    reference_path = random_monotone_path((0, 0), (size - 1, size - 1), size, rng)
    logger.info(f"Generated Zip puzzle ({size}x{size}), reference path of {len(reference_path)} cells.")
    return build_zip_instance(size, reference_path)
