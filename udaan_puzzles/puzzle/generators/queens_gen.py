import logging
import random
from typing import Dict, Sequence, Tuple

from ..common import PuzzleKind
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance

logger = logging.getLogger(__name__)


def build_queens_instance(regions: Sequence[Sequence[int]],
                          placement: Dict[int, Tuple[int, int]],
                          pattern_id: str = "custom") -> PuzzleInstance:
    """
    Empty board over a region pattern.

    Cell values are token flags; the region id lives in cell.meta. The known
    placement is kept as the advisory solution for hints.
    """
    rows, cols = len(regions), len(regions[0])
    grid = GridModel(rows, cols, fill=False)
    for r, c, cell in grid.iter_cells():
        cell.meta["region"] = regions[r][c]

    solution = {
        "regions": tuple(tuple(row) for row in regions),
        "placement": tuple(sorted(placement.items())),
    }
    state = {
        "pattern_id": pattern_id,
        "target_count": len({region for row in regions for region in row}),
        "tokens": (),
    }
    return PuzzleInstance(kind=PuzzleKind.QUEENS, grid=grid, solution=solution, state=state)


def generate_queens_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a QUEENS puzzle by drawing one pre-checked region pattern."""
    patterns = generator_instance.QUEENS_PATTERNS
    if not patterns:
        raise ValueError("Cannot generate queens puzzle: no solvable region patterns loaded.")

    chosen = rng.choice(patterns)
    regions = chosen["regions"]
    if (len(regions), len(regions[0])) != tuple(entry.grid_shape):
        raise ValueError(f"Queens pattern '{chosen['id']}' does not match the catalog shape {entry.grid_shape}.")

    instance = build_queens_instance(regions, chosen["placement"], pattern_id=chosen["id"])
    logger.info(f"Generated Queens puzzle: pattern '{chosen['id']}', target {instance.state['target_count']} tokens.")
    return instance
