from typing import List, Sequence
import logging
import random

from ..common import (PuzzleKind, SUDOKU_EMPTY, SUDOKU_GIVEN_PROBABILITY,
                      SUDOKU_MIN_GIVEN, SUDOKU_SHUFFLE_SWAPS)
from ..grid import GridModel
from ..puzzle_types import PuzzleInstance

logger = logging.getLogger(__name__)


def shuffle_solved_grid(solved: Sequence[Sequence[int]], rng: random.Random,
                        swaps: int = SUDOKU_SHUFFLE_SWAPS) -> List[List[int]]:
    """
    Applies random row swaps then column swaps.

    Swapping whole rows or columns keeps every row and column free of
    duplicates, so the result is still a solved grid.
    """
    grid = [list(row) for row in solved]
    size = len(grid)
    for _ in range(swaps):
        row1, row2 = rng.randrange(size), rng.randrange(size)
        grid[row1], grid[row2] = grid[row2], grid[row1]
    for _ in range(swaps):
        col1, col2 = rng.randrange(size), rng.randrange(size)
        for row in grid:
            row[col1], row[col2] = row[col2], row[col1]
    return grid


def choose_given_mask(rows: int, cols: int, rng: random.Random,
                      probability: float = SUDOKU_GIVEN_PROBABILITY,
                      min_given: int = SUDOKU_MIN_GIVEN) -> List[List[bool]]:
    """Independent per-cell draw, topped up in row-major order to reach min_given."""
    mask = [[rng.random() < probability for _ in range(cols)] for _ in range(rows)]
    given_count = sum(cell for row in mask for cell in row)
    if given_count < min_given:
        logger.debug(f"Only {given_count} given cells drawn, topping up to {min_given}.")
        for r in range(rows):
            for c in range(cols):
                if given_count >= min_given:
                    break
                if not mask[r][c]:
                    mask[r][c] = True
                    given_count += 1
    return mask


def build_mini_sudoku_instance(solution: Sequence[Sequence[int]],
                               given: Sequence[Sequence[bool]]) -> PuzzleInstance:
    """Given cells show their solution value and are immutable; the rest start empty."""
    values = [[solution[r][c] if given[r][c] else SUDOKU_EMPTY for c in range(len(row))]
              for r, row in enumerate(solution)]
    grid = GridModel.from_values(values, given=given)
    frozen_solution = tuple(tuple(row) for row in solution)
    return PuzzleInstance(kind=PuzzleKind.MINI_SUDOKU, grid=grid, solution=frozen_solution)


def generate_mini_sudoku_puzzle_internal(entry, generator_instance, rng: random.Random, **kwargs) -> PuzzleInstance:
    """Generates a MINI_SUDOKU puzzle from the fixed solved grid."""
    solved = generator_instance.SUDOKU_SOLVED_GRID
    rows, cols = entry.grid_shape
    if len(solved) != rows or any(len(row) != cols for row in solved):
        raise ValueError(f"Solved grid does not match the catalog shape {entry.grid_shape}.")

    shuffled = shuffle_solved_grid(solved, rng)
    mask = choose_given_mask(rows, cols, rng)
    instance = build_mini_sudoku_instance(shuffled, mask)
    logger.info(f"Generated Mini Sudoku puzzle with {len(instance.given_cells())} given cells.")
    return instance
