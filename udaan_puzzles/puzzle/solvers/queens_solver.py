import itertools
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from constraint import BacktrackingSolver, FunctionConstraint, Problem

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def attacks(a: Position, b: Position) -> bool:
    """True if two tokens share a row, a column or a diagonal."""
    return a[0] == b[0] or a[1] == b[1] or abs(a[0] - b[0]) == abs(a[1] - b[1])


class _QueensRegionSolver:
    """
    (Internal Use) Finds one token placement for a region pattern using a CSP
    solver (python-constraint).

    One variable per region; its domain is the region's cells. Every pair of
    regions must hold mutually non-attacking tokens.
    """
    def __init__(self, regions: Sequence[Sequence[int]]):
        if not regions or not regions[0]:
            raise ValueError("Region pattern cannot be empty.")
        self.region_cells: Dict[int, List[Position]] = {}
        for r, row in enumerate(regions):
            for c, region in enumerate(row):
                self.region_cells.setdefault(region, []).append((r, c))

        self.problem = Problem(BacktrackingSolver())
        for region, cells in self.region_cells.items():
            self.problem.addVariable(region, cells)
        for region_a, region_b in itertools.combinations(self.region_cells, 2):
            self.problem.addConstraint(FunctionConstraint(lambda a, b: not attacks(a, b)), (region_a, region_b))

        logger.debug(f"Queens solver initialized with {len(self.region_cells)} regions.")

    def find_solution(self) -> Optional[Dict[int, Position]]:
        """
        Returns:
            {region: (row, col)} for one valid placement, or None if the pattern is unsolvable.
        """
        solution = self.problem.getSolution()
        if solution:
            logger.debug(f"Queens solver found placement: {solution}")
            return dict(solution)
        logger.debug("Queens solver found no placement.")
        return None
