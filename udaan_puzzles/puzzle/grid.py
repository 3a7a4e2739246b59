"""
Grid Module - Fixed-size 2-D cell container shared by every puzzle kind.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .common import Annotation
from .errors import ImmutableCellError, OutOfBoundsError


@dataclass
class Cell:
    """
    One addressable cell.

    Attributes:
        value: Kind-specific payload (digit, colour, path marker, token flag, rung record...)
        mutable: False for given cells, which never change after generation
        annotation: Outcome of the last validation touching this cell
        meta: Per-cell metadata that is not part of the playable value (e.g. region id)
    """
    value: Any = None
    mutable: bool = True
    annotation: Annotation = Annotation.UNSET
    meta: Dict[str, Any] = field(default_factory=dict)


class GridModel:
    """
    Rectangular mapping from (row, col) to Cell.

    Dimensions are fixed at construction. Only the targeted cell is touched
    by set() and annotate().
    """

    def __init__(self, rows: int, cols: int, fill: Any = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}.")
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [[Cell(value=fill) for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_values(cls, values: Sequence[Sequence[Any]],
                    given: Optional[Sequence[Sequence[bool]]] = None) -> 'GridModel':
        """
        Build a grid from a 2-D value list.

        Args:
            values: Row-major values, all rows the same length
            given: Optional mask of the same shape; True marks a given (immutable) cell

        Returns:
            GridModel holding copies of the values
        """
        if not values or not values[0]:
            raise ValueError("Cannot build a grid from empty values.")
        widths = {len(row) for row in values}
        if len(widths) != 1:
            raise ValueError("All rows must have the same length.")
        grid = cls(len(values), len(values[0]))
        for r, row in enumerate(values):
            for c, value in enumerate(row):
                cell = grid._cells[r][c]
                cell.value = value
                if given is not None:
                    cell.mutable = not given[r][c]
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.shape)

    def get(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Write a value; given cells raise ImmutableCellError."""
        cell = self.get(row, col)
        if not cell.mutable:
            raise ImmutableCellError(row, col)
        cell.value = value

    def annotate(self, row: int, col: int, annotation: Annotation) -> None:
        self.get(row, col).annotation = annotation

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Row-major (row, col, cell) triples. Each call starts a new pass."""
        for r in range(self._rows):
            for c in range(self._cols):
                yield r, c, self._cells[r][c]

    def __iter__(self) -> Iterator[Tuple[int, int, Cell]]:
        return self.iter_cells()

    def values(self) -> List[List[Any]]:
        return [[cell.value for cell in row] for row in self._cells]

    def row_values(self, row: int) -> List[Any]:
        self._check_bounds(row, 0)
        return [cell.value for cell in self._cells[row]]

    def col_values(self, col: int) -> List[Any]:
        self._check_bounds(0, col)
        return [self._cells[r][col].value for r in range(self._rows)]

    def __repr__(self) -> str:
        return f"GridModel({self._rows}x{self._cols})"
