"""
Move Module - Fully formed user moves, one shape per interaction kind.

The host keeps presentation state (selected number, colour, direction) and
only submits complete moves.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FillCell:
    """Mini Sudoku: write a symbol (1-9) into a cell, or 0 to clear it."""
    row: int
    col: int
    value: int


@dataclass(frozen=True)
class ToggleToken:
    """Queens: place a token on an empty cell or remove an existing one."""
    row: int
    col: int


@dataclass(frozen=True)
class PaintCell:
    """Tango: paint a cell with a palette colour."""
    row: int
    col: int
    color: str


@dataclass(frozen=True)
class ExtendPath:
    """Zip: append a cell to the in-progress path."""
    row: int
    col: int


@dataclass(frozen=True)
class ToggleItem:
    """Pinpoint: add or remove an item from the selection."""
    item: str


@dataclass(frozen=True)
class ChooseCategory:
    """Pinpoint: pick a category, which evaluates the current selection."""
    category: str


@dataclass(frozen=True)
class SubmitAnswer:
    """
    Crossclimb: answer the current rung.

    Attributes:
        answer: Free text or the chosen multiple-choice option
        rung: Rung index the host believes is current (None = current rung)
    """
    answer: str
    rung: Optional[int] = None
