class PuzzleEngineError(Exception):
    """Base class for errors raised by the puzzle engine."""


class OutOfBoundsError(PuzzleEngineError, IndexError):
    """A move or lookup referenced a cell outside the grid."""

    def __init__(self, row: int, col: int, shape):
        self.row = row
        self.col = col
        self.shape = tuple(shape)
        super().__init__(f"Cell ({row}, {col}) is outside the {self.shape[0]}x{self.shape[1]} grid.")


class ImmutableCellError(PuzzleEngineError):
    """A write targeted a given (immutable) cell."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is a given cell and cannot be changed.")


class InvalidMoveShape(PuzzleEngineError, TypeError):
    """The move payload does not belong to the active puzzle kind."""
