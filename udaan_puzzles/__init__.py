"""Constraint-puzzle engine for the Udaan learning platform's logic puzzles."""
from .puzzle import (PuzzleKind, Verdict, Annotation, RungStatus, GridModel, Cell,
                     PuzzleInstance, MoveOutcome, PuzzleCatalog, PuzzleGenerator, MoveVerifier,
                     OutOfBoundsError, ImmutableCellError, InvalidMoveShape)
from .core import SessionController, SessionPhase, SessionState

__version__ = "0.1.0"
