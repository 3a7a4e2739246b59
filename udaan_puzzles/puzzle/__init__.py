# Make 'puzzle' a package
# Selectively expose key classes/enums for easier top-level imports
from .common import PuzzleKind, Verdict, Annotation, RungStatus, format_elapsed
from .errors import PuzzleEngineError, OutOfBoundsError, ImmutableCellError, InvalidMoveShape
from .grid import GridModel, Cell
from .moves import FillCell, ToggleToken, PaintCell, ExtendPath, ToggleItem, ChooseCategory, SubmitAnswer
from .puzzle_types import PuzzleInstance, MoveOutcome, CellChange, Rung
from .catalog import PuzzleCatalog, CatalogEntry, ScoringTable
from .generator import PuzzleGenerator
from .verifier import MoveVerifier
