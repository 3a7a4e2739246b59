from typing import Any, Dict, List, Optional
import logging
import random

from .catalog import PuzzleCatalog
from .common import PuzzleKind
from .data import load_json_data
from .puzzle_types import PuzzleInstance
from .solvers.queens_solver import _QueensRegionSolver

# Setup logging
logger = logging.getLogger(__name__)


def _require_keys(records: List[Dict[str, Any]], required_keys: List[str], pool_name: str) -> None:
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"Invalid {pool_name} record: expected an object, got {type(record).__name__}.")
        if not all(key in record for key in required_keys):
            logger.error(f"Invalid {pool_name} format: Missing keys in '{record.get('id', 'UNKNOWN')}'. Found: {list(record.keys())}")
            raise ValueError(f"Invalid {pool_name} data structure: every record needs {required_keys}.")


class PuzzleGenerator:
    """Builds fresh puzzle instances for any catalog kind from the fixed data libraries."""

    def __init__(self, catalog: Optional[PuzzleCatalog] = None, rng: Optional[random.Random] = None,
                 data_dir: Optional[str] = None):
        self.catalog = catalog or PuzzleCatalog(data_dir=data_dir)
        self.rng = rng or random.Random()
        self.data_dir = data_dir

        # Load puzzle data pools from JSON files
        self._load_puzzle_data()

    def _load_puzzle_data(self):
        """Loads and validates every fixed library. Generation never touches the disk afterwards."""
        try:
            sudoku_data = load_json_data("mini_sudoku.json", self.data_dir)
            self.SUDOKU_SOLVED_GRID = [list(row) for row in sudoku_data["solved_grid"]]

            patterns = load_json_data("queens_patterns.json", self.data_dir)
            _require_keys(patterns, ["id", "regions"], "queens pattern")
            self.QUEENS_PATTERNS = self._solvable_queens_patterns(patterns)

            tango_data = load_json_data("tango_patterns.json", self.data_dir)
            self.TANGO_PALETTE = list(tango_data.get("palette", []))
            self.TANGO_PATTERNS = list(tango_data.get("patterns", []))
            self.TANGO_HINTS = list(tango_data.get("hints", []))
            _require_keys(self.TANGO_PATTERNS, ["id", "target"], "tango pattern")

            self.PINPOINT_QUESTIONS = load_json_data("pinpoint_questions.json", self.data_dir)
            _require_keys(self.PINPOINT_QUESTIONS,
                          ["text", "items", "correct_items", "categories", "correct_category"], "pinpoint question")

            self.CROSSCLIMB_TRIVIA = load_json_data("crossclimb_trivia.json", self.data_dir)
            _require_keys(self.CROSSCLIMB_TRIVIA, ["question", "answer", "points"], "crossclimb trivia")

            # Basic validation after loading
            if not self.QUEENS_PATTERNS: logger.warning("No solvable Queens region patterns after loading.")
            if not self.TANGO_PATTERNS: logger.warning("Tango pattern library is empty.")
            if not self.PINPOINT_QUESTIONS: logger.warning("Pinpoint question bank is empty.")
            if not self.CROSSCLIMB_TRIVIA: logger.warning("Crossclimb trivia bank is empty.")

        except (FileNotFoundError, ValueError, KeyError) as e:
            logger.critical(f"Fatal error loading critical game data: {e}", exc_info=True)
            # Application cannot proceed without data
            raise RuntimeError("Failed to load essential game data. Cannot continue.") from e

    def _solvable_queens_patterns(self, patterns: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Keeps only patterns where one token per region can be placed without attacks."""
        solvable = []
        for pattern in patterns:
            placement = _QueensRegionSolver(pattern["regions"]).find_solution()
            if placement is None:
                logger.warning(f"Dropping Queens pattern '{pattern['id']}': no non-attacking placement exists.")
                continue
            solvable.append({**pattern, "placement": placement})
        logger.debug(f"{len(solvable)}/{len(patterns)} Queens patterns are solvable.")
        return solvable

    def generate(self, kind: PuzzleKind) -> PuzzleInstance:
        """Generates a fresh instance of the requested kind. Safe to call repeatedly."""
        entry = self.catalog.entry(kind)
        logger.info(f"Generating puzzle of kind {kind.name}")
        try:
            return entry.generate(entry=entry, generator_instance=self, rng=self.rng)
        except Exception as e:
            logger.error(f"Error generating {kind.name} puzzle: {e}", exc_info=True)
            raise ValueError(f"Failed to generate requested puzzle kind '{kind.name}'.") from e
