from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from .common import Annotation, PuzzleKind, RungStatus, Verdict
from .grid import GridModel


@dataclass(frozen=True)
class Rung:
    """One Crossclimb question as stored in a ladder cell."""
    question: str
    answer: str
    options: Tuple[str, ...]
    difficulty: str
    points: int
    status: RungStatus = RungStatus.LOCKED
    user_answer: str = ""
    is_correct: Optional[bool] = None


@dataclass(frozen=True)
class CellChange:
    """A single cell write produced by a validator. None leaves that part untouched."""
    row: int
    col: int
    value: Any = None
    annotation: Optional[Annotation] = None
    write_value: bool = True


@dataclass
class MoveOutcome:
    """
    Verdict for one move plus the delta to apply.

    Attributes:
        verdict: Accepted-Correct / Accepted-Partial / Accepted-Incorrect / Rejected
        points: Signed score delta before the floor is applied
        message: Human-readable status for the host
        cell_changes: Cell writes to commit
        state_changes: Entries merged into PuzzleInstance.state
    """
    verdict: Verdict
    points: int = 0
    message: str = ""
    cell_changes: List[CellChange] = field(default_factory=list)
    state_changes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def rejected(cls, message: str) -> 'MoveOutcome':
        return cls(verdict=Verdict.REJECTED, message=message)

    @property
    def has_delta(self) -> bool:
        return bool(self.cell_changes or self.state_changes)


class PuzzleInstance:
    """A live puzzle: its grid, the immutable solution reference and kind-specific live state."""

    def __init__(self, kind: PuzzleKind, grid: GridModel, solution: Any,
                 state: Optional[Dict[str, Any]] = None):
        self.kind = kind
        self.grid = grid
        # Mapping solutions get a read-only view; the rest are built from tuples
        self._solution = MappingProxyType(dict(solution)) if isinstance(solution, dict) else solution
        self.state: Dict[str, Any] = dict(state) if state else {}

    @property
    def solution(self) -> Any:
        return self._solution

    def given_cells(self) -> Dict[Tuple[int, int], Any]:
        return {(r, c): cell.value for r, c, cell in self.grid.iter_cells() if not cell.mutable}

    def __repr__(self) -> str:
        return f"PuzzleInstance({self.kind.name}, {self.grid!r})"
