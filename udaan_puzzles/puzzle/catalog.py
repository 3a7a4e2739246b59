"""
Puzzle Catalog Module - One table entry per puzzle kind.

Each entry ties a kind to its grid shape, generation function, validation
function, completion predicate, hint function, accepted move types and
scoring table. Scoring tables are policy: they load from
game_data/scoring_tables.json and can be overridden per kind without
touching any algorithm.
"""

import copy
import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

from .common import PuzzleKind
from .data import load_json_data
from .moves import (ChooseCategory, ExtendPath, FillCell, PaintCell, SubmitAnswer,
                    ToggleItem, ToggleToken)
from .generators import (crossclimb_gen, mini_sudoku_gen, pinpoint_gen, queens_gen,
                         tango_gen, zip_gen)
from .verifiers import (crossclimb_verifier, mini_sudoku_verifier, pinpoint_verifier,
                        queens_verifier, tango_verifier, zip_verifier)

logger = logging.getLogger(__name__)

CATALOG_FILE = "puzzle_catalog.json"
SCORING_FILE = "scoring_tables.json"


@dataclass(frozen=True)
class ScoringTable:
    """
    Per-kind scoring constants.

    Attributes:
        points: Named signed score deltas (e.g. 'correct_fill': 10)
        floor_at_zero: Clamp the running score at 0 after every delta
        carry_score_on_next: Keep the score when the host asks for the next puzzle
    """
    points: Mapping[str, int] = field(default_factory=dict)
    floor_at_zero: bool = True
    carry_score_on_next: bool = False

    @property
    def completion_bonus(self) -> int:
        return self.points.get("completion_bonus", 0)

    def apply(self, score: int, delta: int) -> int:
        new_score = score + delta
        return max(0, new_score) if self.floor_at_zero else new_score

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScoringTable':
        points = data.get("points", {})
        if not isinstance(points, Mapping) or not all(isinstance(v, int) for v in points.values()):
            raise ValueError(f"Scoring points must map names to integers, got {points!r}")
        return cls(
            points=MappingProxyType(dict(points)),
            floor_at_zero=bool(data.get("floor_at_zero", True)),
            carry_score_on_next=bool(data.get("carry_score_on_next", False)),
        )


@dataclass(frozen=True)
class CatalogEntry:
    kind: PuzzleKind
    title: str
    description: str
    difficulty: str
    grid_shape: Tuple[int, int]
    generate: Callable
    validate: Callable
    is_complete: Callable
    hint: Callable
    move_types: Tuple[Type, ...]
    scoring: ScoringTable


# Algorithm references per kind: (generate, validate, is_complete, hint, move types)
_ALGORITHMS: Dict[PuzzleKind, Tuple[Callable, Callable, Callable, Callable, Tuple[Type, ...]]] = {
    PuzzleKind.MINI_SUDOKU: (
        mini_sudoku_gen.generate_mini_sudoku_puzzle_internal,
        mini_sudoku_verifier.validate_mini_sudoku_move,
        mini_sudoku_verifier.is_mini_sudoku_complete,
        mini_sudoku_verifier.mini_sudoku_hint,
        (FillCell,),
    ),
    PuzzleKind.QUEENS: (
        queens_gen.generate_queens_puzzle_internal,
        queens_verifier.validate_queens_move,
        queens_verifier.is_queens_complete,
        queens_verifier.queens_hint,
        (ToggleToken,),
    ),
    PuzzleKind.TANGO: (
        tango_gen.generate_tango_puzzle_internal,
        tango_verifier.validate_tango_move,
        tango_verifier.is_tango_complete,
        tango_verifier.tango_hint,
        (PaintCell,),
    ),
    PuzzleKind.ZIP: (
        zip_gen.generate_zip_puzzle_internal,
        zip_verifier.validate_zip_move,
        zip_verifier.is_zip_complete,
        zip_verifier.zip_hint,
        (ExtendPath,),
    ),
    PuzzleKind.PINPOINT: (
        pinpoint_gen.generate_pinpoint_puzzle_internal,
        pinpoint_verifier.validate_pinpoint_move,
        pinpoint_verifier.is_pinpoint_complete,
        pinpoint_verifier.pinpoint_hint,
        (ToggleItem, ChooseCategory),
    ),
    PuzzleKind.CROSSCLIMB: (
        crossclimb_gen.generate_crossclimb_puzzle_internal,
        crossclimb_verifier.validate_crossclimb_move,
        crossclimb_verifier.is_crossclimb_complete,
        crossclimb_verifier.crossclimb_hint,
        (SubmitAnswer,),
    ),
}


def _merge_scoring(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge override tables over the defaults; 'points' merges key by key."""
    merged = copy.deepcopy(base)
    for kind_name, table in overrides.items():
        if kind_name not in PuzzleKind.__members__:
            logger.warning(f"Ignoring scoring override for unknown puzzle kind '{kind_name}'.")
            continue
        target = merged.setdefault(kind_name, {})
        for key, value in table.items():
            if key == "points":
                target.setdefault("points", {}).update(value)
            else:
                target[key] = value
    return merged


class PuzzleCatalog:
    """Lookup table from PuzzleKind to its CatalogEntry."""

    def __init__(self, scoring_overrides: Optional[Mapping[Union[str, PuzzleKind], Any]] = None,
                 overrides_file: Optional[str] = None, data_dir: Optional[str] = None):
        metadata = load_json_data(CATALOG_FILE, data_dir)
        scoring = load_json_data(SCORING_FILE, data_dir)

        if overrides_file:
            try:
                with open(overrides_file, 'r', encoding='utf-8') as f:
                    scoring = _merge_scoring(scoring, json.load(f))
                logger.info(f"Applied scoring overrides from {overrides_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load scoring overrides from {overrides_file}: {e}, using defaults")
        if scoring_overrides:
            named = {(k.name if isinstance(k, PuzzleKind) else k): v for k, v in scoring_overrides.items()}
            scoring = _merge_scoring(scoring, named)

        self._entries: Dict[PuzzleKind, CatalogEntry] = {}
        for kind, (generate, validate, is_complete, hint, move_types) in _ALGORITHMS.items():
            meta = metadata.get(kind.name)
            if meta is None:
                raise ValueError(f"Catalog metadata missing for puzzle kind {kind.name}.")
            table = scoring.get(kind.name)
            if table is None:
                raise ValueError(f"Scoring table missing for puzzle kind {kind.name}.")
            self._entries[kind] = CatalogEntry(
                kind=kind,
                title=meta.get("title", kind.name.title()),
                description=meta.get("description", ""),
                difficulty=meta.get("difficulty", ""),
                grid_shape=tuple(meta["grid_shape"]),
                generate=generate,
                validate=validate,
                is_complete=is_complete,
                hint=hint,
                move_types=move_types,
                scoring=ScoringTable.from_dict(table),
            )
        logger.debug(f"Puzzle catalog loaded with {len(self._entries)} entries.")

    def entry(self, kind: PuzzleKind) -> CatalogEntry:
        try:
            return self._entries[kind]
        except KeyError:
            raise ValueError(f"Puzzle kind {kind!r} is not in the catalog.") from None

    def __getitem__(self, kind: PuzzleKind) -> CatalogEntry:
        return self.entry(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def __iter__(self):
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def kinds(self) -> Tuple[PuzzleKind, ...]:
        return tuple(self._entries)
