import json

import pytest

from udaan_puzzles.puzzle import (ChooseCategory, FillCell, PuzzleCatalog, PuzzleKind,
                                  ScoringTable, SubmitAnswer, ToggleItem)


def test_catalog_has_one_entry_per_kind(catalog):
    assert len(catalog) == len(PuzzleKind)
    assert set(catalog.kinds()) == set(PuzzleKind)
    for kind in PuzzleKind:
        assert kind in catalog
        entry = catalog[kind]
        assert entry.kind is kind
        assert entry.title
        assert callable(entry.generate) and callable(entry.validate)
        assert callable(entry.is_complete) and callable(entry.hint)


def test_grid_shapes(catalog):
    assert catalog[PuzzleKind.MINI_SUDOKU].grid_shape == (3, 3)
    assert catalog[PuzzleKind.QUEENS].grid_shape == (6, 6)
    assert catalog[PuzzleKind.TANGO].grid_shape == (4, 4)
    assert catalog[PuzzleKind.ZIP].grid_shape == (5, 5)
    assert catalog[PuzzleKind.CROSSCLIMB].grid_shape == (5, 1)


def test_default_scoring_tables(catalog):
    sudoku = catalog[PuzzleKind.MINI_SUDOKU].scoring
    assert sudoku.points["correct_fill"] == 10
    assert sudoku.points["incorrect_fill"] == -5
    assert catalog[PuzzleKind.QUEENS].scoring.points["legal_placement"] == 25
    assert catalog[PuzzleKind.QUEENS].scoring.completion_bonus == 100
    assert catalog[PuzzleKind.TANGO].scoring.points["correct_cell"] == 20
    assert catalog[PuzzleKind.ZIP].scoring.points["invalid_extension"] == -5
    pinpoint = catalog[PuzzleKind.PINPOINT].scoring
    assert (pinpoint.points["fully_correct"], pinpoint.points["partially_correct"], pinpoint.points["incorrect"]) == (100, 25, -10)
    assert catalog[PuzzleKind.CROSSCLIMB].scoring.points["streak_bonus"] == 5


def test_carry_over_only_for_sequences(catalog):
    carrying = {entry.kind for entry in catalog if entry.scoring.carry_score_on_next}
    assert carrying == {PuzzleKind.PINPOINT, PuzzleKind.CROSSCLIMB}


def test_move_types(catalog):
    assert catalog[PuzzleKind.MINI_SUDOKU].move_types == (FillCell,)
    assert catalog[PuzzleKind.PINPOINT].move_types == (ToggleItem, ChooseCategory)
    assert catalog[PuzzleKind.CROSSCLIMB].move_types == (SubmitAnswer,)


def test_scoring_overrides_by_kind_and_name():
    catalog = PuzzleCatalog(scoring_overrides={
        PuzzleKind.MINI_SUDOKU: {"points": {"correct_fill": 15}},
        "TANGO": {"floor_at_zero": False},
    })
    sudoku = catalog[PuzzleKind.MINI_SUDOKU].scoring
    assert sudoku.points["correct_fill"] == 15
    # Untouched keys keep their defaults
    assert sudoku.points["incorrect_fill"] == -5
    assert catalog[PuzzleKind.TANGO].scoring.floor_at_zero is False


def test_scoring_overrides_file(tmp_path):
    overrides = tmp_path / "scoring.json"
    overrides.write_text(json.dumps({"ZIP": {"points": {"completion_bonus": 250}}, "CHESS": {}}))
    catalog = PuzzleCatalog(overrides_file=str(overrides))
    assert catalog[PuzzleKind.ZIP].scoring.completion_bonus == 250


def test_unreadable_overrides_file_falls_back_to_defaults(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    catalog = PuzzleCatalog(overrides_file=str(broken))
    assert catalog[PuzzleKind.ZIP].scoring.completion_bonus == 100


def test_scoring_table_floor():
    floored = ScoringTable.from_dict({"points": {"x": 1}})
    assert floored.apply(3, -5) == 0
    unfloored = ScoringTable.from_dict({"points": {"x": 1}, "floor_at_zero": False})
    assert unfloored.apply(3, -5) == -2


def test_scoring_table_rejects_non_integer_points():
    with pytest.raises(ValueError):
        ScoringTable.from_dict({"points": {"x": "ten"}})


def test_scoring_points_are_read_only(catalog):
    with pytest.raises(TypeError):
        catalog[PuzzleKind.ZIP].scoring.points["valid_extension"] = 1000
