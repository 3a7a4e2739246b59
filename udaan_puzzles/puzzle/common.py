from enum import Enum, auto


class PuzzleKind(Enum):
    MINI_SUDOKU = auto()
    QUEENS = auto()
    TANGO = auto()
    ZIP = auto()
    PINPOINT = auto()
    CROSSCLIMB = auto()


class Verdict(Enum):
    ACCEPTED_CORRECT = auto()
    ACCEPTED_PARTIAL = auto() # Only produced by Pinpoint category choices
    ACCEPTED_INCORRECT = auto()
    REJECTED = auto()

    @property
    def is_accepted(self) -> bool:
        return self is not Verdict.REJECTED


class Annotation(Enum):
    UNSET = auto()
    CORRECT = auto()
    INCORRECT = auto()
    BLOCKED = auto()


class RungStatus(Enum):
    LOCKED = auto()
    CURRENT = auto()
    COMPLETED = auto()


# --- Constants ---
SUDOKU_SYMBOLS = tuple(range(1, 10))
SUDOKU_EMPTY = 0
SUDOKU_GIVEN_PROBABILITY = 0.4
SUDOKU_MIN_GIVEN = 4
SUDOKU_SHUFFLE_SWAPS = 3

ZIP_START = "start"
ZIP_END = "end"
ZIP_EMPTY = "empty"
ZIP_PATH = "path"

CROSSCLIMB_RUNGS = 5


def format_elapsed(seconds: int) -> str:
    """Formats a second counter as m:ss for the host's clock display."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"
