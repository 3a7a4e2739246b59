import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

from ..puzzle.catalog import CatalogEntry, PuzzleCatalog
from ..puzzle.common import PuzzleKind, format_elapsed
from ..puzzle.errors import ImmutableCellError, InvalidMoveShape, OutOfBoundsError
from ..puzzle.generator import PuzzleGenerator
from ..puzzle.puzzle_types import MoveOutcome, PuzzleInstance
from ..puzzle.verifier import MoveVerifier
from .tick_timer import QtTickTimer

# Setup basic logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

ScoreCallback = Callable[[int], None]


class SessionPhase(Enum):
    GENERATING = auto()
    ACTIVE = auto()
    COMPLETE = auto()


@dataclass
class SessionState:
    """Running bookkeeping for one puzzle. status_message is advisory only."""
    score: int = 0
    elapsed_seconds: int = 0
    move_count: int = 0
    completed: bool = False
    status_message: str = ""
    puzzle_number: int = 1


class SessionController:
    """
    Drives one puzzle kind for the host: generation, moves, score, clock and completion.

    Phases: GENERATING -> ACTIVE -> COMPLETE. New/next puzzle requests go back
    to GENERATING from either ACTIVE or COMPLETE. The host receives
    on_score_update(score) after every score-affecting change and
    on_game_complete(final_score) exactly once per finished puzzle.
    """

    def __init__(self, kind: PuzzleKind,
                 on_score_update: Optional[ScoreCallback] = None,
                 on_game_complete: Optional[ScoreCallback] = None,
                 catalog: Optional[PuzzleCatalog] = None,
                 generator: Optional[PuzzleGenerator] = None,
                 timer_factory: Optional[Callable[[Callable[[], None]], Any]] = None):
        if generator is None:
            generator = PuzzleGenerator(catalog=catalog)
        self.generator = generator
        self.catalog = generator.catalog
        self.verifier = MoveVerifier(self.catalog)
        self.kind = kind
        self.entry: CatalogEntry = self.catalog.entry(kind)

        self.on_score_update = on_score_update
        self.on_game_complete = on_game_complete
        self._timer_factory = timer_factory or QtTickTimer
        self._timer = None
        # Bumped on every regeneration so ticks from a superseded timer are ignored
        self._session_id = 0

        self._phase = SessionPhase.GENERATING
        self._instance: Optional[PuzzleInstance] = None
        self._state = SessionState()
        self._completion_notified = False

    # --- Read-only views ---
    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def instance(self) -> Optional[PuzzleInstance]:
        return self._instance

    @property
    def state(self) -> SessionState:
        """A copy of the session bookkeeping; the controller is its only writer."""
        return dataclasses.replace(self._state)

    @property
    def formatted_time(self) -> str:
        return format_elapsed(self._state.elapsed_seconds)

    # --- Lifecycle ---
    def start(self) -> None:
        """Generates the first puzzle and starts the clock."""
        if self._instance is not None:
            logger.warning(f"{self.kind.name} session already started; use request_new_puzzle() to reset.")
            return
        self._begin_puzzle(carry_score=False, puzzle_number=1)

    def request_new_puzzle(self) -> None:
        """Discards the current puzzle and its score, time and move count."""
        logger.info(f"New {self.kind.name} puzzle requested.")
        self._begin_puzzle(carry_score=False, puzzle_number=self._state.puzzle_number)
        self._state.status_message = "Puzzle reset! Try again."

    def request_next_puzzle(self) -> None:
        """Like request_new_puzzle(), but kinds that accumulate keep their score."""
        if self._phase is SessionPhase.ACTIVE:
            logger.info(f"Next {self.kind.name} puzzle requested before the current one was finished.")
        self._begin_puzzle(carry_score=self.entry.scoring.carry_score_on_next,
                           puzzle_number=self._state.puzzle_number + 1)

    def stop(self) -> None:
        """Releases the clock when the host closes the game."""
        self._release_timer()
        logger.info(f"{self.kind.name} session stopped.")

    def _begin_puzzle(self, carry_score: bool, puzzle_number: int) -> None:
        self._release_timer()
        self._phase = SessionPhase.GENERATING
        self._session_id += 1
        previous_score = self._state.score

        self._instance = self.generator.generate(self.kind)
        self._state = SessionState(
            score=previous_score if carry_score else 0,
            puzzle_number=puzzle_number,
            status_message=self.entry.description,
        )
        self._completion_notified = False
        self._phase = SessionPhase.ACTIVE
        self._start_timer()
        logger.info(f"{self.kind.name} puzzle #{puzzle_number} active (score {self._state.score}).")
        self._notify_score()

    # --- Clock ---
    def _start_timer(self) -> None:
        session_id = self._session_id
        self._timer = self._timer_factory(lambda: self._on_timer(session_id))
        self._timer.start()

    def _release_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self, session_id: int) -> None:
        if session_id != self._session_id:
            logger.debug(f"Ignoring tick from superseded timer (session {session_id}).")
            return
        self.tick()

    def tick(self) -> None:
        """Advances the clock by one second while the puzzle is active."""
        if self._phase is not SessionPhase.ACTIVE:
            return
        self._state.elapsed_seconds += 1

    # --- Moves ---
    def submit_move(self, move: Any) -> MoveOutcome:
        """
        Validates and applies one move.

        Returns:
            The MoveOutcome; its points include the completion bonus when this
            move finished the puzzle (before the score floor is applied).

        Raises:
            OutOfBoundsError: the move references a cell outside the grid (host bug)
            RuntimeError: start() has not been called
        """
        if self._instance is None:
            raise RuntimeError("Session not started. Call start() first.")
        if self._phase is SessionPhase.COMPLETE:
            outcome = MoveOutcome.rejected("Puzzle already complete! Start a new one.")
            self._state.status_message = outcome.message
            return outcome

        try:
            outcome = self.verifier.check(self._instance, move)
        except ImmutableCellError as e:
            logger.debug(f"Ignoring move on a given cell: {e}")
            return MoveOutcome.rejected(str(e))
        except InvalidMoveShape as e:
            logger.warning(f"Rejected malformed move: {e}")
            return MoveOutcome.rejected(str(e))
        except OutOfBoundsError as e:
            logger.error(f"Move {move} references a nonexistent cell: {e}", exc_info=True)
            raise

        self.verifier.apply(self._instance, outcome)
        if outcome.verdict.is_accepted:
            self._state.move_count += 1

        completed_now = self.entry.is_complete(self._instance)
        if completed_now:
            outcome.points += self.entry.scoring.completion_bonus

        if outcome.points:
            self._state.score = self.entry.scoring.apply(self._state.score, outcome.points)
            self._notify_score()
        self._state.status_message = outcome.message

        if completed_now:
            self._complete()
        return outcome

    def hint(self) -> Optional[str]:
        """Advisory hint for the current puzzle. Never changes score or grid."""
        if self._instance is None or self._phase is not SessionPhase.ACTIVE:
            return None
        text = self.entry.hint(self._instance)
        if text:
            self._state.status_message = text
        return text

    def _complete(self) -> None:
        self._phase = SessionPhase.COMPLETE
        self._state.completed = True
        self._release_timer()
        logger.info(f"{self.kind.name} puzzle completed: score {self._state.score}, "
                    f"{self._state.move_count} moves, {self.formatted_time}.")
        if not self._completion_notified:
            self._completion_notified = True
            if self.on_game_complete:
                self.on_game_complete(self._state.score)

    def _notify_score(self) -> None:
        if self.on_score_update:
            self.on_score_update(self._state.score)
