from .game_state import SessionController, SessionPhase, SessionState
from .tick_timer import QtTickTimer
