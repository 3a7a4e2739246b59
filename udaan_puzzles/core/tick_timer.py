import logging
from typing import Callable, Optional

from PyQt6.QtCore import QTimer

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class QtTickTimer:
    """
    Explicit handle around a repeating QTimer.

    The session controller owns one handle per active puzzle and cancels it
    on every transition out of the active phase. Requires a running Qt
    application (QCoreApplication or QApplication) to actually fire.
    """

    def __init__(self, callback: Callable[[], None], interval_ms: int = TICK_INTERVAL_MS):
        self._timer: Optional[QTimer] = QTimer()
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(callback)

    def start(self) -> None:
        if self._timer is None:
            raise RuntimeError("Cannot start a cancelled tick timer.")
        self._timer.start()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    def cancel(self) -> None:
        """Stops the timer and releases the underlying QTimer. The handle cannot be restarted."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.timeout.disconnect()
        self._timer.deleteLater()
        self._timer = None
        logger.debug("Tick timer cancelled and released.")

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()
