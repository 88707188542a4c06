# -*- coding: utf-8 -*-
"""
src/sketchauth/gui/replay.py

Progressive redraw of the saved template, one point per timer tick.

The animator only reads the points it is given. Starting a new replay
stops the one in flight, and `stop()` is called when the canvas goes away.
"""

import logging

import numpy as np
from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


class ReplayAnimator(QObject):
    """
    Emits growing prefixes of a point sequence on a QTimer.
    """
    # Payload: the (k, 2) prefix drawn so far.
    frame = pyqtSignal(np.ndarray)
    finished = pyqtSignal()

    def __init__(self, interval_ms: int = 16, parent: QObject = None):
        super().__init__(parent)
        self._points = np.empty((0, 2))
        self._shown = 0
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._step)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self, points: np.ndarray):
        """Replays `points`, cancelling any replay already running."""
        if self.is_running:
            logger.debug("Cancelling the running replay.")
        self.stop()
        self._points = np.array(points, dtype=np.float64)
        self._shown = 1
        if len(self._points) < 2:
            self.finished.emit()
            return
        self._timer.start()

    def stop(self):
        self._timer.stop()

    def _step(self):
        self._shown += 1
        self.frame.emit(self._points[:self._shown])
        if self._shown >= len(self._points):
            self._timer.stop()
            self.finished.emit()
