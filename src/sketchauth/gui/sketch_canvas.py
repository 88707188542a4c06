# -*- coding: utf-8 -*-
"""
src/sketchauth/gui/sketch_canvas.py

Defines the SketchCanvas widget the gesture is drawn on.

The widget forwards pointer press, move and release to the session
controller's capture operations and paints three layers: the saved template
as a faint overlay, the replay in progress, and the stroke being drawn.
Touch input reaches it as synthesized mouse events.
"""

import logging
from typing import Optional

import numpy as np
from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF
from PyQt6.QtWidgets import QWidget

from ..core.session import SessionController
from .overlay import DEFAULT_FILL, fit_to_view

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 720
CANVAS_HEIGHT = 480

STROKE_COLOR = QColor("#111111")
OVERLAY_COLOR = QColor(0, 119, 255, 90)  # #0077ff at ~35% opacity
REPLAY_COLOR = QColor(255, 102, 0, 242)  # #ff6600 at ~95% opacity


class SketchCanvas(QWidget):
    """
    Drawing surface feeding a SessionController.
    """
    # Emitted on release with the number of points captured.
    stroke_finished = pyqtSignal(int)

    def __init__(self, controller: SessionController, fill: float = DEFAULT_FILL, parent: QWidget = None):
        super().__init__(parent)
        self.controller = controller
        self.fill = fill
        self.show_overlay = True
        self._overlay: Optional[np.ndarray] = None
        self._replay: Optional[np.ndarray] = None

        self.setFixedSize(CANVAS_WIDTH, CANVAS_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_StaticContents)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self.setStyleSheet("background-color: white;")
        self.setAutoFillBackground(True)

    # --- Layers ---

    def set_overlay(self, template: Optional[np.ndarray]):
        """Sets the template drawn faintly behind the stroke (None hides it)."""
        if template is None or len(template) == 0:
            self._overlay = None
        else:
            self._overlay = fit_to_view(template, self.width(), self.height(), self.fill)
        self.update()

    def set_show_overlay(self, visible: bool):
        self.show_overlay = visible
        self.update()

    def map_template(self, template: np.ndarray) -> np.ndarray:
        """Maps a template into this canvas's coordinates."""
        return fit_to_view(template, self.width(), self.height(), self.fill)

    def set_replay_frame(self, points: Optional[np.ndarray]):
        self._replay = points
        self.update()

    def clear(self):
        self._replay = None
        self.update()

    # --- Input ---

    def mousePressEvent(self, event):
        """Starts a new stroke when the left mouse button is pressed."""
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._replay = None
            self.controller.begin_capture((pos.x(), pos.y()))
            self.update()

    def mouseMoveEvent(self, event):
        if self.controller.is_capturing:
            pos = event.position()
            self.controller.extend_capture((pos.x(), pos.y()))
            self.update()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.controller.is_capturing:
            self.controller.end_capture()
            count = len(self.controller.stroke)
            logger.debug(f"Stroke finished with {count} points.")
            self.stroke_finished.emit(count)

    def leaveEvent(self, event):
        """Leaving the canvas ends the stroke, as releasing does."""
        if self.controller.is_capturing:
            self.controller.end_capture()
            self.stroke_finished.emit(len(self.controller.stroke))
        super().leaveEvent(event)

    # --- Painting ---

    @staticmethod
    def _draw_polyline(painter: QPainter, points, color: QColor, width: float):
        if points is None or len(points) < 2:
            return
        pen = QPen(QBrush(color), width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap, Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.drawPolyline(QPolygonF([QPointF(float(x), float(y)) for x, y in points]))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor("white"))

        if self.show_overlay:
            self._draw_polyline(painter, self._overlay, OVERLAY_COLOR, 3)
        self._draw_polyline(painter, self._replay, REPLAY_COLOR, 4)
        self._draw_polyline(painter, self.controller.stroke, STROKE_COLOR, 4)
