# -*- coding: utf-8 -*-
"""
src/sketchauth/app.py

Application window for SketchAuth.

This module contains `MainWindow`, which puts the sketch canvas next to the
controls (save, verify, clear, threshold, template status, overlay toggle,
replay, export and import), and `SketchAuthApp`, which wires the
configuration, the template store and the session controller together.
"""

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (QCheckBox, QFileDialog, QFrame, QHBoxLayout, QLabel, QPushButton,
                             QSlider, QVBoxLayout, QWidget)

from .config import APP_NAME, Config, get_config
from .core.errors import SketchAuthError
from .core.session import SessionController
from .core.template_store import TemplateStore
from .gui.replay import ReplayAnimator
from .gui.sketch_canvas import SketchCanvas
from .utils.blob_store import FileBlobStore
from .utils.clipboard_manager import copy_to_clipboard, paste_from_clipboard

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "sketch-template.json"
THRESHOLD_MIN = 5
THRESHOLD_MAX = 60
TIPS = ("Tips: draw with a consistent stroke, test a few times and adjust the "
        "threshold as needed. Use the overlay to compare visually.")


class MainWindow(QWidget):
    """
    The sketch password window: canvas on the left, controls on the right.
    """

    def __init__(self, controller: SessionController, config: Config, parent: QWidget = None):
        super().__init__(parent)
        self.controller = controller
        self.config = config

        self.setWindowTitle(f"{APP_NAME} - Sketch Password")

        self.canvas = SketchCanvas(controller, fill=config.overlay_fill)
        self.canvas.set_show_overlay(config.show_overlay)
        self.replay = ReplayAnimator(interval_ms=config.replay_interval_ms, parent=self)
        self.replay.frame.connect(self.canvas.set_replay_frame)
        self.canvas.stroke_finished.connect(lambda _count: self._show_message())

        self._setup_ui()
        self._refresh_template_state()

    def _setup_ui(self):
        """Creates and arranges the widgets within the window."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        frame = QFrame()
        frame.setFrameShape(QFrame.Shape.Box)
        frame.setStyleSheet("QFrame { border: 1px solid #dddddd; }")
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(0, 0, 0, 0)
        frame_layout.addWidget(self.canvas)
        layout.addWidget(frame)

        panel = QVBoxLayout()
        panel.setSpacing(8)

        # Save / Verify / Clear
        actions = QHBoxLayout()
        for text, slot in (("Save Pattern", self.save_template),
                           ("Verify", self.verify),
                           ("Clear", self.clear)):
            button = QPushButton(text)
            button.clicked.connect(slot)
            actions.addWidget(button)
        panel.addLayout(actions)

        # Threshold
        self.threshold_label = QLabel()
        self.threshold_slider = QSlider(Qt.Orientation.Horizontal)
        self.threshold_slider.setRange(THRESHOLD_MIN, THRESHOLD_MAX)
        initial = int(round(self.controller.threshold))
        self.threshold_slider.setValue(max(THRESHOLD_MIN, min(THRESHOLD_MAX, initial)))
        self.threshold_slider.valueChanged.connect(self.set_threshold)
        hint = QLabel("Lower = stricter")
        hint.setStyleSheet("color: #666666; font-size: 11px;")
        panel.addWidget(self.threshold_label)
        panel.addWidget(self.threshold_slider)
        panel.addWidget(hint)
        self._update_threshold_label()

        # Template status
        self.template_label = QLabel()
        self.remove_button = QPushButton("Remove")
        self.remove_button.clicked.connect(self.remove_template)
        panel.addWidget(self.template_label)
        panel.addWidget(self.remove_button)

        # Overlay, replay, transfer
        self.overlay_checkbox = QCheckBox("Show saved overlay")
        self.overlay_checkbox.setChecked(self.canvas.show_overlay)
        self.overlay_checkbox.toggled.connect(self.canvas.set_show_overlay)
        panel.addWidget(self.overlay_checkbox)

        transfer = QHBoxLayout()
        for text, slot in (("Replay", self.replay_template),
                           ("Export", self.export_template),
                           ("Import", self.import_template)):
            button = QPushButton(text)
            button.clicked.connect(slot)
            transfer.addWidget(button)
        panel.addLayout(transfer)

        clipboard = QHBoxLayout()
        for text, slot in (("Copy", self.copy_template),
                           ("Paste", self.paste_template)):
            button = QPushButton(text)
            button.clicked.connect(slot)
            clipboard.addWidget(button)
        panel.addLayout(clipboard)

        # Messages
        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        self.message_label.setMinimumHeight(40)
        tips = QLabel(TIPS)
        tips.setWordWrap(True)
        tips.setStyleSheet("color: #888888; font-size: 11px;")
        panel.addWidget(self.message_label)
        panel.addWidget(tips)
        panel.addStretch(1)

        side = QWidget()
        side.setFixedWidth(260)
        side.setLayout(panel)
        layout.addWidget(side)

    # --- State display ---

    def _show_message(self):
        self.message_label.setText(self.controller.message)

    def _update_threshold_label(self):
        self.threshold_label.setText(f"Threshold: {self.controller.threshold:g}")

    def _refresh_template_state(self):
        template = self.controller.template_for_display()
        saved = template is not None
        self.template_label.setText(f"<b>Template:</b> {'Saved' if saved else 'Not saved'}")
        self.remove_button.setVisible(saved)
        self.canvas.set_overlay(template)

    def _run(self, action):
        """Runs a controller action, showing its message whatever the outcome."""
        try:
            return action()
        except SketchAuthError as e:
            logger.info(f"Action rejected: {e.message}")
            return None
        finally:
            self._show_message()

    # --- Slots ---

    def set_threshold(self, value: int):
        self.controller.threshold = value
        self._update_threshold_label()

    def save_template(self):
        if self._run(self.controller.save_as_template) is not None:
            self._refresh_template_state()

    def verify(self):
        self._run(self.controller.verify)

    def clear(self):
        self.replay.stop()
        self.controller.clear()
        self.canvas.clear()
        self._show_message()

    def remove_template(self):
        self.replay.stop()
        self._run(self.controller.remove_template)
        self.canvas.clear()
        self._refresh_template_state()

    def replay_template(self):
        template = self._run(self.controller.replay_template)
        if template is not None:
            self.replay.start(self.canvas.map_template(template))

    def export_template(self):
        data = self._run(self.controller.export_template)
        if data is None:
            return
        path, _ = QFileDialog.getSaveFileName(self, "Export template", EXPORT_FILENAME,
                                              "JSON files (*.json)")
        if not path:
            return
        try:
            Path(path).write_bytes(data)
            logger.info(f"Template exported to {path}")
        except OSError as e:
            logger.error(f"Could not write template to {path}: {e}")
            self.message_label.setText(f"Could not write {path}.")

    def import_template(self):
        path, _ = QFileDialog.getOpenFileName(self, "Import template", "", "JSON files (*.json)")
        if not path:
            return
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error(f"Could not read template from {path}: {e}")
            self.message_label.setText(f"Could not read {path}.")
            return
        self._import(data)

    def copy_template(self):
        data = self._run(self.controller.export_template)
        if data is not None and not copy_to_clipboard(data.decode("utf-8")):
            self.message_label.setText("Could not access the clipboard.")

    def paste_template(self):
        text = paste_from_clipboard()
        if not text:
            self.message_label.setText("Clipboard is empty.")
            return
        self._import(text.encode("utf-8"))

    def _import(self, data: bytes):
        if self._run(lambda: self.controller.import_template(data)) is not None:
            self._refresh_template_state()

    def closeEvent(self, event):
        self.replay.stop()
        super().closeEvent(event)


class SketchAuthApp:
    """
    The application controller. Builds the store, the session and the window.
    """

    def __init__(self, config: Config = None):
        self.config = config or get_config()
        logger.info(f"Using application directory {self.config.app_dir}")

        self.template_store = TemplateStore(
            FileBlobStore(self.config.template_dir),
            key=self.config.template_key,
            min_points=self.config.min_save_points,
        )
        self.controller = SessionController(
            self.template_store,
            threshold=self.config.threshold,
            profile=self.config.profile,
            min_save_points=self.config.min_save_points,
            min_verify_points=self.config.min_verify_points,
        )
        self.window = MainWindow(self.controller, self.config)
        self.window.show()
