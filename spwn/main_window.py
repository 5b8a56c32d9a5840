#===============================================================================
#  spwn | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Frameless always-on-top launcher window:
#    - query field (Up/Down navigate, Enter runs, Esc closes)
#    - matching application list
#    - output pane for command/app results
#  The window only forwards events to LauncherState and renders its snapshots.
#===============================================================================

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from .constants import (
    APP_TITLE,
    HEIGHT_COLLAPSED,
    HEIGHT_WITH_OUTPUT,
    HEIGHT_WITH_RESULTS,
    RESULT_LIST_HEIGHT,
    THEME_BG,
    THEME_BORDER,
    THEME_PANEL,
    WINDOW_WIDTH,
)
from .models import Direction, StateSnapshot
from .state import LauncherState
from .ui_widgets import ResultList, SearchInput

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, launcher: LauncherState):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)

        self.launcher = launcher
        self._task: Optional[asyncio.Future] = None

        self.setStyleSheet(f"""
        QMainWindow {{ background: {THEME_BG}; }}
        QLineEdit {{
            color: white;
            background: {THEME_PANEL};
            border: 1px solid {THEME_BORDER};
            padding: 10px;
        }}
        QListWidget, QPlainTextEdit {{
            color: white;
            background: {THEME_BG};
            border: none;
        }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(0)

        self.input = SearchInput()
        self.input.textChanged.connect(self.launcher.query_changed)
        self.input.returnPressed.connect(self.run_submission)
        self.input.arrowDown.connect(lambda: self.launcher.navigate(Direction.NEXT))
        self.input.arrowUp.connect(lambda: self.launcher.navigate(Direction.PREVIOUS))
        self.input.escapePressed.connect(self.launcher.close)
        layout.addWidget(self.input)

        self.results = ResultList()
        self.results.setFixedHeight(RESULT_LIST_HEIGHT)
        layout.addWidget(self.results)

        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        self.output.setFont(QFont("Monospace", 11))
        layout.addWidget(self.output)

        self.launcher.subscribe(self.render)
        self.launcher.on_close(self.shutdown)

        self.render(self.launcher.snapshot())
        self.input.setFocus()

    # ----------------------------
    # Rendering
    # ----------------------------
    def render(self, snap: StateSnapshot):
        if self.input.text() != snap.query:
            self.input.blockSignals(True)
            self.input.setText(snap.query)
            self.input.blockSignals(False)

        self.results.set_entries(snap.entries, snap.selected_index)
        self.results.setVisible(bool(snap.entries))

        if snap.pending:
            self.output.setPlainText("Running…")
        else:
            self.output.setPlainText(snap.result_text)
        show_output = snap.pending or snap.has_result
        self.output.setVisible(show_output)

        if show_output:
            height = HEIGHT_WITH_OUTPUT
        elif snap.entries:
            height = HEIGHT_WITH_RESULTS
        else:
            height = HEIGHT_COLLAPSED
        self.setFixedSize(WINDOW_WIDTH, height)

    def center_on_screen(self):
        screen = self.screen() or QApplication.primaryScreen()
        if screen is None:
            return
        geo = self.frameGeometry()
        geo.moveCenter(screen.availableGeometry().center())
        self.move(geo.topLeft())

    # ----------------------------
    # Execution
    # ----------------------------
    def run_submission(self):
        pending = self.launcher.submit()
        if pending is None:
            return
        self._task = asyncio.ensure_future(pending)

    # ----------------------------
    # Visibility / shutdown
    # ----------------------------
    @Slot()
    def toggle_visibility(self):
        """Entry point for an external hotkey source."""
        if self.launcher.toggle_visibility():
            self.show()
            self.center_on_screen()
            self.raise_()
            self.activateWindow()
            self.input.setFocus()
        else:
            self.hide()

    def shutdown(self):
        if self._task is not None and not self._task.done():
            # the process itself keeps running; only our wait is dropped
            self._task.cancel()
        self.hide()
        QApplication.quit()

    def closeEvent(self, event):
        self.launcher.close()
        event.accept()
