#===============================================================================
#  spwn | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reusable UI widgets (search input, result list). Keeps the window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QFont, QIcon
from PySide6.QtWidgets import QLineEdit, QListWidget, QListWidgetItem

from .constants import INPUT_PLACEHOLDER, THEME_SELECTED
from .models import ApplicationEntry


class SearchInput(QLineEdit):
    """Single-line query field that reports navigation keys as signals."""

    arrowUp = Signal()
    arrowDown = Signal()
    escapePressed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setPlaceholderText(INPUT_PLACEHOLDER)
        self.setFont(QFont("Segoe UI", 14))

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key_Up:
            self.arrowUp.emit()
        elif key == Qt.Key_Down:
            self.arrowDown.emit()
        elif key == Qt.Key_Escape:
            self.escapePressed.emit()
        else:
            super().keyPressEvent(event)


def icon_for(entry: ApplicationEntry) -> QIcon:
    ref = entry.icon_reference
    if not ref:
        return QIcon()
    if Path(ref).is_absolute():
        return QIcon(ref)
    return QIcon.fromTheme(ref)


class ResultList(QListWidget):
    """Read-only list of matching apps. Selection is driven by the state machine."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.NoFocus)
        self.setSelectionMode(QListWidget.NoSelection)
        self.setUniformItemSizes(True)
        self.setFont(QFont("Monospace", 12))

    def set_entries(self, entries: Sequence[ApplicationEntry], selected_index: int) -> None:
        self.clear()
        for i, entry in enumerate(entries):
            item = QListWidgetItem(icon_for(entry), entry.name)
            if i == selected_index:
                item.setBackground(QColor(THEME_SELECTED))
                item.setForeground(QColor("white"))
            self.addItem(item)
        if entries:
            self.scrollToItem(self.item(selected_index))
