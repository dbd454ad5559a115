from typing import Callable

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame

from ...constant import Key
from .key_map import to_key


class SelectControl(QFrame):
    clicked = Signal()

    def __init__(self, key_handler: Callable[[Key], bool], parent=None):
        super().__init__(parent)
        self._key_handler = key_handler
        self.setObjectName("smartSelectControl")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mousePressEvent(self, event):
        self.setFocus(Qt.FocusReason.MouseFocusReason)
        self.clicked.emit()

    def keyPressEvent(self, event):
        key = to_key(event.key())
        if key is not None and self._key_handler(key):
            event.accept()
            return
        super().keyPressEvent(event)

    def set_open(self, is_open: bool):
        self.setProperty("open", "true" if is_open else "false")
        self.style().unpolish(self)
        self.style().polish(self)
