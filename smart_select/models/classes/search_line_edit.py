from typing import Callable, Optional

from PySide6.QtWidgets import QLineEdit

from ...constant import Key
from .key_map import to_key


class SearchLineEdit(QLineEdit):
    def __init__(self, key_handler: Callable[[Key], bool], parent=None):
        super().__init__(parent)
        self._ph = ""
        self._key_handler = key_handler

    def focusInEvent(self, event):
        super().focusInEvent(event)
        self._ph = self.placeholderText()
        self.setPlaceholderText("")

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self.setPlaceholderText(self._ph)

    def update_placeholder(self, text):
        self._ph = text
        self.setPlaceholderText(text)

    def keyPressEvent(self, event):
        key: Optional[Key] = to_key(event.key())
        # Space stays text
        if key is not None and key is not Key.SPACE \
                and self._key_handler(key):
            event.accept()
            return
        super().keyPressEvent(event)
