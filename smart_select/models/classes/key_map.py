from typing import Optional

from PySide6.QtCore import Qt

from ...constant import Key

_QT_KEYS = {
    Qt.Key.Key_Return: Key.ENTER,
    Qt.Key.Key_Enter: Key.ENTER,
    Qt.Key.Key_Space: Key.SPACE,
    Qt.Key.Key_Down: Key.ARROW_DOWN,
    Qt.Key.Key_Up: Key.ARROW_UP,
    Qt.Key.Key_Escape: Key.ESCAPE,
}


def to_key(qt_key) -> Optional[Key]:
    return _QT_KEYS.get(qt_key)
