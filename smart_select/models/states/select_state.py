from PySide6.QtCore import QObject, Signal


class SelectState(QObject):
    opened = Signal(object)  # {}
    closed = Signal(object)  # {}
    searched = Signal(object)  # {"query": str}
    changed = Signal(object)  # {"value": list[str], "items": list}
    notified = Signal(str, object)  # "smart-select:<name>", payload
