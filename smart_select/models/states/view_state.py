from PySide6.QtCore import QObject, Signal


class ViewState(QObject):
    summaryChanged = Signal(object)
    chipsChanged = Signal(object)
    listChanged = Signal(object, str)
    activeChanged = Signal(int)
    focusRequested = Signal()
    repositionRequested = Signal()
