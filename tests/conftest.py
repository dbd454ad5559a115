import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from smart_select import create_smart_select

# Ensure QApplication exists
qapp = QApplication.instance()
if not qapp:
    qapp = QApplication(sys.argv)


ITEMS = [
    {"id": "F1", "label": "11111", "type": "TAG", "currency": "USD"},
    {"id": "F2", "label": "AA2234", "type": "TAG", "currency": "USD"},
    {"id": "F3", "label": "BBB1", "type": "TAG", "currency": "EUR"},
]


class SignalRecorder:
    """Collects emissions of the controller's notification signals."""

    def __init__(self, controller):
        self.opened = []
        self.closed = []
        self.searched = []
        self.changed = []
        self.notified = []
        events = controller.events
        events.opened.connect(lambda payload: self.opened.append(payload))
        events.closed.connect(lambda payload: self.closed.append(payload))
        events.searched.connect(lambda payload: self.searched.append(payload))
        events.changed.connect(lambda payload: self.changed.append(payload))
        events.notified.connect(
            lambda name, payload: self.notified.append((name, payload)))


@pytest.fixture
def items():
    return [dict(item) for item in ITEMS]


@pytest.fixture
def make_select(items):
    def _make(**options):
        options.setdefault("root", object())
        options.setdefault("items", items)
        options.setdefault("get_subtitle", lambda item: item.get("currency"))
        return create_smart_select(**options)

    return _make


@pytest.fixture
def select(make_select):
    return make_select()


@pytest.fixture
def recorder(select):
    return SignalRecorder(select)
