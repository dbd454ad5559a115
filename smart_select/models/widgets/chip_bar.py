# -*- coding: utf-8 -*-
from functools import partial

from PySide6.QtCore import Signal, Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QPushButton, \
    QSizePolicy, QStackedLayout

from ..items import Item


class ChipBar(QWidget):
    CHIP_H = 26
    CHIP_TEXT_W = 140
    removeRequested = Signal(str)

    def __init__(self, /, parent=None):
        super().__init__(parent)
        self._chips: list[QPushButton] = []
        self._stack = QStackedLayout(self)

        # nothing selected, the bar takes no visible space
        self._stack.addWidget(QWidget(self))

        self._list_page = QWidget(self)
        self._list_layout = QHBoxLayout(self._list_page)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(6)
        self._list_layout.addStretch(1)
        self._stack.addWidget(self._list_page)

        self._stack.setCurrentIndex(0)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    @property
    def chips(self) -> list[QPushButton]:
        return list(self._chips)

    def set_items(self, items: list[Item]):
        for chip in self._chips:
            self._list_layout.removeWidget(chip)
            chip.deleteLater()
        self._chips.clear()

        if not items:
            self._stack.setCurrentIndex(0)
            return

        for item in items:
            chip = QPushButton(self._list_page)
            chip.setObjectName("smartSelectChip")
            chip.setMinimumHeight(self.CHIP_H)
            chip.setSizePolicy(QSizePolicy.Policy.Preferred,
                               QSizePolicy.Policy.Fixed)
            fm = chip.fontMetrics()
            elided = fm.elidedText(item.label, Qt.TextElideMode.ElideRight,
                                   self.CHIP_TEXT_W)
            chip.setText(f"{elided}  x")
            chip.setToolTip(item.label)
            chip.setCursor(Qt.CursorShape.PointingHandCursor)
            chip.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
            chip.setAutoDefault(False)
            chip.clicked.connect(partial(self.removeRequested.emit, item.id))
            # keep the trailing stretch last
            self._list_layout.insertWidget(len(self._chips), chip)
            self._chips.append(chip)

        self._stack.setCurrentIndex(1)
