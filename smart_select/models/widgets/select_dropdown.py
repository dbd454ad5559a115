# -*- coding: utf-8 -*-
from typing import Callable, Iterable

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QListWidget, QListWidgetItem, QPushButton,
    QVBoxLayout
)

from ...constant import Key, NO_RESULTS_TEXT, SEARCH_PLACEHOLDER
from ..classes import SearchLineEdit
from ..items import Item

_ID_ROLE = Qt.ItemDataRole.UserRole


class SelectDropdown(QFrame):
    rowClicked = Signal(int)
    searchEdited = Signal(str)
    searchCleared = Signal()

    def __init__(self, key_handler: Callable[[Key], bool], parent=None):
        super().__init__(parent)
        self.setObjectName("smartSelectDropdown")
        self.setWindowFlags(Qt.WindowType.Tool
                            | Qt.WindowType.FramelessWindowHint)

        root = QVBoxLayout(self)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        search_row = QHBoxLayout()
        self.search_edit = SearchLineEdit(key_handler, self)
        self.search_edit.update_placeholder(SEARCH_PLACEHOLDER)
        self.search_edit.textEdited.connect(self.searchEdited)
        self.search_clear = QPushButton("x", self)
        self.search_clear.setObjectName("smartSelectSearchClear")
        self.search_clear.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.search_clear.setAutoDefault(False)
        self.search_clear.clicked.connect(self._on_search_clear)
        search_row.addWidget(self.search_edit, 1)
        search_row.addWidget(self.search_clear)
        root.addLayout(search_row)

        self.list = QListWidget(self)
        self.list.setObjectName("smartSelectList")
        self.list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.list.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self.list, 1)

    def set_rows(self, items: Iterable[Item], selected: set[str]):
        self.list.clear()
        rows = list(items)
        if not rows:
            empty = QListWidgetItem(NO_RESULTS_TEXT)
            empty.setFlags(Qt.ItemFlag.NoItemFlags)
            self.list.addItem(empty)
            return
        for item in rows:
            text = item.label
            if item.subtitle:
                text = f"{text}\n{item.subtitle}"
            row = QListWidgetItem(text)
            row.setData(_ID_ROLE, item.id)
            row.setFlags(Qt.ItemFlag.ItemIsEnabled
                         | Qt.ItemFlag.ItemIsSelectable)
            row.setCheckState(Qt.CheckState.Checked if item.id in selected
                              else Qt.CheckState.Unchecked)
            self.list.addItem(row)

    def sync_checks(self, selected: set[str]):
        for i in range(self.list.count()):
            row = self.list.item(i)
            item_id = row.data(_ID_ROLE)
            if item_id is None:
                continue
            row.setCheckState(Qt.CheckState.Checked if item_id in selected
                              else Qt.CheckState.Unchecked)

    @Slot(int)
    def set_active(self, index: int):
        if 0 <= index < self.list.count():
            self.list.setCurrentRow(index)
            self.list.scrollToItem(self.list.item(index))
        else:
            self.list.setCurrentRow(-1)
            self.list.clearSelection()

    @Slot(QListWidgetItem)
    def _on_item_clicked(self, row: QListWidgetItem):
        if row.data(_ID_ROLE) is None:
            return
        self.rowClicked.emit(self.list.row(row))

    @Slot()
    def _on_search_clear(self):
        self.search_edit.clear()
        self.searchCleared.emit()
