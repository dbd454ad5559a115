# -*- coding: utf-8 -*-
from typing import Any

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, Slot
from PySide6.QtWidgets import (
    QApplication, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
)

from ...constant import DROPDOWN_OFFSET, LIGHT_CSS
from ..classes import SelectControl
from ..controller import SmartSelect, create_smart_select
from .chip_bar import ChipBar
from .select_dropdown import SelectDropdown


class SmartSelectWidget(QWidget):
    """
    Qt view over a ``SmartSelect`` controller.

    Renders from the controller's view signals and turns clicks and key
    presses into controller calls. The application-wide event filter for
    outside clicks and window moves only lives while the dropdown is open.
    """
    controller: SmartSelect

    def __init__(self, /, parent: QWidget | None = None, **options: Any):
        super().__init__(parent)
        self.controller = create_smart_select(options, root=self)
        self._filter_installed = False
        self.setStyleSheet(LIGHT_CSS)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(4)

        self.label = QLabel(self.controller.config.label, self)
        root.addWidget(self.label)

        self.control = SelectControl(self.controller.handle_control_key, self)
        control_row = QHBoxLayout(self.control)
        control_row.setContentsMargins(0, 0, 0, 0)
        self.placeholder = QLabel(self.controller.config.placeholder,
                                  self.control)
        self.placeholder.setObjectName("smartSelectPlaceholder")
        self.count_pill = QLabel(self.control)
        self.count_pill.setObjectName("smartSelectCountPill")
        self.summary = QLabel("Selected", self.control)
        self.clear_btn = QPushButton("x", self.control)
        self.clear_btn.setObjectName("smartSelectClear")
        self.clear_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.clear_btn.setAutoDefault(False)
        arrow = QLabel("▾", self.control)
        control_row.addWidget(self.placeholder)
        control_row.addWidget(self.count_pill)
        control_row.addWidget(self.summary)
        control_row.addStretch(1)
        control_row.addWidget(self.clear_btn)
        control_row.addWidget(arrow)
        root.addWidget(self.control)

        self.chip_bar = ChipBar(self)
        root.addWidget(self.chip_bar)

        self.dropdown = SelectDropdown(self.controller.handle_search_key,
                                       self)
        self.dropdown.setStyleSheet(LIGHT_CSS)
        self.dropdown.hide()

        view = self.controller.view
        view.summaryChanged.connect(self._render_summary)
        view.chipsChanged.connect(self._render_chips)
        view.listChanged.connect(self._render_list)
        view.activeChanged.connect(self.dropdown.set_active)
        view.focusRequested.connect(self._focus_search)
        view.repositionRequested.connect(self._reposition)
        events = self.controller.events
        events.opened.connect(self._on_opened)
        events.closed.connect(self._on_closed)

        self.control.clicked.connect(self.controller.toggle)
        self.clear_btn.clicked.connect(self._on_clear_clicked)
        self.chip_bar.removeRequested.connect(self.controller.toggle_select)
        self.dropdown.rowClicked.connect(self.controller.select_row)
        self.dropdown.searchEdited.connect(self.controller.apply_filter)
        self.dropdown.searchCleared.connect(self.controller.clear_search)

        self.controller.refresh()

    @property
    def value(self) -> list[str]:
        return self.controller.value

    @value.setter
    def value(self, ids):
        self.controller.value = ids

    def set_items(self, records):
        self.controller.set_items(records)

    # rendering

    @Slot(object)
    def _render_summary(self, state: dict):
        count = len(state["selected_items"])
        self.placeholder.setVisible(not count)
        self.count_pill.setVisible(bool(count))
        self.summary.setVisible(bool(count))
        self.clear_btn.setVisible(bool(count))
        self.count_pill.setText(str(count))
        self.dropdown.sync_checks(set(state["selected"]))

    @Slot(object)
    def _render_chips(self, state: dict):
        self.chip_bar.set_items(state["selected_items"])

    @Slot(object, str)
    def _render_list(self, state: dict, query: str):
        # set_items drops the search term, drop the stale text with it
        if not query and self.dropdown.search_edit.text().strip():
            self.dropdown.search_edit.clear()
        self.dropdown.set_rows(state["filtered"], set(state["selected"]))
        self.dropdown.set_active(state["active_index"])

    @Slot()
    def _focus_search(self):
        if self.dropdown.isVisible():
            self.dropdown.activateWindow()
            self.dropdown.search_edit.setFocus(
                Qt.FocusReason.PopupFocusReason)

    @Slot()
    def _reposition(self):
        rect = self.control.rect()
        pos = self.control.mapToGlobal(rect.bottomLeft())
        self.dropdown.setMinimumWidth(rect.width())
        self.dropdown.move(pos + QPoint(0, DROPDOWN_OFFSET))

    # lifecycle

    @Slot(object)
    def _on_opened(self, _payload):
        self.dropdown.show()
        self.dropdown.raise_()
        self.control.set_open(True)
        if (app := QApplication.instance()) is not None \
                and not self._filter_installed:
            app.installEventFilter(self)
            self._filter_installed = True

    @Slot(object)
    def _on_closed(self, _payload):
        self.dropdown.hide()
        self.control.set_open(False)
        self._remove_filter()

    def _remove_filter(self):
        if self._filter_installed \
                and (app := QApplication.instance()) is not None:
            app.removeEventFilter(self)
        self._filter_installed = False

    @Slot()
    def _on_clear_clicked(self):
        self.controller.clear_selection()
        self.controller.close()

    def _is_inside(self, global_pos: QPoint) -> bool:
        local = self.control.mapFromGlobal(global_pos)
        # chip clicks keep the dropdown open
        chips = self.chip_bar.mapFromGlobal(global_pos)
        return self.control.rect().contains(local) \
            or self.chip_bar.rect().contains(chips) \
            or self.dropdown.frameGeometry().contains(global_pos)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        match event.type():
            case QEvent.Type.MouseButtonPress:
                if not self._is_inside(event.globalPosition().toPoint()):
                    self.controller.close()
            case QEvent.Type.Resize | QEvent.Type.Move:
                if watched is self.window():
                    self._reposition()
        return False

    def hideEvent(self, event):
        super().hideEvent(event)
        self.controller.close()
