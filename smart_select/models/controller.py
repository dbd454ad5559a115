from collections.abc import Iterable, Mapping
from typing import Any, Optional

from PySide6.QtCore import QMutexLocker

from ..app_state import ControllerState
from ..config import SelectConfig, create_config
from ..constant import EVENT_PREFIX, Key, NotifyType
from .filtering import filter_items, normalize_query
from .items import Item, normalize_items
from .log import get_logger
from .states import SelectState, ViewState


class SmartSelect:
    """
    Headless controller of a single or multi select dropdown.

    Owns the normalized items, the filtered view, the selected ids, the
    keyboard-active row and the open/closed state. Views render from the
    signals on ``view`` and drive the controller through its methods only.
    Public notifications (open, close, search, change) go out on ``events``.

    Every operation runs to completion under one recursive lock, signal
    handlers on the same thread may call back into the controller.
    """
    config: SelectConfig
    events: SelectState
    view: ViewState

    def __init__(self, config: SelectConfig, items: Any = None):
        self.config = config
        self.events = SelectState()
        self.view = ViewState()
        self.logger = get_logger(self.__class__.__name__)
        self._state = ControllerState()
        normalized = normalize_items(items or [], config)
        self._state.items = normalized
        self._state.filtered = list(normalized)
        self.logger.info(f"Loaded {len(normalized)} item(s), "
                         f"multi={config.multi}")

    def _locked(self) -> QMutexLocker:
        return QMutexLocker(self._state.lock)

    # state views

    @property
    def multi(self) -> bool:
        return self.config.multi

    @property
    def items(self) -> list[Item]:
        with self._locked():
            return list(self._state.items)

    @property
    def filtered(self) -> list[Item]:
        with self._locked():
            return list(self._state.filtered)

    @property
    def active_index(self) -> int:
        with self._locked():
            return self._state.active_index

    @property
    def active_item(self) -> Optional[Item]:
        with self._locked():
            index = self._state.active_index
            if 0 <= index < len(self._state.filtered):
                return self._state.filtered[index]
            return None

    @property
    def is_open(self) -> bool:
        with self._locked():
            return self._state.is_open

    @property
    def query(self) -> str:
        with self._locked():
            return self._state.query

    @property
    def has_selection(self) -> bool:
        return bool(self._state.selected)

    @property
    def selected_items(self) -> list[Item]:
        # items order, not selection order
        with self._locked():
            selected = self._state.selected
            return [item for item in self._state.items if item.id in selected]

    @property
    def value(self) -> list[str]:
        return self._state.selected.copy()

    @value.setter
    def value(self, ids: Iterable[str]) -> None:
        self.set_value(ids)

    def snapshot(self) -> dict[str, Any]:
        with self._locked():
            state = self._state.as_dict()
            state["selected_items"] = self.selected_items
        state.update(multi=self.config.multi, label=self.config.label,
                     placeholder=self.config.placeholder)
        return state

    # rendering requests

    def _render_selection(self) -> None:
        state = self.snapshot()
        self.view.summaryChanged.emit(state)
        self.view.chipsChanged.emit(state)

    def _render_list(self) -> None:
        self.view.listChanged.emit(self.snapshot(), self._state.query)

    def _render_active(self) -> None:
        self.view.activeChanged.emit(self._state.active_index)

    def refresh(self) -> None:
        """Re-send every render request, e.g. after a view has connected."""
        with self._locked():
            self._render_list()
            self._render_selection()
            self._render_active()

    # notifications

    def _notify(self, kind: NotifyType, payload: dict) -> None:
        match kind:
            case NotifyType.OPEN:
                self.events.opened.emit(payload)
            case NotifyType.CLOSE:
                self.events.closed.emit(payload)
            case NotifyType.SEARCH:
                self.events.searched.emit(payload)
            case NotifyType.CHANGE:
                self.events.changed.emit(payload)
        self.events.notified.emit(f"{EVENT_PREFIX}{kind}", payload)

    def emit_change(self) -> None:
        with self._locked():
            selected = self._state.selected
            ids = selected.copy()
            records = [item.raw for item in self._state.items
                       if item.id in selected]
            if self.config.on_change is not None:
                try:
                    self.config.on_change(list(records))
                except Exception:
                    self.logger.exception("on_change callback raised")
            self._notify(NotifyType.CHANGE, {"value": ids, "items": records})

    # item store

    def set_items(self, records: Any) -> None:
        with self._locked():
            items = normalize_items(records or [], self.config)
            self._state.items = items
            self._state.filtered = list(items)
            self._state.selected.clear()
            self._state.active_index = -1
            self._state.query = ""
            self.logger.info(f"Replaced items, {len(items)} item(s) loaded")
            self._render_list()
            self._render_selection()
            self.emit_change()

    def _has_item(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self._state.items)

    # filtering

    def apply_filter(self, term: str | None) -> None:
        query = normalize_query(term)
        with self._locked():
            self._state.query = query
            self._state.filtered = filter_items(self._state.items, query)
            self._state.active_index = -1
            self._render_list()
            self._notify(NotifyType.SEARCH, {"query": query})

    def clear_search(self) -> None:
        with self._locked():
            self.apply_filter("")
            self.close()

    # selection

    def toggle_select(self, item_id: str | None) -> None:
        if not item_id:
            return
        with self._locked():
            if not self._has_item(item_id):
                self.logger.debug(f"Ignoring unknown id {item_id!r}")
                return
            if self.config.multi:
                self._state.selected.toggle(item_id)
            else:
                self._state.selected.replace([item_id])
                self.close()
            self._render_selection()
            self.emit_change()

    def select_row(self, index: int) -> None:
        with self._locked():
            if not 0 <= index < len(self._state.filtered):
                return
            self.toggle_select(self._state.filtered[index].id)
            if self.config.multi and self._state.is_open:
                self._state.active_index = index
                self._render_active()
                self.view.focusRequested.emit()

    def select_active(self) -> None:
        with self._locked():
            item = self.active_item
            if item is not None:
                self.toggle_select(item.id)

    def clear_selection(self) -> None:
        with self._locked():
            if not self._state.selected:
                return
            self._state.selected.clear()
            self._render_selection()
            self.emit_change()

    def set_value(self, ids: Iterable[str] | None) -> None:
        if ids is None or isinstance(ids, (str, Mapping)) \
                or not isinstance(ids, Iterable):
            ids = ()
        with self._locked():
            known = [i for i in ids if self._has_item(i)]
            if not self.config.multi:
                known = known[:1]
            self._state.selected.replace(known)
            self._render_selection()
            self.emit_change()

    # navigation

    def move_active(self, step: int) -> None:
        if not step:
            return
        step = 1 if step > 0 else -1
        with self._locked():
            count = len(self._state.filtered)
            if not count:
                return
            if self._state.active_index == -1:
                self._state.active_index = 0 if step > 0 else count - 1
            else:
                self._state.active_index = \
                    (self._state.active_index + step) % count
            self._render_active()

    # lifecycle

    def open(self) -> None:
        with self._locked():
            if self._state.is_open:
                return
            self._state.is_open = True
            self._state.active_index = -1
            self.logger.debug("Dropdown opened")
            self.view.repositionRequested.emit()
            self._render_active()
            self._notify(NotifyType.OPEN, {})
            self.view.focusRequested.emit()

    def close(self) -> None:
        with self._locked():
            if not self._state.is_open:
                return
            self._state.is_open = False
            self.logger.debug("Dropdown closed")
            self._notify(NotifyType.CLOSE, {})

    def toggle(self) -> None:
        with self._locked():
            if self._state.is_open:
                self.close()
            else:
                self.open()

    # keyboard

    def handle_control_key(self, key: Key | str) -> bool:
        try:
            key = Key(key)
        except ValueError:
            return False
        with self._locked():
            match key:
                case Key.ENTER | Key.SPACE:
                    self.toggle()
                case Key.ARROW_DOWN:
                    if not self._state.is_open:
                        self.open()
                        if self._state.filtered:
                            self._state.active_index = 0
                            self._render_active()
                    else:
                        self.move_active(1)
                case Key.ARROW_UP:
                    if self._state.is_open:
                        self.move_active(-1)
                case Key.ESCAPE:
                    self.close()
        return True

    def handle_search_key(self, key: Key | str) -> bool:
        try:
            key = Key(key)
        except ValueError:
            return False
        match key:
            case Key.ARROW_DOWN:
                self.move_active(1)
            case Key.ARROW_UP:
                self.move_active(-1)
            case Key.ENTER:
                self.select_active()
            case Key.ESCAPE:
                self.close()
            case _:
                return False
        return True


def create_smart_select(options: Mapping[str, Any] | None = None,
                        **kwargs: Any) -> SmartSelect:
    opts = dict(options or {})
    opts.update(kwargs)
    config = create_config(opts)
    return SmartSelect(config, opts.get("items"))
