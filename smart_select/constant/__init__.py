from enum import StrEnum, unique

__all__ = [
    "DEFAULT_LABEL", "DEFAULT_PLACEHOLDER", "DEFAULT_MULTI", "EVENT_PREFIX",
    "FALLBACK_ID_TEMPLATE", "LOGGER_NAME", "NO_RESULTS_TEXT",
    "SEARCH_PLACEHOLDER", "DROPDOWN_OFFSET", "VERSION", "LIGHT_CSS",
    "NotifyType", "Key"
]


@unique
class NotifyType(StrEnum):
    OPEN = "open"
    CLOSE = "close"
    SEARCH = "search"
    CHANGE = "change"


@unique
class Key(StrEnum):
    ENTER = "Enter"
    SPACE = " "
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ESCAPE = "Escape"


DEFAULT_LABEL = "Smart Select"
DEFAULT_PLACEHOLDER = "Select"
DEFAULT_MULTI = True
# Positional id used when the id accessor yields None or ""
FALLBACK_ID_TEMPLATE = "ss-{}"
EVENT_PREFIX = "smart-select:"
LOGGER_NAME = "SmartSelectLogger"
SEARCH_PLACEHOLDER = "Search"
NO_RESULTS_TEXT = "No results"
# Gap in pixels between the control and the dropdown
DROPDOWN_OFFSET = 4
VERSION = "0.1.0"

LIGHT_CSS = """QFrame#smartSelectControl {
    background-color: #ffffff;
    border: 1px solid #d1d5db;
    border-radius: 6px;
    padding: 4px 8px;
}

QFrame#smartSelectControl[open="true"] {
    border-color: #2563eb;
}

QLabel#smartSelectPlaceholder {
    color: #9ca3af;
}

QLabel#smartSelectCountPill {
    background-color: #2563eb;
    color: #ffffff;
    border-radius: 8px;
    padding: 0 6px;
}

QPushButton#smartSelectClear, QPushButton#smartSelectSearchClear {
    border: none;
    color: #6b7280;
    padding: 0 4px;
}

QPushButton#smartSelectChip {
    background-color: #eff6ff;
    border: 1px solid #bfdbfe;
    border-radius: 10px;
    padding: 2px 8px;
}

QFrame#smartSelectDropdown {
    background-color: #ffffff;
    border: 1px solid #d1d5db;
    border-radius: 6px;
}

QListWidget#smartSelectList::item:selected {
    background-color: #e0e7ff;
    color: #111827;
}
"""
