from dataclasses import dataclass, field

from ..models.classes.selection_set import SelectionSet
from ..models.items import Item
from .app_state_base import StateBase


@dataclass(slots=True)
class ControllerState(StateBase):
    items: list[Item] = field(default_factory=list)
    filtered: list[Item] = field(default_factory=list)
    selected: SelectionSet = field(default_factory=SelectionSet)
    active_index: int = -1
    is_open: bool = False
    # Last normalized search term
    query: str = ""
