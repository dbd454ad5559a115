from .key_map import to_key
from .search_line_edit import SearchLineEdit
from .select_control import SelectControl
from .selection_set import SelectionSet
