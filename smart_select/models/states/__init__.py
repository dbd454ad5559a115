from .select_state import SelectState
from .view_state import ViewState
