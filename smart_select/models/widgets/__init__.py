from .chip_bar import ChipBar
from .select_dropdown import SelectDropdown
from .smart_select_widget import SmartSelectWidget
