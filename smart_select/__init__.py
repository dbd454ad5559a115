from .config import SelectConfig, create_config
from .constant import Key, NotifyType, VERSION
from .exceptions import MissingRootError, SmartSelectError
from .models.controller import SmartSelect, create_smart_select
from .models.items import Item, normalize_items

__version__ = VERSION

__all__ = [
    "SelectConfig", "create_config", "Key", "NotifyType", "MissingRootError",
    "SmartSelectError", "SmartSelect", "create_smart_select", "Item",
    "normalize_items", "__version__"
]
