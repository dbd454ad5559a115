from .MissingRootError import MissingRootError
from .SmartSelectError import SmartSelectError
