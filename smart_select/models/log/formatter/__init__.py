from .control_name import ControlNameFormatter
