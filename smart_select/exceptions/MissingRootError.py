from .SmartSelectError import SmartSelectError


class MissingRootError(SmartSelectError):
    def __init__(self, message="root is required"):
        super().__init__(message)

    def __repr__(self):
        return f"SmartSelect: missing rendering target, {self.message}"
