class SmartSelectError(Exception):
    message: str

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"SmartSelect: {self.message}"
