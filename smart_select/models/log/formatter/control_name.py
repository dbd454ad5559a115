from logging import Formatter


class ControlNameFormatter(Formatter):
    def format(self, record) -> str:
        record.controlName = getattr(record, 'controlName', 'N/A')
        return super().format(record)
