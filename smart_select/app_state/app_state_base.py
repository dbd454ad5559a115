from dataclasses import dataclass, field, fields
from typing import Any

from PySide6.QtCore import QRecursiveMutex


@dataclass(slots=True)
class StateBase:
    # Recursive: signal handlers on the owning thread may re-enter the
    # controller while it still holds the lock.
    lock: QRecursiveMutex = field(default_factory=QRecursiveMutex,
                                  init=False, repr=False, compare=False)

    def as_dict(self) -> dict[str, Any]:
        """
        Shallow snapshot of all public fields. Containers are copied so that
        the snapshot does not change when the state mutates afterwards.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "lock":
                continue
            value = getattr(self, f.name)
            if hasattr(value, "copy"):
                value = value.copy()
            result[f.name] = value
        return result
