from typing import Any, Iterable, Iterator

from PySide6.QtCore import QMutex, QMutexLocker


class SelectionSet:
    """
    Insertion-ordered set of selected item ids.

    Backed by a dict so that iteration follows the order ids were selected
    in. Iteration works on a snapshot, mutating while iterating is safe.
    """

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: dict[str, None] = dict.fromkeys(ids)
        self._lock = QMutex()

    def __bool__(self) -> bool:
        with QMutexLocker(self._lock):
            return bool(self._ids)

    def __len__(self) -> int:
        with QMutexLocker(self._lock):
            return len(self._ids)

    def __contains__(self, item_id: Any) -> bool:
        with QMutexLocker(self._lock):
            return item_id in self._ids

    def __iter__(self) -> Iterator[str]:
        with QMutexLocker(self._lock):
            snapshot = list(self._ids)
        return iter(snapshot)

    def add(self, item_id: str) -> None:
        with QMutexLocker(self._lock):
            self._ids[item_id] = None

    def toggle(self, item_id: str) -> bool:
        # Returns membership after the flip
        with QMutexLocker(self._lock):
            if item_id in self._ids:
                del self._ids[item_id]
                return False
            self._ids[item_id] = None
            return True

    def clear(self) -> None:
        with QMutexLocker(self._lock):
            self._ids.clear()

    def replace(self, ids: Iterable[str]) -> None:
        with QMutexLocker(self._lock):
            self._ids = dict.fromkeys(ids)

    def copy(self) -> list[str]:
        with QMutexLocker(self._lock):
            return list(self._ids)

    def __repr__(self) -> str:
        with QMutexLocker(self._lock):
            return f"{self.__class__.__name__}({list(self._ids)!r})"
