from typing import Iterable

from .items import Item


def normalize_query(term: str | None) -> str:
    return (term or "").strip().lower()


def matches(item: Item, query: str) -> bool:
    values = (item.id, item.label, item.subtitle or "")
    return any(query in str(v).lower() for v in values)


def filter_items(items: Iterable[Item], query: str) -> list[Item]:
    # Always a new list, never the caller's sequence
    if not query:
        return list(items)
    return [item for item in items if matches(item, query)]
