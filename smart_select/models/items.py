from dataclasses import dataclass
from typing import Any

from ..config import SelectConfig
from ..constant import FALLBACK_ID_TEMPLATE


@dataclass(frozen=True)
class Item:
    id: str
    label: str
    subtitle: str
    meta: Any
    raw: Any  # the caller's original record


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_item(record: Any, index: int, config: SelectConfig) -> Item:
    base_id = config.get_id(record)
    if base_id is None or base_id == "":
        item_id = FALLBACK_ID_TEMPLATE.format(index)
    else:
        item_id = str(base_id)
    return Item(
        id=item_id,
        label=_to_text(config.get_label(record)),
        subtitle=_to_text(config.get_subtitle(record)),
        meta=config.get_meta(record),
        raw=record,
    )


def normalize_items(records: Any, config: SelectConfig) -> list[Item]:
    """
    Map raw records to items, dropping any without an id or a label.

    Output keeps input order and is not deduplicated. Anything that is not a
    list or tuple counts as no records.
    """
    if not isinstance(records, (list, tuple)):
        return []
    items = (normalize_item(record, i, config)
             for i, record in enumerate(records))
    return [item for item in items if item.id and item.label]
