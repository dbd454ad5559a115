from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..constant import DEFAULT_LABEL, DEFAULT_MULTI, DEFAULT_PLACEHOLDER
from ..exceptions import MissingRootError
from ..models.log import get_logger

Accessor = Callable[[Any], Any]
ChangeCallback = Callable[[list], None]

_logger = get_logger("SelectConfig")


def read_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def default_get_id(record: Any) -> Optional[str]:
    value = read_field(record, "id")
    return None if value is None else str(value)


def default_get_label(record: Any) -> str:
    value = read_field(record, "label")
    return "" if value is None else str(value)


def default_get_subtitle(_record: Any) -> str:
    return ""


def default_get_meta(_record: Any) -> dict:
    return {}


@dataclass(frozen=True)
class SelectConfig:
    """
    Read-only construction options of one select control.

    The four accessors map a raw record to the fields of an ``Item``. They
    may run several times per record (every ``set_items`` renormalizes), so
    they have to be deterministic and free of side effects.
    """
    root: Any
    label: str = DEFAULT_LABEL
    placeholder: str = DEFAULT_PLACEHOLDER
    multi: bool = DEFAULT_MULTI
    get_id: Accessor = default_get_id
    get_label: Accessor = default_get_label
    get_subtitle: Accessor = default_get_subtitle
    get_meta: Accessor = default_get_meta
    on_change: Optional[ChangeCallback] = None


def create_config(options: Mapping[str, Any] | None = None,
                  **kwargs: Any) -> SelectConfig:
    opts = dict(options or {})
    opts.update(kwargs)
    root = opts.get("root")
    if root is None:
        raise MissingRootError()

    on_change = opts.get("on_change")
    if on_change is not None and not callable(on_change):
        _logger.debug(f"Ignoring non-callable on_change: {on_change!r}")
        on_change = None

    return SelectConfig(
        root=root,
        label=opts.get("label", DEFAULT_LABEL),
        placeholder=opts.get("placeholder", DEFAULT_PLACEHOLDER),
        multi=bool(opts.get("multi", DEFAULT_MULTI)),
        get_id=opts.get("get_id") or default_get_id,
        get_label=opts.get("get_label") or default_get_label,
        get_subtitle=opts.get("get_subtitle") or default_get_subtitle,
        get_meta=opts.get("get_meta") or default_get_meta,
        on_change=on_change,
    )
