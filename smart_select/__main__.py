# -*- coding: utf-8 -*-
# module import
import sys
from argparse import ArgumentParser

# package import
from PySide6.QtWidgets import QApplication, QVBoxLayout, QWidget

# local package import
from .constant import DEFAULT_LABEL, DEFAULT_PLACEHOLDER, VERSION
from .models.log import get_logger, init_logger
from .models.widgets import SmartSelectWidget

DEMO_ITEMS = [
    {"id": "F1", "label": "11111", "type": "TAG", "currency": "USD"},
    {"id": "F2", "label": "AA2234", "type": "TAG", "currency": "USD"},
    {"id": "F3", "label": "BBB1", "type": "TAG", "currency": "EUR"},
]


def main() -> int:
    parser = ArgumentParser(prog="smart_select",
                            description=f"SmartSelect {VERSION} demo")
    parser.add_argument("--single", dest="single", action="store_true",
                        help="single selection mode")
    parser.add_argument("--label", dest="label", default=DEFAULT_LABEL)
    parser.add_argument("--placeholder", dest="placeholder",
                        default=DEFAULT_PLACEHOLDER)
    parser.add_argument("--debug", dest="debug", action="store_true")
    parser.add_argument("--log-file", dest="log_file", default=None)

    args, qt_args = parser.parse_known_args()
    init_logger(debug=args.debug, log_path=args.log_file)
    logger = get_logger("Demo")

    app = QApplication([sys.argv[0], *qt_args])
    window = QWidget()
    window.setWindowTitle("SmartSelect")
    layout = QVBoxLayout(window)
    select = SmartSelectWidget(
        window,
        label=args.label,
        placeholder=args.placeholder,
        multi=not args.single,
        items=DEMO_ITEMS,
        get_id=lambda item: item["id"],
        get_label=lambda item: item["label"],
        get_subtitle=lambda item: item["currency"],
        get_meta=lambda item: {"type": item["type"]},
        on_change=lambda records: logger.info(
            f"Selected: {[r['id'] for r in records]}"),
    )
    select.controller.events.searched.connect(
        lambda payload: logger.debug(f"Search: {payload['query']!r}"))
    layout.addWidget(select)
    layout.addStretch(1)
    window.resize(360, 240)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
