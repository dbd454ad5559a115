from logging import DEBUG, INFO
from logging import Handler, Logger, LoggerAdapter, StreamHandler
from logging import getLogger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ...constant import LOGGER_NAME
from .formatter import ControlNameFormatter


def _make_handler(log_path: str | Path | None) -> Handler:
    if log_path is None:
        return StreamHandler()
    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = TimedRotatingFileHandler(
        log_path, when="midnight", interval=1, backupCount=14, encoding="utf-8"
    )
    fh.suffix = "%Y-%m-%d.log"
    fh.namer = lambda _name: _name.replace(".log.", ".")
    return fh


def init_logger(name: str = LOGGER_NAME, *, debug: bool = False,
                log_path: str | Path | None = None) -> Logger:
    logger = getLogger(name)
    logger.setLevel(DEBUG if debug else INFO)
    handler = _make_handler(log_path)
    handler.setFormatter(ControlNameFormatter(
        "%(asctime)s.%(msecs)03d [%(controlName)s] - %(message)s",
        "%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger


def get_logger(control_name: str, name: str = LOGGER_NAME) -> LoggerAdapter:
    logger = getLogger(name)
    adapter = LoggerAdapter(logger, {"controlName": control_name})
    return adapter
