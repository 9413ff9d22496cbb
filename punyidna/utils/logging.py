"""
Package-wide logging: every logger under ``punyidna`` prints through one stderr handler at the level from $LOGLEVEL.
The handler is installed on the first get_logger() call, so importing the package alone does not touch logging.
"""
import logging
import os
import threading
from typing import Optional

loglevel = os.getenv("LOGLEVEL", "INFO")

_PACKAGE_NAME = __name__.split(".")[0]

_init_lock = threading.Lock()
_package_handler: Optional[logging.Handler] = None


class CallerFormatter(logging.Formatter):
    """Adds ``record.caller``: the ``module.function:line`` of the call, relative to the package root"""

    def format(self, record: logging.LogRecord) -> str:
        module_path = record.name.split(".")
        if module_path[0] == _PACKAGE_NAME:
            module_path = module_path[1:]
        record.caller = f"{'.'.join(module_path)}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _initialize_if_necessary():
    global _package_handler

    with _init_lock:
        if _package_handler is not None:
            return

        formatter = CallerFormatter(
            fmt="{asctime}.{msecs:03.0f} [{levelname}] [{caller}] {message}",
            style="{",
            datefmt="%b %d %H:%M:%S",
        )
        _package_handler = logging.StreamHandler()
        _package_handler.setFormatter(formatter)
        package_logger = logging.getLogger(_PACKAGE_NAME)
        package_logger.addHandler(_package_handler)
        package_logger.propagate = False
        package_logger.setLevel(loglevel)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    _initialize_if_necessary()
    return logging.getLogger(name)
