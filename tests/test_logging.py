import logging

from punyidna.utils.logging import CallerFormatter, get_logger


def test_caller_is_relative_to_package():
    formatter = CallerFormatter(fmt="[{caller}] {message}", style="{")
    record = logging.LogRecord("punyidna.idna.core", logging.DEBUG, "core.py", 169, "rejected", None, None, "to_ascii")
    assert formatter.format(record) == "[idna.core.to_ascii:169] rejected"

    record = logging.LogRecord("app", logging.INFO, "app.py", 3, "started", None, None, "main")
    assert formatter.format(record) == "[app.main:3] started"


def test_package_logger_has_one_handler():
    get_logger(__name__)
    get_logger("punyidna.idna.core")

    package_logger = get_logger("punyidna")
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, CallerFormatter)
    assert not package_logger.propagate
