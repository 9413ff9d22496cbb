import logging

import pytest

from punyidna.utils.logging import get_logger


@pytest.fixture
def debug_logs(caplog, monkeypatch):
    """Capture DEBUG records of the punyidna loggers, which do not propagate to the root logger by default"""
    monkeypatch.setattr(get_logger("punyidna"), "propagate", True)
    with caplog.at_level(logging.DEBUG, logger="punyidna"):
        yield caplog
