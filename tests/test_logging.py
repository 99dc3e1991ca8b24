import logging

import pytest

from storefront.utils import logging as app_logging


@pytest.fixture()
def root(monkeypatch):
    root = logging.getLogger()
    # restored after the test, whatever configure_logging adds
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(app_logging, "_configured", False)
    return root


def test_get_logger_does_not_touch_root_handlers(root):
    before = list(root.handlers)

    app_logging.get_logger("storefront.anything")

    assert root.handlers == before


def test_configure_logging_adds_one_handler(root):
    before = len(root.handlers)

    app_logging.configure_logging("INFO")
    app_logging.configure_logging("INFO")

    assert len(root.handlers) == before + 1
    assert root.level == logging.INFO
