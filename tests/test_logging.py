import json
import logging

import pytest

from rhyme_finder.utils import logging_config
from rhyme_finder.utils.observability import get_logger


def test_structured_logger_appends_bound_and_call_context(caplog):
    caplog.set_level(logging.INFO, logger="rhyme_finder.tests")
    logger = get_logger("rhyme_finder.tests").bind(component="unit")

    logger.info("Lookup done", context={"term": "time", "results": 3})

    message = caplog.records[-1].getMessage()
    text, payload = message.split(" | ", 1)
    assert text == "Lookup done"
    assert json.loads(payload) == {"component": "unit", "results": 3, "term": "time"}


def test_structured_logger_without_context_leaves_message_alone(caplog):
    caplog.set_level(logging.INFO, logger="rhyme_finder.tests")

    get_logger("rhyme_finder.tests").info("plain")

    assert caplog.records[-1].getMessage() == "plain"


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logging_config, "_configured_level", None)
    names = ("rhyme_finder", "httpx", "httpcore")
    previous = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in previous.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("10", logging.DEBUG),
        (logging.ERROR, logging.ERROR),
        ("bogus", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert logging_config.resolve_level(value) == expected


def test_configure_logging_applies_given_level_once(fresh_logging):
    assert logging_config.configure_logging(logging.DEBUG) == logging.DEBUG
    assert logging.getLogger("rhyme_finder").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG

    # Later calls are ignored until forced.
    assert logging_config.configure_logging("ERROR") == logging.DEBUG
    assert logging.getLogger("rhyme_finder").level == logging.DEBUG


def test_configure_logging_quiets_transport_loggers_above_debug(fresh_logging):
    logging_config.configure_logging("info")

    assert logging.getLogger("rhyme_finder").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_configure_logging_ignores_environment(fresh_logging, monkeypatch):
    monkeypatch.setenv("RHYME_FINDER_LOG_LEVEL", "debug")

    assert logging_config.configure_logging() == logging.INFO
