from collections.abc import Iterator

import pytest
from loguru import logger

import fluents.logging_utils as logging_utils
from fluents import create


@pytest.fixture
def captured() -> Iterator[list[str]]:
    messages: list[str] = []
    logger.enable("fluents")
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("fluents")


def test_protocol_events_are_logged(captured: list[str]) -> None:
    with create(None, [1]) as fluent:
        fluent.get()

    text = "".join(captured)
    assert f"fluent.create name={fluent.name}" in text
    assert "fluent.worker.state" in text
    assert f"fluent.destroy name={fluent.name}" in text


def test_library_logging_is_disabled_by_default() -> None:
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        with create(None, [1]) as fluent:
            fluent.get()
    finally:
        logger.remove(sink_id)

    assert not any("fluent.create" in message for message in messages)


def test_configure_logging_enables_library(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    try:
        logging_utils.configure_logging(level="debug", profile="default")
        assert logging_utils._CONFIGURED == ("default", "DEBUG")
    finally:
        logger.disable("fluents")
