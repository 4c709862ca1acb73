import logging

import pytest

from power4.debug import DebugLevel, DebugManager


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=1)
        self.messages = []

    def emit(self, record):
        self.messages.append((record.levelno, record.getMessage()))


@pytest.fixture
def manager(request):
    manager = DebugManager(name=f"power4.test.{request.node.name}")
    handler = ListHandler()
    manager.logger.addHandler(handler)
    manager.handler = handler
    return manager


def test_default_level_only_shows_errors(manager):
    manager.info("hidden", "board")
    manager.error("shown", "board")
    assert manager.handler.messages == [(logging.ERROR, "[board] shown")]


def test_levels_and_trace(manager):
    manager.configure(level=DebugLevel.TRACE)
    manager.debug("d")
    manager.trace("t", "rules")
    assert manager.handler.messages == [(logging.DEBUG, "d"), (5, "TRACE: [rules] t")]


def test_none_silences_everything(manager):
    manager.configure(level=DebugLevel.NONE)
    manager.error("nope")
    assert manager.handler.messages == []


def test_component_filter(manager):
    manager.configure(level=DebugLevel.INFO, components=["ai"])
    manager.info("kept", "ai")
    manager.info("dropped", "board")
    assert manager.handler.messages == [(logging.INFO, "[ai] kept")]


def test_set_from_string(manager):
    manager.set_from_string("DEBUG")
    assert manager.level == DebugLevel.DEBUG
    manager.set_from_string("loud")
    assert manager.level == DebugLevel.DEBUG
    assert (logging.WARNING, "Unknown debug level: loud") in manager.handler.messages


def test_timers(manager):
    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_log_file(manager, tmp_path):
    log_file = tmp_path / "power4.log"
    manager.configure(log_file=str(log_file))
    manager.error("to file", "cli")
    manager.configure(log_file="")
    assert "[cli] to file" in log_file.read_text()
