"""Tests for settings helpers and the logging setup."""

import logging
import os
from contextlib import contextmanager

from world_cup_api.app.core.config import get_data_file_path, settings
from world_cup_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Detach every root handler for the duration of the block."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_relative_data_file_resolves_to_bundled_winners():
    path = get_data_file_path("data/winners.json")
    assert os.path.isabs(path)
    assert path.endswith(os.path.join("world_cup_api", "data", "winners.json"))
    assert os.path.isfile(path)


def test_data_file_defaults_to_settings():
    assert get_data_file_path() == get_data_file_path(settings.data_file)
    assert get_data_file_path(None) == get_data_file_path()


def test_absolute_data_file_is_used_as_is(tmp_path):
    target = str(tmp_path / "winners.json")
    assert get_data_file_path(target) == target


def test_setup_logging_configures_root_once():
    with bare_root_logger() as root:
        setup_logging("debug")
        setup_logging("info")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO


def test_setup_logging_adds_file_handler(tmp_path):
    logfile = tmp_path / "api.log"
    with bare_root_logger() as root:
        setup_logging("INFO", logfile=str(logfile))
        assert len(root.handlers) == 2
        logging.getLogger("world_cup_api.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] world_cup_api.test: hello" in logfile.read_text(encoding="utf-8")
