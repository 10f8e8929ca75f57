"""Tests for loading list settings from JSON."""
import json
import logging
import os

import pytest

from circularscroll import config
from circularscroll.config import load_settings
from circularscroll.logging_config import LOGGER_NAMESPACE, setup_logging
from circularscroll.model.geometry_primitives import Axis
from circularscroll.model.settings import ListSettings


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_default_settings_file_matches_defaults():
    assert os.path.exists(config.DEFAULT_SETTINGS_PATH)
    assert load_settings() == ListSettings()


def test_missing_default_file_falls_back(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DEFAULT_SETTINGS_PATH", str(tmp_path / "absent.json"))
    assert load_settings() == ListSettings()


def test_load_partial_settings(tmp_path):
    path = write_json(tmp_path / "list.json", {"axis": "horizontal", "align_to_center": True})
    settings = load_settings(path)
    assert settings.axis == Axis.HORIZONTAL
    assert settings.align_to_center
    assert settings.divide_factor == ListSettings().divide_factor


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "nope.json"))


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{axis: ", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_settings(str(path))


def test_not_an_object(tmp_path):
    path = write_json(tmp_path / "list.json", [1, 2, 3])
    with pytest.raises(ValueError, match="JSON object"):
        load_settings(path)


def test_invalid_values(tmp_path):
    path = write_json(tmp_path / "list.json", {"divide_factor": 0})
    with pytest.raises(ValueError, match="divide_factor"):
        load_settings(path)


def test_wrong_typed_value(tmp_path):
    path = write_json(tmp_path / "list.json", {"divide_factor": "2", "sliding_frames": 10.5})
    with pytest.raises(ValueError, match="divide_factor must be a number"):
        load_settings(path)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogging:
    def test_writes_log_file(self, tmp_path, clean_logger):
        log_file = tmp_path / "list.log"
        setup_logging(level="debug", log_file=str(log_file))

        logging.getLogger("circularscroll.test").debug("hello from the list")
        for handler in clean_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "hello from the list" in text

    def test_reconfiguring_closes_previous_handlers(self, tmp_path, clean_logger):
        setup_logging(log_file=str(tmp_path / "first.log"))
        (old_file_handler,) = [h for h in clean_logger.handlers if isinstance(h, logging.FileHandler)]

        setup_logging(log_file=str(tmp_path / "second.log"))

        assert old_file_handler not in clean_logger.handlers
        assert old_file_handler.stream is None
        assert len(clean_logger.handlers) == 2

    def test_unknown_level_name(self, clean_logger):
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging(level="chatty")
