# -*- coding: utf-8 -*-
import json
import logging

from infra.paths import logs_dir, settings_file, user_data_dir
from infra.settings import load_settings, log_level, save_settings


def test_user_dirs_follow_home_override(user_home):
    assert user_data_dir() == user_home
    assert logs_dir() == user_home / "logs"
    assert logs_dir().is_dir()
    assert settings_file().parent == user_home


def test_missing_settings_are_created_with_defaults(user_home):
    assert load_settings() == {"log_level": "INFO"}
    assert json.loads(settings_file().read_text(encoding="utf-8")) == {"log_level": "INFO"}


def test_saved_settings_are_merged_and_cleaned(user_home):
    save_settings({"log_level": "debug", "unknown": 1})
    assert load_settings() == {"log_level": "DEBUG"}
    assert log_level() == logging.DEBUG

    save_settings({"log_level": None})
    assert load_settings()["log_level"] == "INFO"

    save_settings({"log_level": "LOUD"})
    assert log_level() == logging.INFO


def test_corrupt_settings_are_restored(user_home, caplog):
    settings_file().write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="infra.settings"):
        assert load_settings() == {"log_level": "INFO"}
    assert "restoring defaults" in caplog.text
    assert json.loads(settings_file().read_text(encoding="utf-8")) == {"log_level": "INFO"}


def test_non_object_settings_are_restored(user_home):
    settings_file().write_text("[1, 2]", encoding="utf-8")
    assert load_settings() == {"log_level": "INFO"}
