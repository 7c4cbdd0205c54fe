import logging
from pathlib import Path

import config


def test_missing_config_gives_defaults(isolated_user_config):
    assert not isolated_user_config.exists()
    assert config.get_save_file() == config.DEFAULT_SAVE_FILE
    assert config.get_user_lang() == ""
    assert config.get_log_file() == config.DEFAULT_LOG_FILE
    assert config.get_log_level() == logging.INFO


def test_invalid_yaml_is_ignored(isolated_user_config):
    isolated_user_config.write_text("lang: [unclosed", encoding="utf-8")
    assert config.get_user_lang() == ""


def test_non_mapping_yaml_is_ignored(isolated_user_config):
    isolated_user_config.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.get_save_file() == config.DEFAULT_SAVE_FILE


def test_values_are_read_from_yaml(isolated_user_config, tmp_path):
    isolated_user_config.write_text(
        f"save_file: {tmp_path / 'mine.json'}\nlog_file: {tmp_path / 'x.log'}\nlog_level: debug\n",
        encoding="utf-8",
    )
    assert config.get_save_file() == tmp_path / "mine.json"
    assert config.get_log_file() == tmp_path / "x.log"
    assert config.get_log_level() == logging.DEBUG


def test_env_overrides_config(isolated_user_config, monkeypatch, tmp_path):
    isolated_user_config.write_text("log_level: debug\n", encoding="utf-8")
    monkeypatch.setenv("TASKMAN_LOG_LEVEL", "warning")
    monkeypatch.setenv("TASKMAN_LOG_FILE", str(tmp_path / "env.log"))
    assert config.get_log_level() == logging.WARNING
    assert config.get_log_file() == tmp_path / "env.log"


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("TASKMAN_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.INFO


def test_set_user_lang_roundtrip(isolated_user_config):
    config.set_user_lang("ru")
    assert config.get_user_lang() == "ru"
    assert "lang: ru" in isolated_user_config.read_text(encoding="utf-8")
    config.set_user_lang("")
    assert config.get_user_lang() == ""
    assert not isolated_user_config.exists()


def test_set_user_lang_keeps_other_keys(isolated_user_config):
    isolated_user_config.write_text("save_file: /tmp/a.json\n", encoding="utf-8")
    config.set_user_lang("en")
    assert config.get_save_file() == Path("/tmp/a.json")
    assert config.get_user_lang() == "en"
