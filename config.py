from __future__ import annotations

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

USER_CONFIG_PATH = Path.home() / ".taskman_config.yaml"
DEFAULT_SAVE_FILE = Path.home() / "taskman.json"
DEFAULT_LOG_FILE = Path.home() / ".taskman" / "taskman.log"
DEFAULT_LOG_LEVEL = "INFO"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        USER_CONFIG_PATH.unlink(missing_ok=True)
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _setting(key: str, env: Optional[str] = None) -> str:
    """Env override first, then the YAML value; blank when neither is set."""
    if env and os.getenv(env):
        return os.environ[env].strip()
    return str(_load_config().get(key) or "").strip()


def _path_setting(key: str, default: Path, env: Optional[str] = None) -> Path:
    value = _setting(key, env)
    return Path(value).expanduser() if value else default


def get_save_file() -> Path:
    """Save file used when no path is given on the command line."""
    return _path_setting("save_file", DEFAULT_SAVE_FILE)


def get_user_lang() -> str:
    return _setting("lang")


def set_user_lang(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["lang"] = value
    else:
        data.pop("lang", None)
    _save_config(data)


def get_log_file() -> Path:
    return _path_setting("log_file", DEFAULT_LOG_FILE, env="TASKMAN_LOG_FILE")


def get_log_level() -> int:
    name = (_setting("log_level", env="TASKMAN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
