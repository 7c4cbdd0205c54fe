import pytest

import config


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "user_config.yaml")
    for name in ("TASKMAN_LANG", "TASKMAN_LOG_LEVEL", "TASKMAN_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return config.USER_CONFIG_PATH
