import pytest

import utils.app_config as app_config
from database.store import Store


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(app_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(app_config, "CONFIG_FILE", config_dir / "config.json")
    return config_dir


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "money.db"


@pytest.fixture()
def store(db_path):
    s = Store(str(db_path))
    try:
        yield s
    finally:
        s.close()
