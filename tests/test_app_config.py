import json

import utils.app_config as app_config
from utils.app_config import get_currency_id, get_database_url, load_config, save_config, set_currency_id


def test_defaults_without_file():
    assert load_config() == {}
    assert get_currency_id() == 1


def test_currency_preference_persists(isolated_config):
    set_currency_id(3)
    assert get_currency_id() == 3
    saved = json.loads((isolated_config / "config.json").read_text(encoding="utf-8"))
    assert saved == {"currency_id": 3}


def test_save_keeps_other_keys():
    save_config({"theme": "dark"})
    set_currency_id(2)
    assert load_config() == {"theme": "dark", "currency_id": 2}


def test_corrupt_file_is_ignored(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == {}
    assert get_currency_id() == 1


def test_non_numeric_currency_id(isolated_config):
    save_config({"currency_id": "euro"})
    assert get_currency_id() == 1


def test_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "  sqlite:///money.db ")
    assert get_database_url() == "sqlite:///money.db"
    monkeypatch.delenv("DATABASE_URL")
    assert get_database_url() is None


def test_config_location_is_patched(isolated_config):
    assert app_config.CONFIG_FILE == isolated_config / "config.json"
