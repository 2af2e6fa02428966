"""Configuration that lives outside the database.

DATABASE_URL comes from the environment (a .env file is loaded by main.py).
User preferences such as the display currency live in
~/.money_tracker/config.json.
"""
import json
import logging
import os
from pathlib import Path

from utils.constants import DATABASE_URL_ENV, DEFAULT_CURRENCY_ID

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".money_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"


def get_database_url() -> str | None:
    """Return DATABASE_URL, or None if unset or blank."""
    url = os.environ.get(DATABASE_URL_ENV, "").strip()
    return url or None


def load_config() -> dict:
    """Returns {} on a missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict) -> None:
    """Creates the config dir if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError as e:
        logger.warning("Could not save config %s: %s", CONFIG_FILE, e)
        tmp.unlink(missing_ok=True)


def get_currency_id() -> int:
    value = load_config().get("currency_id", DEFAULT_CURRENCY_ID)
    try:
        return int(value)
    except (TypeError, ValueError):
        return DEFAULT_CURRENCY_ID


def set_currency_id(currency_id: int) -> None:
    config = load_config()
    config["currency_id"] = int(currency_id)
    save_config(config)
