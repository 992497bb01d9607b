"""Config file loading, validation, and persistence.

Schema on disk (~/.config/requestie/config.json):

    {
        "state_dir": "~/.local/share/requestie",
        "log_file": "~/.local/state/requestie/requestie.log",
        "log_level": "WARNING"
    }

Every key is optional.  Keys prefixed with "_" are reserved for comments
and are stripped on load.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from requestie.storage import DEFAULT_STATE_DIR

CONFIG_PATH = Path("~/.config/requestie/config.json").expanduser()

DEFAULT_LOG_FILE = Path("~/.local/state/requestie/requestie.log").expanduser()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """User settings. Paths may use ``~``."""

    model_config = ConfigDict(extra="forbid")

    state_dir: Path = DEFAULT_STATE_DIR
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = "WARNING"

    @field_validator("state_dir", "log_file")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_config() -> Settings:
    """Load and validate the config file.

    Creates the config directory and a config.json holding the defaults on
    first run.  Raises ConfigError if the file exists but is malformed.
    """
    if not CONFIG_PATH.exists():
        settings = Settings()
        save_config(settings)
        return settings

    try:
        raw: object = json.loads(CONFIG_PATH.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config: {exc}") from exc


def save_config(settings: Settings) -> None:
    """Persist settings to disk, creating directories as needed."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(settings.model_dump_json(indent=2))


# Theme persistence
THEME_CONFIG_PATH = Path("~/.config/requestie/theme.json").expanduser()


def load_theme() -> str | None:
    """Load the saved theme preference.

    Returns the theme name if set, None otherwise.
    """
    if not THEME_CONFIG_PATH.exists():
        return None
    try:
        data = json.loads(THEME_CONFIG_PATH.read_text())
        return data.get("theme")
    except (json.JSONDecodeError, AttributeError):
        return None


def save_theme(theme: str) -> None:
    """Save the theme preference to disk."""
    THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    THEME_CONFIG_PATH.write_text(json.dumps({"theme": theme}, indent=2))
