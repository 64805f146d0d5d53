"""Application configuration backed by a JSON settings file."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Default values
DEFAULTS = {
    "general/sessionDir": "~/.claude/projects",
    "general/defaultDays": 7,
    "display/exact": False,
    "display/byProject": False,
    "display/models": False,
    "advanced/debugLogging": False,
    "advanced/workers": 1,
}


def default_settings_path() -> Path:
    return Path.home() / ".config" / "ccost" / "settings.json"


class ConfigManager:
    """Slash-keyed settings with typed accessors and defaults."""

    def __init__(self, settings_path: str | Path | None = None):
        self._path = Path(settings_path) if settings_path else default_settings_path()
        self._settings: dict = self._load()

    def _load(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        return data

    def get_string(self, key: str) -> str:
        return str(self._settings.get(key, DEFAULTS.get(key, "")))

    def get_int(self, key: str) -> int:
        val = self._settings.get(key, DEFAULTS.get(key, 0))
        if isinstance(val, bool):
            return DEFAULTS.get(key, 0)
        try:
            return int(val)
        except (ValueError, TypeError):
            return DEFAULTS.get(key, 0)

    def get_bool(self, key: str) -> bool:
        val = self._settings.get(key, DEFAULTS.get(key, False))
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return val.lower() in ("true", "1", "yes")
        return bool(val)

    def session_dir(self) -> Path:
        return Path(self.get_string("general/sessionDir")).expanduser()
