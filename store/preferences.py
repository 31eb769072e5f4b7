"""
User preference store.

A small JSON file holding key-value preferences. The NASA API key is stored
under a fixed key; a missing file or a missing key is a normal state meaning
"not configured".
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from policies import APP_RULES

logger = logging.getLogger(__name__)

_PREFERENCE_RULES = APP_RULES.get("preferences", {})

NASA_API_KEY = _PREFERENCE_RULES.get("nasa_api_key", "nasa_api_key")


def get_preferences_path() -> Path:
    """Preferences file location from the environment or the policy default."""
    return Path(
        os.getenv(
            "MYCOSMO_PREFERENCES_PATH",
            _PREFERENCE_RULES.get("default_path", "preferences.json"),
        )
    )


class PreferenceStore:
    """Read/write user preferences kept in a JSON file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or get_preferences_path()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable preferences file {self.path}, ignoring it: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Preferences file {self.path} is not a JSON object, ignoring it")
            return {}
        return data

    def _save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default``."""
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        data = self._load()
        data[key] = value
        self._save(data)
        logger.info(f"Preference updated: {key}")

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False if it was not set."""
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        logger.info(f"Preference removed: {key}")
        return True

    def get_nasa_api_key(self) -> Optional[str]:
        """The configured NASA API key, or None when absent or blank."""
        value = self.get(NASA_API_KEY)
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    def set_nasa_api_key(self, api_key: str) -> None:
        self.set(NASA_API_KEY, api_key.strip())

    def clear_nasa_api_key(self) -> bool:
        return self.delete(NASA_API_KEY)
