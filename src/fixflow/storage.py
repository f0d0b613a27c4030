"""
Durable client-side key-value store for the active language.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "appLanguage"


class LanguageStore:
    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict:
        try:
            data = json.loads(self._path.read_text())
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        value = self._load().get(LANGUAGE_KEY)
        return value if isinstance(value, str) else None

    def set(self, code: str) -> None:
        data = self._load()
        data[LANGUAGE_KEY] = code
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2))
        except OSError as e:
            logger.warning(f"Could not persist language to {self._path}: {e}")
