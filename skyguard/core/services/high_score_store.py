"""
high_score_store.py
-------------------
Persists the single high-score value across runs in a small JSON file.
"""

import json
import os

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Assets


class HighScoreStore:
    """Reads and writes one integer under a fixed key."""

    def __init__(self, path=None, key=None):
        """
        Args:
            path: JSON file location (defaults to Assets.HIGH_SCORE_FILE)
            key: Key inside the file (defaults to Assets.HIGH_SCORE_KEY)
        """
        self.path = path or Assets.HIGH_SCORE_FILE
        self.key = key or Assets.HIGH_SCORE_KEY

    def get(self) -> int:
        """Return the stored high score, or 0 if missing or unreadable."""
        data = self._read()
        try:
            return max(0, int(data.get(self.key, 0)))
        except (TypeError, ValueError):
            DebugLogger.warn(f"Invalid high score in {self.path}, using 0")
            return 0

    def set(self, value: int) -> None:
        """Store value, keeping any other keys in the file."""
        data = self._read()
        data[self.key] = int(value)
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            DebugLogger.system(f"Saved high score {value} to {self.path}", category="session")
        except (IOError, OSError, TypeError) as e:
            DebugLogger.warn(f"Failed to save high score: {e}")

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError, OSError) as e:
            DebugLogger.warn(f"Failed to load high score: {e}")
            return {}
        return data if isinstance(data, dict) else {}
