"""
difficulty.py
-------------
Difficulty levels and their (enemy speed, spawn rate) presets.

The built-in presets can be overridden by a ``difficulty.json`` file found
through the config manager.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.services.config_manager import load_config


class DifficultyLevel(str, Enum):
    """Selectable difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "DifficultyLevel":
        """Accept an enum member or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown difficulty '{value}' (expected one of: {valid})") from None


@dataclass(frozen=True)
class DifficultySettings:
    """Enemy speed (px/tick) and spawn interval (ms) for one difficulty."""
    enemy_speed: float
    spawn_rate_ms: float

    def __post_init__(self):
        if self.enemy_speed <= 0:
            raise ValueError(f"enemy_speed must be positive, got {self.enemy_speed}")
        if self.spawn_rate_ms <= 0:
            raise ValueError(f"spawn_rate_ms must be positive, got {self.spawn_rate_ms}")


DIFFICULTY_PRESETS: Dict[DifficultyLevel, DifficultySettings] = {
    DifficultyLevel.EASY: DifficultySettings(enemy_speed=2, spawn_rate_ms=1500),
    DifficultyLevel.MEDIUM: DifficultySettings(enemy_speed=4, spawn_rate_ms=1000),
    DifficultyLevel.HARD: DifficultySettings(enemy_speed=6, spawn_rate_ms=600),
}


def load_difficulty_table(filename: Optional[str] = "difficulty.json") -> Dict[DifficultyLevel, DifficultySettings]:
    """
    Build the difficulty table from presets merged with an optional config file.

    Args:
        filename: Config file name, or None to use the built-in presets only

    Returns:
        dict: DifficultyLevel -> DifficultySettings

    Raises:
        ValueError: If an entry is not an object or holds non-numeric or non-positive values
    """
    if filename is None:
        return dict(DIFFICULTY_PRESETS)

    defaults = {
        level.value: {
            "enemy_speed": settings.enemy_speed,
            "spawn_rate_ms": settings.spawn_rate_ms,
        }
        for level, settings in DIFFICULTY_PRESETS.items()
    }
    cfg = load_config(filename, defaults)

    table = {}
    for level in DifficultyLevel:
        table[level] = _parse_settings(level, cfg[level.value])

    unknown = set(cfg) - {level.value for level in DifficultyLevel}
    if unknown:
        DebugLogger.warn(f"Ignoring unknown difficulty entries: {sorted(unknown)}", category="loading")

    return table


def _parse_settings(level, entry) -> DifficultySettings:
    if not isinstance(entry, dict):
        raise ValueError(f"Difficulty '{level.value}' must be an object, got {entry!r}")
    try:
        return DifficultySettings(
            enemy_speed=float(entry["enemy_speed"]),
            spawn_rate_ms=float(entry["spawn_rate_ms"]),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid settings for difficulty '{level.value}': {e}") from e
