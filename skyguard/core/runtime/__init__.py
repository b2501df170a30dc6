"""
Runtime package.

Exposes game settings namespaces for convenience imports.
"""

from skyguard.core.runtime.game_settings import (
    Assets,
    BulletDefaults,
    Colors,
    Display,
    EnemyDefaults,
    Layers,
    Physics,
    PlayerDefaults,
    Scoring,
)

__all__ = [
    "Assets",
    "BulletDefaults",
    "Colors",
    "Display",
    "EnemyDefaults",
    "Layers",
    "Physics",
    "PlayerDefaults",
    "Scoring",
]
