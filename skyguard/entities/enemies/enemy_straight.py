"""
enemy_straight.py
-----------------
Enemy that falls straight down at the speed set by the active difficulty.
"""

from skyguard.core.runtime.game_settings import EnemyDefaults, Layers
from skyguard.entities.base_entity import BaseEntity
from skyguard.entities.entity_types import EntityCategory


class Enemy(BaseEntity):
    """Descending enemy. Starts just above the top edge by default."""

    __slots__ = ()

    def __init__(self, x, speed, y=None,
                 width=EnemyDefaults.WIDTH, height=EnemyDefaults.HEIGHT):
        """
        Args:
            x: Left edge at spawn
            speed: Downward pixels per tick
            y: Top edge at spawn (defaults to -height)
        """
        if y is None:
            y = -height
        super().__init__(x, y, width, height, speed)

        self.layer = Layers.ENEMIES
        self.category = EntityCategory.ENEMY
        self.sprite_key = "enemy"

    def update(self):
        self.y += self.speed

    def has_escaped(self, viewport_height) -> bool:
        """True once the enemy has crossed below the bottom edge."""
        return self.y > viewport_height
