"""
bullet_straight.py
------------------
Player projectile travelling straight up at a fixed speed.

Off-screen cleanup and collision are handled by the world simulation and the
collision manager; the bullet only moves itself.
"""

from skyguard.core.runtime.game_settings import BulletDefaults, Layers
from skyguard.entities.base_entity import BaseEntity
from skyguard.entities.entity_types import EntityCategory, Facing


class Bullet(BaseEntity):
    """Upward-moving projectile fired by the player."""

    __slots__ = ('facing',)

    def __init__(self, x, y, facing=Facing.RIGHT,
                 width=BulletDefaults.WIDTH, height=BulletDefaults.HEIGHT,
                 speed=BulletDefaults.SPEED):
        """
        Args:
            x, y: Top-left spawn position
            facing: Player facing at fire time (kept for reference, not used for motion)
        """
        super().__init__(x, y, width, height, speed)
        self.facing = facing

        self.layer = Layers.BULLETS
        self.category = EntityCategory.PROJECTILE
        self.sprite_key = "bullet"

    @classmethod
    def fired_by(cls, player) -> "Bullet":
        """Create a bullet centered on the player's top edge."""
        x = player.x + player.width / 2 - BulletDefaults.WIDTH / 2
        return cls(x, player.y, facing=player.facing)

    def update(self):
        self.y -= self.speed

    def is_offscreen(self) -> bool:
        """True once the bullet has crossed above the top edge."""
        return self.y < 0
