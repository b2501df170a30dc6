"""
player_core.py
--------------
Defines the controllable Player entity: movement, health and lives.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Display, Layers, PlayerDefaults
from skyguard.entities.base_entity import BaseEntity
from skyguard.entities.entity_types import EntityCategory, Facing
from .player_movement import update_movement


class Player(BaseEntity):
    """Represents the controllable player entity."""

    __slots__ = ('facing', 'health', 'max_health', 'lives')

    def __init__(self, viewport_width=Display.WIDTH, viewport_height=Display.HEIGHT,
                 width=PlayerDefaults.WIDTH, height=PlayerDefaults.HEIGHT,
                 speed=PlayerDefaults.SPEED, lives=PlayerDefaults.START_LIVES):
        """
        Spawn centered horizontally, just above the bottom edge.

        Args:
            viewport_width: Play area width used for the spawn position
            viewport_height: Play area height used for the spawn position
            width: Sprite width
            height: Sprite height
            speed: Horizontal pixels per tick
            lives: Starting lives
        """
        x, y = self._compute_spawn_position(viewport_width, viewport_height, width, height)
        super().__init__(x, y, width, height, speed)

        self.facing = Facing.RIGHT
        self.max_health = PlayerDefaults.MAX_HEALTH
        self.health = self.max_health
        self.lives = lives

        self.layer = Layers.PLAYER
        self.category = EntityCategory.PLAYER
        self.sprite_key = "player"

        DebugLogger.state(f"Player spawned at ({x:.1f}, {y:.1f})", category="entity")

    @staticmethod
    def _compute_spawn_position(viewport_width, viewport_height, width, height):
        x = viewport_width / 2 - width / 2
        y = viewport_height - height - PlayerDefaults.BOTTOM_MARGIN
        return x, y

    # ===========================================================
    # Frame Cycle
    # ===========================================================

    def update(self, input_state=None, viewport_width=Display.WIDTH):
        """Apply held movement signals. y never changes after spawn."""
        if input_state is None:
            return
        update_movement(self, input_state, viewport_width)

    def draw(self, draw_manager):
        """Render mirrored when facing left."""
        draw_manager.draw_entity(self, self.layer, flip_x=self.facing is Facing.LEFT)

    # ===========================================================
    # Health & Lives
    # ===========================================================

    def take_damage(self, amount: int) -> bool:
        """
        Subtract health. Health may go transiently negative until normalized.

        Returns:
            bool: True if health is depleted (<= 0)
        """
        self.health -= amount
        return self.health <= 0

    def restore_health(self):
        self.health = self.max_health

    def lose_life(self) -> int:
        """Consume one life (never below zero). Returns remaining lives."""
        if self.lives > 0:
            self.lives -= 1
        return self.lives

    @property
    def is_alive(self) -> bool:
        return self.lives > 0
