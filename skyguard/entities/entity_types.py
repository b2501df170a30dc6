"""Entity types."""

from enum import Enum


class EntityCategory:
    """High-level logical grouping for entities."""
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"


class Facing(Enum):
    """Horizontal facing direction of the player (and bullets it fires)."""
    LEFT = "left"
    RIGHT = "right"
