"""
Entity model.

Exports the three fixed entity roles used by the simulation.
"""

from skyguard.entities.bullets import Bullet
from skyguard.entities.enemies import Enemy
from skyguard.entities.entity_types import EntityCategory, Facing
from skyguard.entities.player import Player

__all__ = ["Bullet", "Enemy", "EntityCategory", "Facing", "Player"]
