from skyguard.entities.enemies.enemy_straight import Enemy

__all__ = ["Enemy"]
