from skyguard.entities.bullets.bullet_straight import Bullet

__all__ = ["Bullet"]
