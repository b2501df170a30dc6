from skyguard.systems.collision.collision_manager import CollisionManager

__all__ = ["CollisionManager"]
