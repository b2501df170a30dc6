from skyguard.systems.world.spawn_manager import SpawnManager
from skyguard.systems.world.world_simulation import WorldSimulation

__all__ = ["SpawnManager", "WorldSimulation"]
