from skyguard.entities.player.player_core import Player

__all__ = ["Player"]
