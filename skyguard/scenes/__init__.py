"""
Scene module exports.

One scene per session state: start screen, gameplay, game over.
"""

from skyguard.scenes.base_scene import BaseScene
from skyguard.scenes.game_over_scene import GameOverScene
from skyguard.scenes.game_scene import GameScene
from skyguard.scenes.start_scene import StartScene

__all__ = [
    'BaseScene',
    'GameOverScene',
    'GameScene',
    'StartScene',
]
