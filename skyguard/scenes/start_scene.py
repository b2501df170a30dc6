"""
start_scene.py
--------------
Title screen with difficulty selection.

Selecting a difficulty starts the session; the scene manager then switches
to the gameplay scene.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.difficulty import DifficultyLevel
from skyguard.scenes.base_scene import BaseScene, sound_label


DIFFICULTY_ACTIONS = {
    "select_easy": DifficultyLevel.EASY,
    "select_medium": DifficultyLevel.MEDIUM,
    "select_hard": DifficultyLevel.HARD,
}


class StartScene(BaseScene):
    """Idle screen: shows controls, the sound state and the stored high score."""

    def on_enter(self):
        DebugLogger.state("Start screen shown", category="scene")

    def handle_action(self, action):
        level = DIFFICULTY_ACTIONS.get(action)
        if level is None:
            return False
        self.session.start(level)
        return True

    def draw(self, draw_manager):
        self.draw_screen(draw_manager, "start", {
            "high_score": self.session.high_score,
            "sound": sound_label(self.session),
        })
