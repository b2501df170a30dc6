"""
game_over_scene.py
------------------
Final score screen shown after the last life is lost.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.scenes.base_scene import BaseScene, sound_label


class GameOverScene(BaseScene):
    """Shows the session result until the player restarts."""

    def on_enter(self):
        result = self.session.last_result
        if result is not None:
            DebugLogger.state(f"Game over screen: {result}", category="scene")

    def handle_action(self, action):
        if action != "restart":
            return False
        return self.session.restart()

    def draw(self, draw_manager):
        self.draw_screen(draw_manager, "game_over", self.build_context())

    def build_context(self) -> dict:
        result = self.session.last_result
        if result is None:
            context = {
                "score": self.session.score,
                "high_score": self.session.high_score,
                "new_high_score": self.session.new_high_score,
                "difficulty": self.session.difficulty.value,
            }
        else:
            context = {
                "score": result.score,
                "high_score": result.high_score,
                "new_high_score": result.new_high_score,
                "difficulty": result.difficulty,
            }
        context["sound"] = sound_label(self.session)
        return context
