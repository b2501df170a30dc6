"""
game_scene.py
-------------
Gameplay scene: draws the world and HUD after every simulation tick.

Responsibilities
----------------
- Act as the session renderer (draw_world is called once per tick)
- Route the fire action to the session
- Flash the screen briefly when the player takes contact damage
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Colors, Display, Layers
from skyguard.core.services.event_manager import PlayerHitEvent
from skyguard.scenes.base_scene import BaseScene, sound_label


HIT_FLASH_TICKS = 6
HIT_FLASH_ALPHA = 90

HUD_X = 10
HUD_Y = 10
HUD_LINE_SPACING = 25


class GameScene(BaseScene):
    """Renders the running session."""

    def __init__(self, scene_manager):
        super().__init__(scene_manager)
        self.flash_ticks = 0
        self.session.events.subscribe(PlayerHitEvent, self._on_player_hit)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_enter(self):
        self.flash_ticks = 0
        DebugLogger.state(f"Gameplay [{self.session.difficulty.value.upper()}]", category="scene")

    def on_exit(self):
        self.session.input_state.release_all()
        self.flash_ticks = 0

    def _on_player_hit(self, event):
        self.flash_ticks = HIT_FLASH_TICKS

    # ===========================================================
    # Input
    # ===========================================================

    def handle_action(self, action):
        if action != "fire":
            return False
        self.session.fire()
        return True

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        """World visuals are queued by draw_world on each tick."""
        pass

    def draw_world(self, session):
        """Queue one complete frame of the world state."""
        dm = self.draw_manager
        dm.clear()

        if session.player is not None:
            session.player.draw(dm)
        for bullet in session.bullets:
            bullet.draw(dm)
        for enemy in session.enemies:
            enemy.draw(dm)

        for i, line in enumerate(self.hud_lines(session)):
            dm.draw_text(line, (HUD_X, HUD_Y + i * HUD_LINE_SPACING), layer=Layers.UI)

        if self.flash_ticks > 0:
            self.flash_ticks -= 1
            dm.queue_rect((0, 0, Display.WIDTH, Display.HEIGHT), Colors.HIT_FLASH,
                          layer=Layers.OVERLAY, alpha=HIT_FLASH_ALPHA)

    @staticmethod
    def hud_lines(session) -> list:
        """Score, lives, health and sound readouts."""
        player = session.player
        lives = player.lives if player else 0
        health = max(0, player.health) if player else 0
        return [
            f"Score: {session.score}",
            f"Lives: {lives}",
            f"Health: {health}%",
            f"Sound: {sound_label(session)}",
        ]
