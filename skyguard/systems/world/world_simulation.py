"""
world_simulation.py
-------------------
Advances every entity by one tick and prunes the ones that left the viewport.

Per-tick order:
    1. Player movement from the current input state
    2. Bullets move; bullets above the top edge are removed
    3. Enemies move; enemies below the bottom edge are removed and cost a life
    4. Collision passes

Escapes are handled before collisions, so an escaping enemy cannot also hit
the player in the same tick.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.systems.collision.collision_manager import CollisionManager


class WorldSimulation:
    """Runs the fixed update pipeline against a session."""

    def __init__(self, session, collision_manager=None):
        self.session = session
        self.collision_manager = collision_manager or CollisionManager(session)

    def step(self):
        """Advance the world one tick. Returns early if the session ends mid-step."""
        session = self.session
        if not session.running:
            return

        self.update_player()
        self.update_bullets()
        self.update_enemies()

        if not session.running:
            return

        self.collision_manager.resolve()

    # ===========================================================
    # Phases
    # ===========================================================

    def update_player(self):
        session = self.session
        session.player.update(session.input_state, session.viewport_width)

    def update_bullets(self):
        bullets = self.session.bullets
        for i in range(len(bullets) - 1, -1, -1):
            bullet = bullets[i]
            bullet.update()
            if bullet.is_offscreen():
                del bullets[i]

    def update_enemies(self):
        session = self.session
        enemies = session.enemies
        escaped = 0

        for i in range(len(enemies) - 1, -1, -1):
            enemy = enemies[i]
            enemy.update()
            if not enemy.has_escaped(session.viewport_height):
                continue

            del enemies[i]
            escaped += 1
            # No further penalties once the session has ended this tick
            if session.running:
                session.lose_life(cause="escape")

        if escaped:
            DebugLogger.state(f"Escaped enemies this tick: {escaped}", category="session")
