"""
spawn_manager.py
----------------
Timed enemy generation parameterized by the active difficulty.

Responsibilities
----------------
- Own the periodic spawn timer on the injected scheduler.
- Create one enemy per firing at a random x along the top edge.
- Never run two timers at once; restarting cancels the previous one.

The timer is wall-clock periodic and independent of the frame rate. It only
appends new enemies; it never touches existing ones.
"""

import random

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import EnemyDefaults
from skyguard.entities.enemies.enemy_straight import Enemy


class SpawnManager:
    """Periodic enemy spawner for one session."""

    def __init__(self, session, scheduler, rng=None):
        """
        Args:
            session: GameSession receiving spawned enemies
            scheduler: Scheduler providing set_interval/clear_interval
            rng: random.Random used for spawn positions
        """
        self.session = session
        self.scheduler = scheduler
        self.rng = rng or random.Random()

        self.settings = None
        self._timer = None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self, settings):
        """
        (Re)start spawning with the given DifficultySettings.

        Any previous timer is cancelled first.
        """
        self.stop()
        self.settings = settings
        self._timer = self.scheduler.set_interval(self._on_spawn_timer, settings.spawn_rate_ms)
        DebugLogger.state(
            f"Enemy spawning started (every {settings.spawn_rate_ms} ms, speed {settings.enemy_speed})",
            category="spawn"
        )

    def stop(self):
        """Cancel the spawn timer. Safe to call when already stopped."""
        if self._timer is None:
            return
        self.scheduler.clear_interval(self._timer)
        self._timer = None
        DebugLogger.state("Enemy spawning stopped", category="spawn")

    @property
    def active(self) -> bool:
        return self._timer is not None

    # ===========================================================
    # Spawning
    # ===========================================================

    def _on_spawn_timer(self):
        # Stale firings after the session ended are ignored
        if not self.session.running or self.settings is None:
            return
        self.spawn_enemy()

    def spawn_enemy(self) -> Enemy:
        """Create one enemy above the top edge and hand it to the session."""
        max_x = max(0, self.session.viewport_width - EnemyDefaults.WIDTH)
        x = self.rng.uniform(0, max_x)
        enemy = Enemy(x=x, speed=self.settings.enemy_speed)
        self.session.enemies.append(enemy)

        DebugLogger.trace(f"Spawned enemy at x={x:.1f}", category="spawn")
        return enemy
