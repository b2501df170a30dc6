"""
collision_manager.py
--------------------
Pairwise AABB collision passes (BaseEntity.overlaps) and their gameplay consequences.

Responsibilities
----------------
- Bullet x Enemy: remove both, award score, play the hit cue.
- Player x Enemy: remove the enemy, damage the player.
- Tolerate entities already removed earlier in the same pass.

Both passes walk the lists in reverse index order so entries can be deleted
in place without disturbing indices still to be visited.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Scoring


class CollisionManager:
    """Detects overlaps and applies their consequences to the session."""

    def __init__(self, session):
        """
        Args:
            session: GameSession owning the entity collections and counters
        """
        self.session = session

    # ===========================================================
    # Entry Point
    # ===========================================================

    def resolve(self):
        """Run both collision passes for the current tick."""
        kills = self.resolve_bullets_vs_enemies()
        hits = self.resolve_player_vs_enemies()
        if kills or hits:
            DebugLogger.trace(f"Tick collisions: kills={kills} hits={hits}")
        return kills, hits

    # ===========================================================
    # Bullet x Enemy
    # ===========================================================

    def resolve_bullets_vs_enemies(self) -> int:
        """
        Each bullet destroys at most one enemy per tick.

        Returns:
            int: Number of enemies destroyed
        """
        bullets = self.session.bullets
        enemies = self.session.enemies
        kills = 0

        for i in range(len(bullets) - 1, -1, -1):
            if i >= len(bullets):
                continue
            bullet = bullets[i]

            for j in range(len(enemies) - 1, -1, -1):
                if j >= len(enemies):
                    continue
                enemy = enemies[j]

                if not bullet.overlaps(enemy):
                    continue

                del bullets[i]
                del enemies[j]
                kills += 1
                self.session.on_enemy_destroyed(enemy, Scoring.KILL_SCORE)
                break

        return kills

    # ===========================================================
    # Player x Enemy
    # ===========================================================

    def resolve_player_vs_enemies(self) -> int:
        """
        Remove every enemy touching the player and apply contact damage.

        Damage is applied sequentially; the pass stops as soon as the session
        is no longer running.

        Returns:
            int: Number of enemies that hit the player
        """
        player = self.session.player
        enemies = self.session.enemies
        hits = 0

        if player is None:
            return hits

        for i in range(len(enemies) - 1, -1, -1):
            if not self.session.running:
                break
            if i >= len(enemies):
                continue
            enemy = enemies[i]

            if not player.overlaps(enemy):
                continue

            del enemies[i]
            hits += 1
            self.session.damage_player(Scoring.CONTACT_DAMAGE)

        return hits
