"""
game_session.py
---------------
Session state machine: owns the player, the entity collections, the spawn
scheduler and the tick loop for one play-through.

States
------
IDLE -> RUNNING     start(difficulty)
RUNNING -> GAME_OVER  lives reach zero (health depletion or escapes)
GAME_OVER -> IDLE   restart()

Collaborators (scheduler, audio, high-score store, renderer, event bus,
input state, rng) are injected so the session runs headless in tests.
"""

from dataclasses import dataclass

from skyguard.audio.sound_cues import SoundCue
from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.difficulty import DifficultyLevel, load_difficulty_table
from skyguard.core.runtime.game_settings import Display
from skyguard.core.runtime.input_state import InputState
from skyguard.core.runtime.session_state import SessionState
from skyguard.core.services.event_manager import (
    EnemyDestroyedEvent,
    EventManager,
    GameOverEvent,
    LifeLostEvent,
    PlayerHitEvent,
    SessionStartedEvent,
)
from skyguard.entities.bullets.bullet_straight import Bullet
from skyguard.entities.player.player_core import Player
from skyguard.systems.world.spawn_manager import SpawnManager
from skyguard.systems.world.world_simulation import WorldSimulation


@dataclass(frozen=True)
class SessionResult:
    """Outcome surfaced on the game over screen."""
    score: int
    high_score: int
    new_high_score: bool
    difficulty: str


class GameSession:
    """Explicit context object for one play-through and its transitions."""

    def __init__(self, scheduler, sound_manager=None, high_score_store=None,
                 events=None, input_state=None, renderer=None, rng=None,
                 difficulty_table=None, viewport=(Display.WIDTH, Display.HEIGHT)):
        """
        Args:
            scheduler: Scheduler providing frame requests and interval timers
            sound_manager: Audio collaborator (play/stop_all/toggle_mute), optional
            high_score_store: Persistence collaborator (get/set), optional
            events: EventManager for session notifications
            input_state: InputState read by the player each tick
            renderer: Object with draw_world(session), called after every tick
            rng: random.Random for spawn positions
            difficulty_table: DifficultyLevel -> DifficultySettings mapping
            viewport: (width, height) of the play area
        """
        self.scheduler = scheduler
        self.sound = sound_manager
        self.high_score_store = high_score_store
        self.events = events or EventManager()
        self.input_state = input_state or InputState()
        self.renderer = renderer
        self.difficulty_table = difficulty_table or load_difficulty_table()
        self.viewport_width, self.viewport_height = viewport

        # Session data
        self.state = SessionState.IDLE
        self.difficulty = DifficultyLevel.MEDIUM
        self.settings = self.difficulty_table[self.difficulty]
        self.score = 0
        self.high_score = self._load_high_score()
        self.new_high_score = False
        self.last_result = None
        self.tick_count = 0

        # Owned entities
        self.player = None
        self.bullets = []
        self.enemies = []

        # Systems
        self.spawn_manager = SpawnManager(self, scheduler, rng)
        self.world = WorldSimulation(self)
        self._frame_handle = None

        DebugLogger.init_entry("GameSession")
        DebugLogger.init_sub(f"Viewport: {self.viewport_width}x{self.viewport_height}")
        DebugLogger.init_sub(f"High score: {self.high_score}")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def ticking(self) -> bool:
        """True while a next-frame request is pending."""
        return self._frame_handle is not None

    @property
    def muted(self) -> bool:
        """Audio mute state; a session without audio counts as muted."""
        return self.sound is None or bool(self.sound.muted)

    # ===========================================================
    # Transitions
    # ===========================================================

    def start(self, difficulty) -> bool:
        """
        IDLE -> RUNNING with a fresh player and empty collections.

        Args:
            difficulty: DifficultyLevel or its name ("easy", "medium", "hard")

        Returns:
            bool: False if the session was not idle

        Raises:
            ValueError: Unknown difficulty name
        """
        level = DifficultyLevel.parse(difficulty)

        if self.state is not SessionState.IDLE:
            DebugLogger.warn(f"Ignoring start({level.value}) while {self.state.value}", category="session")
            return False

        self.difficulty = level
        self.settings = self.difficulty_table[level]
        self.score = 0
        self.new_high_score = False
        self.last_result = None
        self.tick_count = 0
        self.bullets.clear()
        self.enemies.clear()
        self.player = Player(self.viewport_width, self.viewport_height)

        self.state = SessionState.RUNNING
        DebugLogger.state(f"Session started [{level.value.upper()}]", category="session")

        self._play(SoundCue.GAME_START)
        self.spawn_manager.start(self.settings)
        if self._frame_handle is None:
            self._game_loop()

        self.events.dispatch(SessionStartedEvent(difficulty=level.value))
        return True

    def game_over(self):
        """
        RUNNING -> GAME_OVER. Halts the loop and spawner and settles the high score.

        Calling it outside RUNNING does nothing.
        """
        if self.state is not SessionState.RUNNING:
            return

        self.state = SessionState.GAME_OVER
        self.stop()

        if self.sound is not None:
            self.sound.stop_all()
        self._play(SoundCue.GAME_OVER)

        stored = self._load_high_score()
        if self.score > stored:
            self.high_score = self.score
            self.new_high_score = True
            if self.high_score_store is not None:
                self.high_score_store.set(self.score)
        else:
            self.high_score = stored
            self.new_high_score = False

        self.last_result = SessionResult(
            score=self.score,
            high_score=self.high_score,
            new_high_score=self.new_high_score,
            difficulty=self.difficulty.value,
        )

        DebugLogger.state(
            f"Game over - score {self.score} (high {self.high_score}"
            f"{', NEW' if self.new_high_score else ''})",
            category="session"
        )
        self.events.dispatch(GameOverEvent(
            score=self.score,
            high_score=self.high_score,
            new_high_score=self.new_high_score,
        ))

    def restart(self) -> bool:
        """GAME_OVER -> IDLE. Score and entities are reset by the next start()."""
        if self.state is not SessionState.GAME_OVER:
            DebugLogger.warn(f"Ignoring restart while {self.state.value}", category="session")
            return False

        self.state = SessionState.IDLE
        self.input_state.release_all()
        DebugLogger.state("Session back to idle", category="session")
        return True

    def stop(self):
        """Cancel the spawn timer and the pending frame. Idempotent."""
        self.spawn_manager.stop()
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    # ===========================================================
    # Tick Loop
    # ===========================================================

    def _game_loop(self, timestamp=None):
        """Frame callback: run one tick and request the next while running."""
        self._frame_handle = None
        if not self.running:
            return

        self.tick()

        if self.running:
            self._frame_handle = self.scheduler.request_frame(self._game_loop)

    def tick(self):
        """One simulation step followed by rendering."""
        self.world.step()
        self.tick_count += 1
        if self.renderer is not None:
            self.renderer.draw_world(self)

    # ===========================================================
    # Player Actions
    # ===========================================================

    def fire(self):
        """Spawn a bullet from the player. Ignored unless running."""
        if not self.running:
            return None

        bullet = Bullet.fired_by(self.player)
        self.bullets.append(bullet)
        self._play(SoundCue.SHOOT)
        return bullet

    def toggle_mute(self) -> bool:
        if self.sound is None:
            return False
        return self.sound.toggle_mute()

    # ===========================================================
    # Consequences (called by the world simulation and collisions)
    # ===========================================================

    def on_enemy_destroyed(self, enemy, points):
        self.score += points
        self._play(SoundCue.HIT)
        self.events.dispatch(EnemyDestroyedEvent(position=enemy.center, score=self.score))

    def damage_player(self, amount):
        """
        Apply contact damage, consuming a life when health is depleted.

        Health is reset to full while lives remain and clamped to zero on the
        final life. The hit is reported before the life is consumed, so
        listeners see it ahead of any LifeLostEvent or GameOverEvent.
        """
        player = self.player
        depleted = player.take_damage(amount)
        if depleted:
            if player.lives > 1:
                player.restore_health()
            else:
                player.health = 0

        self.events.dispatch(PlayerHitEvent(damage=amount, health=player.health))

        if depleted:
            self.lose_life(cause="health")

    def lose_life(self, cause):
        """Consume one life; the last one ends the session."""
        remaining = self.player.lose_life()
        DebugLogger.state(f"Life lost ({cause}) - {remaining} left", category="session")
        self.events.dispatch(LifeLostEvent(lives=remaining, cause=cause))

        if remaining <= 0:
            self.game_over()

    # ===========================================================
    # Helpers
    # ===========================================================

    def _play(self, cue):
        if self.sound is not None:
            self.sound.play(cue)

    def _load_high_score(self) -> int:
        if self.high_score_store is None:
            return getattr(self, "high_score", 0)
        return self.high_score_store.get()
