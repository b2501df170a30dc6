"""
scene_manager.py
----------------
Scene coordinator driven by the session state.

Each SessionState maps to one scene instance. Transitions follow the
session: starting, game over and restart swap the active scene.
"""

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.session_state import SessionState
from skyguard.core.services.event_manager import GameOverEvent, SessionStartedEvent
from skyguard.scenes.game_over_scene import GameOverScene
from skyguard.scenes.game_scene import GameScene
from skyguard.scenes.start_scene import StartScene
from skyguard.ui.screen_loader import ScreenLoader


class SceneManager:
    """Coordinates scene transitions and delegates input and draw logic."""

    def __init__(self, session, draw_manager, screens=None):
        """
        Args:
            session: GameSession shared by all scenes
            draw_manager: DrawManager receiving draw calls
            screens: Preloaded screen layouts (loaded from screens.yaml if None)
        """
        DebugLogger.init_entry("SceneManager")

        self.session = session
        self.draw_manager = draw_manager
        self.screens = screens if screens is not None else ScreenLoader().load()

        # Scene registry - one instance per session state
        self.scene_classes = {
            SessionState.IDLE: StartScene,
            SessionState.RUNNING: GameScene,
            SessionState.GAME_OVER: GameOverScene,
        }
        self.scenes = {state: cls(self) for state, cls in self.scene_classes.items()}
        DebugLogger.init_sub(f"Registered scenes: {[s.value for s in self.scenes]}")

        # Gameplay scene renders every tick
        session.renderer = self.scenes[SessionState.RUNNING]

        session.events.subscribe(SessionStartedEvent, self._on_session_event)
        session.events.subscribe(GameOverEvent, self._on_session_event)

        self._active_state = None
        self.sync()

    # ===========================================================
    # Scene Control
    # ===========================================================

    @property
    def active_scene(self):
        return self.scenes[self._active_state]

    @property
    def active_state(self):
        return self._active_state

    def sync(self):
        """Swap scenes if the session state changed since the last check."""
        state = self.session.state
        if state is self._active_state:
            return

        prev = self._active_state
        if prev is not None:
            self.scenes[prev].on_exit()

        self._active_state = state
        DebugLogger.system(
            f"Transitioning [{prev.value if prev else 'None'}] -> [{state.value}]",
            category="scene"
        )
        self.scenes[state].on_enter()

    def _on_session_event(self, event):
        self.sync()

    # ===========================================================
    # Input & Drawing
    # ===========================================================

    def handle_action(self, action) -> bool:
        """
        Route a discrete action.

        Mute is global; everything else goes to the active scene.

        Returns:
            bool: True if the action was consumed
        """
        if action is None:
            return False

        if action == "toggle_mute":
            self.session.toggle_mute()
            return True

        consumed = self.active_scene.handle_action(action)
        self.sync()
        return consumed

    def draw(self, draw_manager):
        self.sync()
        self.active_scene.draw(draw_manager)
