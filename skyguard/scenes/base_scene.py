"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (enter, exit)
- Access to the session, draw manager and screen layouts
- Abstract methods for handle_action and draw
"""

from abc import ABC, abstractmethod

from skyguard.core.runtime.game_settings import Display


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        scene_manager: Owning SceneManager
        session: GameSession shared by every scene
        draw_manager: DrawManager receiving draw calls
    """

    def __init__(self, scene_manager):
        self.scene_manager = scene_manager
        self.session = scene_manager.session
        self.draw_manager = scene_manager.draw_manager
        self.screens = scene_manager.screens
        self.center_x = Display.WIDTH // 2

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before transitioning to another scene."""
        pass

    # ===========================================================
    # Abstract Methods
    # ===========================================================

    @abstractmethod
    def handle_action(self, action):
        """
        React to a discrete input action.

        Returns:
            bool: True if the action was consumed
        """
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """Queue this scene's visuals for the current display frame."""
        pass

    def draw_screen(self, draw_manager, name, context):
        """Clear the queue and draw a YAML text screen."""
        draw_manager.clear()
        layout = self.screens.get(name)
        if layout is not None:
            layout.draw(draw_manager, context, self.center_x)


def sound_label(session) -> str:
    """'on' / 'off' readout of the session's mute state."""
    return "off" if session.muted else "on"
