"""
event_manager.py
----------------
Event-driven system for decoupled session communication.
Lets scenes and HUD react to gameplay without the session knowing about them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from skyguard.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class SessionStartedEvent(BaseEvent):
    """Dispatched when a session enters RUNNING."""
    difficulty: str


@dataclass(frozen=True)
class EnemyDestroyedEvent(BaseEvent):
    """Dispatched when a bullet destroys an enemy."""
    position: tuple
    score: int


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched when an enemy collides with the player."""
    damage: int
    health: int


@dataclass(frozen=True)
class LifeLostEvent(BaseEvent):
    """Dispatched when the player loses a life."""
    lives: int
    cause: str  # "health" or "escape"


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when a session ends."""
    score: int
    high_score: int
    new_high_score: bool


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.
        """
        subscribers = self._subscribers.get(type(event))
        if not subscribers:
            return

        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Number of subscribers for event_type, or in total when None."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
