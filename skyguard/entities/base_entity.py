"""
base_entity.py
--------------
Foundational class for all in-game entities (Player, Bullet, Enemy).

Coordinate System
-----------------
Entities use top-left coordinates in screen space (y grows downward):
- (x, y) is the top-left corner of the bounding box
- width/height are fixed for the entity's lifetime
- Overlap tests are strict axis-aligned bounding-box checks
"""

from skyguard.core.runtime.game_settings import Layers
from skyguard.entities.entity_types import EntityCategory


class BaseEntity:
    """
    Base class for all game entities.

    Subclasses override update(); draw() queues the entity on a DrawManager.
    """

    __slots__ = ('x', 'y', 'width', 'height', 'speed', 'layer', 'category', 'sprite_key')

    def __init__(self, x: float, y: float, width: float, height: float, speed: float = 0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed

        self.layer = Layers.ENEMIES
        self.category = EntityCategory.ENEMY
        self.sprite_key = None

    # ===================================================================
    # Bounds
    # ===================================================================

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> tuple:
        """(x, y, width, height) tuple for renderers."""
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> tuple:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: "BaseEntity") -> bool:
        """Strict AABB overlap. Touching edges do not count."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    # ===================================================================
    # Frame Cycle
    # ===================================================================

    def update(self):
        """Advance one tick. Override in subclasses."""
        pass

    def draw(self, draw_manager):
        """Queue entity for rendering via DrawManager."""
        draw_manager.draw_entity(self, self.layer)

    def __repr__(self):
        return (f"{type(self).__name__}(x={self.x:.1f}, y={self.y:.1f}, "
                f"w={self.width}, h={self.height})")
