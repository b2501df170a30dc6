"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Load and cache entity images, with colored rectangles as fallback
- Maintain layered draw queue (surfaces, shapes, text)
- Render queued items onto the display surface
"""

import pygame

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Assets, Colors, Layers


FALLBACK_COLORS = {
    "player": Colors.PLAYER,
    "enemy": Colors.ENEMY,
    "bullet": Colors.BULLET,
}


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, image_paths=None):
        """
        Args:
            image_paths: Mapping of sprite key -> file path (defaults to Assets.IMAGES)
        """
        self.image_paths = dict(image_paths or Assets.IMAGES)

        # Caches
        self.images = {}   # {(key, w, h, flip_x): Surface}
        self.fonts = {}    # {size: Font}
        self._failed = set()

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, pos), ...]}
        self.shape_layers = {}    # {layer: [(rect, color, alpha), ...]}

        self.background_color = Colors.BACKGROUND

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def get_entity_image(self, key, size, flip_x=False):
        """
        Get a scaled entity image, loading it on first use.

        Args:
            key: Sprite key ("player", "enemy", "bullet")
            size: (width, height) tuple
            flip_x: Mirror horizontally

        Returns:
            pygame.Surface: Always returns a valid surface
        """
        size = (int(size[0]), int(size[1]))
        cache_key = (key, size[0], size[1], flip_x)
        if cache_key in self.images:
            return self.images[cache_key]

        img = self._load_scaled(key, size)
        if flip_x:
            img = pygame.transform.flip(img, True, False)

        self.images[cache_key] = img
        return img

    def _load_scaled(self, key, size):
        path = self.image_paths.get(key)
        if path and key not in self._failed:
            try:
                img = pygame.image.load(path)
                if pygame.display.get_surface() is not None:
                    img = img.convert_alpha()
                DebugLogger.action(f"Loaded image '{key}' from {path}", category="loading")
                return pygame.transform.scale(img, size)
            except (pygame.error, FileNotFoundError) as e:
                self._failed.add(key)
                DebugLogger.warn(f"Missing image '{key}' at {path}: {e}", category="loading")

        return self._generate_fallback(key, size)

    def _generate_fallback(self, key, size):
        """Solid rectangle in the sprite's fallback color."""
        img = pygame.Surface(size, pygame.SRCALPHA)
        img.fill(FALLBACK_COLORS.get(key, (255, 0, 255)))
        return img

    def get_font(self, size=Assets.FONT_SIZE):
        font = self.fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(Assets.FONT_NAME, size)
            self.fonts[size] = font
        return font

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()
        for layer_items in self.shape_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, pos, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            pos: Top-left position or Rect
            layer: Render layer (lower = first)
        """
        if surface is None or pos is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return
        self.surface_layers.setdefault(layer, []).append((surface, pos))

    def draw_entity(self, entity, layer=0, flip_x=False):
        """
        Queue an entity by its sprite key and bounding box.

        Args:
            entity: Object with sprite_key, x, y, width, height
            layer: Render layer
            flip_x: Mirror horizontally
        """
        img = self.get_entity_image(entity.sprite_key, (entity.width, entity.height), flip_x)
        self.queue_draw(img, (round(entity.x), round(entity.y)), layer)

    def queue_rect(self, rect, color, layer=Layers.OVERLAY, alpha=255):
        """Queue a filled rectangle, optionally translucent."""
        self.shape_layers.setdefault(layer, []).append((pygame.Rect(rect), color, alpha))

    def draw_text(self, text, pos, layer=Layers.UI, size=Assets.FONT_SIZE,
                  color=Colors.TEXT, center=False):
        """
        Queue a line of text.

        Args:
            text: String to render
            pos: Top-left position, or the center when center=True
            layer: Render layer
            size: Font size
            color: RGB tuple
            center: Interpret pos as the text center
        """
        surface = self.get_font(size).render(str(text), True, color)
        if center:
            pos = surface.get_rect(center=pos)
        self.queue_draw(surface, pos, layer)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Main display surface
        """
        target_surface.fill(self.background_color)

        layers = sorted(set(self.surface_layers) | set(self.shape_layers))
        for layer in layers:
            items = self.surface_layers.get(layer)
            if items:
                target_surface.blits(items)

            for rect, color, alpha in self.shape_layers.get(layer, ()):
                if alpha >= 255:
                    pygame.draw.rect(target_surface, color, rect)
                    continue
                overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
                overlay.fill((*color, alpha))
                target_surface.blit(overlay, rect.topleft)

    @property
    def queued_count(self) -> int:
        """Number of surfaces and shapes waiting for render()."""
        return (sum(len(items) for items in self.surface_layers.values())
                + sum(len(items) for items in self.shape_layers.values()))
