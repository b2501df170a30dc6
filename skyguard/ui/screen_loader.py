"""
screen_loader.py
----------------
Loads text screen layouts (start, game over) from YAML files.

Each screen is a list of centered text lines. Line text is a format
template filled from a context dict at draw time; a line with a `when` key
is only shown if that context value is truthy.

Example:
    game_over:
      lines:
        - text: "Score: {score}"
          y: 280
        - text: "New high score!"
          y: 360
          color: HIGHLIGHT
          when: new_high_score
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Assets, Colors, Layers
from skyguard.core.services.config_manager import PACKAGE_CONFIG_ROOT


FONT_SIZES = {
    "normal": Assets.FONT_SIZE,
    "title": Assets.TITLE_FONT_SIZE,
}


@dataclass(frozen=True)
class TextLine:
    """One centered line of a screen."""
    text: str
    y: int
    size: int = Assets.FONT_SIZE
    color: tuple = Colors.TEXT
    when: Optional[str] = None

    def format(self, context: Dict[str, Any]) -> Optional[str]:
        """Fill the template, or None when the line is hidden."""
        if self.when and not context.get(self.when):
            return None
        try:
            return self.text.format(**context)
        except (KeyError, IndexError) as e:
            DebugLogger.warn(f"Missing value {e} for screen text '{self.text}'", category="scene")
            return self.text


@dataclass
class ScreenLayout:
    """Named list of text lines drawn on one layer."""
    name: str
    lines: List[TextLine] = field(default_factory=list)
    layer: int = Layers.UI

    def draw(self, draw_manager, context: Dict[str, Any], center_x: int):
        """Queue every visible line on the draw manager."""
        for line in self.lines:
            text = line.format(context)
            if text is None:
                continue
            draw_manager.draw_text(text, (center_x, line.y), layer=self.layer,
                                   size=line.size, color=line.color, center=True)


class ScreenLoader:
    """Loads and parses screen layouts from YAML files."""

    def __init__(self, base_path=None):
        """
        Args:
            base_path: Directory holding screen YAML files (defaults to skyguard/config/ui)
        """
        self.base_path = Path(base_path or os.path.join(PACKAGE_CONFIG_ROOT, "ui"))
        self.cache: Dict[str, Dict[str, ScreenLayout]] = {}

    def load(self, filename: str = "screens.yaml") -> Dict[str, ScreenLayout]:
        """
        Load every screen defined in a YAML file.

        Args:
            filename: Path relative to base_path

        Returns:
            dict: screen name -> ScreenLayout

        Raises:
            FileNotFoundError: File does not exist
            ValueError: File content is not a mapping of screens
        """
        if filename in self.cache:
            return self.cache[filename]

        full_path = self.base_path / filename
        if not full_path.exists():
            raise FileNotFoundError(f"Screen config not found: {full_path}")

        with open(full_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        screens = self.parse(config)
        self.cache[filename] = screens
        DebugLogger.action(f"Loaded {len(screens)} screens from {full_path}", category="loading")
        return screens

    def parse(self, config) -> Dict[str, ScreenLayout]:
        """Build ScreenLayouts from an already-parsed YAML document."""
        if not isinstance(config, dict):
            raise ValueError("Screen config must be a mapping of screen names")

        screens = {}
        for name, screen_config in config.items():
            if not isinstance(screen_config, dict) or "lines" not in screen_config:
                raise ValueError(f"Screen '{name}' has no 'lines' list")

            lines = [self._parse_line(name, entry) for entry in screen_config["lines"]]
            layer = self._resolve_layer(screen_config.get("layer", "UI"))
            screens[name] = ScreenLayout(name=name, lines=lines, layer=layer)
        return screens

    def clear_cache(self):
        self.cache.clear()

    # ===========================================================
    # Field Resolution
    # ===========================================================

    def _parse_line(self, screen, entry) -> TextLine:
        if "text" not in entry or "y" not in entry:
            raise ValueError(f"Screen '{screen}' line needs 'text' and 'y': {entry}")

        return TextLine(
            text=str(entry["text"]),
            y=int(entry["y"]),
            size=self._resolve_size(entry.get("size", "normal")),
            color=self._resolve_color(entry.get("color", "TEXT")),
            when=entry.get("when"),
        )

    @staticmethod
    def _resolve_size(value) -> int:
        if isinstance(value, int):
            return value
        if value in FONT_SIZES:
            return FONT_SIZES[value]
        DebugLogger.warn(f"Unknown font size '{value}', using normal", category="loading")
        return Assets.FONT_SIZE

    @staticmethod
    def _resolve_color(value) -> tuple:
        """Accept a Colors attribute name or an [r, g, b] list."""
        if isinstance(value, (list, tuple)) and len(value) == 3:
            return tuple(int(c) for c in value)
        color = getattr(Colors, str(value), None)
        if isinstance(color, tuple):
            return color
        DebugLogger.warn(f"Unknown color '{value}', using TEXT", category="loading")
        return Colors.TEXT

    @staticmethod
    def _resolve_layer(value) -> int:
        """Accept a Layers attribute name or a number."""
        if isinstance(value, (int, float)):
            return int(value)
        layer = getattr(Layers, str(value), None)
        if isinstance(layer, int):
            return layer
        DebugLogger.warn(f"Unknown layer '{value}', using Layers.UI", category="loading")
        return Layers.UI
