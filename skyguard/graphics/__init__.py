"""
Rendering package.
"""

from skyguard.graphics.draw_manager import DrawManager

__all__ = ["DrawManager"]
