"""
Screen layout package.
"""

from skyguard.ui.screen_loader import ScreenLayout, ScreenLoader, TextLine

__all__ = ["ScreenLayout", "ScreenLoader", "TextLine"]
