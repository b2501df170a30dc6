"""
sound_manager.py
----------------
pygame.mixer backed sound cues with a global mute flag.

Playback is fire-and-forget: a missing mixer, a missing file or a playback
error is logged and otherwise ignored.
"""

import pygame

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Assets


class SoundManager:
    """Loads cue sounds once and plays them on request."""

    def __init__(self, asset_paths=None, muted=False):
        """
        Args:
            asset_paths: Mapping of cue name -> file path (defaults to Assets.SOUNDS)
            muted: Initial mute state
        """
        self.asset_paths = dict(asset_paths or Assets.SOUNDS)
        self.sounds = {}
        self.muted = muted

        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_assets()

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled: {e}", category="audio")
            return False
        return True

    def load_assets(self):
        for name, path in self.asset_paths.items():
            self.load_sound(name, path)

    def load_sound(self, name, path):
        """Load one cue. Failures leave the cue silent."""
        try:
            sound = pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError, OSError) as e:
            DebugLogger.warn(f"Missing sound '{name}' at {path}: {e}", category="audio")
            return
        self.sounds[name] = sound

    # ===========================================================
    # Playback
    # ===========================================================

    def play(self, name):
        """Restart and play a cue unless muted."""
        if self.muted:
            return

        sound = self.sounds.get(name)
        if sound is None:
            DebugLogger.trace(f"No sound loaded for cue '{name}'", category="audio")
            return

        try:
            sound.stop()  # rewind so rapid repeats restart the cue
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Failed to play '{name}': {e}", category="audio")

    def stop_all(self):
        """Silence every playing cue."""
        if not self.enabled:
            return
        try:
            pygame.mixer.stop()
        except pygame.error as e:
            DebugLogger.warn(f"Failed to stop sounds: {e}", category="audio")

    # ===========================================================
    # Mute
    # ===========================================================

    def toggle_mute(self) -> bool:
        """Flip the mute flag. Returns the new state."""
        self.muted = not self.muted
        if self.muted:
            self.stop_all()
        DebugLogger.state(f"Audio {'muted' if self.muted else 'unmuted'}", category="audio")
        return self.muted
