"""
sound_cues.py
-------------
Names of the sound cues the session emits.

Kept apart from the mixer so the simulation never imports pygame.
"""


class SoundCue:
    SHOOT = "shoot"
    HIT = "hit"
    GAME_START = "game_start"
    GAME_OVER = "game_over"
