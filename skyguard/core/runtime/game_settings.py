"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Skyguard"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Tick timing. Entity speeds are expressed in pixels per tick."""
    FRAME_MS: float = 1000 / Display.FPS


# ===========================================================
# Entity Defaults
# ===========================================================

class PlayerDefaults:
    """Player configuration defaults."""
    WIDTH: int = 50
    HEIGHT: int = 50
    SPEED: int = 5
    BOTTOM_MARGIN: int = 10
    MAX_HEALTH: int = 100
    START_LIVES: int = 3


class BulletDefaults:
    """Player projectile configuration."""
    WIDTH: int = 5
    HEIGHT: int = 15
    SPEED: int = 10


class EnemyDefaults:
    """Enemy configuration. Speed comes from the active difficulty."""
    WIDTH: int = 40
    HEIGHT: int = 40


# ===========================================================
# Scoring & Damage
# ===========================================================

class Scoring:
    """Score and damage rules."""
    KILL_SCORE: int = 10
    CONTACT_DAMAGE: int = 20


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    BULLETS: int = 200
    ENEMIES: int = 300
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """RGB colors for fallback shapes and text."""
    BACKGROUND = (10, 10, 40)
    TEXT = (255, 255, 255)
    HIGHLIGHT = (255, 215, 0)
    PLAYER = (80, 200, 120)
    BULLET = (255, 255, 100)
    ENEMY = (220, 80, 80)
    HIT_FLASH = (255, 0, 0)


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset locations, relative to the working directory."""
    IMAGES = {
        "player": "assets/images/player.png",
        "enemy": "assets/images/animal.png",
        "bullet": "assets/images/boulet.png",
    }

    SOUNDS = {
        "shoot": "assets/audio/gun-fire.mp3",
        "hit": "assets/audio/hit.mp3",
        "game_over": "assets/audio/game-over.mp3",
        "game_start": "assets/audio/game-start.mp3",
    }

    FONT_NAME: str = None  # pygame default font
    FONT_SIZE: int = 20
    TITLE_FONT_SIZE: int = 48

    HIGH_SCORE_FILE: str = "highscore.json"
    HIGH_SCORE_KEY: str = "highScore"
