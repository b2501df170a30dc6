"""
game_loop.py
------------
Defines the GameLoop class that hosts a session in a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the runtime collaborators
- Drive the scheduler once per display frame (timers, then the tick)
- Route keyboard events through InputManager to the scenes
- Render the draw queue and pace the loop to Display.FPS
"""

import random

import pygame

from skyguard.audio.sound_manager import SoundManager
from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.difficulty import load_difficulty_table
from skyguard.core.runtime.game_session import GameSession
from skyguard.core.runtime.game_settings import Display
from skyguard.core.runtime.input_state import InputState
from skyguard.core.runtime.scheduler import Scheduler
from skyguard.core.services.event_manager import EventManager
from skyguard.core.services.high_score_store import HighScoreStore
from skyguard.core.services.input_manager import InputManager
from skyguard.core.services.scene_manager import SceneManager
from skyguard.graphics.draw_manager import DrawManager


class GameLoop:
    """Core runtime controller that manages the window's main loop."""

    def __init__(self, seed=None):
        """
        Args:
            seed: Optional RNG seed for reproducible spawn positions
        """
        DebugLogger.section("Initializing GameLoop")

        # -------------------------------------------------------
        # Initialize pygame systems
        # -------------------------------------------------------
        pygame.init()
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} @ {Display.FPS} FPS")

        # -------------------------------------------------------
        # Core Systems
        # -------------------------------------------------------
        self.clock = pygame.time.Clock()
        self.scheduler = Scheduler(pygame.time.get_ticks)
        self.input_state = InputState()
        self.input_manager = InputManager(self.input_state)
        self.draw_manager = DrawManager()

        self.session = GameSession(
            scheduler=self.scheduler,
            sound_manager=SoundManager(),
            high_score_store=HighScoreStore(),
            events=EventManager(),
            input_state=self.input_state,
            rng=random.Random(seed),
            difficulty_table=load_difficulty_table(),
            viewport=(Display.WIDTH, Display.HEIGHT),
        )

        # -------------------------------------------------------
        # Scene Management
        # -------------------------------------------------------
        self.scenes = SceneManager(self.session, self.draw_manager)

        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed or Esc is pressed."""
        DebugLogger.section("Game Loop")

        try:
            while self.running:
                self._handle_events()
                if not self.running:
                    break

                # Spawn timers first, then the frame requested by the last tick
                self.scheduler.pump()
                self._draw()
                self.clock.tick(Display.FPS)
        finally:
            self.session.stop()
            self.scheduler.clear()
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            action = self.input_manager.handle_event(event)
            if action == "quit":
                self.running = False
                DebugLogger.action("Quit signal received", category="input")
                return
            self.scenes.handle_action(action)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.scenes.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()
