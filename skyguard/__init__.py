"""
Skyguard
--------
Minimal real-time vertical arcade shooter built on pygame.

The simulation core (session, entities, collision, spawning) runs headless;
pygame adapters for rendering, input and audio live beside it.
"""

__version__ = "0.1.0"
