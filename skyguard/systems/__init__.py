"""Gameplay systems: collision, spawning and the per-tick world step."""
