"""
input_state.py
--------------
Headless snapshot of the held movement signals read by the simulation.

Key mapping lives in services.input_manager; the simulation only ever reads
this object.
"""


class InputState:
    """Current held state of the movement signals."""

    __slots__ = ("move_left", "move_right")

    def __init__(self, move_left: bool = False, move_right: bool = False):
        self.move_left = move_left
        self.move_right = move_right

    def set_held(self, action: str, held: bool) -> bool:
        """
        Update a held signal by action name.

        Returns:
            bool: True if the action is a movement signal
        """
        if action == "move_left":
            self.move_left = held
            return True
        if action == "move_right":
            self.move_right = held
            return True
        return False

    def release_all(self):
        """Clear all held signals (focus loss, scene change)."""
        self.move_left = False
        self.move_right = False

    def __repr__(self):
        return f"InputState(move_left={self.move_left}, move_right={self.move_right})"
