"""
player_movement.py
------------------
Horizontal player movement bounded by the viewport edges.

Left is evaluated before right, so holding both ends the tick facing right.
"""

from skyguard.entities.entity_types import Facing


def update_movement(player, input_state, viewport_width):
    """
    Move the player according to the held movement signals.

    Args:
        player (Player): The player instance being updated.
        input_state (InputState): Current held signals.
        viewport_width (float): Right boundary of the play area.
    """
    if input_state.move_left and player.x > 0:
        player.x -= player.speed
        player.facing = Facing.LEFT

    if input_state.move_right and player.x < viewport_width - player.width:
        player.x += player.speed
        player.facing = Facing.RIGHT
