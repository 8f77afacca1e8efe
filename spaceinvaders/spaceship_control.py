"""Moves the player's spaceship and draws it."""

from spaceinvaders import constants
from spaceinvaders.spaceship import HorizontalDirection

SPEED = 200


class SpaceshipControl:
    """Moves a spaceship according to the pressed direction buttons."""

    def __init__(self, layer, spaceship):
        self.layer = layer
        self.spaceship = spaceship

    def update_spaceship(self, elapsed_time):
        """Move the ship for the given number of seconds, within the field edges."""
        position = self.spaceship.position
        direction = self.spaceship.direction
        velocity = 0
        if (
            position.x > constants.FIELD_EDGE_LEFT
            and direction is HorizontalDirection.LEFT
        ):
            velocity = -SPEED
        if (
            position.x < constants.FIELD_EDGE_RIGHT
            and direction is HorizontalDirection.RIGHT
        ):
            velocity = SPEED
        self.spaceship.position = (position.x + velocity * elapsed_time, position.y)

    def draw_spaceship(self):
        """Draw the ship onto the layer."""
        self.layer.add_to_layer(self.spaceship.sprite)

    def left_button_pressed(self):
        """Start moving the ship to the left."""
        self.spaceship.move_left()

    def right_button_pressed(self):
        """Start moving the ship to the right."""
        self.spaceship.move_right()

    def direction_button_released(self, direction):
        """Stop the ship if it is moving in the released direction."""
        if direction is self.spaceship.direction:
            self.spaceship.stop_horizontal_movement()