"""The player's spaceship."""

from enum import Enum

import pygame

from spaceinvaders import constants


class HorizontalDirection(Enum):
    """Horizontal movement of the spaceship."""

    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class Spaceship:
    """The player's ship: a position, a movement direction and a sprite.

    The sprite is anchored at the bottom centre of its image, so the
    position names the point where the ship stands.
    """

    def __init__(self, image):
        self._position = pygame.math.Vector2(constants.CENTER_X, -10)
        self._direction = HorizontalDirection.NONE
        self.sprite = pygame.sprite.Sprite()
        self.sprite.image = image
        self.sprite.rect = image.get_rect()
        self._place_sprite()

    @property
    def position(self):
        """Current position as a fresh vector."""
        return pygame.math.Vector2(self._position)

    @position.setter
    def position(self, value):
        self._position = pygame.math.Vector2(value)
        self._place_sprite()

    @property
    def direction(self):
        """Direction in which the ship is currently moving."""
        return self._direction

    def move_right(self):
        """Start moving to the right."""
        self._direction = HorizontalDirection.RIGHT

    def move_left(self):
        """Start moving to the left."""
        self._direction = HorizontalDirection.LEFT

    def stop_horizontal_movement(self):
        """Stop moving sideways."""
        self._direction = HorizontalDirection.NONE

    def _place_sprite(self):
        self.sprite.rect.midbottom = (
            round(self._position.x),
            round(self._position.y),
        )