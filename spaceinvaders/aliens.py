"""The alien formation."""

from enum import Enum

import pygame

from spaceinvaders import constants

SHEET_REGION = pygame.Rect(0, 321, 481, 321)
SCALE = 0.15
INITIAL_SPRITE_POSITION = (20, -500)


class AlienDirection(Enum):
    """Horizontal movement of the alien formation."""

    LEFT = "left"
    RIGHT = "right"


class Aliens:
    """An alien cut out of a sprite sheet.

    The formation starts moving to the right. The sprite is anchored at
    the bottom centre of its image.
    """

    def __init__(self, image):
        region = image.subsurface(SHEET_REGION)
        size = (
            max(1, round(SHEET_REGION.width * SCALE)),
            max(1, round(SHEET_REGION.height * SCALE)),
        )
        self._position = pygame.math.Vector2(constants.CENTER_X, -10)
        self._direction = AlienDirection.RIGHT
        self.alive = True
        self.sprite = pygame.sprite.Sprite()
        self.sprite.image = pygame.transform.scale(region, size)
        self.sprite.rect = self.sprite.image.get_rect()
        self.sprite.rect.midbottom = INITIAL_SPRITE_POSITION

    @property
    def position(self):
        """Current position as a fresh vector."""
        return pygame.math.Vector2(self._position)

    @position.setter
    def position(self, value):
        self._position = pygame.math.Vector2(value)
        self.sprite.rect.midbottom = (
            round(self._position.x),
            round(self._position.y),
        )

    @property
    def direction(self):
        """Direction in which the formation is moving."""
        return self._direction

    def move_right(self):
        """Start moving to the right."""
        self._direction = AlienDirection.RIGHT

    def move_left(self):
        """Start moving to the left."""
        self._direction = AlienDirection.LEFT