"""Header with score, level and lives, and the centred game-over text."""

import pygame

from spaceinvaders import constants

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
PADDING_LEFT = 5
PADDING_RIGHT = 5
ICON_SCALE = 0.3
ICON_WIDTH = 80
ICON_HEIGHT = 40
DEFAULT_TEXT_SIZE = 30


class TextView:
    """A line of text rendered to an image, positioned by its rect."""

    def __init__(self, font, size, text="", color=WHITE):
        self._font = pygame.font.Font(font, size)
        self._text = text
        self._color = pygame.Color(color)
        self.rect = pygame.Rect(0, 0, 0, 0)
        self._render()

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, value):
        self._text = value
        self._render()

    @property
    def color(self):
        return pygame.Color(self._color)

    @color.setter
    def color(self, value):
        self._color = pygame.Color(value)
        self._render()

    def _render(self):
        self.image = self._font.render(self._text, True, self._color)
        self.rect = self.image.get_rect(topleft=self.rect.topleft)


def _life_icon_sprites(image, count):
    region = pygame.Rect(0, image.get_height() - ICON_HEIGHT, ICON_WIDTH, ICON_HEIGHT)
    region = region.clip(image.get_rect())
    cut = image.subsurface(region)
    size = (
        max(1, round(region.width * ICON_SCALE)),
        max(1, round(region.height * ICON_SCALE)),
    )
    icon = pygame.transform.scale(cut, size)
    sprites = []
    for _ in range(count):
        sprite = pygame.sprite.Sprite()
        sprite.image = icon
        sprite.rect = icon.get_rect()
        sprites.append(sprite)
    return sprites


class OverlayControl:
    """Shows the game state in a header line and announces the end of the game.

    ``font`` is a font file path, or None for pygame's built-in font;
    ``life_icon`` is the image whose bottom-left corner shows a life.
    """

    def __init__(self, layer, state, font, life_icon):
        if not pygame.font.get_init():
            pygame.font.init()
        self.layer = layer
        self.state = state
        self.level_view = TextView(font, 15, "Level: 1")
        self.score_view = TextView(font, 20, "SCORE: 0")
        self.lives_view = TextView(font, 15, "Lives:")
        self.center_view = TextView(font, DEFAULT_TEXT_SIZE)
        self.center_view.rect.topleft = (constants.CENTER_X, constants.CENTER_Y)
        self.life_icons = _life_icon_sprites(life_icon, 3)
        self.show_center_view = False
        self._layout_header()

    def _layout_header(self):
        line = round(self.score_view.rect.height / 2)
        self.score_view.rect.center = (constants.CENTER_X, line)
        self.level_view.rect.midleft = (PADDING_LEFT, line)

        icon_width = self.life_icons[0].rect.width
        first = constants.VIEW_WIDTH - PADDING_RIGHT
        step = PADDING_RIGHT + icon_width
        for index, icon in enumerate(self.life_icons):
            icon.rect.midright = (first - index * step, line)
        self.lives_view.rect.midright = (first - len(self.life_icons) * step, line)

    def update_score(self, score):
        """Show a new score."""
        self.score_view.text = f"SCORE:{score}"
        self._layout_header()

    def update_level(self, level):
        """Show a new level."""
        self.level_view.text = f"Level:{level}"
        self._layout_header()

    def update_lives(self):
        """Show the number of lives held by the game state."""
        self.lives_view.text = f"Lives: {self.state.lives}"

    def draw(self):
        """Draw the header, the life icons and, if shown, the centre text."""
        self.layer.add_to_layer(self.score_view)
        self.layer.add_to_layer(self.lives_view)
        self.layer.add_to_layer(self.level_view)
        lives = self.state.lives
        if lives >= 1:
            self.layer.add_to_layer(self.life_icons[0])
        if lives >= 2:
            self.layer.add_to_layer(self.life_icons[1])
        if lives == 3:
            self.layer.add_to_layer(self.life_icons[2])
        if self.show_center_view:
            self.layer.add_to_layer(self.center_view)

    def game_over(self):
        """Show "Game Over" in red in the middle of the screen."""
        self.show_center_view = True
        self.center_view.text = "Game Over"
        self.center_view.color = RED
        self.center_view.rect.center = (constants.CENTER_X, constants.CENTER_Y)