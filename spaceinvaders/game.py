"""The game window, its main loop and the entry point."""

import pygame

from spaceinvaders import constants
from spaceinvaders.alien_control import AlienControl
from spaceinvaders.aliens import Aliens
from spaceinvaders.game_state import GameState
from spaceinvaders.layer import Layer
from spaceinvaders.overlay_control import OverlayControl
from spaceinvaders.spaceship import HorizontalDirection, Spaceship
from spaceinvaders.spaceship_control import SpaceshipControl

FONT_PATH = "assets/fonts/DejaVuSansMono.ttf"
SPACESHIP_IMAGE_PATH = "assets/sprites/pixilart-drawing.png"
ALIEN_SHEET_PATH = "assets/sprites/spritesheetCOLOR.png"
TITLE = "Space Invaders"


def _load_image(path):
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as error:
        raise ValueError("Could not load sprite") from error


class Game:
    """Opens the window, reads input, updates and draws the scene."""

    def __init__(self):
        pygame.init()
        self.window = pygame.display.set_mode(
            (constants.VIEW_WIDTH, constants.VIEW_HEIGHT)
        )
        pygame.display.set_caption(TITLE)
        self._open = True
        self.clock = pygame.time.Clock()
        self.view = pygame.Rect(
            0, -constants.VIEW_HEIGHT, constants.VIEW_WIDTH, constants.VIEW_HEIGHT
        )
        self.state = GameState()
        self.game_layer = Layer(self.window)
        self.overlay_layer = Layer(self.window)

        spaceship_image = _load_image(SPACESHIP_IMAGE_PATH)
        alien_sheet = _load_image(ALIEN_SHEET_PATH)

        self.overlay_control = OverlayControl(
            self.overlay_layer, self.state, FONT_PATH, spaceship_image
        )
        self.spaceship_control = SpaceshipControl(
            self.game_layer, Spaceship(spaceship_image)
        )
        self.alien_control = AlienControl(self.game_layer, Aliens(alien_sheet))
        self.game_layer.set_view(self.view)

    @property
    def is_open(self):
        """Whether the window is still open."""
        return self._open

    def start(self):
        """Run the main loop until the window is closed."""
        while self._open:
            elapsed = self.clock.tick(constants.FRAME_RATE) / 1000
            closed = any(self.handle_event(event) for event in pygame.event.get())
            if not closed:
                self.update(elapsed)
                self.draw()
        pygame.display.quit()

    def handle_event(self, event):
        """Process one input event; return True if the window was closed."""
        if event.type == pygame.QUIT:
            self._open = False
            return True
        if event.type == pygame.KEYUP:
            if event.key == pygame.K_LEFT:
                self.spaceship_control.direction_button_released(
                    HorizontalDirection.LEFT
                )
            elif event.key == pygame.K_RIGHT:
                self.spaceship_control.direction_button_released(
                    HorizontalDirection.RIGHT
                )
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RIGHT:
                self.spaceship_control.right_button_pressed()
            elif event.key == pygame.K_LEFT:
                self.spaceship_control.left_button_pressed()
        return False

    def update(self, time_passed):
        """Advance the game by the given number of seconds."""
        if self.state.game_won:
            self.state.level += 1
            self.overlay_control.update_level(self.state.level)
            self.state.game_won = False

        if self.state.lives <= 0:
            self.overlay_control.game_over()
            return

        self.spaceship_control.update_spaceship(time_passed)

    def draw(self):
        """Draw the scene and the overlay to the window."""
        self.window.fill((0, 0, 0))
        self.game_layer.clear()
        self.spaceship_control.draw_spaceship()
        self.alien_control.draw_aliens()

        self.overlay_layer.clear()
        self.overlay_control.draw()

        self.game_layer.draw()
        self.overlay_layer.draw()
        pygame.display.flip()


def main(argv=None):
    """Start the game and return once its window is closed."""
    game = Game()
    game.start()
    pygame.quit()
    return 0