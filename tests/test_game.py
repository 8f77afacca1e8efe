import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import shutil  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from spaceinvaders import constants  # noqa: E402
from spaceinvaders.game import Game  # noqa: E402
from spaceinvaders.spaceship import HorizontalDirection  # noqa: E402


def _write_assets(root):
    sprites = root / "assets" / "sprites"
    fonts = root / "assets" / "fonts"
    sprites.mkdir(parents=True)
    fonts.mkdir(parents=True)
    ship = pygame.Surface((80, 40))
    ship.fill((255, 255, 255))
    pygame.image.save(ship, str(sprites / "pixilart-drawing.png"))
    pygame.image.save(pygame.Surface((962, 965)), str(sprites / "spritesheetCOLOR.png"))
    default_font = os.path.join(
        os.path.dirname(pygame.__file__), pygame.font.get_default_font()
    )
    shutil.copy(default_font, fonts / "DejaVuSansMono.ttf")


@pytest.fixture
def game(tmp_path, monkeypatch):
    _write_assets(tmp_path)
    monkeypatch.chdir(tmp_path)
    created = Game()
    pygame.event.clear()
    return created


def test_missing_sprites_raise(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError, match="Could not load sprite"):
        Game()


def test_quit_event_closes_window(game):
    assert game.handle_event(pygame.event.Event(pygame.QUIT)) is True
    assert game.is_open is False


def test_key_presses_steer_spaceship(game):
    ship = game.spaceship_control.spaceship
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    assert ship.direction is HorizontalDirection.RIGHT
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert ship.direction is HorizontalDirection.RIGHT
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
    assert ship.direction is HorizontalDirection.NONE
    assert game.handle_event(
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
    ) is False
    assert ship.direction is HorizontalDirection.LEFT


def test_won_game_raises_level(game):
    game.state.game_won = True
    game.update(0.0)
    assert game.state.level == 2
    assert game.state.game_won is False
    assert game.overlay_control.level_view.text == "Level:2"


def test_no_lives_ends_game_and_freezes_ship(game):
    ship = game.spaceship_control.spaceship
    start = ship.position
    game.state.lives = 0
    game.spaceship_control.right_button_pressed()
    game.update(0.5)
    assert game.overlay_control.show_center_view is True
    assert game.overlay_control.center_view.text == "Game Over"
    assert ship.position == start


def test_update_moves_ship(game):
    ship = game.spaceship_control.spaceship
    start = ship.position
    game.spaceship_control.left_button_pressed()
    game.update(0.1)
    assert ship.position.x < start.x


def test_draw_shows_spaceship_at_bottom(game):
    game.draw()
    assert tuple(game.window.get_at((constants.CENTER_X, 570)))[:3] == (255, 255, 255)
    assert tuple(game.window.get_at((constants.CENTER_X, 400)))[:3] == (0, 0, 0)


def test_start_returns_after_quit(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.start()
    assert game.is_open is False