import pygame
import pytest

from spaceinvaders import constants
from spaceinvaders.spaceship import HorizontalDirection, Spaceship
from spaceinvaders.spaceship_control import SpaceshipControl


class RecordingLayer:
    def __init__(self):
        self.drawn = []

    def add_to_layer(self, drawable):
        self.drawn.append(drawable)


@pytest.fixture
def control():
    return SpaceshipControl(RecordingLayer(), Spaceship(pygame.Surface((80, 40))))


def test_moves_right_at_fixed_speed(control):
    control.right_button_pressed()
    control.update_spaceship(0.5)
    assert control.spaceship.position.x == pytest.approx(400)


def test_moves_left(control):
    start = control.spaceship.position
    control.left_button_pressed()
    control.update_spaceship(0.1)
    assert control.spaceship.position.x < start.x
    assert control.spaceship.position.y == start.y


def test_no_movement_without_direction(control):
    start = control.spaceship.position
    control.update_spaceship(1.0)
    assert control.spaceship.position == start


def test_stops_at_right_edge(control):
    control.spaceship.position = (constants.FIELD_EDGE_RIGHT, -10)
    control.right_button_pressed()
    control.update_spaceship(1.0)
    assert control.spaceship.position.x == constants.FIELD_EDGE_RIGHT


def test_stops_at_left_edge(control):
    control.spaceship.position = (constants.FIELD_EDGE_LEFT, -10)
    control.left_button_pressed()
    control.update_spaceship(1.0)
    assert control.spaceship.position.x == constants.FIELD_EDGE_LEFT


def test_release_matching_direction_stops(control):
    control.left_button_pressed()
    control.direction_button_released(HorizontalDirection.LEFT)
    assert control.spaceship.direction is HorizontalDirection.NONE


def test_release_other_direction_keeps_moving(control):
    control.right_button_pressed()
    control.direction_button_released(HorizontalDirection.LEFT)
    assert control.spaceship.direction is HorizontalDirection.RIGHT


def test_draw_adds_sprite(control):
    control.draw_spaceship()
    assert control.layer.drawn == [control.spaceship.sprite]