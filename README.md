# spaceinvaders

The start of a Space Invaders style arcade game. You steer a spaceship
along the bottom of a 600 × 600 playing field while an alien sits above it.
A header shows the current level, the score and the lives that remain.

## Installation

```
pip install .
```

The game uses pygame for its window, input and drawing.

## Playing

Start the game with:

```
spaceinvaders
```

Controls:

- **Left arrow**: move the spaceship to the left
- **Right arrow**: move the spaceship to the right
- Release the arrow key to stop moving
- Close the window to quit

The game runs at up to 60 frames per second. The spaceship moves at 200
pixels per second. It stops moving once it has reached the left edge
(x = 60) or the right edge (x = 540) of the playing field. The header shows
`Level: 1` at the left, `SCORE: 0` in the middle and `Lives:` with three
life icons at the right.

The game loads its images and font from an `assets/` directory relative to
the directory it is started from: `assets/sprites/pixilart-drawing.png` for
the spaceship and the life icons, `assets/sprites/spritesheetCOLOR.png` for
the alien, and `assets/fonts/DejaVuSansMono.ttf` for the text. If one of
the two images cannot be loaded, starting the game fails with
`ValueError("Could not load sprite")`.

## What the game does not do yet

There is only movement of the spaceship. The alien stands still, nothing
can be shot, and there are no collisions. The score and the number of
lives therefore never change during play, and no level is ever won.

The rules for these cases are in place in `Game.update()`: when
`GameState.game_won` is set, the level goes up by one and the header shows
it; when `GameState.lives` reaches 0, a red "Game Over" appears in the
middle of the screen and the spaceship no longer moves.

## Library use

The parts of the game can also be used on their own:

- `spaceinvaders.constants` holds the size of the view, the frame rate and
  the edges of the playing field.
- `spaceinvaders.game_state.GameState` is a dataclass holding `lives`,
  `score`, `level`, `alien_hits`, `spaceship_hits` and `game_won`.
- `spaceinvaders.spaceship.Spaceship` and `spaceinvaders.aliens.Aliens` are
  the game objects. Each has a `position`, a `direction` and a pygame
  `sprite`. Their directions are `HorizontalDirection` (`LEFT`, `RIGHT`,
  `NONE`) and `AlienDirection` (`LEFT`, `RIGHT`). `Aliens` cuts its image
  out of a sprite sheet.
- `spaceinvaders.spaceship_control.SpaceshipControl` turns key presses into
  movement. `update_spaceship(elapsed_time)` moves the ship by the given
  number of seconds.
- `spaceinvaders.alien_control.AlienControl` draws an alien onto a layer.
- `spaceinvaders.overlay_control.OverlayControl` draws the score, level,
  lives and the game-over text. It has `update_score()`, `update_level()`,
  `update_lives()`, `draw()` and `game_over()`.
- `spaceinvaders.layer.Layer` is a transparent drawing surface the size of
  the window. `set_view()` chooses the part of the world it shows, and
  `draw()` puts it onto the window.
- `spaceinvaders.game.Game` ties these together. `Game.start()` runs the
  main loop until the window is closed, and `spaceinvaders.game.main()`
  starts a game and returns 0 when it ends.

## Tests

```
pip install .[test]
pytest
```