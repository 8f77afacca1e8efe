"""Counters that describe the progress of a running game."""

from dataclasses import dataclass


@dataclass
class GameState:
    """Lives, score, level and hit counters shared by the controls."""

    lives: int = 3
    score: int = 0
    level: int = 1
    alien_hits: int = 0
    spaceship_hits: int = 0
    game_won: bool = False