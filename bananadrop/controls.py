"""Keyboard handling for the bowl."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .game_state import GameState, Vec2

STEP = 3


class Key(Enum):
    ESC = "esc"
    Q = "q"
    R = "r"
    LEFT = "left"
    RIGHT = "right"


def can_move_left(pos: Vec2) -> bool:
    """True while the bowl is clear of the left wall."""
    return pos.x > 6


def can_move_right(pos: Vec2, bowl_size: int) -> bool:
    """True while the bowl's right edge is clear of the right wall."""
    return pos.x + bowl_size < 101


def _move(game_state: GameState, key: Key) -> None:
    bowl = game_state.bowl
    if key is Key.LEFT and can_move_left(bowl.pos):
        bowl.pos.x -= STEP
    elif key is Key.RIGHT and can_move_right(bowl.pos, bowl.size):
        bowl.pos.x += STEP


def handle_keys(
    game_state: GameState, pressed: Iterable[Key], held: Iterable[Key] = ()
) -> bool:
    """Apply key presses and held keys; return True if quitting was asked for."""
    quit_requested = False
    for key in pressed:
        if key in (Key.ESC, Key.Q):
            quit_requested = True
        elif key is Key.R:
            if game_state.lives == 0:
                game_state.reset()
        else:
            _move(game_state, key)

    for key in held:
        _move(game_state, key)
    return quit_requested