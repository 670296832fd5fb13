import pytest

from bananadrop.controls import Key, can_move_left, can_move_right, handle_keys
from bananadrop.game_state import GameState, Vec2


def test_can_move_left_boundary():
    assert can_move_left(Vec2(7, 32))
    assert not can_move_left(Vec2(6, 32))


def test_can_move_right_boundary():
    assert can_move_right(Vec2(90, 32), 10)
    assert not can_move_right(Vec2(91, 32), 10)


@pytest.mark.parametrize("key", [Key.ESC, Key.Q])
def test_quit_keys(key):
    state = GameState()
    assert handle_keys(state, [key]) is True


def test_no_quit_without_quit_key():
    state = GameState()
    assert handle_keys(state, [Key.LEFT], [Key.RIGHT]) is False


def test_left_press_moves_by_step():
    state = GameState()
    start = state.bowl.pos.x
    handle_keys(state, [Key.LEFT])
    assert state.bowl.pos.x == start - 3


def test_right_held_moves_by_step():
    state = GameState()
    start = state.bowl.pos.x
    handle_keys(state, [], [Key.RIGHT])
    assert state.bowl.pos.x == start + 3


def test_press_and_hold_both_apply():
    state = GameState()
    start = state.bowl.pos.x
    handle_keys(state, [Key.LEFT], [Key.LEFT])
    assert state.bowl.pos.x == start - 6


def test_blocked_at_walls():
    state = GameState()
    state.bowl.pos.x = 6
    handle_keys(state, [Key.LEFT], [Key.LEFT])
    assert state.bowl.pos.x == 6
    state.bowl.pos.x = 91
    handle_keys(state, [Key.RIGHT], [Key.RIGHT])
    assert state.bowl.pos.x == 91


def test_restart_only_when_out_of_lives():
    state = GameState(score=4, lives=2)
    handle_keys(state, [Key.R])
    assert state.score == 4

    state.lives = 0
    handle_keys(state, [Key.R])
    assert state.lives == 5
    assert state.score == 0