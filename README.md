# bananadrop

A small arcade game for the terminal. Bananas (`J`) fall down the playing
field; move your bowl left and right to catch them.

## Playing

Install the package and start the game:

    pip install .
    bananadrop

The game draws with the standard `curses` module, so it needs a terminal
where Python's `curses` is available (Linux, macOS and other POSIX systems).
Make the terminal at least 110 columns by 42 rows.

Options:

- `--fps N` sets the number of frames per second (default 30; must be
  positive).

Controls:

- Left / Right arrow keys move the bowl three columns at a time, until it
  reaches the edge of the field.
- `Q` or `Esc` quits.
- `R` starts a new round once the game is over.

## Rules

- You start with 5 lives and a bowl 10 columns wide.
- Each caught banana scores one point.
- Each banana that reaches the bottom of the field costs a life. When no lives
  are left the game is over and the final score is shown.
- A round begins with 15 bananas to drop. The level is the score divided by
  10; the higher the level, the more often bananas appear and the faster they
  fall.
- Whenever the score sits on a non-zero multiple of 10, the supply is refilled
  to 15 bananas and a power-up is released:
  - `=` (blue) widens the bowl by 5,
  - `+` (green) gives an extra life,
  - `-` (red) narrows the bowl by 5.
  A power-up that reaches the bottom is simply lost.
- Restarting with `R` resets score, lives and bananas; the bowl keeps its
  current position and width.

## Using the game logic

The rules live in `bananadrop.game_state` and need no terminal:

```python
import random

from bananadrop.game_state import GameState

state = GameState(rng=random.Random(1))
for _ in range(100):
    state.update_state()
print(state.score, state.lives, len(state.bananas))
```

`GameState.update_state()` advances one frame. The smaller steps it is made
of (`spawn_bananas`, `spawn_power_ups`, `update_bananas`, `update_power_ups`,
`check_banana_collisions`, `check_power_up_collisions`) and `reset()` can be
called on their own. Passing a seeded `random.Random` as `rng` makes a game
repeatable.

Keyboard handling is in `bananadrop.controls`: `handle_keys(game_state,
pressed, held)` applies `Key` values to a game and returns `True` when quitting
was asked for.

`bananadrop.app` has `Canvas`, an in-memory grid of coloured characters with
`draw_text`, `draw_rect` and `lines()`, and `render(canvas, game_state)`,
which draws one frame onto it:

```python
from bananadrop.app import Canvas, render
from bananadrop.game_state import GameState

for line in render(Canvas(), GameState()).lines():
    print(line)
```

## Tests

    pip install ".[test]"
    pytest