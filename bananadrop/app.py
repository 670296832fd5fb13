"""Drawing the game onto a character canvas and running it in a terminal."""

from __future__ import annotations

import argparse
import curses
import itertools
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from .controls import Key, handle_keys
from .game_state import GameState, PowerType, Vec2

CANVAS_WIDTH = 110
CANVAS_HEIGHT = 42


class Color(Enum):
    WHITE = "white"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"


@dataclass(frozen=True)
class RectCharset:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    @classmethod
    def simple_round_lines(cls) -> "RectCharset":
        return cls("─", "│", "╭", "╮", "╰", "╯")

    @classmethod
    def double_lines(cls) -> "RectCharset":
        return cls("═", "║", "╔", "╗", "╚", "╝")


_POWER_UP_LOOK = {
    PowerType.EXTEND: ("=", Color.BLUE),
    PowerType.ONE_UP: ("+", Color.GREEN),
    PowerType.SHRINK: ("-", Color.RED),
}


class Canvas:
    """A fixed grid of characters, each with a colour; writes off the grid are dropped."""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
        self.width = width
        self.height = height
        self._chars = [[" "] * width for _ in range(height)]
        self._colors = [[Color.WHITE] * width for _ in range(height)]

    def _put(self, x: int, y: int, char: str, color: Color) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._chars[y][x] = char
            self._colors[y][x] = color

    def draw_text(self, text: str, pos: Vec2, color: Color = Color.WHITE) -> "Canvas":
        for offset, char in enumerate(text):
            self._put(pos.x + offset, pos.y, char, color)
        return self

    def draw_rect(
        self, charset: RectCharset, pos: Vec2, size: Vec2, color: Color = Color.WHITE
    ) -> "Canvas":
        """Outline a rectangle covering size.x columns and size.y rows from pos."""
        if size.x <= 0 or size.y <= 0:
            return self
        left, top = pos.x, pos.y
        right, bottom = left + size.x - 1, top + size.y - 1
        for x in range(left + 1, right):
            self._put(x, top, charset.horizontal, color)
            self._put(x, bottom, charset.horizontal, color)
        for y in range(top + 1, bottom):
            self._put(left, y, charset.vertical, color)
            self._put(right, y, charset.vertical, color)
        self._put(left, top, charset.top_left, color)
        self._put(right, top, charset.top_right, color)
        self._put(left, bottom, charset.bottom_left, color)
        self._put(right, bottom, charset.bottom_right, color)
        return self

    def lines(self) -> list[str]:
        """The canvas rows as text, trailing blanks removed."""
        return ["".join(row).rstrip() for row in self._chars]

    def _runs(self) -> Iterator[tuple[int, int, str, Color]]:
        for y, (chars, colors) in enumerate(zip(self._chars, self._colors)):
            x = 0
            for color, group in itertools.groupby(zip(chars, colors), key=lambda c: c[1]):
                text = "".join(char for char, _ in group)
                yield y, x, text, color
                x += len(text)


def render(canvas: Canvas, game_state: GameState) -> Canvas:
    """Draw one frame of the current game state onto the canvas."""
    if game_state.lives > 0:
        for banana in game_state.bananas:
            canvas.draw_text("J", banana.pos, Color.YELLOW)
        for power_up in game_state.power_ups:
            glyph, color = _POWER_UP_LOOK[power_up.power_type]
            canvas.draw_text(glyph, power_up.pos, color)
        canvas.draw_text("Press Q to quit", Vec2(4, 1), Color.WHITE)
        canvas.draw_text("Move with arrow keys <-  ->", Vec2(4, 2), Color.WHITE)
        canvas.draw_text(f"Score : {game_state.score}", Vec2(4, 3), Color.GREEN)
        canvas.draw_text(f"Lives : {game_state.lives}", Vec2(20, 3), Color.RED)
        canvas.draw_rect(
            RectCharset.simple_round_lines(), Vec2(4, 5), Vec2(100, 30), Color.WHITE
        )
        canvas.draw_rect(
            RectCharset.double_lines(),
            game_state.bowl.pos,
            Vec2(game_state.bowl.size, 2),
            Color.RED,
        )
    else:
        canvas.draw_text("Game over", Vec2(1, 2), Color.RED)
        canvas.draw_text(f"Score : {game_state.score}", Vec2(1, 3), Color.GREEN)
        canvas.draw_text("Press R to restart", Vec2(1, 4), Color.WHITE)
        canvas.draw_text("Press Q to quit", Vec2(1, 5), Color.WHITE)
    return canvas


_CURSES_COLORS = {
    Color.WHITE: curses.COLOR_WHITE,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.GREEN: curses.COLOR_GREEN,
    Color.RED: curses.COLOR_RED,
}


def _key_from_code(code: int) -> Key | None:
    if code == 27:
        return Key.ESC
    if code == curses.KEY_LEFT:
        return Key.LEFT
    if code == curses.KEY_RIGHT:
        return Key.RIGHT
    if code in (ord("q"), ord("Q")):
        return Key.Q
    if code in (ord("r"), ord("R")):
        return Key.R
    return None


def _read_keys(screen) -> list[Key]:
    keys = []
    while (code := screen.getch()) != -1:
        key = _key_from_code(code)
        if key is not None:
            keys.append(key)
    return keys


def _paint(screen, canvas: Canvas, pairs: dict[Color, int]) -> None:
    screen.erase()
    for y, x, text, color in canvas._runs():
        try:
            screen.addstr(y, x, text, pairs.get(color, 0))
        except curses.error:
            pass
    screen.refresh()


def _run(screen, fps: int) -> None:
    curses.curs_set(0)
    screen.nodelay(True)
    screen.keypad(True)
    pairs: dict[Color, int] = {}
    if curses.has_colors():
        curses.start_color()
        for number, (color, code) in enumerate(_CURSES_COLORS.items(), start=1):
            curses.init_pair(number, code, curses.COLOR_BLACK)
            pairs[color] = curses.color_pair(number)

    game_state = GameState()
    frame_time = 1.0 / fps
    while True:
        started = time.monotonic()
        if handle_keys(game_state, _read_keys(screen)):
            return
        if game_state.lives > 0:
            game_state.update_state()
        _paint(screen, render(Canvas(), game_state), pairs)
        time.sleep(max(0.0, frame_time - (time.monotonic() - started)))


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game in the terminal."""
    parser = argparse.ArgumentParser(prog="bananadrop", description="Catch the falling bananas.")
    parser.add_argument("--fps", type=int, default=30, help="frames per second")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    curses.wrapper(_run, args.fps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())