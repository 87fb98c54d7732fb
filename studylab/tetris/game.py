"""Running a game of falling blocks, and showing it in a terminal."""

from __future__ import annotations

import random
import time
from typing import Any, Optional

from studylab.tetris.board import Board, Key, next_block_lines
from studylab.tetris.pieces import Block

try:
    import curses
except ImportError:  # pragma: no cover - terminals without curses support
    curses = None  # type: ignore[assignment]

BOARD_X, BOARD_Y = 9, 3
MENU_X, MENU_Y = 50, 5
NEXT_BLOCK_X, NEXT_BLOCK_Y = MENU_X + 5, MENU_Y + 4
STEPS_PER_TICK = 5
ESCAPE = 27
SPACE = 32

_PAUSE_BOX = (
    "▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤",
    "▤                              ▤",
    "▤  +-----------------------+   ▤",
    "▤  |       P A U S E       |   ▤",
    "▤  +-----------------------+   ▤",
    "▤  Press any key to resume..   ▤",
    "▤                              ▤",
    "▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤▤",
)


class TetrisGame:
    """The board and the piece in play, advanced by keys and by clock ticks."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.board = Board()
        self.block = Block(rng)
        self.board.place(self.block)

    @property
    def playing(self) -> bool:
        return bool(self.board.playing)

    @property
    def score(self) -> int:
        return self.board.score

    def handle_key(self, key: Key) -> bool:
        """Carry out a player's key; return whether the game goes on."""
        if not self.board.playing:
            return False
        if key is Key.QUIT:
            self.board.playing = False
            return False
        if key is Key.PAUSE or self.board.needs_block:
            return True
        self.board.apply_key(self.block, key)
        return True

    def tick(self) -> bool:
        """Let the piece fall one row; when it lands, clear lines and bring the next one."""
        if not self.board.playing:
            return False
        if not self.board.needs_block:
            self.board.move_down(self.block)
        if self.board.needs_block:
            self._next_block()
        return self.playing

    def _next_block(self) -> None:
        self.board.delete_lines(self.block)
        self.board.level_up()
        self.block.spawn()
        self.board.place(self.block)
        if self.board.is_game_over(self.block):
            self.board.playing = False


def _require_curses() -> None:
    if curses is None:
        raise RuntimeError("this terminal has no curses support")


def _put(screen: Any, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _draw(screen: Any, game: TetrisGame) -> None:
    for i, row in enumerate(game.board.render()):
        _put(screen, BOARD_Y + i, BOARD_X, row)
    for offset, text in game.board.menu_lines():
        _put(screen, MENU_Y + offset, MENU_X, text)
    for i, row in enumerate(next_block_lines(game.block)):
        _put(screen, NEXT_BLOCK_Y + i, NEXT_BLOCK_X, row)
    screen.refresh()


def _key_for(code: int) -> Optional[Key]:
    keys = {
        curses.KEY_LEFT: Key.LEFT,
        curses.KEY_RIGHT: Key.RIGHT,
        curses.KEY_DOWN: Key.DOWN,
        curses.KEY_UP: Key.ROTATE,
        SPACE: Key.DROP,
        ord("p"): Key.PAUSE,
        ord("P"): Key.PAUSE,
        ESCAPE: Key.QUIT,
    }
    return keys.get(code)


def _pause(screen: Any, game: TetrisGame) -> None:
    for i, line in enumerate(_PAUSE_BOX):
        _put(screen, 5 + i, 5, line)
    screen.refresh()
    screen.nodelay(False)
    screen.getch()
    screen.nodelay(True)
    screen.erase()
    _draw(screen, game)
    time.sleep(1.0)


def play(screen: Any) -> int:
    """Play one game on a curses window and return the final score."""
    _require_curses()
    game = TetrisGame()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.nodelay(True)
    screen.erase()
    _draw(screen, game)
    time.sleep(1.0)
    while game.playing:
        for _ in range(STEPS_PER_TICK):
            key = _key_for(screen.getch())
            if key is Key.QUIT:
                game.handle_key(key)
                return game.score
            if key is Key.PAUSE:
                _pause(screen, game)
            elif key is not None:
                game.handle_key(key)
            _draw(screen, game)
            time.sleep(game.board.speed / STEPS_PER_TICK / 1000)
        game.tick()
        _draw(screen, game)
        time.sleep(game.board.speed / 1000)
    screen.erase()
    _put(screen, 0, 0, f"Your Score: {game.score}")
    screen.refresh()
    time.sleep(5.0)
    return game.score


def main(argv: Optional[list[str]] = None) -> int:
    """Start a game in the terminal."""
    _require_curses()
    curses.wrapper(play)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())