"""The playing field: walls, fixed blocks, moves, cleared lines, score and level."""

from __future__ import annotations

import enum

from studylab.tetris.pieces import (
    BLOCK_ROTATIONS,
    BLOCK_SIZE,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    Block,
    Cell,
    Direction,
    shape_cells,
)

CEILING_ROW = 2
START_LEVEL = 5
LINES_PER_LEVEL = 2
START_SPEED = 500
MAX_LEVEL = 10

_SPEEDS = {1: 500, 2: 400, 3: 300, 4: 200, 5: 100, 6: 80, 7: 60, 8: 40, 9: 20, 10: 10}
_LINE_SCORES = {1: 100, 2: 250, 3: 400, 4: 800}
_BLOCKING = (Cell.FIXED_BLOCK, Cell.WALL, Cell.BOTTOM_WALL)

_SYMBOLS = {
    Cell.EMPTY: "  ",
    Cell.TOP_WALL: " -",
    Cell.WALL: "▩",
    Cell.BOTTOM_WALL: "▩",
    Cell.MOVING_BLOCK: "■",
    Cell.FIXED_BLOCK: "■",
}


class Key(enum.Enum):
    """The actions a player can ask for."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    ROTATE = enum.auto()
    DROP = enum.auto()
    PAUSE = enum.auto()
    QUIT = enum.auto()


class Board:
    """A walled grid of cells with the game's score, level and speed."""

    def __init__(self) -> None:
        self.grid: list[list[Cell]] = [
            [Cell.EMPTY] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)
        ]
        self.grid[CEILING_ROW] = [Cell.TOP_WALL] * BOARD_WIDTH
        self.grid[BOARD_HEIGHT - 1] = [Cell.BOTTOM_WALL] * BOARD_WIDTH
        for row in self.grid:
            row[0] = Cell.WALL
            row[-1] = Cell.WALL
        self.level = START_LEVEL
        self.lines_left = LINES_PER_LEVEL
        self.score = 0
        self.needs_block = True
        self.speed = START_SPEED
        self.playing = True

    def _paint(self, block: Block, cell: Cell) -> None:
        for row, col in block.cells():
            self.grid[row][col] = cell
        ceiling = self.grid[CEILING_ROW]
        for col, value in enumerate(ceiling):
            if value is Cell.EMPTY:
                ceiling[col] = Cell.TOP_WALL

    def place(self, block: Block) -> None:
        """Draw the block onto the grid as a moving piece."""
        self._paint(block, Cell.MOVING_BLOCK)
        self.needs_block = False

    def fits(self, block: Block, dx: int = 0, dy: int = 0, turn: int = 0) -> bool:
        """Tell whether the block, shifted and turned, stays clear of walls and fixed blocks."""
        direction = (block.direction + turn) % BLOCK_ROTATIONS
        for row, col in shape_cells(block.current, direction):
            y = block.y + dy + row
            x = block.x + dx + col
            if not (0 <= y < BOARD_HEIGHT and 0 <= x < BOARD_WIDTH):
                return False
            if self.grid[y][x] in _BLOCKING:
                return False
        return True

    def _shift(self, block: Block, dx: int, dy: int, turn: int) -> bool:
        if not self.fits(block, dx, dy, turn):
            return False
        self._paint(block, Cell.EMPTY)
        block.x += dx
        block.y += dy
        block.direction = Direction((block.direction + turn) % BLOCK_ROTATIONS)
        self.place(block)
        return True

    def move_left(self, block: Block) -> bool:
        return self._shift(block, -1, 0, 0)

    def move_right(self, block: Block) -> bool:
        return self._shift(block, 1, 0, 0)

    def move_down(self, block: Block) -> bool:
        """Lower the block one row; if it cannot move, fix it in place and return False."""
        if self._shift(block, 0, 1, 0):
            return True
        self._paint(block, Cell.FIXED_BLOCK)
        self.needs_block = True
        return False

    def rotate(self, block: Block) -> bool:
        return self._shift(block, 0, 0, 1)

    def apply_key(self, block: Block, key: Key) -> bool:
        """Carry out a movement key; return whether the block moved."""
        if key is Key.LEFT:
            return self.move_left(block)
        if key is Key.RIGHT:
            return self.move_right(block)
        if key is Key.DOWN:
            return self.move_down(block)
        if key is Key.ROTATE:
            return self.rotate(block)
        if key is Key.DROP:
            return self.hard_drop(block) > 0
        raise ValueError(f"{key.name} does not move the block")

    def hard_drop(self, block: Block) -> int:
        """Drop the block to the bottom, fix it, score the rows skipped and return them."""
        skipped = 0
        while self.fits(block, dy=1):
            self.move_down(block)
            skipped += 1
        self.move_down(block)
        self.score += skipped
        return skipped

    def delete_lines(self, block: Block) -> int:
        """Clear full rows among the four the block spans; score them and return the count."""
        deleted = 0
        inner = range(1, BOARD_WIDTH - 1)
        for i in range(block.y, block.y + BLOCK_SIZE):
            if i >= BOARD_HEIGHT:
                break
            row = self.grid[i]
            if sum(1 for col in inner if row[col] is Cell.FIXED_BLOCK) < len(inner):
                continue
            deleted += 1
            for col in inner:
                row[col] = Cell.EMPTY
            for k in range(i, CEILING_ROW + 1, -1):
                for col in inner:
                    self.grid[k][col] = self.grid[k - 1][col]
                    if k == CEILING_ROW + 2:
                        self.grid[k - 1][col] = Cell.EMPTY
        self.score_up(deleted)
        self.lines_left -= deleted
        return deleted

    def is_game_over(self, block: Block) -> bool:
        """Tell whether a fixed block has reached the ceiling under the block."""
        ceiling = self.grid[CEILING_ROW]
        return any(
            0 <= block.x + i < BOARD_WIDTH and ceiling[block.x + i] is Cell.FIXED_BLOCK
            for i in range(BLOCK_SIZE)
        )

    def check_level_up(self) -> bool:
        return self.lines_left <= 0 and self.level < MAX_LEVEL

    def level_up(self) -> bool:
        """Go up a level and speed up if enough lines were cleared."""
        if not self.check_level_up():
            return False
        self.level += 1
        self.lines_left = LINES_PER_LEVEL
        self.speed = _SPEEDS.get(self.level, self.speed)
        return True

    def score_up(self, combo: int) -> int:
        """Add the score for clearing ``combo`` lines at once and return it."""
        points = _LINE_SCORES.get(combo, 0)
        self.score += points
        return points

    def render(self) -> list[str]:
        """Return the grid as text, one string per row."""
        return ["".join(_SYMBOLS[cell] for cell in row) for row in self.grid]

    def menu_lines(self) -> list[tuple[int, str]]:
        """Return the side panel as (row offset, text) pairs."""
        return [
            (0, f"Level: {self.level}"),
            (1, f"Left Line For Next Level: {self.lines_left}  "),
            (3, "    Next Block "),
            (9, " Score :"),
            (10, f"        {self.score}"),
            (14, "  ↑   : Lotation"),
            (15, "←  → : Left / Right"),
            (16, "  ↓   : Down"),
            (18, "SPACE : Push Bottom"),
            (19, "P   : Pause"),
            (20, "ESC  : Quit"),
        ]


def next_block_lines(block: Block) -> list[str]:
    """Return the upcoming piece, upright, as four rows of text."""
    filled = set(shape_cells(block.next, Direction.UP))
    return [
        "".join("■" if (row, col) in filled else "  " for col in range(BLOCK_SIZE))
        for row in range(BLOCK_SIZE)
    ]