"""Falling pieces: their shapes in every rotation, and the block being played."""

from __future__ import annotations

import enum
import random
from typing import Optional

BLOCK_SHAPES = 7
BLOCK_ROTATIONS = 4
BLOCK_SIZE = 4

BOARD_WIDTH = 12
BOARD_HEIGHT = 24


class Cell(enum.IntEnum):
    """What occupies one square of the board."""

    MOVING_BLOCK = -1
    EMPTY = 0
    FIXED_BLOCK = 1
    WALL = 2
    BOTTOM_WALL = 3
    TOP_WALL = 4


class Direction(enum.IntEnum):
    """The rotation a piece is in."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


_O = ("....", ".##.", ".##.", "....")
_I_TALL = (".#..", ".#..", ".#..", ".#..")
_I_FLAT = ("....", "....", "####", "....")
_S_FLAT = ("....", ".##.", "##..", "....")
_S_TALL = (".#..", ".##.", "..#.", "....")
_Z_FLAT = ("....", "##..", ".##.", "....")
_Z_TALL = ("..#.", ".##.", ".#..", "....")

_SHAPE_ROWS = (
    (_O, _O, _O, _O),
    (
        ("....", "..#.", "###.", "...."),
        (".##.", "..#.", "..#.", "...."),
        ("###.", "#...", "....", "...."),
        ("#...", "#...", "##..", "...."),
    ),
    (
        ("....", "#...", "###.", "...."),
        ("..#.", "..#.", ".##.", "...."),
        ("###.", "..#.", "....", "...."),
        ("##..", "#...", "#...", "...."),
    ),
    (_I_TALL, _I_FLAT, _I_TALL, _I_FLAT),
    (
        ("....", ".#..", "###.", "...."),
        ("....", ".#..", "##..", ".#.."),
        ("....", "....", "###.", ".#.."),
        ("....", ".#..", ".##.", ".#.."),
    ),
    (_S_FLAT, _S_TALL, _S_FLAT, _S_TALL),
    (_Z_FLAT, _Z_TALL, _Z_FLAT, _Z_TALL),
)

Offsets = tuple[tuple[int, int], ...]

_SHAPES: tuple[tuple[Offsets, ...], ...] = tuple(
    tuple(
        tuple(
            (row, col)
            for row, line in enumerate(rows)
            for col, mark in enumerate(line)
            if mark == "#"
        )
        for rows in rotations
    )
    for rotations in _SHAPE_ROWS
)


def shape_cells(shape: int, direction: int) -> Offsets:
    """Return the (row, column) offsets a shape fills within its 4x4 box."""
    if not 0 <= shape < BLOCK_SHAPES:
        raise ValueError(f"no such shape: {shape}")
    return _SHAPES[shape][Direction(direction % BLOCK_ROTATIONS)]


class Block:
    """The piece in play, together with the one that comes after it."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.current = 0
        self.next = 0
        self.direction = Direction.UP
        self.x = 0
        self.y = 0
        self.spawn(first=True)

    def spawn(self, first: bool = False) -> None:
        """Bring the next piece into play at the top middle and draw a new next one."""
        if first:
            self.current = self._rng.randrange(BLOCK_SHAPES)
        else:
            self.current = self.next
        self.next = self._rng.randrange(BLOCK_SHAPES)
        self.direction = Direction.UP
        self.x = BOARD_WIDTH // 2 - 1
        self.y = 0

    def cells(self) -> list[tuple[int, int]]:
        """Return the (row, column) board squares the piece covers."""
        return [
            (self.y + row, self.x + col)
            for row, col in shape_cells(self.current, self.direction)
        ]

    def move_left(self) -> None:
        self.x -= 1

    def move_right(self) -> None:
        self.x += 1

    def move_down(self) -> None:
        self.y += 1

    def rotate(self) -> None:
        self.direction = Direction((self.direction + 1) % BLOCK_ROTATIONS)