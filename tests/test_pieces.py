import random

import pytest

from studylab.tetris.pieces import (
    BLOCK_ROTATIONS,
    BLOCK_SHAPES,
    BOARD_WIDTH,
    Block,
    Direction,
    shape_cells,
)


@pytest.mark.parametrize("shape", range(BLOCK_SHAPES))
@pytest.mark.parametrize("direction", list(Direction))
def test_every_shape_has_four_squares(shape, direction):
    cells = shape_cells(shape, direction)
    assert len(set(cells)) == 4
    assert all(0 <= r < 4 and 0 <= c < 4 for r, c in cells)


def test_square_shape_is_the_same_in_every_direction():
    expected = {(1, 1), (1, 2), (2, 1), (2, 2)}
    for direction in Direction:
        assert set(shape_cells(0, direction)) == expected


def test_line_shape_alternates():
    assert shape_cells(3, Direction.UP) == shape_cells(3, Direction.DOWN)
    assert shape_cells(3, Direction.RIGHT) == shape_cells(3, Direction.LEFT)
    assert shape_cells(3, Direction.UP) != shape_cells(3, Direction.RIGHT)


def test_unknown_shape_is_rejected():
    with pytest.raises(ValueError):
        shape_cells(BLOCK_SHAPES, Direction.UP)


def test_spawn_draws_from_rng_and_passes_next_on():
    expected = random.Random(7)
    block = Block(random.Random(7))
    assert block.current == expected.randrange(BLOCK_SHAPES)
    assert block.next == expected.randrange(BLOCK_SHAPES)
    upcoming = block.next
    block.spawn(first=False)
    assert block.current == upcoming
    assert block.next == expected.randrange(BLOCK_SHAPES)


def test_spawn_resets_position_and_direction():
    block = Block(random.Random(1))
    block.move_down()
    block.move_right()
    block.rotate()
    block.spawn()
    assert (block.x, block.y) == (BOARD_WIDTH // 2 - 1, 0)
    assert block.direction is Direction.UP


def test_cells_are_offset_by_position():
    block = Block(random.Random(3))
    relative = shape_cells(block.current, block.direction)
    assert block.cells() == [(block.y + r, block.x + c) for r, c in relative]


def test_moves_are_inverse():
    block = Block(random.Random(2))
    start = block.cells()
    block.move_left()
    block.move_right()
    assert block.cells() == start
    block.move_down()
    assert [r for r, _ in block.cells()] == [r + 1 for r, _ in start]


def test_rotation_cycles():
    block = Block(random.Random(5))
    seen = []
    for _ in range(BLOCK_ROTATIONS):
        seen.append(block.direction)
        block.rotate()
    assert block.direction is Direction.UP
    assert seen == list(Direction)