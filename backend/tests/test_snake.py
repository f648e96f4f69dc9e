"""
Tests for the Snake entity and the Grid geometry.
"""

import pytest
import random
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.errors import InvariantViolation
from domain.grid import Grid
from domain.snake import Snake


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_multiple_positions(self):
        positions = [(5, 5), (4, 5), (3, 5)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_needs_a_segment(self):
        with pytest.raises(InvariantViolation):
            Snake([])

    def test_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_head_of_emptied_snake_is_invariant_violation(self):
        snake = Snake([(5, 5)])
        snake.positions.clear()
        with pytest.raises(InvariantViolation):
            _ = snake.head

    @pytest.mark.parametrize("direction,expected", [
        (UP, (5, 4)),
        (DOWN, (5, 6)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_advance_head_uses_screen_coordinates(self, direction, expected):
        snake = Snake([(5, 5)])
        assert snake.advance_head(direction) == expected

    def test_advance_head_does_not_mutate(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.advance_head(RIGHT)
        assert list(snake.positions) == [(5, 5), (4, 5)]

    def test_push_front_then_pop_back_keeps_length(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.push_front((6, 5))
        removed = snake.pop_back()
        assert removed == (4, 5)
        assert list(snake.positions) == [(6, 5), (5, 5)]

    def test_pop_back_never_removes_last_segment(self):
        snake = Snake([(5, 5)])
        with pytest.raises(InvariantViolation):
            snake.pop_back()
        assert list(snake.positions) == [(5, 5)]

    def test_contains(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.contains((4, 5))
        assert not snake.contains((6, 5))


class TestGrid:
    """Tests for the Grid class."""

    @pytest.mark.parametrize("point,inside", [
        ((0, 0), True),
        ((9, 4), True),
        ((10, 0), False),
        ((0, 5), False),
        ((-1, 2), False),
        ((3, -1), False),
    ])
    def test_contains(self, point, inside):
        grid = Grid(10, 5)
        assert grid.contains(point) is inside

    def test_area(self):
        assert Grid(10, 5).area == 50

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_dimensions_must_be_positive(self, width, height):
        with pytest.raises(ValueError):
            Grid(width, height)

    def test_random_cell_is_inside(self):
        grid = Grid(4, 3)
        rng = random.Random(7)
        for _ in range(100):
            assert grid.contains(grid.random_cell(rng))
