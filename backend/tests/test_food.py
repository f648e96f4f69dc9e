"""
Tests for food placement.
"""

import pytest
import random
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import InvariantViolation
from domain.food import spawn_food
from domain.grid import Grid
from domain.snake import Snake


def test_spawn_never_lands_on_snake():
    grid = Grid(5, 5)
    snake = Snake([(x, 2) for x in range(5)] + [(4, 3), (3, 3)])
    rng = random.Random(3)
    for _ in range(200):
        food = spawn_food(grid, snake, rng)
        assert grid.contains(food)
        assert not snake.contains(food)


def test_spawn_finds_the_only_free_cell():
    grid = Grid(3, 3)
    cells = [(x, y) for y in range(3) for x in range(3)]
    free = cells.pop(4)
    snake = Snake(cells)
    for seed in range(10):
        assert spawn_food(grid, snake, random.Random(seed)) == free


def test_spawn_reaches_every_free_cell():
    grid = Grid(3, 2)
    snake = Snake([(0, 0)])
    rng = random.Random(11)
    seen = {spawn_food(grid, snake, rng) for _ in range(500)}
    assert seen == {(x, y) for x in range(3) for y in range(2)} - {(0, 0)}


def test_spawn_on_full_grid_is_invariant_violation():
    grid = Grid(2, 1)
    snake = Snake([(0, 0), (1, 0)])
    with pytest.raises(InvariantViolation):
        spawn_food(grid, snake, random.Random(0))


def test_spawn_uses_module_random_by_default():
    grid = Grid(4, 4)
    snake = Snake([(0, 0)])
    assert not snake.contains(spawn_food(grid, snake))
