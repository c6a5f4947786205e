"""
Tests for the ray-cast vision of a snake.
"""
from collections import deque

import numpy as np

from snake_evolution.game import Direction, Game, Position, vision, vision_size

# Slot of a reading for a direction in the default order
FOOD, BODY, WALL = 0, 1, 2


def slot(direction, reading, directions=None):
    directions = directions or Direction.vision_order()
    return directions.index(direction) * 3 + reading


def test_vision_size():
    assert vision_size() == 24
    assert vision_size(Direction.cardinal()) == 12


def test_vision_does_not_change_the_game():
    game = Game(10)
    before = game.frame()
    first = vision(game)
    second = vision(game)
    np.testing.assert_array_equal(first, second)
    assert game.frame() == before


def test_every_ray_sees_a_wall():
    readings = vision(Game(10))
    assert readings.shape == (24,)
    assert readings.dtype == np.float32
    assert np.all(readings[WALL::3] > 0)


def test_wall_distances_from_the_start():
    game = Game(10)
    game.food = Position(0, 9)
    readings = vision(game)

    assert readings[slot(Direction.UP, WALL)] == 6
    assert readings[slot(Direction.DOWN, WALL)] == 5
    assert readings[slot(Direction.LEFT, WALL)] == 6
    assert readings[slot(Direction.UP_LEFT, WALL)] == 6

    assert readings[slot(Direction.RIGHT, FOOD)] == 0
    assert readings[slot(Direction.RIGHT, BODY)] == 1
    assert readings[slot(Direction.RIGHT, WALL)] == 5


def test_food_distance():
    game = Game(10)
    game.food = Position(5, 2)
    readings = vision(game)

    assert readings[slot(Direction.UP, FOOD)] == 3
    assert readings[slot(Direction.DOWN, FOOD)] == 0


def test_nearest_body_segment_wins():
    game = Game(10)
    game.body = deque([Position(5, 1), Position(5, 3), Position(5, 5)])
    game.food = Position(0, 9)
    readings = vision(game)

    assert readings[slot(Direction.UP, BODY)] == 2


def test_cardinal_directions_only():
    game = Game(10)
    game.food = Position(5, 2)
    directions = Direction.cardinal()
    readings = vision(game, directions)

    assert readings.shape == (12,)
    assert readings[slot(Direction.UP, FOOD, directions)] == 3
    assert readings[slot(Direction.RIGHT, BODY, directions)] == 1


def grown_game(food):
    # Body bends back across the up-right diagonal at distances 1 and 3
    game = Game(10)
    game.body = deque(Position(x, y) for x, y in [
        (8, 2), (8, 3), (8, 4), (7, 4), (6, 4), (6, 5), (5, 5),
    ])
    game.food = food
    return game


def test_diagonal_ray_keeps_the_first_body_hit():
    readings = vision(grown_game(food=Position(0, 0)))

    assert readings[slot(Direction.UP_RIGHT, FOOD)] == 0
    assert readings[slot(Direction.UP_RIGHT, BODY)] == 1
    assert readings[slot(Direction.UP_RIGHT, WALL)] == 5


def test_food_between_body_segments():
    readings = vision(grown_game(food=Position(7, 3)))

    assert readings[slot(Direction.UP_RIGHT, FOOD)] == 2
    assert readings[slot(Direction.UP_RIGHT, BODY)] == 1
    assert readings[slot(Direction.DOWN_LEFT, FOOD)] == 0
    assert readings[slot(Direction.RIGHT, BODY)] == 1
