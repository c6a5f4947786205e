"""
Tests for the Snake game rules.
"""
from collections import deque

import pytest

from snake_evolution.game import Direction, Game, Position, render_text


def game_with_body(cells, size=10, food=Position(0, 0)):
    game = Game(size)
    game.body = deque(Position(x, y) for x, y in cells)
    game.food = food
    return game


class TestDirection:
    def test_from_index(self):
        assert [Direction.from_index(i) for i in range(4)] == [
            Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
        ]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_from_index_out_of_range(self, index):
        with pytest.raises(ValueError):
            Direction.from_index(index)

    def test_get_index(self):
        assert Direction.get_index(Direction.LEFT) == 2

    def test_offsets(self):
        assert Position(3, 3) + Direction.UP_RIGHT.offset == Position(4, 2)
        assert Position(3, 3) + Direction.DOWN_LEFT.offset == Position(2, 4)


class TestGameSetup:
    def test_initial_state(self):
        game = Game(10)
        assert list(game.body) == [Position(6, 5), Position(5, 5)]
        assert game.head == Position(5, 5)
        assert game.score == 0
        assert game.step_count == 0
        assert game.moves_left == 100
        assert not game.finished
        assert game.food not in game.body
        assert game.in_bounds(game.food)

    def test_too_small(self):
        with pytest.raises(ValueError):
            Game(2)

    def test_food_is_deterministic_per_seed(self):
        assert Game(10, seed=3).food == Game(10, seed=3).food
        foods = {Game(10, seed=seed).food for seed in range(20)}
        assert len(foods) > 1


class TestMoves:
    def test_small_grid_scenario(self):
        game = game_with_body([(2, 1), (1, 1)], size=3)

        game.move_snake(Direction.LEFT)
        assert list(game.body) == [Position(1, 1), Position(0, 1)]

        game.move_snake(Direction.UP)
        assert list(game.body) == [Position(1, 1), Position(0, 1), Position(0, 0)]
        assert game.score == 1
        assert game.step_count == 2
        assert not game.finished
        assert game.food not in game.body

    def test_eating_grows_and_extends_budget(self):
        game = Game(10)
        game.food = Position(4, 5)

        game.move_snake(Direction.LEFT)

        assert game.score == 1
        assert len(game.body) == 3
        assert game.moves_left == 199
        assert game.food != Position(4, 5)

    def test_plain_move_keeps_length(self):
        game = Game(10)
        game.food = Position(0, 0)

        game.move_snake(Direction.UP)

        assert list(game.body) == [Position(5, 5), Position(5, 4)]
        assert game.moves_left == 99
        assert game.step_count == 1

    @pytest.mark.parametrize("cells, direction", [
        ([(1, 0), (0, 0)], Direction.LEFT),
        ([(8, 0), (9, 0)], Direction.RIGHT),
        ([(1, 0), (0, 0)], Direction.UP),
        ([(1, 9), (0, 9)], Direction.DOWN),
    ])
    def test_walls_finish_the_game(self, cells, direction):
        game = game_with_body(cells, food=Position(5, 5))

        game.move_snake(direction)

        assert game.finished
        assert game.step_count == 0
        assert game.score == 0

    def test_moving_into_own_body(self):
        game = Game(10)
        game.move_snake(Direction.RIGHT)
        assert game.finished
        assert game.step_count == 0

    def test_budget_runs_out(self):
        game = Game(10)
        game.food = Position(0, 0)
        game.moves_left = 1

        game.move_snake(Direction.UP)

        assert game.finished
        assert game.step_count == 1
        assert game.moves_left == 0

    def test_moves_after_finish_are_ignored(self):
        game = Game(10)
        game.move_snake(Direction.RIGHT)
        frame = game.frame()

        game.move_snake(Direction.UP)
        game.move_snake(Direction.LEFT)

        assert game.frame() == frame

    def test_filling_the_board_wins(self):
        game = game_with_body([(0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0), (0, 0), (0, 1)],
                              size=3, food=Position(1, 1))

        game.move_snake(Direction.RIGHT)

        assert game.score == 1
        assert game.food is None
        assert game.finished
        assert game.won


class TestFrame:
    def test_frame_snapshot(self):
        game = Game(10)
        frame = game.frame()

        game.food = Position(0, 0)
        game.move_snake(Direction.UP)

        assert frame.body == (Position(6, 5), Position(5, 5))
        assert frame.head == Position(5, 5)
        assert frame.steps == 0
        assert game.frame().steps == 1

    def test_render_text(self):
        game = Game(3)
        game.food = Position(0, 0)

        assert render_text(game.frame()) == (
            "* . .\n"
            ". @ o\n"
            ". . .\n"
            "Score: 0"
        )
        assert game.display() == render_text(game.frame())
