"""
Tests for the pygame renderer, run against SDL's dummy video driver.
"""
from collections import deque

import numpy as np
import pytest

from snake_evolution.evolution import Snake
from snake_evolution.game import Direction, Game, Position
from snake_evolution.game.renderer import PygameRenderer
from snake_evolution.train.train_evolution import replay


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv('SDL_VIDEODRIVER', 'dummy')
    monkeypatch.setenv('SDL_AUDIODRIVER', 'dummy')


def test_draw_frames():
    renderer = PygameRenderer(10, render_delay=0)
    game = Game(10)
    try:
        assert renderer.draw(game.frame())
        game.move_snake(Direction.UP)
        assert renderer.draw(game.frame())
    finally:
        renderer.close()

    assert not renderer.draw(game.frame())


def test_draw_skips_cells_off_the_grid():
    game = Game(10)
    game.body = deque([Position(1, 0), Position(0, 0)])
    game.move_snake(Direction.UP)

    renderer = PygameRenderer(10, render_delay=0)
    try:
        assert game.finished
        assert renderer.draw(game.frame())
    finally:
        renderer.close()


def test_gui_replay():
    snake = Snake.random(np.random.default_rng(0))
    for _ in range(10):
        snake.make_move()

    replay(snake, gui=True, delay=0)
