"""
Deterministic single-player Snake game used to evaluate evolved brains.

The body is stored tail first, head last. Food placement draws from a
generator private to the game, so a game replays identically for the same
seed and the same sequence of moves.
"""

from collections import deque
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .direction import Position


INITIAL_MOVES = 100  # Move budget of a new game
FOOD_MOVES = 100  # Moves granted for every food eaten


class Frame(NamedTuple):
    """Read-only snapshot of a game, consumed by renderers"""
    size: int
    body: Tuple[Position, ...]
    food: Optional[Position]
    score: int
    steps: int
    moves_left: int
    finished: bool

    @property
    def head(self):
        return self.body[-1]


class Game:
    def __init__(self, size=10, seed=0):
        if size < 3:
            raise ValueError(f"Grid size must be at least 3, got {size}")

        self.size = size
        self.seed = seed
        self._rng = np.random.default_rng(seed)

        # Centred head with the tail one cell to its right
        center = size // 2
        self.body = deque([Position(center + 1, center), Position(center, center)])

        self.score = 0
        self.step_count = 0
        self.moves_left = INITIAL_MOVES
        self.finished = False
        self.won = False

        self.food = self._place_food()

    @property
    def head(self):
        return self.body[-1]

    def in_bounds(self, position):
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def _free_cells(self):
        occupied = set(self.body)
        return [
            Position(x, y)
            for y in range(self.size)
            for x in range(self.size)
            if Position(x, y) not in occupied
        ]

    def _place_food(self):
        empty_cells = self._free_cells()
        if not empty_cells:
            return None  # Board is full
        return empty_cells[int(self._rng.integers(len(empty_cells)))]

    def move_snake(self, direction):
        """Advance the game by one move; moves after the game finished are ignored"""
        if self.finished:
            return

        head = self.head
        offset = direction.offset

        # Left or right wall
        if not 0 <= head.x + offset.x < self.size:
            self.finished = True
            return

        new_head = head + offset
        collided = new_head in self.body
        self.body.append(new_head)

        # Top or bottom wall, or own body
        if not 0 <= new_head.y < self.size or collided:
            self.finished = True
            return

        self.step_count += 1
        self.moves_left -= 1
        if self.moves_left <= 0:
            self.finished = True

        if new_head == self.food:
            self.score += 1
            self.moves_left += FOOD_MOVES
            self.food = self._place_food()
            if self.food is None:
                self.won = True
                self.finished = True
        elif len(self.body) > 2:
            self.body.popleft()

    def frame(self):
        return Frame(
            size=self.size,
            body=tuple(self.body),
            food=self.food,
            score=self.score,
            steps=self.step_count,
            moves_left=self.moves_left,
            finished=self.finished,
        )

    def display(self):
        """Text rendering of the current state"""
        return render_text(self.frame())


HEAD = '@'
BODY = 'o'
FOOD = '*'
EMPTY = '.'


def render_text(frame):
    """Draw a frame as rows of glyphs followed by a score line"""
    body = set(frame.body)
    rows = []
    for y in range(frame.size):
        row = []
        for x in range(frame.size):
            position = Position(x, y)
            if position == frame.head:
                row.append(HEAD)
            elif position in body:
                row.append(BODY)
            elif position == frame.food:
                row.append(FOOD)
            else:
                row.append(EMPTY)
        rows.append(' '.join(row))
    rows.append(f"Score: {frame.score}")
    return '\n'.join(rows)
