from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int

    def __add__(self, other):
        return Position(self.x + other[0], self.y + other[1])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (1, -1)
    DOWN_LEFT = (-1, 1)
    DOWN_RIGHT = (1, 1)

    @property
    def offset(self):
        return Position(*self.value)

    @staticmethod
    def from_index(index):
        """Map a network action index to a movement direction"""
        actions = Direction.cardinal()
        if not 0 <= index < len(actions):
            raise ValueError(f"Action index must be within [0, {len(actions) - 1}], got {index}")
        return actions[index]

    @staticmethod
    def get_index(direction):
        return Direction.cardinal().index(direction)

    @staticmethod
    def cardinal():
        return [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

    @staticmethod
    def vision_order():
        return list(Direction)
