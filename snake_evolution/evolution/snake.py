from ..game import Direction, Game, vision, vision_size
from .brain import Brain


SCORE_WEIGHT = 10.0
STEP_WEIGHT = 0.01


class Snake:
    """A brain playing its own game, with the moves it made so far"""

    def __init__(self, brain, grid_size=10, seed=0, directions=None):
        self.directions = directions or Direction.vision_order()
        if brain.nn.input_size != vision_size(self.directions):
            raise ValueError(
                f"Brain takes {brain.nn.input_size} inputs but vision produces "
                f"{vision_size(self.directions)}"
            )

        self.brain = brain
        self.game = Game(grid_size, seed)
        self.history = []

    @classmethod
    def random(cls, rng, grid_size=10, seed=0, directions=None):
        directions = directions or Direction.vision_order()
        brain = Brain.random(rng, inputs=vision_size(directions))
        return cls(brain, grid_size, seed, directions)

    @classmethod
    def from_chromosome(cls, chromosome, grid_size=10, seed=0, directions=None):
        directions = directions or Direction.vision_order()
        brain = Brain.from_chromosome(chromosome, inputs=vision_size(directions))
        return cls(brain, grid_size, seed, directions)

    @property
    def finished(self):
        return self.game.finished

    def process_vision(self):
        return vision(self.game, self.directions)

    def make_move(self):
        if self.game.finished:
            return

        action = self.brain.act(self.process_vision())
        direction = Direction.from_index(action)

        self.history.append(direction)
        self.game.move_snake(direction)

    def fitness(self):
        # Food dominates, survival length breaks ties between equal scores
        return self.game.score * SCORE_WEIGHT + self.game.step_count * STEP_WEIGHT

    def as_chromosome(self):
        return self.brain.as_chromosome()

    def replay(self):
        """Yield every frame of the recorded game, starting with the initial one"""
        game = Game(self.game.size, self.game.seed)
        yield game.frame()
        for direction in self.history:
            game.move_snake(direction)
            yield game.frame()
