from .snake import Snake


class SnakeIndividual:
    """Fitness and chromosome of a snake, as seen by the genetic algorithm"""

    def __init__(self, fitness, chromosome):
        self._fitness = fitness
        self._chromosome = chromosome

    @classmethod
    def create(cls, chromosome):
        return cls(0.0, chromosome)

    @classmethod
    def from_snake(cls, snake):
        return cls(snake.fitness(), snake.as_chromosome())

    def fitness(self):
        return self._fitness

    def chromosome(self):
        return self._chromosome

    def into_snake(self, grid_size, seed=0, directions=None):
        return Snake.from_chromosome(self._chromosome, grid_size, seed, directions)
