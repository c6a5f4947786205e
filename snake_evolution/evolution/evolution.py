from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from ..ai import GaussianMutation, GeneticAlgorithm, RouletteWheelSelection, UniformCrossover
from .snake import Snake
from .snake_individual import SnakeIndividual


POPULATION_SIZE = 2000
MUTATION_RATE = 0.15
MUTATION_STRENGTH = 0.3
GENERATION_LENGTH = 10_000
GAME_GRID_SIZE = 10


class Evolution:
    """Population of snakes evolved one generation at a time"""

    def __init__(self, population, grid_size=GAME_GRID_SIZE, generation_length=GENERATION_LENGTH,
                 mutation_rate=MUTATION_RATE, mutation_strength=MUTATION_STRENGTH,
                 num_threads=1, food_seed=0, generation=0, directions=None):
        # Args:
        #   population: Snakes of the current generation
        #   grid_size: Edge length of every game grid
        #   generation_length: Tick budget of one generation
        #   mutation_rate: Probability of mutating each gene
        #   mutation_strength: Largest change a mutation applies to a gene
        #   num_threads: Number of threads used to advance the games
        #   food_seed: Base seed of the food placement, offset by the generation number
        #   generation: Number of generations evolved so far
        #   directions: Vision directions, all eight by default
        if not population:
            raise ValueError("Population must not be empty")

        self.population = list(population)
        self.grid_size = grid_size
        self.generation_length = generation_length
        self.mutation_rate = mutation_rate
        self.mutation_strength = mutation_strength
        self.num_threads = num_threads
        self.food_seed = food_seed
        self.generation = generation
        self.directions = directions
        self.age = 0

        self.ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(mutation_rate, mutation_strength),
        )

        # Last evaluated generation, kept for replays after the population was replaced
        self.last_generation = []

        # Statistics tracking
        self.best_fitness_history = []
        self.avg_fitness_history = []
        self.best_score_history = []
        self.avg_score_history = []

    @classmethod
    def random(cls, rng, grid_size=GAME_GRID_SIZE, population_size=POPULATION_SIZE, food_seed=0,
               directions=None, **kwargs):
        population = [
            Snake.random(rng, grid_size, food_seed, directions)
            for _ in range(population_size)
        ]
        return cls(population, grid_size=grid_size, food_seed=food_seed,
                   directions=directions, **kwargs)

    @property
    def population_size(self):
        return len(self.population)

    def game_seed(self, generation=None):
        if generation is None:
            generation = self.generation
        return self.food_seed + generation

    def all_finished(self):
        return all(snake.finished for snake in self.population)

    @staticmethod
    def _advance(snakes):
        for snake in snakes:
            if not snake.finished:
                snake.make_move()

    def step(self, executor=None):
        """Advance every unfinished snake by one move"""
        if executor is None and self.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.num_threads) as pool:
                self._step(pool)
        else:
            self._step(executor)
        self.age += 1

    def _step(self, executor):
        if executor is None:
            self._advance(self.population)
            return

        # Games are independent, so the population is split by index
        chunks = [self.population[i::self.num_threads] for i in range(self.num_threads)]
        futures = [executor.submit(self._advance, chunk) for chunk in chunks]
        for future in as_completed(futures):
            future.result()

    def train(self, rng, progress_callback=None):
        """Play the current generation until its tick budget runs out, then evolve it"""
        if self.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.num_threads) as executor:
                self._play_generation(executor, progress_callback)
        else:
            self._play_generation(None, progress_callback)

        self.process_evolution(rng)

    def _play_generation(self, executor, progress_callback):
        while self.age < self.generation_length:
            # Moves of finished games are no-ops, the rest of the budget changes nothing
            if self.all_finished():
                break
            self.step(executor)
            if progress_callback:
                progress_callback(self.age, self.generation_length)

    def process_evolution(self, rng):
        """Replace the population with the offspring of the current one"""
        individuals = [SnakeIndividual.from_snake(snake) for snake in self.population]
        offspring = self.ga.step(rng, individuals)

        # Only a generation that evolved gets a statistics entry
        self._record_statistics()

        seed = self.game_seed(self.generation + 1)
        population = [
            individual.into_snake(self.grid_size, seed, self.directions)
            for individual in offspring
        ]

        self.last_generation = self.population
        self.population = population
        self.generation += 1
        self.age = 0

    def _record_statistics(self):
        fitnesses = [snake.fitness() for snake in self.population]
        scores = [snake.game.score for snake in self.population]

        self.best_fitness_history.append(max(fitnesses))
        self.avg_fitness_history.append(float(np.mean(fitnesses)))
        self.best_score_history.append(max(scores))
        self.avg_score_history.append(float(np.mean(scores)))

    def _candidates(self, last_generation):
        population = self.last_generation if last_generation else self.population
        if not population:
            raise ValueError("No evaluated generation yet")
        return population

    def best_individual(self, last_generation=False):
        # max() keeps the first of equally fit snakes
        return max(self._candidates(last_generation), key=lambda snake: snake.fitness())

    def worst_individual(self, last_generation=False):
        return min(self._candidates(last_generation), key=lambda snake: snake.fitness())
