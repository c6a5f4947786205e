from typing import Protocol

import numpy as np

from .chromosome import Chromosome


class Individual(Protocol):
    # Anything the genetic algorithm can evolve: a fitness, a chromosome,
    # and a way to be rebuilt from a chromosome

    def fitness(self) -> float:
        ...

    def chromosome(self) -> Chromosome:
        ...

    @classmethod
    def create(cls, chromosome: Chromosome) -> "Individual":
        ...


class SelectionMethod:
    def select(self, rng, population):
        raise NotImplementedError


class CrossoverMethod:
    def crossover(self, rng, parent_a, parent_b):
        raise NotImplementedError


class MutationMethod:
    def mutate(self, rng, child):
        raise NotImplementedError


class RouletteWheelSelection(SelectionMethod):
    """Fitness-proportionate selection with replacement"""

    def select(self, rng, population):
        if not population:
            raise ValueError("Received empty population")

        weights = np.array([individual.fitness() for individual in population], dtype=np.float64)
        if np.any(weights < 0):
            raise ValueError("Fitness values must be non-negative for roulette wheel selection")

        wheel = np.cumsum(weights)
        if wheel[-1] <= 0:
            raise ValueError("At least one individual needs a positive fitness")

        # One spin per selection, zero-fitness slots have no width on the wheel
        spin = rng.random() * wheel[-1]
        index = int(np.searchsorted(wheel, spin, side="right"))
        return population[min(index, len(population) - 1)]


class UniformCrossover(CrossoverMethod):
    """Each gene comes from parent A or parent B with equal probability"""

    def crossover(self, rng, parent_a, parent_b):
        if len(parent_a) != len(parent_b):
            raise ValueError(
                f"Parents have different lengths: {len(parent_a)} and {len(parent_b)}"
            )

        take_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(take_a, parent_a.genes, parent_b.genes))


class GaussianMutation(MutationMethod):
    def __init__(self, rate, factor):
        # rate: probability of changing a gene
        # factor: magnitude of change
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Mutation rate must be within [0, 1], got {rate}")

        self.rate = rate
        self.factor = factor

    def mutate(self, rng, child):
        """Mutate the chromosome in place

        Every gene draws its sign, then whether it mutates, then (only when it
        does) the magnitude of the change.
        """
        genes = child.genes.tolist()
        for i, gene in enumerate(genes):
            sign = -1.0 if rng.random() < 0.5 else 1.0
            if rng.random() < self.rate:
                genes[i] = gene + sign * self.factor * rng.random()
        child.genes[:] = genes


class GeneticAlgorithm:
    # Generational genetic algorithm: every call to step() replaces the whole population

    def __init__(self, selection_method, crossover_method, mutation_method):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def step(self, rng, population):
        """Build the next generation from the current one

        Random draws happen in a fixed order for every offspring slot:
        parent A, parent B, crossover, mutation. Seeded runs are reproducible.
        """
        if not population:
            raise ValueError("Received empty population")

        new_population = []
        for _ in range(len(population)):
            # Selection
            parent_a = self.selection_method.select(rng, population)
            parent_b = self.selection_method.select(rng, population)

            # Crossover
            child = self.crossover_method.crossover(rng, parent_a.chromosome(), parent_b.chromosome())

            # Mutation
            self.mutation_method.mutate(rng, child)

            new_population.append(type(parent_a).create(child))

        return new_population

    def breed(self, rng, parent_a, parent_b):
        """Cross and mutate two chosen parents, skipping selection"""
        child = self.crossover_method.crossover(rng, parent_a.chromosome(), parent_b.chromosome())
        self.mutation_method.mutate(rng, child)
        return type(parent_a).create(child)
