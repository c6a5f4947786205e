"""
AI Module for Snake Evolution

This module contains the weight-addressable neural network and the generic
genetic algorithm used to evolve snake brains.
"""

from .chromosome import Chromosome
from .neural_network import Activation, Layer, LayerTopology, Network, Neuron
from .genetic_algorithm import (
    CrossoverMethod,
    GaussianMutation,
    GeneticAlgorithm,
    Individual,
    MutationMethod,
    RouletteWheelSelection,
    SelectionMethod,
    UniformCrossover,
)

__all__ = [
    'Chromosome',
    'Activation', 'Layer', 'LayerTopology', 'Network', 'Neuron',
    'GeneticAlgorithm', 'Individual',
    'SelectionMethod', 'RouletteWheelSelection',
    'CrossoverMethod', 'UniformCrossover',
    'MutationMethod', 'GaussianMutation',
]
