"""
Evolution Module for Snake Evolution

This module binds the genetic algorithm and the neural network to the game:
the brain topology, the snake agent with its vision and fitness, and the
generational loop.
"""

from .brain import Brain
from .snake import Snake
from .snake_individual import SnakeIndividual
from .evolution import Evolution

__all__ = ['Brain', 'Snake', 'SnakeIndividual', 'Evolution']
