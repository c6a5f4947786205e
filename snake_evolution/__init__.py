"""
Snake Evolution

Neuroevolution of Snake players: a genetic algorithm evolves the weights of
small feed-forward networks that play a deterministic grid Snake game.
"""

__version__ = "0.1.0"
