"""
Training Module for Snake Evolution

This module contains the training driver, checkpointing and the operator menu.
"""

from .checkpoint import load_brain, load_state, save_best, save_state
from .train_evolution import main, plot_evolution_progress, train_evolution

__all__ = [
    'load_brain', 'load_state', 'save_best', 'save_state',
    'main', 'plot_evolution_progress', 'train_evolution',
]
