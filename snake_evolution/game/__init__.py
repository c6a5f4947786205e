"""
Snake Game Module

This module contains the deterministic grid physics, the vision sensor and the
text renderer. The pygame window renderer lives in game.renderer.
"""

from .direction import Direction, Position
from .snake_game import Frame, Game, render_text
from .vision import vision, vision_size

__all__ = ['Direction', 'Position', 'Frame', 'Game', 'render_text', 'vision', 'vision_size']
