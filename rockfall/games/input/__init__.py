"""
Input abstraction layer for Rockfall games.

Keyboard and touch sources are merged into one left/right Intent.
"""

from rockfall.games.input.intent import Direction, normalize_intent
from rockfall.games.input.input_manager import InputManager

__all__ = ['Direction', 'normalize_intent', 'InputManager']
