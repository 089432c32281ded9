"""
Input source implementations.
"""

from rockfall.games.input.sources.base import InputSource
from rockfall.games.input.sources.keyboard import KeyboardInputSource
from rockfall.games.input.sources.touch import TouchInputSource

__all__ = ['InputSource', 'KeyboardInputSource', 'TouchInputSource']
