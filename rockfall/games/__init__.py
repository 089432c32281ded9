"""
Rockfall Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum (session phase)
- input: Keyboard/touch input sources merged into a movement intent
"""

from rockfall.games.game_state import GameState
from rockfall.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
