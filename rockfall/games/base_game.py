"""Base class for all Rockfall games.

All games inherit from BaseGame to get a consistent interface with the
standalone entry points and the game_info factories.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from rockfall.games.game_state import GameState
from rockfall.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all Rockfall games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process pygame events
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
        - get_available_actions() / execute_action(): Named commands
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries win on name clashes
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--fullscreen',
            'action': 'store_true',
            'default': False,
            'help': 'Run fullscreen'
        },
        {
            'name': '--fps',
            'type': int,
            'default': 60,
            'help': 'Display refresh rate the game loop is tied to'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List[pygame.event.Event]) -> None:
        """Process input events.

        Args:
            events: pygame events collected this frame
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        log.debug("%s reset", self.NAME)

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Get list of actions currently available to the player.

        Each action has:
        - id: Unique identifier (e.g., 'start', 'restart')
        - label: Display text
        - style: Optional style hint ('primary', 'secondary')

        Base implementation returns empty list.
        """
        return []

    def execute_action(self, action_id: str) -> bool:
        """Execute a game action by ID.

        Args:
            action_id: The action identifier (e.g., 'start', 'restart')

        Returns:
            True if action was handled, False otherwise
        """
        return False
