"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import FrozenSet

import pygame

from rockfall.games.input.intent import Direction


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources are fed pygame events as they arrive and report the set of
    directions they currently hold. They only ever replace their own
    state; the frame tick reads it once at its start.
    """

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update held state from a pygame event.

        Returns:
            True if the event was consumed by this source.
        """
        pass

    @abstractmethod
    def directions(self) -> FrozenSet[Direction]:
        """Directions currently held by this source."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Release everything this source holds."""
        pass
