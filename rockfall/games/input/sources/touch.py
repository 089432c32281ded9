"""
Touch Input Source - press-and-hold on the left or right half of the field.

Handles both mouse buttons and touch fingers. Only one direction is
active at a time; the latest press replaces the previous one.
"""
from typing import FrozenSet, Optional

import pygame

from rockfall.games.input.intent import Direction
from rockfall.games.input.sources.base import InputSource


class TouchInputSource(InputSource):
    """Single pointer direction, set on press and cleared on release or leave."""

    def __init__(self, field_width: float, window_width: Optional[float] = None):
        """
        Args:
            field_width: Width in pixels used to split presses into halves
            window_width: Window width in pixels, used to convert normalized
                finger positions (default: field_width)
        """
        self._field_width = float(field_width)
        self._window_width = float(window_width if window_width is not None else field_width)
        self._direction: Optional[Direction] = None

    @property
    def direction(self) -> Optional[Direction]:
        return self._direction

    def set_field_width(self, field_width: float, window_width: Optional[float] = None) -> None:
        """Update the split point (and the finger scale) after a resize."""
        self._field_width = float(field_width)
        if window_width is not None:
            self._window_width = float(window_width)

    def _direction_for_x(self, x: float) -> Direction:
        return Direction.LEFT if x < self._field_width / 2 else Direction.RIGHT

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._direction = self._direction_for_x(event.pos[0])
            return True
        if event.type == pygame.FINGERDOWN:
            # Finger x is normalized to the window, the split is in field pixels
            self._direction = self._direction_for_x(event.x * self._window_width)
            return True
        if event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
            self.clear()
            return True
        if event.type == pygame.WINDOWLEAVE:
            self.clear()
            return False
        return False

    def directions(self) -> FrozenSet[Direction]:
        if self._direction is None:
            return frozenset()
        return frozenset((self._direction,))

    def clear(self) -> None:
        self._direction = None
