"""
Keyboard Input Source - arrow keys and A/D.

A key is held from its KEYDOWN until the matching KEYUP.
"""
from typing import Dict, FrozenSet, Set

import pygame

from rockfall.games.input.intent import Direction
from rockfall.games.input.sources.base import InputSource
from rockfall.logging import get_logger

log = get_logger('input')

# pygame key codes are case-free, so 'a' and 'A' share K_a
DEFAULT_KEYMAP: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class KeyboardInputSource(InputSource):
    """Tracks the set of held movement keys."""

    def __init__(self, keymap: Dict[int, Direction] = None):
        self._keymap = dict(keymap) if keymap is not None else dict(DEFAULT_KEYMAP)
        self._held: Set[int] = set()

    @property
    def held_keys(self) -> FrozenSet[int]:
        return frozenset(self._held)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN and event.key in self._keymap:
            self._held.add(event.key)
            return True
        if event.type == pygame.KEYUP and event.key in self._keymap:
            self._held.discard(event.key)
            return True
        if event.type == pygame.WINDOWFOCUSLOST:
            # KEYUPs are not delivered while unfocused
            if self._held:
                log.debug("Focus lost, releasing %d held keys", len(self._held))
            self.clear()
        return False

    def directions(self) -> FrozenSet[Direction]:
        return frozenset(self._keymap[key] for key in self._held)

    def clear(self) -> None:
        self._held.clear()
