"""
Input Manager - Collects input from every active source.

The manager fans pygame events out to its sources and merges whatever
they hold into a single Intent for the next tick.
"""
from typing import Iterable, List, Optional

import pygame

from models import Intent
from rockfall.games.input.intent import normalize_intent
from rockfall.games.input.sources.base import InputSource


class InputManager:
    """Manages input sources and derives the current movement intent."""

    def __init__(self, sources: Optional[Iterable[InputSource]] = None):
        """Initialize with optional input sources."""
        self._sources: List[InputSource] = list(sources or [])

    def add_source(self, source: InputSource) -> None:
        """Add an input source."""
        self._sources.append(source)

    def get_sources(self) -> List[InputSource]:
        """Get the active input sources."""
        return list(self._sources)

    def process(self, events: Iterable[pygame.event.Event]) -> List[pygame.event.Event]:
        """Feed events to every source.

        Every source sees every event, so a focus or leave event can reset
        several of them at once.

        Returns:
            Events no source consumed, for the game loop to handle.
        """
        unhandled = []
        for event in events:
            consumed = False
            for source in self._sources:
                if source.handle_event(event):
                    consumed = True
            if not consumed:
                unhandled.append(event)
        return unhandled

    def get_intent(self) -> Intent:
        """Merge all held directions into one Intent."""
        held = set()
        for source in self._sources:
            held.update(source.directions())
        return normalize_intent(held)

    def clear(self) -> None:
        """Release everything held by every source."""
        for source in self._sources:
            source.clear()
