"""
Falling Rocks game mode.

Dodge the rocks, catch coins, stars and gems. Three rock hits end the
game. This module is the pygame presentation around the simulation:
it feeds input and resize events in and draws the snapshot out.
"""
import math
import random
from typing import Any, Callable, Dict, List, Optional

import pygame

from models import Entity, EntityCategory, Snapshot
from rockfall.games import BaseGame, GameState
from rockfall.games.input import InputManager
from rockfall.games.input.sources import KeyboardInputSource, TouchInputSource
from rockfall.logging import get_logger
from games.FallingRocks import config
from games.FallingRocks.scheduler import FrameScheduler
from games.FallingRocks.simulation import Simulation

log = get_logger('falling_rocks')

_START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
_PRESS_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)


class FallingRocksMode(BaseGame):
    """
    Falling Rocks game mode.

    Objects fall from the top of the field; the player moves left and
    right along the ground to dodge rocks and collect rewards.
    """

    NAME = "Falling Rocks"
    DESCRIPTION = "Dodge the rocks and collect coins!"
    VERSION = "1.0.0"
    AUTHOR = "Rockfall Team"

    ARGUMENTS = [
        {
            'name': '--width',
            'type': int,
            'default': config.SCREEN_WIDTH,
            'help': 'Window width'
        },
        {
            'name': '--height',
            'type': int,
            'default': config.SCREEN_HEIGHT,
            'help': 'Window height'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Seed for the spawn generator (reproducible runs)'
        },
        {
            'name': '--fps',
            'type': int,
            'default': config.FPS,
            'help': 'Display refresh rate; one simulation tick per frame'
        },
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """
        Initialize game mode.

        Args:
            width: Initial window width
            height: Initial window height
            seed: Spawn RNG seed (None = nondeterministic)
            clock: Millisecond clock override, mainly for tests
            rng: Random source override, mainly for tests
        """
        self._simulation = Simulation(width, height, seed=seed, clock=clock, rng=rng)
        self._scheduler = FrameScheduler(self._simulation)

        self._keyboard = KeyboardInputSource()
        self._touch = TouchInputSource(self._simulation.geometry.width, window_width=width)
        self._input = InputManager([self._keyboard, self._touch])

        # Fonts (initialized lazily)
        self._font: Optional[pygame.font.Font] = None
        self._font_small: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    def _get_internal_state(self) -> GameState:
        return self._simulation.phase

    def get_score(self) -> int:
        return self._simulation.score

    # =========================================================================
    # Commands
    # =========================================================================

    def get_available_actions(self) -> List[Dict[str, Any]]:
        if self.state is GameState.NOT_STARTED:
            return [{'id': 'start', 'label': 'Start Game', 'style': 'primary'}]
        if self.state is GameState.GAME_OVER:
            return [{'id': 'restart', 'label': 'Play Again', 'style': 'primary'}]
        return [{'id': 'restart', 'label': 'Restart', 'style': 'secondary'}]

    def execute_action(self, action_id: str) -> bool:
        if action_id == 'start' and self.state is GameState.NOT_STARTED:
            self._scheduler.start()
            return True
        if action_id == 'restart' and self.state is not GameState.NOT_STARTED:
            self._scheduler.restart()
            return True
        return False

    def _start_or_restart(self) -> None:
        action = self.get_available_actions()[0]['id']
        self.execute_action(action)
        # A press that started the game must not also steer
        self._input.clear()

    def reset(self) -> None:
        """Restart the session (R key in the standalone runner)."""
        super().reset()
        self._input.clear()
        if self.state is not GameState.NOT_STARTED:
            self._scheduler.restart()

    def resize(self, width: int, height: int) -> None:
        """Propagate a new window size to the simulation and touch split."""
        self._simulation.set_viewport(width, height)
        self._touch.set_field_width(self._simulation.geometry.width, window_width=width)

    # =========================================================================
    # Frame
    # =========================================================================

    def handle_input(self, events: List[pygame.event.Event]) -> None:
        """Route pygame events: commands, resizes, then movement sources."""
        movement_events = []
        for event in events:
            if event.type == pygame.KEYDOWN and event.key in _START_KEYS:
                if self.state is not GameState.RUNNING:
                    self._start_or_restart()
            elif event.type in _PRESS_EVENTS and self.state is not GameState.RUNNING:
                self._start_or_restart()
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            else:
                movement_events.append(event)

        self._input.process(movement_events)
        self._simulation.set_intent(self._input.get_intent())

    def update(self, dt: float) -> None:
        """Run this frame's tick. Spawn cadence follows the clock, not dt."""
        for outcome in self._scheduler.pump():
            if outcome.category.is_hazard:
                log.info("Hit by a rock, %d lives left", self._simulation.lives)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _get_font_small(self) -> pygame.font.Font:
        if self._font_small is None:
            self._font_small = pygame.font.Font(None, 24)
        return self._font_small

    def _get_font_large(self) -> pygame.font.Font:
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, 64)
        return self._font_large

    def render(self, screen: pygame.Surface) -> None:
        """Draw field, entities, player, HUD and any overlay."""
        snapshot = self._simulation.snapshot()
        screen.fill((0, 0, 0))
        self._render_field(screen, snapshot)

        if snapshot.phase is not GameState.NOT_STARTED:
            for entity in snapshot.entities:
                self._render_entity(screen, entity)
            player = snapshot.player
            pygame.draw.rect(
                screen,
                config.PLAYER_COLOR,
                pygame.Rect(int(player.x), int(player.y), int(player.width), int(player.height)),
                border_radius=6,
            )

        self._render_hud(screen, snapshot)

        if snapshot.phase is GameState.NOT_STARTED:
            self._render_overlay(screen, snapshot, "Falling Rocks",
                                 ["Press SPACE or tap to start",
                                  "Move with LEFT/RIGHT or A/D"])
        elif snapshot.phase is GameState.GAME_OVER:
            self._render_overlay(screen, snapshot, "Game Over!",
                                 [f"Score: {snapshot.score}",
                                  "Press SPACE or tap to play again"])

    def _render_field(self, screen: pygame.Surface, snapshot: Snapshot) -> None:
        geometry = snapshot.geometry
        half = geometry.height // 2
        screen.fill(config.BACKGROUND_TOP, pygame.Rect(0, 0, geometry.width, half))
        screen.fill(config.BACKGROUND_BOTTOM,
                    pygame.Rect(0, half, geometry.width, geometry.height - half))
        ground = max(4, geometry.height // 12)
        screen.fill(config.GROUND_COLOR,
                    pygame.Rect(0, geometry.height - ground, geometry.width, ground))

    def _render_entity(self, screen: pygame.Surface, entity: Entity) -> None:
        color = config.CATEGORY_COLORS[entity.category]
        size = entity.size
        cx = entity.x + size / 2
        cy = entity.y + size / 2
        r = size / 2

        if entity.category is EntityCategory.STAR:
            points = []
            for i in range(10):
                angle = -math.pi / 2 + i * math.pi / 5
                radius = r if i % 2 == 0 else r * 0.45
                points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
            pygame.draw.polygon(screen, color, points)
        elif entity.category is EntityCategory.GEM:
            pygame.draw.polygon(screen, color, [(cx, cy - r), (cx + r, cy), (cx, cy + r), (cx - r, cy)])
        else:
            pygame.draw.circle(screen, color, (int(cx), int(cy)), int(r))

    def _render_hud(self, screen: pygame.Surface, snapshot: Snapshot) -> None:
        top = snapshot.geometry.height + 10
        text = self._get_font().render(f"Score: {snapshot.score}", True, config.HUD_COLOR)
        screen.blit(text, (10, top))

        for i in range(config.STARTING_LIVES):
            color = config.LIFE_COLOR if i < snapshot.lives else config.LOST_LIFE_COLOR
            pygame.draw.circle(screen, color, (snapshot.geometry.width - 20 - i * 30, top + 12), 10)

        legend = self._get_font_small().render(
            "Rock = -1 life | Coin = +10 | Star = +25 | Gem = +50", True, config.HUD_COLOR
        )
        screen.blit(legend, (10, top + 40))

    def _render_overlay(self, screen: pygame.Surface, snapshot: Snapshot,
                        title: str, lines: List[str]) -> None:
        geometry = snapshot.geometry
        shade = pygame.Surface((geometry.width, geometry.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 128))
        screen.blit(shade, (0, 0))

        title_surf = self._get_font_large().render(title, True, config.HUD_COLOR)
        y = geometry.height // 3
        screen.blit(title_surf, title_surf.get_rect(center=(geometry.width // 2, y)))
        for line in lines:
            y += 44
            surf = self._get_font().render(line, True, config.HUD_COLOR)
            screen.blit(surf, surf.get_rect(center=(geometry.width // 2, y)))
