"""Tests for the pygame game mode."""

import pygame
import pytest

from models import EntityCategory
from rockfall.games.game_state import GameState
from games.FallingRocks import config, game_info
from games.FallingRocks.game_mode import FallingRocksMode


def key(event_type, code):
    return pygame.event.Event(event_type, key=code, mod=0)


def press(x, y=300):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(x, y))


def release(x, y=300):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(x, y))


@pytest.fixture
def game(clock):
    return FallingRocksMode(width=800, height=1000, seed=3, clock=clock)


def frame(game, *events):
    game.handle_input(list(events))
    game.update(1 / 60)


class TestMetadata:

    def test_info(self):
        info = FallingRocksMode.get_info()
        assert info['name'] == "Falling Rocks"
        names = [arg['name'] for arg in info['arguments']]
        assert names == ['--width', '--height', '--seed', '--fps', '--fullscreen']

    def test_fps_default_from_config(self):
        fps = [arg for arg in FallingRocksMode.get_arguments() if arg['name'] == '--fps']
        assert len(fps) == 1
        assert fps[0]['default'] == config.FPS

    def test_game_info_matches_mode(self):
        assert game_info.NAME == FallingRocksMode.NAME
        assert game_info.DESCRIPTION == FallingRocksMode.DESCRIPTION
        assert not hasattr(game_info, 'ARGUMENTS')

    def test_factory_filters_options(self):
        game = game_info.get_game_mode(width=400, height=None, seed=1, palette='warm')
        assert isinstance(game, FallingRocksMode)
        assert game.simulation.geometry.width == 400


class TestCommands:

    def test_initial_actions(self, game):
        assert game.state is GameState.NOT_STARTED
        assert [a['id'] for a in game.get_available_actions()] == ['start']
        assert not game.execute_action('restart')

    def test_space_starts(self, game):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        assert game.state is GameState.RUNNING
        assert game.scheduler.tick_count == 1

    def test_space_while_running_does_not_restart(self, game, clock):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        clock.advance(1001)
        frame(game)
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        assert len(game.simulation.entities) == 1

    def test_unknown_action(self, game):
        assert not game.execute_action('fly')

    def test_reset_restarts_running_game(self, game, clock):
        frame(game, key(pygame.KEYDOWN, pygame.K_RETURN))
        clock.advance(1001)
        frame(game)
        game.reset()
        assert game.state is GameState.RUNNING
        assert game.simulation.entities == ()


class TestMovement:

    def test_keyboard_hold_and_release(self, game):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        frame(game, key(pygame.KEYDOWN, pygame.K_LEFT))
        frame(game)
        assert game.simulation.player.x == 364
        frame(game, key(pygame.KEYUP, pygame.K_LEFT))
        assert game.simulation.player.x == 364

    def test_opposite_keys_cancel(self, game):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        frame(game, key(pygame.KEYDOWN, pygame.K_a), key(pygame.KEYDOWN, pygame.K_d))
        assert game.simulation.player.x == 380

    def test_press_that_starts_does_not_steer(self, game):
        frame(game, press(100))
        assert game.state is GameState.RUNNING
        assert game.simulation.player.x == 380

    def test_touch_steers_while_running(self, game):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        frame(game, press(700))
        assert game.simulation.player.x == 388
        frame(game, release(700))
        assert game.simulation.player.x == 388

    def test_resize(self, game):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        frame(game, pygame.event.Event(pygame.VIDEORESIZE, w=400, h=1000, size=(400, 1000)))
        assert game.simulation.geometry.width == 400
        assert game.simulation.player.x == 380
        # touch split follows the new width
        frame(game, press(150))
        assert game.simulation.player.x == 376

    def test_finger_in_wide_window_uses_field_half(self, clock):
        game = FallingRocksMode(width=1600, height=1000, seed=3, clock=clock)
        assert game.simulation.geometry.width == 800
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        # window x 600 is left of the window middle but right of the field middle
        frame(game, pygame.event.Event(pygame.FINGERDOWN, x=0.375, y=0.5, finger_id=0, touch_id=0))
        assert game.simulation.player.x == 388


class TestRender:
    """Smoke tests: every phase draws without a display."""

    @pytest.fixture(autouse=True)
    def headless(self, monkeypatch):
        monkeypatch.setenv('SDL_VIDEODRIVER', 'dummy')
        pygame.font.init()
        yield
        pygame.font.quit()

    @pytest.fixture
    def screen(self):
        return pygame.Surface((800, 1000))

    def test_not_started(self, game, screen):
        game.render(screen)

    def test_running(self, game, clock, screen):
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        for _ in range(8):
            clock.advance(1001)
            frame(game)
        assert game.simulation.entities
        game.render(screen)

    def test_game_over(self, clock, stub_random, screen):
        game = FallingRocksMode(width=800, height=1000, clock=clock,
                                rng=stub_random(EntityCategory.HAZARD, 0.5))
        frame(game, key(pygame.KEYDOWN, pygame.K_SPACE))
        for _ in range(500):
            clock.advance(1001)
            frame(game)
        assert game.state is GameState.GAME_OVER
        game.render(screen)
