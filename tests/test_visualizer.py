import numpy as np
import pygame
import pytest

import visualizer
from visualizer import algorithm_name, draw_bars, run_sort, shuffled_array, value_to_color


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((200, 100))
    yield surface
    pygame.display.quit()


def test_value_to_color_gradient():
    assert value_to_color(0, 100) == (0, 0, 255)
    assert value_to_color(50, 100) == (0, 255, 0)
    assert value_to_color(100, 100) == (255, 0, 0)


def test_shuffled_array_is_permutation():
    arr = shuffled_array(32, np.random.default_rng(1))
    assert isinstance(arr, list)
    assert sorted(arr) == list(range(1, 33))


def test_algorithm_name():
    assert algorithm_name("quick") == "Quick Sort"
    with pytest.raises(KeyError):
        algorithm_name("merge")


def test_key_bindings_cover_every_algorithm():
    assert sorted(visualizer.KEY_BINDINGS.values()) == sorted(k for _, k in visualizer.ALGORITHMS)


def test_draw_bars(screen):
    draw_bars(screen, [3, 1, 2], [0])
    assert screen.get_at((10, 99))[:3] == visualizer.ACTIVE_COLOR
    draw_bars(screen, [], [])
    assert screen.get_at((10, 99))[:3] == visualizer.BACKGROUND_COLOR


@pytest.mark.parametrize("key", ["bubble", "selection", "insertion", "quick"])
def test_run_sort_finishes_sorted(screen, monkeypatch, key):
    monkeypatch.setattr(visualizer, "FPS", 0)
    monkeypatch.setattr(visualizer, "FINISH_PAUSE_MS", 0)
    steps, ok = run_sort(screen, None, key, size=12, rng=np.random.default_rng(3))
    assert ok
    assert steps > 0


def test_escape_quits_from_idle_loop(monkeypatch):
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    monkeypatch.setattr(pygame.event, "get", lambda: [escape])
    with pytest.raises(SystemExit):
        visualizer.main()
