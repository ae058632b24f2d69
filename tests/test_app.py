from unittest import mock

import numpy as np
import pygame
import pytest

from wireframe.app import Viewer, main
from wireframe.projection import Key, pixel_spacing
from wireframe.reader import load_map

MAP_TEXT = "0 0 0 0\n0 10 10 0\n0 10 10 0\n0 0 0 0\n"


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "sample.fdf"
    path.write_text(MAP_TEXT)
    return path


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def _quit():
    return pygame.event.Event(pygame.QUIT)


def test_key_for_interactive(map_file):
    viewer = Viewer(load_map(map_file), interactive=True)
    assert viewer.key_for(pygame.K_ESCAPE) == Key.ESC
    assert viewer.key_for(pygame.K_KP8) == Key.X_TOP
    assert viewer.key_for(pygame.K_i) == Key.ZM_IN
    assert viewer.key_for(pygame.K_c) == Key.COLOR
    assert viewer.key_for(pygame.K_F1) is None


def test_key_for_basic_only_escape(map_file):
    viewer = Viewer(load_map(map_file), interactive=False)
    assert viewer.key_for(pygame.K_ESCAPE) == Key.ESC
    assert viewer.key_for(pygame.K_i) is None
    assert viewer.key_for(pygame.K_UP) is None


def test_viewer_renders_on_creation(map_file):
    height_map = load_map(map_file)
    viewer = Viewer(height_map, interactive=True)
    assert viewer.pix_space == pixel_spacing(len(height_map), height_map.max_row())
    assert np.count_nonzero(viewer.canvas.pixels) > 0


def test_run_applies_zoom_then_quits(map_file, dummy_video):
    viewer = Viewer(load_map(map_file), interactive=True)
    events = [[_key(pygame.K_i)], [_quit()]]
    with mock.patch("pygame.event.get", side_effect=events):
        viewer.run()
    assert viewer.view.zoom_alpha == pytest.approx(1.1, rel=1e-6)
    assert np.count_nonzero(viewer.canvas.pixels) > 0


def test_run_colour_key_and_escape(map_file, dummy_video):
    viewer = Viewer(load_map(map_file), interactive=True)
    events = [[_key(pygame.K_c), _key(pygame.K_ESCAPE)]]
    with mock.patch("pygame.event.get", side_effect=events):
        viewer.run()
    assert viewer.view.colored is True


def test_basic_viewer_ignores_navigation(map_file, dummy_video):
    viewer = Viewer(load_map(map_file), interactive=False)
    before = viewer.canvas.pixels.copy()
    events = [[_key(pygame.K_i), _key(pygame.K_ESCAPE)]]
    with mock.patch("pygame.event.get", side_effect=events):
        viewer.run()
    assert viewer.view.zoom_alpha == 1.0
    assert np.array_equal(viewer.canvas.pixels, before)


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.fdf")]) == 1


def test_main_wrong_argument_count():
    assert main([]) == 1
    assert main(["a.fdf", "b.fdf"]) == 1


def test_main_bad_suffix(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(MAP_TEXT)
    assert main([str(path)]) == 1


def test_main_invalid_map(tmp_path):
    path = tmp_path / "broken.fdf"
    path.write_text("0 a 0\n0 0 0\n")
    assert main([str(path)]) == 1


def test_main_runs_and_returns_zero(map_file, dummy_video):
    with mock.patch("pygame.event.get", side_effect=[[_quit()]]):
        assert main([str(map_file)]) == 0


def test_main_basic_flag(map_file, dummy_video):
    with mock.patch("pygame.event.get", side_effect=[[_key(pygame.K_ESCAPE)]]):
        assert main(["--basic", str(map_file)]) == 0