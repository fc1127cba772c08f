import pygame
import pytest

from stage.presentation import Presentation
from stage.scene_registry import SceneKey


class FakePipeline:
    def __init__(self, camera, root):
        self.camera = camera
        self.root = root
        self.frames = 0
        self.resizes = []

    def resize(self, width, height):
        self.resizes.append((width, height))
        self.camera.update_viewport((width, height))

    def render_frame(self):
        self.frames += 1


@pytest.fixture
def presentation():
    return Presentation((800, 600), FakePipeline)


def test_starts_on_the_hero_scene(presentation):
    presentation.frame(0.0, 0.0)
    assert presentation.registry.visible_keys() == [SceneKey.HERO]
    assert presentation.router.active_section == "hero"
    assert presentation.pipeline.frames == 1
    assert len(list(presentation.root.children)) == len(presentation.registry)


def test_resize_reaches_pipeline_and_skips_zero_area(presentation):
    assert presentation.handle_resize((800, 600))
    assert not presentation.handle_resize((0, 0))
    assert not presentation.handle_resize((400, 0))
    assert presentation.handle_resize((400, 300))

    assert presentation.pipeline.resizes == [(800, 600), (400, 300)]
    assert presentation.camera.aspect == pytest.approx(4 / 3)
    assert presentation.layout.max_scroll == 300 * 7


def test_scrolling_into_a_section_switches_scene(presentation):
    presentation.frame(0.0, 0.0)
    presentation.scroller.scroll_to(600.0, immediate=True)
    assert presentation.router.active_section == "hobby"

    presentation.frame(0.9, 0.9)
    assert presentation.registry.visible_keys() == [SceneKey.HOBBY]
    assert presentation.transitions.settled


def test_generic_section_falls_back_to_hero(presentation):
    presentation.frame(0.0, 0.0)
    presentation.scroller.scroll_to(600.0, immediate=True)
    presentation.frame(1.0, 1.0)
    presentation.scroller.scroll_to(1200.0, immediate=True)
    presentation.frame(2.0, 1.0)
    assert presentation.router.active_section == "process"
    assert presentation.registry.visible_keys() == [SceneKey.HERO]


def test_scrolling_back_reactivates_the_section(presentation, monkeypatch):
    calls = []
    monkeypatch.setattr(presentation.transitions, "switch_to", calls.append)

    presentation.scroller.scroll_to(600.0, immediate=True)
    presentation.scroller.scroll_to(1800.0, immediate=True)
    presentation.scroller.scroll_to(600.0, immediate=True)

    assert calls[0] == "hobby"
    assert calls[-1] == "hobby"
    assert "city" in calls


def test_wheel_scrolls_smoothly(presentation):
    presentation.handle_wheel(-1)
    assert presentation.scroller.target == presentation.settings.wheel_step
    assert presentation.scroll == 0.0

    presentation.frame(0.0, 1 / 60)
    assert 0.0 < presentation.scroll < presentation.settings.wheel_step
    for step in range(1, 200):
        presentation.frame(step / 60, 1 / 60)
    assert presentation.scroll == presentation.settings.wheel_step

    presentation.handle_wheel(5)
    assert presentation.scroller.target == 0.0


def test_keyboard_scrolling(presentation):
    assert presentation.handle_key(pygame.K_DOWN)
    assert presentation.scroller.target == presentation.settings.key_step
    assert presentation.handle_key(pygame.K_PAGEDOWN)
    assert presentation.scroller.target == pytest.approx(presentation.settings.key_step + 540.0)
    assert presentation.handle_key(pygame.K_END)
    assert presentation.scroller.target == presentation.layout.max_scroll
    assert presentation.handle_key(pygame.K_HOME)
    assert presentation.scroller.target == 0.0
    assert not presentation.handle_key(pygame.K_a)


def test_pointer_moves_camera_and_cursor(presentation):
    presentation.frame(0.0, 0.0)
    presentation.handle_pointer_move((800, 0))
    assert presentation.cursor.seen_pointer

    presentation.frame(1.0, 1.0)
    assert presentation.camera.position.x == pytest.approx(0.5)
    assert presentation.camera.position.y == pytest.approx(0.5)
    assert presentation.cursor.dot.position == (800.0, 0.0)


def test_loader_hides_after_load(presentation):
    presentation.frame(0.0, 0.0)
    assert presentation.loader.opacity(0.5) == 1.0
    presentation.on_load()
    assert presentation.loader.opacity(0.9) == 1.0
    assert presentation.loader.is_hidden(1.5)
