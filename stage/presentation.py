"""Wires the stage components together and routes host events into them."""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

import pygame

from rendering.scene_graph import SceneNode, Vector3
from ui.indicators import LoadingOverlay
from ui.layout import PageLayout

from .animation import ProceduralAnimator
from .camera import Camera3D
from .parallax import CursorTrail, PointerParallax
from .render_loop import RenderLoop, RenderPipeline
from .scene_builders import create_default_registry
from .scroll import ScrollObserver, ScrollRouter
from .settings import PresentationSettings
from .smooth_scroll import SmoothScroller
from .transitions import TransitionController
from .tween import TweenEngine

logger = logging.getLogger(__name__)

Size = Tuple[int, int]
Vec2 = Tuple[float, float]
PipelineFactory = Callable[[Camera3D, SceneNode], RenderPipeline]


class Presentation:
    """The whole scroll-driven stage minus the window and GL context."""

    def __init__(
        self,
        window_size: Size,
        pipeline_factory: PipelineFactory,
        settings: Optional[PresentationSettings] = None,
    ) -> None:
        self.settings = settings or PresentationSettings()
        settings = self.settings

        self.registry = create_default_registry(settings)
        self.root = SceneNode("stage")
        for scene in self.registry:
            self.root.add(scene.group)

        self.camera = Camera3D(
            viewport_size=window_size,
            position=Vector3(0.0, 0.0, settings.camera_distance),
            fov=settings.camera_fov,
        )
        self.pipeline = pipeline_factory(self.camera, self.root)
        self.tweens = TweenEngine()
        self.transitions = TransitionController(self.registry, self.tweens, settings)

        self.layout = PageLayout(window_size, settings.sections, settings.section_height_ratio)
        self.observer = ScrollObserver(self.layout)
        self.router = ScrollRouter(
            self.observer, self.transitions, settings.sections, settings.section_aliases
        )
        self.scroller = SmoothScroller(self.layout.max_scroll, settings.smooth_scroll_lerp)
        self.scroller.subscribe(self.observer.update)
        self.observer.update(self.scroller.current)

        self.parallax = PointerParallax(
            self.camera, self.tweens, window_size, settings.parallax_duration
        )
        self.cursor = CursorTrail(self.tweens, settings)
        self.loader = LoadingOverlay(settings.loader_delay, settings.loader_fade)
        self.loop = RenderLoop(ProceduralAnimator(self.registry), self.tweens, self.pipeline)

    # ------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------
    @property
    def scroll(self) -> float:
        return self.scroller.current

    @property
    def elapsed(self) -> float:
        return self.loop.elapsed

    def handle_wheel(self, wheel_y: float) -> None:
        # pygame reports positive ``y`` when the wheel moves away from the user.
        self.scroller.scroll_by(-wheel_y * self.settings.wheel_step)

    def handle_key(self, key: int) -> bool:
        """Keyboard scrolling; returns ``True`` if the key was consumed."""

        page = self.layout.viewport_height * 0.9
        if key == pygame.K_DOWN:
            self.scroller.scroll_by(self.settings.key_step)
        elif key == pygame.K_UP:
            self.scroller.scroll_by(-self.settings.key_step)
        elif key in (pygame.K_PAGEDOWN, pygame.K_SPACE):
            self.scroller.scroll_by(page)
        elif key == pygame.K_PAGEUP:
            self.scroller.scroll_by(-page)
        elif key == pygame.K_HOME:
            self.scroller.scroll_to(0.0)
        elif key == pygame.K_END:
            self.scroller.scroll_to(self.layout.max_scroll)
        else:
            return False
        return True

    def handle_pointer_move(self, pointer: Vec2) -> None:
        self.parallax.on_pointer_move(pointer)
        self.cursor.on_pointer_move(pointer)

    def handle_resize(self, size: Size) -> bool:
        width, height = size
        if width <= 0 or height <= 0:
            logger.debug("Ignoring zero-area resize %dx%d", width, height)
            return False
        self.pipeline.resize(width, height)
        self.layout.update((width, height))
        self.observer.refresh()
        self.scroller.set_limit(self.layout.max_scroll)
        self.parallax.update_viewport((width, height))
        return True

    def on_load(self) -> None:
        self.loader.mark_loaded(self.loop.elapsed)

    def frame(self, now: float, dt: float) -> None:
        """Advance scrolling, then tick tweens, motion and the compositor."""

        self.scroller.step(dt)
        self.loop.tick(now)
