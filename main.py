"""Entry point for the Second Ground Studios scroll stage."""
from __future__ import annotations

import logging
from typing import Optional

import pygame

from logging_config import setup_logging
from rendering.draw_system import SceneRenderer
from rendering.opengl_context import initialize_gl, require_container
from stage.presentation import Presentation
from stage.settings import DEFAULT_WINDOW_SIZE, WINDOW_TITLE, PresentationSettings
from ui.overlays import OverlayRenderer
from ui.page_renderer import PageRenderer

logger = logging.getLogger("main")

DISPLAY_FLAGS = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE


def run(settings: Optional[PresentationSettings] = None) -> None:
    settings = settings or PresentationSettings()
    setup_logging()
    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    pygame.display.set_mode(DEFAULT_WINDOW_SIZE, DISPLAY_FLAGS)
    window_size = require_container().get_size()

    initialize_gl(window_size, settings.background_color, settings.fog_density)
    presentation = Presentation(
        window_size,
        lambda camera, root: SceneRenderer(camera, root, settings.glow_strength),
        settings,
    )
    page_renderer = PageRenderer(settings.section_titles)
    overlay_renderer = OverlayRenderer()
    pygame.mouse.set_visible(False)
    logger.info("Stage ready at %dx%d", *window_size)

    clock = pygame.time.Clock()
    loaded = False
    running = True
    while running:
        dt = clock.tick(settings.target_fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN:
                presentation.handle_key(event.key)
            elif event.type == pygame.VIDEORESIZE:
                pygame.display.set_mode(event.size, DISPLAY_FLAGS)
                # A fresh GL surface loses fixed-function state.
                initialize_gl(event.size, settings.background_color, settings.fog_density)
                presentation.handle_resize(event.size)
            elif event.type == pygame.MOUSEWHEEL:
                presentation.handle_wheel(event.y)
            elif event.type == pygame.MOUSEMOTION:
                presentation.handle_pointer_move(event.pos)

        presentation.frame(pygame.time.get_ticks() / 1000.0, dt)
        page_renderer.draw(presentation.layout, presentation.scroll, presentation.router.active_section)
        overlay_renderer.draw(
            presentation.layout,
            presentation.scroll,
            presentation.cursor,
            presentation.loader,
            presentation.elapsed,
        )
        pygame.display.flip()
        if not loaded:
            presentation.on_load()
            loaded = True

    pygame.quit()


if __name__ == "__main__":
    run()
