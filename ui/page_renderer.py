"""Draws the page's section headings at their scrolled positions."""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

import pygame
from OpenGL import GL as gl

from .layout import PageLayout

TITLE_COLOR = (230, 235, 255)
SUBTITLE_COLOR = (120, 200, 230)


class PageRenderer:
    """Overlay text for each section, scrolled with the page."""

    def __init__(self, titles: Mapping[str, str]) -> None:
        pygame.font.init()
        self._titles = dict(titles)
        self._title_font = pygame.font.SysFont("Consolas", 56)
        self._label_font = pygame.font.SysFont("Consolas", 20)
        self._surface_cache: Dict[Tuple[str, int, Tuple[int, int, int]], pygame.Surface] = {}
        self._viewport_height = 0

    def draw(self, layout: PageLayout, scroll: float, active_section: Optional[str]) -> None:
        width, height = layout.window_size
        gl.glViewport(0, 0, width, height)
        self._viewport_height = height
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPushMatrix()
        gl.glLoadIdentity()
        gl.glOrtho(0, width, height, 0, -1, 1)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glPushMatrix()
        gl.glLoadIdentity()
        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_FOG)
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)

        viewport = layout.viewport_rect
        for index, section_id in enumerate(layout.section_ids):
            rect = layout.to_screen(layout.section_rect(section_id), scroll)
            if not rect.colliderect(viewport):
                continue
            title = self._titles.get(section_id, section_id.title())
            label = f"{index + 1:02d} / {section_id.upper()}"
            label_color = TITLE_COLOR if section_id == active_section else SUBTITLE_COLOR
            self._draw_text(rect.left + 64, rect.centery - 70, label, self._label_font, label_color)
            self._draw_text(rect.left + 64, rect.centery - 40, title, self._title_font, TITLE_COLOR)

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_MODELVIEW)

    def _render_surface(
        self, text: str, font: pygame.font.Font, color: Tuple[int, int, int]
    ) -> pygame.Surface:
        key = (text, id(font), color)
        surface = self._surface_cache.get(key)
        if surface is None:
            surface = font.render(text, True, color)
            self._surface_cache[key] = surface
        return surface

    def _draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font: pygame.font.Font,
        color: Tuple[int, int, int],
    ) -> None:
        surface = self._render_surface(text, font, color)
        if y < 0 or y + surface.get_height() > self._viewport_height:
            # glRasterPos drops the whole bitmap once its origin leaves the view.
            return
        data = pygame.image.tostring(surface, "RGBA", True)
        gl.glRasterPos2f(x, y + surface.get_height())
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
