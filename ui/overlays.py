"""Screen-space overlays: loader veil, scroll progress bar and cursor trail."""
from __future__ import annotations

import math

from OpenGL import GL as gl

from stage.parallax import CursorTrail

from .indicators import LoadingOverlay, progress_bar_width
from .layout import PageLayout

PROGRESS_BAR_HEIGHT = 3
PROGRESS_BAR_COLOR = (0.0, 0.94, 1.0, 0.9)
CURSOR_DOT_RADIUS = 4.0
CURSOR_RING_RADIUS = 18.0
CURSOR_COLOR = (0.9, 0.98, 1.0, 0.9)


class OverlayRenderer:
    """Draws the overlays on top of the composited stage frame."""

    def draw(
        self,
        layout: PageLayout,
        scroll: float,
        cursor: CursorTrail,
        loader: LoadingOverlay,
        now: float,
    ) -> None:
        width, height = layout.window_size
        gl.glViewport(0, 0, width, height)
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

        self._draw_progress_bar(progress_bar_width(layout, scroll))
        if cursor.seen_pointer:
            self._draw_cursor(cursor)
        opacity = loader.opacity(now)
        if opacity > 0.0:
            self._draw_loader(width, height, opacity, now)

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_MODELVIEW)

    @staticmethod
    def _draw_progress_bar(bar_width: float) -> None:
        if bar_width <= 0.0:
            return
        gl.glColor4f(*PROGRESS_BAR_COLOR)
        gl.glBegin(gl.GL_QUADS)
        gl.glVertex2f(0.0, 0.0)
        gl.glVertex2f(bar_width, 0.0)
        gl.glVertex2f(bar_width, PROGRESS_BAR_HEIGHT)
        gl.glVertex2f(0.0, PROGRESS_BAR_HEIGHT)
        gl.glEnd()

    @staticmethod
    def _draw_cursor(cursor: CursorTrail) -> None:
        gl.glColor4f(*CURSOR_COLOR)
        gl.glBegin(gl.GL_TRIANGLE_FAN)
        gl.glVertex2f(cursor.dot.x, cursor.dot.y)
        for i in range(17):
            angle = (2 * math.pi * i) / 16
            gl.glVertex2f(
                cursor.dot.x + math.cos(angle) * CURSOR_DOT_RADIUS,
                cursor.dot.y + math.sin(angle) * CURSOR_DOT_RADIUS,
            )
        gl.glEnd()

        gl.glLineWidth(1.5)
        gl.glBegin(gl.GL_LINE_LOOP)
        for i in range(48):
            angle = (2 * math.pi * i) / 48
            gl.glVertex2f(
                cursor.ring.x + math.cos(angle) * CURSOR_RING_RADIUS,
                cursor.ring.y + math.sin(angle) * CURSOR_RING_RADIUS,
            )
        gl.glEnd()

    @staticmethod
    def _draw_loader(width: int, height: int, opacity: float, now: float) -> None:
        gl.glColor4f(0.02, 0.02, 0.02, opacity)
        gl.glBegin(gl.GL_QUADS)
        gl.glVertex2f(0.0, 0.0)
        gl.glVertex2f(width, 0.0)
        gl.glVertex2f(width, height)
        gl.glVertex2f(0.0, height)
        gl.glEnd()

        # Spinner arc
        center_x = width * 0.5
        center_y = height * 0.5
        radius = min(width, height) * 0.05
        start = now * 4.0
        gl.glLineWidth(2.0)
        gl.glColor4f(0.0, 0.94, 1.0, opacity)
        gl.glBegin(gl.GL_LINE_STRIP)
        for i in range(33):
            angle = start + (1.5 * math.pi * i) / 32
            gl.glVertex2f(center_x + math.cos(angle) * radius, center_y + math.sin(angle) * radius)
        gl.glEnd()
