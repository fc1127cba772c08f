"""OpenGL context helpers for the stage's wireframe rendering."""
from __future__ import annotations

from typing import Tuple

import pygame
from OpenGL import GL as gl


BACKGROUND_COLOR = (5 / 255, 5 / 255, 5 / 255, 1.0)


class ContainerMissingError(RuntimeError):
    """The window surface the stage renders into does not exist."""


def require_container() -> pygame.Surface:
    """Return the active display surface or fail loudly."""

    surface = pygame.display.get_surface()
    if surface is None:
        raise ContainerMissingError("No pygame display surface to attach the stage to")
    width, height = surface.get_size()
    if width <= 0 or height <= 0:
        raise ContainerMissingError(f"Display surface has no area: {width}x{height}")
    return surface


def initialize_gl(
    surface_size: Tuple[int, int],
    background: Tuple[float, float, float, float] = BACKGROUND_COLOR,
    fog_density: float = 0.04,
) -> None:
    """Configure fixed-function state: depth, alpha blending and exp2 fog."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
    gl.glClearColor(*background)

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glDepthFunc(gl.GL_LEQUAL)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glEnable(gl.GL_LINE_SMOOTH)
    gl.glLineWidth(1.5)

    gl.glFogi(gl.GL_FOG_MODE, gl.GL_EXP2)
    gl.glFogfv(gl.GL_FOG_COLOR, background)
    gl.glFogf(gl.GL_FOG_DENSITY, fog_density)
    gl.glEnable(gl.GL_FOG)


def resize_viewport(surface_size: Tuple[int, int]) -> None:
    """Update the viewport when the window changes size."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
