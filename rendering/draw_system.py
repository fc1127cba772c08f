"""Wireframe renderer that composites the stage's scene graph."""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

import numpy as np
from OpenGL import GL as gl

from stage.camera import Camera3D
from .opengl_context import resize_viewport
from .scene_graph import SceneNode, transform_points

logger = logging.getLogger(__name__)

Color = Tuple[float, float, float, float]


class SceneRenderer:
    """Renders every visible node under ``root`` from ``camera``.

    Each frame runs two passes over the same geometry: a wide, faint glow
    pass standing in for bloom, then the crisp line pass.
    """

    def __init__(self, camera: Camera3D, root: SceneNode, glow_strength: float = 0.35) -> None:
        self.camera = camera
        self.root = root
        self.glow_strength = glow_strength
        self.size: Tuple[int, int] = camera.viewport_size
        self.frames_rendered = 0

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            logger.debug("Skipping resize to zero-area container %dx%d", width, height)
            return
        self.size = (width, height)
        self.camera.update_viewport(self.size)
        resize_viewport(self.size)
        logger.info("Stage resized to %dx%d (aspect %.3f)", width, height, self.camera.aspect)

    def render_frame(self) -> None:
        width, height = self.size
        gl.glViewport(0, 0, width, height)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glEnable(gl.GL_FOG)
        gl.glEnable(gl.GL_DEPTH_TEST)
        self._apply_camera(self.camera)

        draw_list = list(self.root.visible_draw_list())
        if self.glow_strength > 0.0:
            gl.glDepthMask(gl.GL_FALSE)
            self._draw_pass(draw_list, line_width=5.0, point_scale=3.0, alpha=self.glow_strength)
            gl.glDepthMask(gl.GL_TRUE)
        self._draw_pass(draw_list, line_width=1.5, point_scale=1.0, alpha=1.0)
        self.frames_rendered += 1

    def _apply_camera(self, camera: Camera3D) -> None:
        projection = camera.projection_matrix()
        view = camera.view_matrix()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixf(np.transpose(projection).flatten())
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixf(np.transpose(view).flatten())

    def _draw_pass(
        self,
        draw_list: Iterable[Tuple[SceneNode, np.ndarray]],
        *,
        line_width: float,
        point_scale: float,
        alpha: float,
    ) -> None:
        gl.glLineWidth(line_width)
        for node, world in draw_list:
            color = (node.color[0], node.color[1], node.color[2], node.color[3] * alpha)
            if node.mesh is not None:
                self._draw_lines(transform_points(world, node.mesh.vertex_array()), node.mesh.segments, color)
            if node.points is not None:
                gl.glPointSize(node.points.point_size * point_scale)
                self._draw_points(transform_points(world, node.points.positions), color)

    @staticmethod
    def _draw_lines(
        vertices: np.ndarray, segments: Iterable[Tuple[int, int]], color: Color
    ) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_LINES)
        for start_index, end_index in segments:
            gl.glVertex3f(*vertices[start_index])
            gl.glVertex3f(*vertices[end_index])
        gl.glEnd()

    @staticmethod
    def _draw_points(vertices: np.ndarray, color: Color) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_POINTS)
        for vertex in vertices:
            gl.glVertex3f(*vertex)
        gl.glEnd()
