"""Perspective camera for the scroll stage."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from rendering.scene_graph import Vector3

Vec3 = Tuple[float, float, float]
Size = Tuple[int, int]


def _pan_matrix(position: Vec3) -> np.ndarray:
    """View matrix for a camera looking down -Z: a pure inverse translation."""

    view = np.identity(4, dtype=np.float32)
    view[:3, 3] = [-c for c in position]
    return view


def _perspective_matrix(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    focal = 1.0 / math.tan(math.radians(fov_degrees) * 0.5)
    depth = near - far
    return np.array(
        [
            [focal / aspect, 0.0, 0.0, 0.0],
            [0.0, focal, 0.0, 0.0],
            [0.0, 0.0, (far + near) / depth, (2.0 * far * near) / depth],
            [0.0, 0.0, -1.0, 0.0],
        ],
        dtype=np.float32,
    )


@dataclass
class Camera3D:
    """Camera that always looks down -Z from its (tweenable) position.

    Parallax only moves ``position.x``/``position.y``; the view direction is
    fixed, so the stage pans rather than orbits.
    """

    viewport_size: Size
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 10.0))
    fov: float = 45.0
    near_clip: float = 0.1
    far_clip: float = 100.0

    @property
    def aspect(self) -> float:
        width, height = self.viewport_size
        return width / height if height > 0 else 1.0

    def update_viewport(self, size: Size) -> bool:
        """Adopt ``size``; returns ``False`` for a zero-area viewport."""

        width, height = size
        if width <= 0 or height <= 0:
            return False
        self.viewport_size = (int(width), int(height))
        return True

    def view_matrix(self) -> np.ndarray:
        return _pan_matrix(self.position.as_tuple())

    def projection_matrix(self) -> np.ndarray:
        return _perspective_matrix(self.fov, self.aspect, self.near_clip, self.far_clip)

