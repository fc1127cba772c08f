"""Lightweight scene graph nodes for the scroll stage renderer."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .wireframe_primitives import PointCloud, WireframeMesh

Vec3 = Tuple[float, float, float]
Color = Tuple[float, float, float, float]


@dataclass
class Vector3:
    """Mutable xyz triple so tweens can write components in place."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def set_scalar(self, value: float) -> "Vector3":
        return self.set(value, value, value)

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)

    def is_close(self, other: Vec3, tolerance: float = 1e-6) -> bool:
        return all(abs(a - b) <= tolerance for a, b in zip(self.as_tuple(), other))


def _rotation_matrix(rotation: Vector3) -> np.ndarray:
    """Euler rotation applied X first, then Y, then Z."""

    cx, sx = math.cos(rotation.x), math.sin(rotation.x)
    cy, sy = math.cos(rotation.y), math.sin(rotation.y)
    cz, sz = math.cos(rotation.z), math.sin(rotation.z)
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]], dtype=np.float32)
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]], dtype=np.float32)
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]], dtype=np.float32)
    return rot_z @ rot_y @ rot_x


@dataclass
class SceneNode:
    """A transformable group that may carry a mesh or a point cloud."""

    name: str
    mesh: Optional[WireframeMesh] = None
    points: Optional[PointCloud] = None
    color: Color = (0.65, 0.85, 1.0, 1.0)
    visible: bool = True
    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    children: List["SceneNode"] = field(default_factory=list)

    def add(self, *nodes: "SceneNode") -> "SceneNode":
        self.children.extend(nodes)
        return self

    def find(self, name: str) -> Optional["SceneNode"]:
        """Depth-first lookup of a descendant (or self) by ``name``."""

        for node in self.walk():
            if node.name == name:
                return node
        return None

    def walk(self) -> Iterator["SceneNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def local_matrix(self) -> np.ndarray:
        matrix = np.identity(4, dtype=np.float32)
        matrix[:3, :3] = _rotation_matrix(self.rotation) @ np.diag(
            np.array(self.scale.as_tuple(), dtype=np.float32)
        )
        matrix[:3, 3] = self.position.as_tuple()
        return matrix

    def visible_draw_list(
        self, parent: Optional[np.ndarray] = None
    ) -> Iterator[Tuple["SceneNode", np.ndarray]]:
        """Yield ``(node, world_matrix)`` for every drawable, visible node.

        Hidden nodes prune their whole subtree.
        """

        if not self.visible:
            return
        world = self.local_matrix() if parent is None else parent @ self.local_matrix()
        if self.mesh is not None or self.points is not None:
            yield self, world
        for child in self.children:
            yield from child.visible_draw_list(world)


def transform_points(matrix: np.ndarray, vertices: np.ndarray) -> np.ndarray:
    """Apply a 4x4 affine ``matrix`` to an ``(n, 3)`` vertex array."""

    if len(vertices) == 0:
        return np.zeros((0, 3), dtype=np.float32)
    homogeneous = np.hstack([vertices, np.ones((len(vertices), 1), dtype=np.float32)])
    return (homogeneous @ matrix.T)[:, :3]
