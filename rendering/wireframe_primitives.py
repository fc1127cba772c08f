"""Static wireframe meshes used by the stage scenes."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np


Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class WireframeMesh:
    """Simple container for line segments connecting vertex indices."""

    vertices: Sequence[Vec3]
    segments: Sequence[Tuple[int, int]]

    def vertex_array(self) -> np.ndarray:
        return np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3)


@dataclass(frozen=True)
class PointCloud:
    """Unconnected points rendered as sprites (the snow field)."""

    positions: np.ndarray
    point_size: float = 2.0

    def __len__(self) -> int:
        return len(self.positions)


def _loop_segments(vertex_count: int) -> List[Tuple[int, int]]:
    return [(i, (i + 1) % vertex_count) for i in range(vertex_count)]


def create_box_mesh(width: float, height: float, depth: float) -> WireframeMesh:
    """Axis-aligned box centred on the origin."""

    hw, hh, hd = width / 2.0, height / 2.0, depth / 2.0
    vertices: List[Vec3] = [
        (-hw, -hh, -hd),
        (hw, -hh, -hd),
        (hw, -hh, hd),
        (-hw, -hh, hd),
        (-hw, hh, -hd),
        (hw, hh, -hd),
        (hw, hh, hd),
        (-hw, hh, hd),
    ]
    segments = _loop_segments(4)
    segments.extend((a + 4, b + 4) for a, b in _loop_segments(4))
    segments.extend((i, i + 4) for i in range(4))
    return WireframeMesh(vertices, segments)


def create_cone_mesh(
    radius: float, height: float, radial_segments: int = 4
) -> WireframeMesh:
    """Cone with its apex on +Y; four radial segments give a pyramid roof."""

    half = height / 2.0
    vertices: List[Vec3] = [(0.0, half, 0.0)]
    for i in range(radial_segments):
        angle = (2 * math.pi * i) / radial_segments
        vertices.append((math.sin(angle) * radius, -half, math.cos(angle) * radius))
    segments = [(1 + a, 1 + b) for a, b in _loop_segments(radial_segments)]
    segments.extend((0, 1 + i) for i in range(radial_segments))
    return WireframeMesh(vertices, segments)


def _icosahedron_base() -> Tuple[List[Vec3], List[Tuple[int, int, int]]]:
    t = (1.0 + math.sqrt(5.0)) / 2.0
    vertices: List[Vec3] = [
        (-1.0, t, 0.0),
        (1.0, t, 0.0),
        (-1.0, -t, 0.0),
        (1.0, -t, 0.0),
        (0.0, -1.0, t),
        (0.0, 1.0, t),
        (0.0, -1.0, -t),
        (0.0, 1.0, -t),
        (t, 0.0, -1.0),
        (t, 0.0, 1.0),
        (-t, 0.0, -1.0),
        (-t, 0.0, 1.0),
    ]
    faces = [
        (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
        (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
        (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
        (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
    ]
    return vertices, faces


def create_icosahedron_mesh(radius: float = 2.0, detail: int = 0) -> WireframeMesh:
    """Geodesic sphere: an icosahedron with each face split ``detail`` times."""

    base_vertices, faces = _icosahedron_base()
    vertices: List[Vec3] = []
    index_of: Dict[Tuple[int, int, int], int] = {}

    def add_vertex(point: Vec3) -> int:
        length = math.sqrt(point[0] ** 2 + point[1] ** 2 + point[2] ** 2)
        projected = tuple(c / length * radius for c in point)
        key = tuple(int(round(c * 1e5)) for c in projected)
        if key not in index_of:
            index_of[key] = len(vertices)
            vertices.append(projected)  # type: ignore[arg-type]
        return index_of[key]

    segments: List[Tuple[int, int]] = []
    seen = set()

    def add_segment(a: int, b: int) -> None:
        key = (min(a, b), max(a, b))
        if a == b or key in seen:
            return
        seen.add(key)
        segments.append((a, b))

    steps = detail + 1
    for face in faces:
        a, b, c = (base_vertices[i] for i in face)
        # Barycentric grid across the face; row i holds steps - i + 1 points.
        grid: List[List[int]] = []
        for i in range(steps + 1):
            row: List[int] = []
            for j in range(steps - i + 1):
                u = i / steps
                v = j / steps
                w = 1.0 - u - v
                point = (
                    a[0] * w + b[0] * u + c[0] * v,
                    a[1] * w + b[1] * u + c[1] * v,
                    a[2] * w + b[2] * u + c[2] * v,
                )
                row.append(add_vertex(point))
            grid.append(row)
        for i in range(steps):
            for j in range(steps - i):
                p0 = grid[i][j]
                p1 = grid[i + 1][j]
                p2 = grid[i][j + 1]
                add_segment(p0, p1)
                add_segment(p1, p2)
                add_segment(p2, p0)
    return WireframeMesh(vertices, segments)


def create_point_cloud(
    count: int,
    spread: float,
    rng: Optional[random.Random] = None,
    point_size: float = 2.0,
) -> PointCloud:
    """Uniformly scatter ``count`` points inside a cube of side ``spread``."""

    rng = rng or random.Random()
    coords = [(rng.random() - 0.5) * spread for _ in range(count * 3)]
    positions = np.asarray(coords, dtype=np.float32).reshape(count, 3)
    return PointCloud(positions, point_size=point_size)
