"""Pointer-driven camera parallax and the trailing cursor markers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .camera import Camera3D
from .easing import power1_out
from .settings import PresentationSettings
from .tween import TweenEngine

Vec2 = Tuple[float, float]
Size = Tuple[int, int]


def pointer_offset(pointer: Vec2, viewport_size: Size) -> Optional[Vec2]:
    """Normalise a pointer to ``[-0.5, 0.5]`` with +y pointing up."""

    width, height = viewport_size
    if width <= 0 or height <= 0:
        return None
    x, y = pointer
    return (x / width - 0.5, -(y / height - 0.5))


class PointerParallax:
    """Eases the camera's x/y towards the pointer's normalised offset."""

    def __init__(
        self,
        camera: Camera3D,
        tweens: TweenEngine,
        viewport_size: Size,
        duration: float = 1.0,
    ) -> None:
        self._camera = camera
        self._tweens = tweens
        self.viewport_size = viewport_size
        self.duration = duration
        self.goal: Vec2 = (camera.position.x, camera.position.y)

    def update_viewport(self, size: Size) -> None:
        if size[0] > 0 and size[1] > 0:
            self.viewport_size = size

    def on_pointer_move(self, pointer: Vec2) -> None:
        offset = pointer_offset(pointer, self.viewport_size)
        if offset is None:
            return
        self.goal = offset
        self._tweens.animate(
            self._camera.position,
            {"x": offset[0], "y": offset[1]},
            self.duration,
            ease=power1_out,
        )


@dataclass
class CursorMarker:
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> Vec2:
        return (self.x, self.y)


class CursorTrail:
    """A quick dot and a lagging ring following the same pointer samples."""

    def __init__(self, tweens: TweenEngine, settings: Optional[PresentationSettings] = None) -> None:
        settings = settings or PresentationSettings()
        self._tweens = tweens
        self.dot = CursorMarker()
        self.ring = CursorMarker()
        self.dot_duration = settings.cursor_dot_duration
        self.ring_duration = settings.cursor_ring_duration
        self.seen_pointer = False

    def on_pointer_move(self, pointer: Vec2) -> None:
        x, y = float(pointer[0]), float(pointer[1])
        if not self.seen_pointer:
            # Start both markers under the pointer instead of sweeping in
            # from the window corner.
            self.dot.x, self.dot.y = x, y
            self.ring.x, self.ring.y = x, y
            self.seen_pointer = True
        self._tweens.animate(self.dot, {"x": x, "y": y}, self.dot_duration)
        self._tweens.animate(self.ring, {"x": x, "y": y}, self.ring_duration)
