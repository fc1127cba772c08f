"""Smooth-scroll emulation: wheel input eases the page towards its target."""
from __future__ import annotations

import math
from typing import Callable, List

ScrollListener = Callable[[float], None]

SNAP_DISTANCE = 0.5
REFERENCE_FPS = 60.0


class SmoothScroller:
    """Damps the visible scroll position towards a wheel-driven target.

    ``lerp`` is the fraction of the remaining distance covered per frame at
    60 fps; other frame rates use the equivalent exponential decay.
    """

    def __init__(self, max_scroll: float = 0.0, lerp: float = 0.1) -> None:
        if not 0.0 < lerp <= 1.0:
            raise ValueError(f"lerp must be in (0, 1]: {lerp}")
        self.lerp = lerp
        self.max_scroll = max(0.0, max_scroll)
        self.current = 0.0
        self.target = 0.0
        self._listeners: List[ScrollListener] = []

    def subscribe(self, listener: ScrollListener) -> None:
        self._listeners.append(listener)

    def set_limit(self, max_scroll: float) -> None:
        self.max_scroll = max(0.0, max_scroll)
        self.target = self._clamp(self.target)
        clamped = self._clamp(self.current)
        if clamped != self.current:
            self.current = clamped
            self._publish()

    def scroll_by(self, delta: float) -> None:
        self.target = self._clamp(self.target + delta)

    def scroll_to(self, value: float, immediate: bool = False) -> None:
        self.target = self._clamp(value)
        if immediate and self.current != self.target:
            self.current = self.target
            self._publish()

    @property
    def is_moving(self) -> bool:
        return self.current != self.target

    def step(self, dt: float) -> float:
        """Advance the damping by ``dt`` seconds and publish any change."""

        if self.current == self.target:
            return self.current
        factor = 1.0 - math.pow(1.0 - self.lerp, max(0.0, dt) * REFERENCE_FPS)
        moved = self.current + (self.target - self.current) * factor
        if abs(self.target - moved) < SNAP_DISTANCE:
            moved = self.target
        self.current = moved
        self._publish()
        return self.current

    def _clamp(self, value: float) -> float:
        return max(0.0, min(self.max_scroll, value))

    def _publish(self) -> None:
        for listener in self._listeners:
            listener(self.current)
