"""The per-frame tick that drives tweens, scene motion and the compositor."""
from __future__ import annotations

from typing import Optional, Protocol

from .animation import ProceduralAnimator
from .camera import Camera3D
from .tween import TweenEngine


class RenderPipeline(Protocol):
    camera: Camera3D

    def resize(self, width: int, height: int) -> None:
        ...

    def render_frame(self) -> None:
        ...


class RenderLoop:
    """One ``tick`` per display refresh; there is no stop condition of its own."""

    def __init__(
        self,
        animator: ProceduralAnimator,
        tweens: TweenEngine,
        pipeline: RenderPipeline,
    ) -> None:
        self._animator = animator
        self._tweens = tweens
        self._pipeline = pipeline
        self._start: Optional[float] = None
        self.frame_count = 0
        self.elapsed = 0.0

    def tick(self, now: float) -> float:
        """Render one frame at absolute time ``now``; returns elapsed seconds."""

        if self._start is None:
            self._start = now
        self.elapsed = now - self._start
        self._tweens.update(self.elapsed)
        self._animator.apply(self.elapsed)
        self._pipeline.render_frame()
        self.frame_count += 1
        return self.elapsed
