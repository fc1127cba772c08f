"""Easing curves for tweens, named after their GSAP counterparts."""
from __future__ import annotations

from typing import Callable

EaseFunction = Callable[[float], float]


def linear(progress: float) -> float:
    return progress


def power1_out(progress: float) -> float:
    """Quadratic ease-out; the default curve for property tweens."""

    inverse = 1.0 - progress
    return 1.0 - inverse * inverse


def back_out(overshoot: float = 1.70158) -> EaseFunction:
    """Ease-out that overshoots the target by ``overshoot`` before settling."""

    def ease(progress: float) -> float:
        shifted = progress - 1.0
        return shifted * shifted * ((overshoot + 1.0) * shifted + overshoot) + 1.0

    return ease
