"""Frame-driven property tweening.

The engine is advanced once per frame with the current time. Each tween
interpolates numeric attributes of a target object from the values they held
when the tween was created towards the requested end values, then writes the
exact end values and fires ``on_complete`` once.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .easing import EaseFunction, power1_out

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TweenState(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Tween:
    """Handle for a single in-flight interpolation."""

    def __init__(
        self,
        target: Any,
        properties: Mapping[str, Tuple[float, float]],
        start_time: float,
        duration: float,
        ease: EaseFunction,
        on_complete: Optional[Callback] = None,
    ) -> None:
        self.target = target
        self._properties: Dict[str, Tuple[float, float]] = dict(properties)
        self.start_time = start_time
        self.duration = duration
        self.ease = ease
        self._on_complete = on_complete
        self.state = TweenState.RUNNING
        self.progress = 0.0

    @property
    def done(self) -> bool:
        return self.state is not TweenState.RUNNING

    @property
    def property_names(self) -> Tuple[str, ...]:
        return tuple(self._properties)

    def cancel(self) -> None:
        """Stop where it is; ``on_complete`` will not fire."""

        if self.state is TweenState.RUNNING:
            self.state = TweenState.CANCELLED

    def release(self, names: Iterable[str]) -> None:
        """Give up control of ``names``; a tween left with nothing is cancelled."""

        for name in names:
            self._properties.pop(name, None)
        if not self._properties:
            self.cancel()

    def render(self, now: float) -> None:
        if self.state is not TweenState.RUNNING:
            return
        if self.duration <= 0.0:
            raw = 1.0
        else:
            raw = min(1.0, max(0.0, (now - self.start_time) / self.duration))
        self.progress = raw
        if raw >= 1.0:
            for name, (_, end) in self._properties.items():
                setattr(self.target, name, end)
            self.state = TweenState.COMPLETED
            if self._on_complete is not None:
                self._on_complete()
            return
        eased = self.ease(raw)
        for name, (start, end) in self._properties.items():
            setattr(self.target, name, start + (end - start) * eased)


class TweenEngine:
    """Owns every running tween and advances them on ``update``."""

    def __init__(self, now: float = 0.0) -> None:
        self._now = now
        self._tweens: List[Tween] = []

    @property
    def now(self) -> float:
        return self._now

    def __len__(self) -> int:
        return sum(1 for tween in self._tweens if not tween.done)

    def animate(
        self,
        target: Any,
        properties: Mapping[str, float],
        duration: float,
        ease: EaseFunction = power1_out,
        on_complete: Optional[Callback] = None,
        overwrite: bool = True,
    ) -> Tween:
        """Start tweening ``properties`` of ``target`` over ``duration`` seconds.

        With ``overwrite`` the same properties are taken away from any older
        tween on ``target``, so the most recent call decides the end value.
        """

        if duration < 0.0:
            raise ValueError(f"Tween duration must not be negative: {duration}")
        if overwrite:
            for tween in self._tweens:
                if tween.target is target and not tween.done:
                    tween.release(properties.keys())
        spans = {
            name: (float(getattr(target, name)), float(end))
            for name, end in properties.items()
        }
        tween = Tween(target, spans, self._now, duration, ease, on_complete)
        self._tweens.append(tween)
        return tween

    def tweens_of(self, target: Any) -> List[Tween]:
        return [tween for tween in self._tweens if tween.target is target and not tween.done]

    def update(self, now: float) -> None:
        """Advance all tweens to ``now``; time never runs backwards."""

        if now < self._now:
            logger.debug("Ignoring clock regression from %.4f to %.4f", self._now, now)
            now = self._now
        self._now = now
        # Completion callbacks may start new tweens; iterate over a snapshot.
        for tween in list(self._tweens):
            tween.render(now)
        self._tweens = [tween for tween in self._tweens if not tween.done]

    def advance(self, dt: float) -> None:
        self.update(self._now + dt)
