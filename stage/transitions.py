"""Scale-based scene switching.

Only this controller changes a scene's ``visible`` flag or scale after
start-up. An exiting scene shrinks to zero and is hidden when its tween
finishes; the incoming scene is shown immediately and pops in from zero with
a back-out overshoot. While both run, two scenes are visible at once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from .easing import back_out, power1_out
from .scene_registry import Scene, SceneKey, SceneRegistry
from .settings import PresentationSettings
from .tween import Tween, TweenEngine

logger = logging.getLogger(__name__)

HIDDEN_SCALE = {"x": 0.0, "y": 0.0, "z": 0.0}
SHOWN_SCALE = {"x": 1.0, "y": 1.0, "z": 1.0}


class TransitionKind(Enum):
    ENTER = "enter"
    EXIT = "exit"


@dataclass
class Transition:
    """One scene's in-flight scale animation."""

    scene_key: SceneKey
    kind: TransitionKind
    tween: Tween

    @property
    def done(self) -> bool:
        return self.tween.done


class TransitionController:
    """Enacts scene switches against a :class:`SceneRegistry`."""

    def __init__(
        self,
        registry: SceneRegistry,
        tweens: TweenEngine,
        settings: Optional[PresentationSettings] = None,
    ) -> None:
        settings = settings or PresentationSettings()
        self._registry = registry
        self._tweens = tweens
        self.exit_duration = settings.exit_duration
        self.entry_duration = settings.entry_duration
        self._entry_ease = back_out(settings.entry_overshoot)
        self._in_flight: Dict[SceneKey, Transition] = {}
        self.active_key: Optional[SceneKey] = SceneKey.parse(settings.initial_scene)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_flight(self, key: Union[SceneKey, str]) -> Optional[Transition]:
        scene_key = SceneKey.parse(key)
        if scene_key is None:
            return None
        transition = self._in_flight.get(scene_key)
        if transition is not None and transition.done:
            return None
        return transition

    def pending(self) -> List[Transition]:
        return [t for t in self._in_flight.values() if not t.done]

    @property
    def settled(self) -> bool:
        return not self.pending()

    def is_exiting(self, key: Union[SceneKey, str]) -> bool:
        transition = self.in_flight(key)
        return transition is not None and transition.kind is TransitionKind.EXIT

    def is_entering(self, key: Union[SceneKey, str]) -> bool:
        transition = self.in_flight(key)
        return transition is not None and transition.kind is TransitionKind.ENTER

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------
    def switch_to(self, key: Union[SceneKey, str]) -> bool:
        """Make ``key`` the active scene; returns ``False`` for unknown keys."""

        target = self._registry.find(key)
        if target is None:
            logger.debug("No scene for key %r; keeping %s", key, self.active_key)
            return False

        if target.visible and not self.is_exiting(target.key):
            # Already shown or still popping in; any outgoing scene keeps shrinking.
            logger.debug("Scene %s already active", target.key.value)
            self.active_key = target.key
            return True

        for scene in self._registry:
            if scene is target or not scene.visible:
                continue
            if self.is_exiting(scene.key):
                self._finish_exit_now(scene)
            else:
                self._start_exit(scene)

        self._start_entry(target)
        self.active_key = target.key
        return True

    def _start_exit(self, scene: Scene) -> None:
        self._supersede(scene.key)
        logger.debug("Exiting scene %s", scene.key.value)

        def hide() -> None:
            scene.visible = False
            self._forget(scene.key, transition)

        tween = self._tweens.animate(
            scene.scale,
            HIDDEN_SCALE,
            self.exit_duration,
            ease=power1_out,
            on_complete=hide,
        )
        transition = Transition(scene.key, TransitionKind.EXIT, tween)
        self._in_flight[scene.key] = transition

    def _finish_exit_now(self, scene: Scene) -> None:
        """Hide a scene that was still shrinking when a newer switch arrived."""

        self._supersede(scene.key)
        scene.scale.set_scalar(0.0)
        scene.visible = False

    def _start_entry(self, scene: Scene) -> None:
        self._supersede(scene.key)
        logger.debug("Entering scene %s", scene.key.value)
        scene.visible = True
        scene.scale.set_scalar(0.0)

        def settle() -> None:
            self._forget(scene.key, transition)

        tween = self._tweens.animate(
            scene.scale,
            SHOWN_SCALE,
            self.entry_duration,
            ease=self._entry_ease,
            on_complete=settle,
        )
        transition = Transition(scene.key, TransitionKind.ENTER, tween)
        self._in_flight[scene.key] = transition

    def _supersede(self, key: SceneKey) -> None:
        previous = self._in_flight.pop(key, None)
        if previous is not None:
            previous.tween.cancel()

    def _forget(self, key: SceneKey, transition: Transition) -> None:
        if self._in_flight.get(key) is transition:
            del self._in_flight[key]
