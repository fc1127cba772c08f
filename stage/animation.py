"""Per-frame procedural motion for the visible scene.

Every law is a pure function of absolute elapsed time, so calling it twice with
the same ``t`` leaves the same transform and frame-rate jitter never builds up.
"""
from __future__ import annotations

import math
from typing import Dict, Optional

from rendering.scene_graph import SceneNode

from .scene_registry import MotionLaw, SceneKey, SceneRegistry

SNOW_NODE = "snow"


def hero_motion(group: SceneNode, t: float) -> None:
    group.rotation.y = t * 0.2
    group.rotation.x = math.sin(t * 0.5) * 0.1


def hobby_motion(group: SceneNode, t: float) -> None:
    group.rotation.y = -t * 0.3


def city_motion(group: SceneNode, t: float) -> None:
    group.rotation.y = t * 0.1


def cards_motion(group: SceneNode, t: float) -> None:
    group.rotation.y = math.sin(t) * 0.2


def neve_motion(group: SceneNode, t: float) -> None:
    # Only the particle field drifts; the group itself stays put.
    snow = group.find(SNOW_NODE)
    if snow is None:
        return
    snow.rotation.y = t * 0.1
    snow.position.y = math.sin(t * 0.5) * 0.5


# The house is deliberately static.
MOTION_LAWS: Dict[SceneKey, Optional[MotionLaw]] = {
    SceneKey.HERO: hero_motion,
    SceneKey.HOBBY: hobby_motion,
    SceneKey.CITY: city_motion,
    SceneKey.CARDS: cards_motion,
    SceneKey.HOUSE: None,
    SceneKey.NEVE: neve_motion,
}


class ProceduralAnimator:
    """Applies each visible scene's motion law for the current frame."""

    def __init__(self, registry: SceneRegistry) -> None:
        self._registry = registry

    def apply(self, elapsed: float) -> int:
        """Animate visible scenes at ``elapsed`` seconds; returns how many moved."""

        animated = 0
        for scene in self._registry:
            if not scene.visible or scene.motion is None:
                continue
            scene.animate(elapsed)
            animated += 1
        return animated
