"""Registry of the stage's fixed set of scenes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Union

from rendering.scene_graph import SceneNode, Vector3

MotionLaw = Callable[[SceneNode, float], None]


class SceneKey(str, Enum):
    HERO = "hero"
    HOBBY = "hobby"
    CITY = "city"
    CARDS = "cards"
    HOUSE = "house"
    NEVE = "neve"

    @classmethod
    def parse(cls, value: Union["SceneKey", str]) -> Optional["SceneKey"]:
        """Return the key for ``value`` or ``None`` if no scene uses it."""

        if isinstance(value, SceneKey):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class SceneNotFoundError(KeyError):
    """Raised when a lookup names a scene the registry does not hold."""


class RegistrySealedError(RuntimeError):
    """Raised when registering a scene after start-up has finished."""


@dataclass
class Scene:
    """A named scene: the group it renders plus its motion law.

    ``visible`` and ``scale`` live on the group so what the renderer draws and
    what the transition controller believes can never disagree.
    """

    key: SceneKey
    group: SceneNode
    motion: Optional[MotionLaw] = None

    @property
    def visible(self) -> bool:
        return self.group.visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self.group.visible = value

    @property
    def scale(self) -> Vector3:
        return self.group.scale

    def animate(self, elapsed: float) -> None:
        if self.motion is not None:
            self.motion(self.group, elapsed)


class SceneRegistry:
    """Fixed mapping of :class:`SceneKey` to :class:`Scene`."""

    def __init__(self) -> None:
        self._scenes: Dict[SceneKey, Scene] = {}
        self._sealed = False

    def register(self, scene: Scene) -> None:
        if self._sealed:
            raise RegistrySealedError(f"Registry is sealed; cannot add {scene.key.value}")
        if scene.key in self._scenes:
            raise ValueError(f"Scene already registered: {scene.key.value}")
        scene.visible = False
        self._scenes[scene.key] = scene

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def activate_initial(self, key: Union[SceneKey, str]) -> Scene:
        """Show ``key`` at full scale and hide everything else."""

        initial = self.get(key)
        for scene in self:
            scene.visible = scene is initial
            scene.scale.set_scalar(1.0 if scene is initial else 0.0)
        return initial

    def get(self, key: Union[SceneKey, str]) -> Scene:
        """Look up a scene by key, raising :class:`SceneNotFoundError`."""

        scene = self.find(key)
        if scene is None:
            raise SceneNotFoundError(f"Unknown scene: {key}")
        return scene

    def find(self, key: Union[SceneKey, str]) -> Optional[Scene]:
        scene_key = SceneKey.parse(key)
        if scene_key is None:
            return None
        return self._scenes.get(scene_key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.find(key) is not None

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[Scene]:
        for key in SceneKey:
            scene = self._scenes.get(key)
            if scene is not None:
                yield scene

    def for_each(self, fn: Callable[[Scene], None]) -> None:
        for scene in self:
            fn(scene)

    def visible_keys(self) -> List[SceneKey]:
        return [scene.key for scene in self if scene.visible]
