import pytest

from rendering.scene_graph import SceneNode
from stage.scene_builders import create_default_registry
from stage.scene_registry import (
    RegistrySealedError,
    Scene,
    SceneKey,
    SceneNotFoundError,
    SceneRegistry,
)


def _registry(*keys):
    registry = SceneRegistry()
    for key in keys:
        registry.register(Scene(key=key, group=SceneNode(key.value)))
    return registry


def test_get_unknown_scene_raises_not_found():
    registry = _registry(SceneKey.HERO)
    with pytest.raises(SceneNotFoundError):
        registry.get("nonexistent")
    with pytest.raises(KeyError):
        registry.get(SceneKey.CITY)


def test_find_accepts_strings_and_keys():
    registry = _registry(SceneKey.HERO, SceneKey.HOBBY)
    assert registry.find("hobby") is registry.get(SceneKey.HOBBY)
    assert registry.find("process") is None
    assert "hero" in registry
    assert "contact" not in registry


def test_registration_hides_scenes_and_rejects_duplicates():
    registry = SceneRegistry()
    scene = Scene(key=SceneKey.HERO, group=SceneNode("hero"))
    assert scene.visible
    registry.register(scene)
    assert not scene.visible
    with pytest.raises(ValueError):
        registry.register(Scene(key=SceneKey.HERO, group=SceneNode("again")))


def test_sealed_registry_cannot_grow():
    registry = _registry(SceneKey.HERO)
    registry.seal()
    with pytest.raises(RegistrySealedError):
        registry.register(Scene(key=SceneKey.CITY, group=SceneNode("city")))


def test_iteration_follows_key_declaration_order():
    registry = _registry(SceneKey.NEVE, SceneKey.CITY, SceneKey.HERO)
    assert [scene.key for scene in registry] == [SceneKey.HERO, SceneKey.CITY, SceneKey.NEVE]
    seen = []
    registry.for_each(lambda scene: seen.append(scene.key))
    assert seen == [SceneKey.HERO, SceneKey.CITY, SceneKey.NEVE]


def test_activate_initial_shows_only_that_scene():
    registry = _registry(SceneKey.HERO, SceneKey.HOBBY, SceneKey.CITY)
    registry.activate_initial("hobby")
    assert registry.visible_keys() == [SceneKey.HOBBY]
    assert registry.get("hobby").scale.is_close((1.0, 1.0, 1.0))
    assert registry.get("hero").scale.is_close((0.0, 0.0, 0.0))


def test_default_registry_holds_every_scene_with_hero_active():
    registry = create_default_registry()
    assert len(registry) == len(SceneKey)
    assert registry.sealed
    assert registry.visible_keys() == [SceneKey.HERO]
    assert registry.get("hero").scale.is_close((1.0, 1.0, 1.0))
    assert registry.get("house").motion is None
