import random

import pytest

from stage.scene_builders import create_default_registry
from stage.scene_registry import SceneKey
from stage.transitions import TransitionController, TransitionKind
from stage.tween import TweenEngine


@pytest.fixture
def stage():
    registry = create_default_registry()
    tweens = TweenEngine()
    controller = TransitionController(registry, tweens)
    return registry, tweens, controller


def test_switch_hides_old_scene_and_pops_in_new_one(stage):
    registry, tweens, controller = stage
    hero = registry.get("hero")
    hobby = registry.get("hobby")

    assert controller.switch_to("hobby")
    assert hobby.visible
    assert hobby.scale.is_close((0.0, 0.0, 0.0))
    assert controller.is_exiting("hero")
    assert controller.is_entering("hobby")

    tweens.update(0.15)
    # Deliberate overlap: the outgoing scene is still drawn while shrinking.
    assert registry.visible_keys() == [SceneKey.HERO, SceneKey.HOBBY]
    assert 0.0 < hero.scale.x < 1.0

    tweens.update(0.31)
    assert not hero.visible
    assert hobby.visible

    tweens.update(0.9)
    assert registry.visible_keys() == [SceneKey.HOBBY]
    assert hobby.scale.is_close((1.0, 1.0, 1.0))
    assert controller.settled
    assert controller.active_key is SceneKey.HOBBY


def test_entry_overshoots_full_scale(stage):
    registry, tweens, controller = stage
    controller.switch_to("city")
    tweens.update(0.36)
    assert registry.get("city").scale.x > 1.0


def test_unknown_key_leaves_active_scene_alone(stage):
    registry, tweens, controller = stage
    assert not controller.switch_to("nonexistent")
    assert controller.settled
    tweens.update(1.0)
    assert registry.visible_keys() == [SceneKey.HERO]
    assert registry.get("hero").scale.is_close((1.0, 1.0, 1.0))
    assert controller.active_key is SceneKey.HERO


def test_switching_to_the_settled_active_scene_changes_nothing(stage):
    registry, tweens, controller = stage
    assert controller.switch_to("hero")
    assert controller.settled
    tweens.update(1.0)
    assert registry.visible_keys() == [SceneKey.HERO]
    assert registry.get("hero").scale.is_close((1.0, 1.0, 1.0))


def test_repeated_switch_while_entering_does_not_restart(stage):
    registry, tweens, controller = stage
    controller.switch_to("hobby")
    tweens.update(0.3)
    first = controller.in_flight("hobby")
    scale_before = registry.get("hobby").scale.x

    controller.switch_to("hobby")
    assert controller.in_flight("hobby") is first
    assert registry.get("hobby").scale.x == scale_before


def test_repeated_switch_lets_outgoing_scene_finish_shrinking(stage):
    registry, tweens, controller = stage
    hero = registry.get("hero")
    controller.switch_to("hobby")
    tweens.update(0.1)
    shrinking = hero.scale.x
    exit_transition = controller.in_flight("hero")

    assert controller.switch_to("hobby")
    assert hero.visible
    assert hero.scale.x == shrinking
    assert controller.in_flight("hero") is exit_transition

    tweens.update(0.2)
    assert hero.visible
    assert 0.0 < hero.scale.x < shrinking
    tweens.update(0.31)
    assert not hero.visible
    assert registry.visible_keys() == [SceneKey.HOBBY]


def test_rapid_switches_keep_at_most_two_scenes_visible(stage):
    registry, tweens, controller = stage
    controller.switch_to("hobby")
    tweens.update(0.1)
    controller.switch_to("city")

    # hero was still shrinking, so it is finished off immediately.
    assert not registry.get("hero").visible
    assert registry.visible_keys() == [SceneKey.HOBBY, SceneKey.CITY]
    assert controller.is_exiting("hobby")
    assert controller.is_entering("city")

    tweens.update(1.0)
    assert registry.visible_keys() == [SceneKey.CITY]


def test_reentering_an_exiting_scene_cancels_its_hide(stage):
    registry, tweens, controller = stage
    controller.switch_to("hobby")
    tweens.update(0.1)
    controller.switch_to("hero")

    assert controller.in_flight("hero").kind is TransitionKind.ENTER
    tweens.update(0.5)
    assert registry.get("hero").visible
    tweens.update(1.0)
    assert registry.visible_keys() == [SceneKey.HERO]
    assert registry.get("hero").scale.is_close((1.0, 1.0, 1.0))


def test_overlap_is_always_one_exit_and_one_entry(stage):
    registry, tweens, controller = stage
    rng = random.Random(3)
    choices = [key.value for key in SceneKey] + ["process", "nonexistent"]
    now = 0.0
    for _ in range(300):
        if rng.random() < 0.4:
            controller.switch_to(rng.choice(choices))
        now += rng.choice((0.02, 0.05, 0.1, 0.2, 0.4))
        tweens.update(now)

        visible = registry.visible_keys()
        assert len(visible) <= 2
        if len(visible) == 2:
            kinds = {controller.in_flight(key).kind for key in visible}
            assert kinds == {TransitionKind.EXIT, TransitionKind.ENTER}

    tweens.update(now + 1.0)
    assert registry.visible_keys() == [controller.active_key]
    assert registry.get(controller.active_key).scale.is_close((1.0, 1.0, 1.0))
