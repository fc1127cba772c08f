"""Geometry for each stage scene and the start-up registry assembly."""
from __future__ import annotations

import logging
import math
import random
from typing import Callable, Dict, Optional, Tuple

from rendering.scene_graph import SceneNode
from rendering.wireframe_primitives import (
    create_box_mesh,
    create_cone_mesh,
    create_icosahedron_mesh,
    create_point_cloud,
)

from .animation import MOTION_LAWS, SNOW_NODE
from .scene_registry import Scene, SceneKey, SceneRegistry
from .settings import PresentationSettings

logger = logging.getLogger(__name__)

Color = Tuple[float, float, float, float]


def _hex_color(value: int, alpha: float = 1.0) -> Color:
    return (
        ((value >> 16) & 0xFF) / 255.0,
        ((value >> 8) & 0xFF) / 255.0,
        (value & 0xFF) / 255.0,
        alpha,
    )


CYAN = _hex_color(0x00F0FF)
VIOLET = _hex_color(0x7000FF)
ROSE = _hex_color(0xFF0055)
EMBER = _hex_color(0xFF4400)
AMBER = _hex_color(0xFFAA00)
SNOW = _hex_color(0xFFFFFF, 0.8)


def build_hero(rng: random.Random) -> SceneNode:
    group = SceneNode("hero")
    group.add(SceneNode("icosahedron", mesh=create_icosahedron_mesh(2.0, detail=1), color=CYAN))
    return group


def build_hobby(rng: random.Random) -> SceneNode:
    """Five flat steps spiralling upwards."""

    group = SceneNode("hobby")
    step_mesh = create_box_mesh(1.5, 0.2, 1.5)
    for i in range(5):
        step = SceneNode(f"step_{i}", mesh=step_mesh, color=VIOLET)
        step.position.set(math.sin(i) * 1.5, i - 2.0, 0.0)
        step.rotation.y = i * 0.4
        group.add(step)
    return group


def build_city(rng: random.Random) -> SceneNode:
    group = SceneNode("city")
    for i in range(12):
        height = rng.random() * 3.0 + 1.0
        block = SceneNode(f"block_{i}", mesh=create_box_mesh(0.8, height, 0.8), color=CYAN)
        block.position.set((rng.random() - 0.5) * 5.0, 0.0, (rng.random() - 0.5) * 3.0)
        group.add(block)
    return group


def build_cards(rng: random.Random) -> SceneNode:
    group = SceneNode("cards")
    card_mesh = create_box_mesh(1.0, 1.5, 0.05)
    for i in range(5):
        card = SceneNode(f"card_{i}", mesh=card_mesh, color=ROSE)
        card.position.x = (i - 2) * 0.6
        card.rotation.z = (i - 2) * 0.1
        group.add(card)
    return group


def build_house(rng: random.Random) -> SceneNode:
    group = SceneNode("house")
    base = SceneNode("base", mesh=create_box_mesh(2.0, 1.2, 2.0), color=AMBER)
    roof = SceneNode("roof", mesh=create_cone_mesh(1.6, 1.0, 4), color=EMBER)
    roof.position.y = 1.1
    roof.rotation.y = math.pi / 4.0
    group.add(base, roof)
    return group


def build_neve(rng: random.Random) -> SceneNode:
    group = SceneNode("neve")
    group.add(SceneNode(SNOW_NODE, points=create_point_cloud(800, 10.0, rng), color=SNOW))
    return group


SCENE_BUILDERS: Dict[SceneKey, Callable[[random.Random], SceneNode]] = {
    SceneKey.HERO: build_hero,
    SceneKey.HOBBY: build_hobby,
    SceneKey.CITY: build_city,
    SceneKey.CARDS: build_cards,
    SceneKey.HOUSE: build_house,
    SceneKey.NEVE: build_neve,
}


def create_default_registry(settings: Optional[PresentationSettings] = None) -> SceneRegistry:
    """Build every scene's geometry, register it, then reveal the initial scene."""

    settings = settings or PresentationSettings()
    rng = random.Random(settings.scene_seed)
    registry = SceneRegistry()
    for key in SceneKey:
        group = SCENE_BUILDERS[key](rng)
        registry.register(Scene(key=key, group=group, motion=MOTION_LAWS[key]))
    registry.seal()
    registry.activate_initial(settings.initial_scene)
    logger.info(
        "Built %d scenes; initial scene is %s", len(registry), settings.initial_scene
    )
    return registry
