"""Tuning values for the scroll stage presentation."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Tuple

Color = Tuple[float, float, float, float]

TARGET_FPS = 60
WINDOW_TITLE = "Second Ground Studios"
DEFAULT_WINDOW_SIZE = (1280, 720)

# Page sections in scroll order. ``process`` and ``contact`` are informational
# sections without a dedicated scene of their own.
DEFAULT_SECTIONS: Tuple[str, ...] = (
    "hero",
    "hobby",
    "process",
    "city",
    "cards",
    "house",
    "contact",
    "neve",
)

DEFAULT_SECTION_TITLES: Mapping[str, str] = {
    "hero": "Second Ground Studios",
    "hobby": "From hobby to craft",
    "process": "How we work",
    "city": "Worlds at city scale",
    "cards": "Card games",
    "house": "Home-grown tools",
    "contact": "Get in touch",
    "neve": "See you in the snow",
}

DEFAULT_SECTION_ALIASES: Mapping[str, str] = {
    "process": "hero",
    "contact": "hero",
}


@dataclass(frozen=True)
class PresentationSettings:
    """Every timing and visual constant the stage needs, in one place."""

    # Transitions
    exit_duration: float = 0.3
    entry_duration: float = 0.6
    entry_overshoot: float = 1.7
    initial_scene: str = "hero"

    # Pointer
    parallax_duration: float = 1.0
    cursor_dot_duration: float = 0.1
    cursor_ring_duration: float = 0.4

    # Scrolling
    sections: Tuple[str, ...] = DEFAULT_SECTIONS
    section_aliases: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_SECTION_ALIASES)
    )
    section_titles: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_SECTION_TITLES)
    )
    section_height_ratio: float = 1.0
    smooth_scroll_lerp: float = 0.1
    wheel_step: float = 120.0
    key_step: float = 80.0

    # Loader
    loader_delay: float = 1.0
    loader_fade: float = 0.4

    # Camera and look
    camera_distance: float = 10.0
    camera_fov: float = 45.0
    background_color: Color = (5 / 255, 5 / 255, 5 / 255, 1.0)
    fog_density: float = 0.04
    glow_strength: float = 0.35
    scene_seed: int = 7
    target_fps: int = TARGET_FPS

    def with_overrides(self, **overrides) -> "PresentationSettings":
        """Return a copy with ``overrides`` applied."""

        return replace(self, **overrides)
