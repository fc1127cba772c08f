"""Layout of the virtual scrolling page that sits in front of the stage."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import pygame


Vec2 = Tuple[float, float]
Size = Tuple[int, int]


@dataclass
class PageLayout:
    """Stacks the page sections vertically, each one a viewport tall by default.

    Rectangles are in page coordinates: ``y = 0`` is the top of the first
    section, and the viewport shows ``[scroll, scroll + height)``.
    """

    window_size: Size
    section_ids: Sequence[str]
    section_height_ratio: float = 1.0
    _rects: Dict[str, pygame.Rect] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._rebuild()

    def update(self, window_size: Size) -> bool:
        """Adopt a new window size; zero-area sizes are ignored."""

        width, height = window_size
        if width <= 0 or height <= 0:
            return False
        self.window_size = (int(width), int(height))
        self._rebuild()
        return True

    def _rebuild(self) -> None:
        width, height = self.window_size
        section_height = max(1, int(height * self.section_height_ratio))
        self._rects = {
            section_id: pygame.Rect(0, index * section_height, width, section_height)
            for index, section_id in enumerate(self.section_ids)
        }

    @property
    def viewport_rect(self) -> pygame.Rect:
        width, height = self.window_size
        return pygame.Rect(0, 0, width, height)

    @property
    def viewport_height(self) -> int:
        return self.window_size[1]

    @property
    def page_height(self) -> int:
        if not self._rects:
            return 0
        return max(rect.bottom for rect in self._rects.values())

    @property
    def max_scroll(self) -> int:
        return max(0, self.page_height - self.viewport_height)

    def section_rect(self, section_id: str) -> pygame.Rect:
        return self._rects[section_id]

    def section_at(self, page_y: float) -> str | None:
        """Return the section whose span contains page coordinate ``page_y``."""

        for section_id in self.section_ids:
            rect = self._rects[section_id]
            if rect.top <= page_y < rect.bottom:
                return section_id
        return None

    def to_screen(self, rect: pygame.Rect, scroll: float) -> pygame.Rect:
        """Translate a page rectangle into window coordinates for ``scroll``."""

        return rect.move(0, -int(round(scroll)))

    def scroll_ratio(self, scroll: float) -> float:
        limit = self.max_scroll
        if limit <= 0:
            return 0.0
        return max(0.0, min(1.0, scroll / limit))
