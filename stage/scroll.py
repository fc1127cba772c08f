"""Scroll triggers and the section-to-scene router.

A trigger watches one page section. Its start boundary is reached when the
section's top edge meets the viewport centre and its end boundary when the
bottom edge passes it, so exactly one section straddles the centre line at a
time. Entering a section from either direction activates its scene.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from ui.layout import PageLayout

from .transitions import TransitionController

logger = logging.getLogger(__name__)

Callback = Callable[[], None]

_ELEMENT_EDGES = ("top", "center", "bottom")


def _boundary(position: str, element_top: float, element_bottom: float, viewport_height: float) -> float:
    """Scroll offset at which ``"<element edge> <viewport edge>"`` line up."""

    parts = position.split()
    if len(parts) != 2 or parts[0] not in _ELEMENT_EDGES or parts[1] not in _ELEMENT_EDGES:
        raise ValueError(f"Unsupported trigger position: {position!r}")
    element_edge, viewport_edge = parts
    element_offset = {
        "top": element_top,
        "center": (element_top + element_bottom) / 2.0,
        "bottom": element_bottom,
    }[element_edge]
    viewport_offset = {
        "top": 0.0,
        "center": viewport_height / 2.0,
        "bottom": float(viewport_height),
    }[viewport_edge]
    return element_offset - viewport_offset


@dataclass
class ScrollTrigger:
    section_id: str
    start_position: str
    end_position: str
    on_enter: Optional[Callback] = None
    on_enter_back: Optional[Callback] = None
    on_leave: Optional[Callback] = None
    on_leave_back: Optional[Callback] = None
    start: float = 0.0
    end: float = 0.0
    active: bool = False

    def contains(self, scroll: float) -> bool:
        return self.start <= scroll < self.end


def _fire(callback: Optional[Callback]) -> None:
    if callback is not None:
        callback()


class ScrollObserver:
    """Evaluates registered triggers whenever the scroll position changes."""

    def __init__(self, layout: PageLayout) -> None:
        self._layout = layout
        self._triggers: List[ScrollTrigger] = []
        self._scroll: Optional[float] = None

    @property
    def triggers(self) -> Sequence[ScrollTrigger]:
        return tuple(self._triggers)

    @property
    def scroll(self) -> float:
        return 0.0 if self._scroll is None else self._scroll

    def create_trigger(
        self,
        section_id: str,
        start: str = "top center",
        end: str = "bottom center",
        on_enter: Optional[Callback] = None,
        on_enter_back: Optional[Callback] = None,
        on_leave: Optional[Callback] = None,
        on_leave_back: Optional[Callback] = None,
    ) -> ScrollTrigger:
        trigger = ScrollTrigger(
            section_id=section_id,
            start_position=start,
            end_position=end,
            on_enter=on_enter,
            on_enter_back=on_enter_back,
            on_leave=on_leave,
            on_leave_back=on_leave_back,
        )
        self._measure(trigger)
        self._triggers.append(trigger)
        return trigger

    def _measure(self, trigger: ScrollTrigger) -> None:
        rect = self._layout.section_rect(trigger.section_id)
        height = self._layout.viewport_height
        trigger.start = _boundary(trigger.start_position, rect.top, rect.bottom, height)
        trigger.end = _boundary(trigger.end_position, rect.top, rect.bottom, height)

    def refresh(self) -> None:
        """Re-measure every trigger (after a resize) and re-evaluate in place."""

        for trigger in self._triggers:
            self._measure(trigger)
        if self._scroll is not None:
            self._evaluate(self._scroll, self._scroll)

    def update(self, scroll: float) -> None:
        """Publish a new scroll position, firing crossings since the last one."""

        previous = self._scroll
        self._scroll = scroll
        if previous is None:
            # First evaluation: only the triggers already containing the
            # position report an entry.
            for trigger in self._triggers:
                if trigger.contains(scroll):
                    trigger.active = True
                    _fire(trigger.on_enter)
            return
        if scroll == previous:
            return
        self._evaluate(previous, scroll)

    def _evaluate(self, previous: float, scroll: float) -> None:
        forward = scroll >= previous
        # Leaves and pass-overs are reported in travel direction; entries are
        # held back and fired last in registration order, so the
        # last-registered active trigger always has the final say.
        indices = range(len(self._triggers))
        entered = set()
        for index in indices if forward else reversed(indices):
            trigger = self._triggers[index]
            was_active = trigger.active
            now_active = trigger.contains(scroll)
            trigger.active = now_active
            if now_active and not was_active:
                entered.add(index)
            elif was_active and not now_active:
                _fire(trigger.on_leave if scroll >= trigger.end else trigger.on_leave_back)
            elif not now_active:
                if forward and previous < trigger.start and scroll >= trigger.end:
                    _fire(trigger.on_enter)
                    _fire(trigger.on_leave)
                elif not forward and previous >= trigger.end and scroll < trigger.start:
                    _fire(trigger.on_enter_back)
                    _fire(trigger.on_leave_back)
        for index in sorted(entered):
            trigger = self._triggers[index]
            _fire(trigger.on_enter if forward else trigger.on_enter_back)


@dataclass(frozen=True)
class Section:
    """A page section and the scene it shows."""

    section_id: str
    scene_key: str


def resolve_scene_key(section_id: str, aliases: Mapping[str, str]) -> str:
    """Map a section id to the scene it shows: an alias, else the same id."""

    return aliases.get(section_id, section_id)


class ScrollRouter:
    """Turns section entries into :meth:`TransitionController.switch_to` calls."""

    def __init__(
        self,
        observer: ScrollObserver,
        controller: TransitionController,
        section_ids: Sequence[str],
        aliases: Mapping[str, str],
    ) -> None:
        self._controller = controller
        self.active_section: Optional[str] = None
        self.sections: List[Section] = [
            Section(section_id, resolve_scene_key(section_id, aliases))
            for section_id in section_ids
        ]
        for section in self.sections:
            activate = self._activator(section.section_id, section.scene_key)
            observer.create_trigger(
                section.section_id,
                start="top center",
                end="bottom center",
                on_enter=activate,
                on_enter_back=activate,
            )

    def _activator(self, section_id: str, target: str) -> Callback:
        def activate() -> None:
            logger.debug("Section %s entered; switching to %s", section_id, target)
            self.active_section = section_id
            self._controller.switch_to(target)

        return activate

    @property
    def section_targets(self) -> Dict[str, str]:
        return {section.section_id: section.scene_key for section in self.sections}
