"""State for the page chrome: the loader veil and the scroll progress bar."""
from __future__ import annotations

from typing import Optional

from .layout import PageLayout


class LoadingOverlay:
    """Opaque veil that fades out a fixed delay after the load event."""

    def __init__(self, delay: float = 1.0, fade: float = 0.4) -> None:
        self.delay = delay
        self.fade = fade
        self.loaded_at: Optional[float] = None

    def mark_loaded(self, now: float) -> None:
        if self.loaded_at is None:
            self.loaded_at = now

    def opacity(self, now: float) -> float:
        if self.loaded_at is None:
            return 1.0
        since_hide = now - self.loaded_at - self.delay
        if since_hide < 0.0:
            return 1.0
        if self.fade <= 0.0:
            return 0.0
        return max(0.0, 1.0 - since_hide / self.fade)

    def is_hidden(self, now: float) -> bool:
        return self.opacity(now) <= 0.0


def progress_bar_width(layout: PageLayout, scroll: float) -> float:
    """Width in pixels of the bar tracking how far down the page we are."""

    return layout.scroll_ratio(scroll) * layout.window_size[0]
