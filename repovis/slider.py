"""A position slider shown along the bottom of the display."""

from __future__ import annotations


class PositionSlider:
    """Tracks the playback position bar, its hover state and fade."""

    def __init__(
        self, display_width: int, display_height: int, percent: float = 0.0
    ) -> None:
        self.display_width = display_width
        self.display_height = display_height
        self.percent = percent
        gap = display_width // 30
        self.min = (float(gap), float(display_height - gap * 2))
        self.max = (float(display_width - gap), float(display_height - gap))
        self.colour = (1.0, 1.0, 1.0)
        self.mouseover = -1.0
        self.mouseover_elapsed = 1.0
        self.fade_time = 1.0
        self.alpha = 0.0
        self.caption = ""
        self.caption_width = 0.0

    def show(self) -> None:
        """Make the slider fade in."""
        self.mouseover_elapsed = 0.0

    def _contains(self, pos: tuple[float, float]) -> bool:
        x, y = pos
        return self.min[0] <= x <= self.max[0] and self.min[1] <= y <= self.max[1]

    def mouse_over(self, pos: tuple[float, float]) -> float | None:
        """Update hover state; return the position under the pointer, or None."""
        if self._contains(pos):
            self.mouseover_elapsed = 0.0
            self.mouseover = float(pos[0])
            return (pos[0] - self.min[0]) / (self.max[0] - self.min[0])
        self.mouseover = -1.0
        return None

    def click(self, pos: tuple[float, float]) -> float | None:
        """Move the slider to the clicked position and return it, or None."""
        percent = self.mouse_over(pos)
        if percent is not None:
            self.percent = percent
        return percent

    def set_caption(self, caption: str, width: float = 0.0) -> None:
        """Set the caption text and its rendered width."""
        self.caption = caption
        self.caption_width = float(width) if caption else 0.0

    @property
    def marker_x(self) -> float:
        """Horizontal position of the current-position marker."""
        return self.min[0] + (self.max[0] - self.min[0]) * self.percent

    def caption_x(self) -> float | None:
        """Left edge of the caption, kept on screen, or None when hidden."""
        if not self.caption or self.mouseover < 0.0:
            return None
        centred = max(1.0, self.mouseover - self.caption_width / 2.0)
        return min(self.display_width - self.caption_width - 1.0, centred)

    def logic(self, dt: float) -> None:
        if self.mouseover < 0.0 and self.mouseover_elapsed < self.fade_time:
            self.mouseover_elapsed += dt
        if self.mouseover_elapsed < self.fade_time and self.alpha < 1.0:
            self.alpha = min(1.0, self.alpha + dt)
        elif self.mouseover_elapsed >= self.fade_time and self.alpha > 0.0:
            self.alpha = max(0.0, self.alpha - dt)