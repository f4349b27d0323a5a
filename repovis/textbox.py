"""A box of text lines with a shaded background, positioned on screen."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class TextBox:
    """Holds lines of text and works out the rectangle that frames them.

    ``measure`` gives the rendered width of a string.
    """

    def __init__(
        self,
        font_size: int,
        measure: Callable[[str], float],
        display_width: int,
        display_height: int,
    ) -> None:
        self.font_size = font_size
        self.measure = measure
        self.display_width = display_width
        self.display_height = display_height
        self.lines: list[str] = []
        self.shadow = (3.0, 3.0)
        self.colour = (0.7, 0.7, 0.7)
        self.corner = (0.0, 0.0)
        self.alpha = 1.0
        self.brightness = 1.0
        self.max_width_chars = 1024
        self.rect_width = 0
        self.rect_height = 0
        self.visible = False

    @property
    def line_height(self) -> int:
        return self.font_size + 4

    def hide(self) -> None:
        self.visible = False

    def show(self) -> None:
        self.visible = True

    def clear(self) -> None:
        self.lines.clear()
        self.rect_width = 0
        self.rect_height = 2

    def add_line(self, text: str) -> None:
        """Append a line, cut to the maximum width, and grow the box to fit."""
        if self.max_width_chars > 0 and len(text) > self.max_width_chars:
            text = text[: self.max_width_chars]
        width = int(self.measure(text) + 6)
        self.rect_width = max(self.rect_width, width)
        self.rect_height += self.line_height
        self.lines.append(text)

    def set_text(self, text: str | Iterable[str]) -> None:
        """Replace the content with one line or a sequence of lines."""
        self.clear()
        if isinstance(text, str):
            self.add_line(text)
        else:
            for line in text:
                self.add_line(line)

    def set_pos(self, pos: tuple[float, float], adjust: bool = False) -> None:
        """Place the box; with adjust, keep it above the point and on screen."""
        x, y = float(pos[0]), float(pos[1])
        if adjust:
            y -= self.rect_height
            if x + self.rect_width > self.display_width:
                if x - self.rect_width - self.line_height > 0:
                    x -= self.rect_width
                else:
                    x = float(self.display_width - self.rect_width)
            if y < 0:
                y += self.rect_height + self.line_height
            if y + self.rect_height > self.display_height:
                y -= self.rect_height
        self.corner = (x, y)

    def line_positions(self) -> list[tuple[int, int, str]]:
        """Where each line is drawn: (x, y, text)."""
        cx, cy = int(self.corner[0]), int(self.corner[1])
        return [
            (cx + 2, cy + 3 + index * self.line_height, line)
            for index, line in enumerate(self.lines)
        ]