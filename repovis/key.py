"""A key of the file extensions currently on screen, with counts."""

from __future__ import annotations

from collections.abc import Callable

Colour = tuple[float, float, float]

ENTRY_WIDTH = 90.0
ENTRY_HEIGHT = 18.0
LEFT_MARGIN = 20.0
ROW_SPACING = 20.0
FIRST_ROW_Y = 20.0


class FileKeyEntry:
    """One extension in the key: its colour, file count, fade and slide."""

    def __init__(
        self, ext: str, colour: Colour, measure: Callable[[str], float]
    ) -> None:
        self.ext = ext
        self.colour = colour
        self.pos_y = -1.0
        self.shadow = (3.0, 3.0)
        self.width = ENTRY_WIDTH
        self.height = ENTRY_HEIGHT
        self.left_margin = LEFT_MARGIN
        self.count = 0
        self.brightness = 1.0
        self.alpha = 0.0
        self.move_elapsed = 1.0
        self.src_y = -1.0
        self.dest_y = -1.0
        self.show = True
        self.pos = (0.0, -1.0)
        self.display_ext = self._fit(ext, measure)

    def _fit(self, ext: str, measure: Callable[[str], float]) -> str:
        text = ext
        truncated = False
        while text and measure(text) > self.width - 15.0:
            text = text[:-1]
            truncated = True
        return text + "..." if truncated else text

    def inc(self) -> None:
        self.count += 1

    def dec(self) -> None:
        self.count -= 1

    def set_dest_y(self, dest_y: float) -> None:
        """Start sliding towards a new vertical position."""
        if dest_y == self.dest_y:
            return
        self.dest_y = dest_y
        self.src_y = self.pos_y
        self.move_elapsed = 0.0

    def is_finished(self) -> bool:
        """Whether the entry has no files and has faded out completely."""
        return self.count <= 0 and self.alpha <= 0.0

    def logic(self, dt: float) -> None:
        if self.count <= 0 or not self.show:
            self.alpha = max(0.0, self.alpha - dt)
        elif self.alpha < 1.0:
            self.alpha = min(1.0, self.alpha + dt)

        if self.pos_y != self.dest_y:
            if self.pos_y < 0.0:
                self.pos_y = self.dest_y
            else:
                self.move_elapsed += dt
                if self.move_elapsed >= 1.0:
                    self.pos_y = self.dest_y
                else:
                    self.pos_y = (
                        self.src_y + (self.dest_y - self.src_y) * self.move_elapsed
                    )

        self.pos = (self.alpha * self.left_margin, self.pos_y)


class FileKey:
    """Keeps the key entries, re-sorting and placing them periodically."""

    def __init__(
        self,
        update_interval: float,
        display_height: int,
        measure: Callable[[str], float],
    ) -> None:
        self.update_interval = update_interval
        self.interval_remaining = 1.0
        self.display_height = display_height
        self.measure = measure
        self.show = True
        self.entries: dict[str, FileKeyEntry] = {}
        self.active: list[FileKeyEntry] = []

    def set_show(self, show: bool) -> None:
        self.show = show
        for entry in self.active:
            entry.show = show
        self.interval_remaining = 0.0

    def clear(self) -> None:
        """Drop every active count to zero so the entries fade out."""
        for entry in self.active:
            entry.count = 0
        self.interval_remaining = 0.0

    def inc(self, ext: str, colour: Colour) -> None:
        entry = self.entries.get(ext)
        if entry is None:
            entry = FileKeyEntry(ext, colour, self.measure)
            self.entries[ext] = entry
        entry.inc()

    def dec(self, ext: str) -> None:
        entry = self.entries.get(ext)
        if entry is not None:
            entry.dec()

    def _recalculate(self) -> None:
        active = []
        finished = []
        for ext in sorted(self.entries):
            entry = self.entries[ext]
            (finished if entry.is_finished() else active).append(entry)

        active.sort(key=lambda e: (-e.count, e.ext))

        max_visible = int((self.display_height - 150.0) / ROW_SPACING)
        if max_visible >= 0 and len(active) > max_visible:
            del active[max_visible:]

        key_y = FIRST_ROW_Y
        for entry in active:
            if entry.count > 0:
                entry.set_dest_y(key_y)
            key_y += ROW_SPACING

        for entry in finished:
            del self.entries[entry.ext]

        self.active = active

    def logic(self, dt: float) -> None:
        self.interval_remaining -= dt
        if self.interval_remaining <= 0.0:
            if self.show:
                self._recalculate()
            self.interval_remaining = self.update_interval
        for entry in self.active:
            entry.logic(dt)