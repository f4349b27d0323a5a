"""A named item on screen that fades in and shows its name for a while."""

from __future__ import annotations

Vec2 = tuple[float, float]
Colour = tuple[float, float, float]

SHADOW_STRENGTH = 0.5


class Pawn:
    """Position, size, fade and name display timing of a visual item."""

    def __init__(self, name: str, pos: Vec2, tagid: int) -> None:
        self.name = name
        self.pos = pos
        self.tagid = tagid
        self.hidden = False
        self.speed = 1.0
        self.selected = False
        self.mouseover = False
        self.shadow = False
        self.shadow_offset = (2.0, 2.0)
        self.elapsed = 0.0
        self.fadetime = 1.0
        self.nametime = 5.0
        self.name_interval = 0.0
        self.name_colour: Colour = (1.0, 1.0, 1.0)
        self.selected_colour: Colour = (1.0, 1.0, 0.3)
        self.size = 0.0
        self.graphic_ratio = 1.0
        self.dims: Vec2 = (0.0, 0.0)

    def show_name(self) -> None:
        """Start showing the name unless it is already showing."""
        if self.name_interval <= 0.0:
            self.name_interval = self.nametime

    def logic(self, dt: float) -> None:
        self.elapsed += dt
        if not self.hidden and self.name_interval > 0.0:
            self.name_interval -= dt

    def set_graphic(self, width: float | None, height: float | None) -> None:
        """Use an image of the given size; without one the pawn is square."""
        if width and height:
            self.graphic_ratio = height / float(width)
        else:
            self.graphic_ratio = 1.0
        self.dims = (self.size, self.size * self.graphic_ratio)

    def bounds(self) -> tuple[Vec2, Vec2]:
        """The (min, max) corners of the area the pawn covers."""
        hx = self.size * 0.5
        hy = hx * self.graphic_ratio
        x, y = self.pos
        return ((x - hx, y - hy), (x + hx, y + hy))

    def name_visible(self) -> bool:
        if self.hidden:
            return False
        return self.selected or self.name_interval >= 0.0

    def name_alpha(self) -> float | None:
        """Opacity of the name: fades in, holds, fades out; None when hidden."""
        if not self.name_visible():
            return None
        done = self.nametime - self.name_interval
        if done < 1.0:
            return done
        if 1.0 < done < self.nametime - 1.0:
            return 1.0
        return self.nametime - done

    def alpha(self) -> float:
        return min(self.elapsed / self.fadetime, 1.0)

    def colour(self) -> Colour:
        return (1.0, 1.0, 1.0)