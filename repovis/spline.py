"""Curved edges drawn between a node and its parent."""

from __future__ import annotations

import math
from typing import NamedTuple

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]

EDGE_RADIUS = 2.5


class QuadVertex(NamedTuple):
    pos: Vec2
    colour: Vec4
    texcoord: Vec2


def _normal(v: Vec2) -> Vec2 | None:
    length = math.hypot(v[0], v[1])
    if length == 0.0:
        return None
    return (v[0] / length, v[1] / length)


def _mix2(a: Vec2, b: Vec2, t: float) -> Vec2:
    tt = 1.0 - t
    return (a[0] * t + b[0] * tt, a[1] * t + b[1] * tt)


def _mix4(a: Vec4, b: Vec4, t: float) -> Vec4:
    tt = 1.0 - t
    return tuple(x * t + y * tt for x, y in zip(a, b))  # type: ignore[return-value]


def _edge_detail(pos1: Vec2, pos2: Vec2, spos: Vec2) -> int:
    mid = _normal(((pos1[0] - pos2[0]) * 0.5, (pos1[1] - pos2[1]) * 0.5))
    to = _normal((pos1[0] - spos[0], pos1[1] - spos[1]))
    if mid is None or to is None:
        return 1
    dp = max(-1.0, min(1.0, to[0] * mid[0] + to[1] * mid[1]))
    ang = math.acos(dp) / math.pi
    return max(1, min(10, int(ang * 100.0)))


class SplineEdge:
    """A quadratic curve from pos2 to pos1 bent towards a control point."""

    def __init__(self) -> None:
        self.points: list[Vec2] = []
        self.colours: list[Vec4] = []
        self.midpoint: Vec2 = (0.0, 0.0)

    def update(
        self, pos1: Vec2, col1: Vec4, pos2: Vec2, col2: Vec4, spos: Vec2
    ) -> None:
        """Recompute the curve; more sharply bent curves get more segments."""
        detail = _edge_detail(pos1, pos2, spos)
        self.points = []
        self.colours = []
        for i in range(detail + 1):
            t = i / detail
            p0 = _mix2(pos1, spos, t)
            p1 = _mix2(spos, pos2, t)
            self.points.append(_mix2(p0, p1, t))
            self.colours.append(_mix4(col1, col2, t))
        self.midpoint = (
            pos1[0] * 0.25 + pos2[0] * 0.25 + spos[0] * 0.5,
            pos1[1] * 0.25 + pos2[1] * 0.25 + spos[1] * 0.5,
        )

    def quads(self) -> list[tuple[QuadVertex, QuadVertex, QuadVertex, QuadVertex]]:
        """One textured quad per curve segment, EDGE_RADIUS wide on each side."""
        result = []
        segments = zip(
            zip(self.points, self.colours), zip(self.points[1:], self.colours[1:])
        )
        for (a, col_a), (b, col_b) in segments:
            direction = (a[0] - b[0], a[1] - b[1])
            normal = _normal((direction[1], -direction[0])) or (0.0, 0.0)
            px, py = normal[0] * EDGE_RADIUS, normal[1] * EDGE_RADIUS
            result.append(
                (
                    QuadVertex((a[0] + px, a[1] + py), col_a, (1.0, 0.0)),
                    QuadVertex((a[0] - px, a[1] - py), col_a, (0.0, 0.0)),
                    QuadVertex((b[0] - px, b[1] - py), col_b, (0.0, 0.0)),
                    QuadVertex((b[0] + px, b[1] + py), col_b, (1.0, 0.0)),
                )
            )
        return result