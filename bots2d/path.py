"""Line follower paths built from right-angled loops of points.

A path is laid out as quads placed next to each other, one per segment of
a closed loop. Every turn in the loop must be a 90 degree turn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

Vec2 = tuple[float, float]


class PathBlueprint(Enum):
    SIMPLE = "simple"
    T_SHAPED = "t_shaped"
    M_SHAPED = "m_shaped"


_BLUEPRINTS: dict[PathBlueprint, tuple[Vec2, ...]] = {
    PathBlueprint.SIMPLE: (
        (-0.50, -0.25),
        (-0.50, 0.25),
        (0.50, 0.25),
        (0.50, -0.25),
    ),
    PathBlueprint.T_SHAPED: (
        (-0.25, 0.00),
        (-0.50, 0.00),
        (-0.50, 0.25),
        (0.50, 0.25),
        (0.50, 0.00),
        (0.25, 0.00),
        (0.25, -0.25),
        (-0.25, -0.25),
    ),
    PathBlueprint.M_SHAPED: (
        (-0.25, 0.15),
        (-0.25, -0.35),
        (-0.50, -0.35),
        (-0.50, 0.40),
        (0.50, 0.40),
        (0.50, -0.35),
        (0.25, -0.35),
        (0.25, 0.15),
    ),
}


class Direction(Enum):
    """Turn at a corner: the first word is the first leg, the second the next."""

    UP_LEFT = "up_left"
    LEFT_UP = "left_up"
    DOWN_LEFT = "down_left"
    LEFT_DOWN = "left_down"
    UP_RIGHT = "up_right"
    RIGHT_UP = "right_up"
    DOWN_RIGHT = "down_right"
    RIGHT_DOWN = "right_down"


@dataclass
class QuadCoords:
    """The four corners of a convex quad."""

    top_left: Vec2 = (0.0, 0.0)
    top_right: Vec2 = (0.0, 0.0)
    bottom_left: Vec2 = (0.0, 0.0)
    bottom_right: Vec2 = (0.0, 0.0)

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)


def blueprint_path_points(blueprint: PathBlueprint) -> tuple[Vec2, ...]:
    """Points of a predefined path loop."""
    try:
        return _BLUEPRINTS[blueprint]
    except (KeyError, TypeError):
        raise ValueError(f"blueprint not found: {blueprint!r}") from None


def turn_direction(p0: Vec2, p1: Vec2, p2: Vec2) -> Direction:
    """Direction of the turn p0 -> p1 -> p2, which must be right-angled."""
    if p0[0] == p2[0] or p0[1] == p2[1]:
        raise ValueError(
            "angle between line segments (p0-p1) and (p1-p2) must be right-angled"
        )
    vertical_first = p0[0] == p1[0]
    up = p2[1] > p0[1]
    if p2[0] < p0[0]:
        if up:
            return Direction.UP_LEFT if vertical_first else Direction.LEFT_UP
        return Direction.DOWN_LEFT if vertical_first else Direction.LEFT_DOWN
    if up:
        return Direction.UP_RIGHT if vertical_first else Direction.RIGHT_UP
    return Direction.DOWN_RIGHT if vertical_first else Direction.RIGHT_DOWN


def _unit(dx: float, dy: float) -> Vec2:
    length = math.hypot(dx, dy)
    return (dx / length, dy / length)


def right_angle_path_quads(points, width: float) -> list[QuadCoords]:
    """Quads covering a closed right-angled loop of points with a line width.

    One quad is produced per segment; the last segment joins up with the first.
    """
    points = [tuple(point) for point in points]
    count = len(points)
    if count < 3:
        raise ValueError("a path loop needs at least three points")
    normal_length = width / math.sqrt(2)
    quads = [QuadCoords()]

    for i in range(1, count + 1):
        p0 = points[i - 1]
        p1 = points[i % count]
        p2 = points[(i + 1) % count]

        back = _unit(p0[0] - p1[0], p0[1] - p1[1])
        ahead = _unit(p2[0] - p1[0], p2[1] - p1[1])
        nx, ny = _unit(back[0] + ahead[0], back[1] + ahead[1])
        nx, ny = nx * normal_length, ny * normal_length
        plus = (p1[0] + nx, p1[1] + ny)
        minus = (p1[0] - nx, p1[1] - ny)

        prev = quads[-1]
        is_last = i == count
        # The last corner completes the first quad, so the loop must close.
        nxt = quads[0] if is_last else QuadCoords()

        direction = turn_direction(p0, p1, p2)
        if direction is Direction.UP_RIGHT:
            nxt.top_left = prev.top_left = minus
            nxt.bottom_left = prev.top_right = plus
        elif direction is Direction.RIGHT_UP:
            nxt.bottom_left = prev.top_right = plus
            nxt.bottom_right = prev.bottom_right = minus
        elif direction is Direction.UP_LEFT:
            nxt.bottom_right = prev.top_left = plus
            nxt.top_right = prev.top_right = minus
        elif direction is Direction.LEFT_UP:
            nxt.bottom_right = prev.top_left = plus
            nxt.bottom_left = prev.bottom_left = minus
        elif direction is Direction.DOWN_LEFT:
            nxt.top_right = prev.bottom_left = plus
            nxt.bottom_right = prev.bottom_right = minus
        elif direction is Direction.LEFT_DOWN:
            nxt.top_left = prev.top_left = minus
            nxt.top_right = prev.bottom_left = plus
        elif direction is Direction.DOWN_RIGHT:
            nxt.top_left = prev.bottom_right = plus
            nxt.bottom_left = prev.bottom_left = minus
        else:
            nxt.top_right = prev.top_right = minus
            nxt.top_left = prev.bottom_right = plus

        if not is_last:
            quads.append(nxt)

    return quads