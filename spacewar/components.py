"""Components that can be attached to game entities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

Vector = tuple[float, float]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass
class Transform:
    """Position, velocity and rotation angle (degrees) of an entity."""

    position: Vector = (0.0, 0.0)
    velocity: Vector = (0.0, 0.0)
    angle: float = 0.0


@dataclass
class CircleShape:
    """A regular polygon approximating a circle, with its origin at the centre."""

    radius: float
    point_count: int
    fill_color: Color
    outline_color: Color
    thickness: float

    def points(self, position: Vector, angle: float) -> list[Vector]:
        """Vertices of the shape placed at ``position`` and rotated by ``angle`` degrees."""
        theta = math.radians(angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        x0, y0 = position
        vertices = []
        for i in range(self.point_count):
            a = i * 2.0 * math.pi / self.point_count - math.pi / 2.0
            px = math.cos(a) * self.radius
            py = math.sin(a) * self.radius
            vertices.append((x0 + px * cos_t - py * sin_t, y0 + px * sin_t + py * cos_t))
        return vertices


@dataclass
class RectangleShape:
    """An axis-aligned rectangle whose origin is its bottom-right corner."""

    width: float
    height: float
    thickness: float
    outline_color: Color
    fill_color: Color

    def rect(self, position: Vector) -> tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` of the rectangle placed at ``position``."""
        x, y = position
        return (x - self.width, y - self.height, self.width, self.height)


@dataclass
class Score:
    score: int = 0


@dataclass
class Collision:
    radius: float = 0.0


@dataclass
class LifeSpan:
    """Total lifetime in frames and the frames left."""

    total: int
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.total


@dataclass
class SpecialShoot:
    """A burst of bullets fired in a ring, with a cooldown in frames."""

    bullet_amount: int
    cooldown: int
    remaining_cooldown: int = field(default=0, init=False)


@dataclass
class Shoot:
    """A single aimed shot with a cooldown in frames."""

    cooldown: int
    remaining_cooldown: int = field(default=0, init=False)


@dataclass
class Input:
    """Current state of the player's controls."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    left_click: bool = False
    right_click: bool = False
    mouse_pos: Vector = (0.0, 0.0)


@dataclass
class Button:
    """A clickable area bounded by its four sides."""

    left: float
    right: float
    top: float
    bottom: float
    on_click: Optional[Callable[[], None]] = None

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the button, edges included."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom