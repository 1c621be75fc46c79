"""Points, the player, and the small numeric helpers of the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

PI = math.pi
DRAD = 0.0174533
TWO_PI = 2 * PI

RES_X = 960
RES_Y = 640
CELLSIZE = 64
STEP_LENGTH = 5


@dataclass
class Vec:
    """A mutable 2D point or displacement."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)


def distance(a: Vec, b: Vec) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def limit_angle(angle: float) -> float:
    """Bring an angle that overshot by less than one turn back into [0, 2*pi]."""
    if angle > TWO_PI:
        return angle - TWO_PI
    if angle < 0:
        return angle + TWO_PI
    return angle


def trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


def hex_to_dec(digits: str) -> int:
    """Read a hexadecimal number; letters of either case count as 10 to 15."""
    result = 0
    for power, char in enumerate(reversed(digits)):
        value = ord(char) - ord("0")
        if "0" <= char <= "9":
            result += value * 16**power
        else:
            result += (9 + int(math.fmod(value, 16))) * 16**power
    return result


def _step(angle: float) -> Vec:
    return Vec(math.cos(angle) * STEP_LENGTH, math.sin(angle) * STEP_LENGTH)


@dataclass
class Player:
    """The viewer: position in world units, facing angle and step vector."""

    pos: Vec
    angle: float
    delta: Vec = field(init=False)

    def __post_init__(self) -> None:
        self.delta = _step(self.angle)

    def rotate(self, delta: float) -> None:
        """Turn by ``delta`` radians and refresh the step vector."""
        self.angle = limit_angle(self.angle + delta)
        self.delta = _step(self.angle)