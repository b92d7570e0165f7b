import math
from dataclasses import dataclass


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass
class Point:
    """2D point. Mutable so a trail can smooth its live position in place."""
    x: float
    y: float

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    def __truediv__(self, k: float) -> "Point":
        return Point(self.x / k, self.y / k)

    def as_tuple(self):
        return (self.x, self.y)


def dist(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
