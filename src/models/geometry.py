"""Geometry primitives shared by figures and transforms"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def offset_to(self, other: 'Point') -> 'Point':
        """Delta from this point to `other`"""
        return Point(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0


def degrees_to_radians(degrees: float) -> float:
    """Convert description-file degrees to stored radians"""
    return degrees / 180 * math.pi
