"""Figure domain models"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from models.color import Color
from models.enums import ShapeKind
from models.geometry import Point, Size


@dataclass(frozen=True)
class RectangleShape:
    """Rectangle centred on the figure center, rotated by `angle` radians"""
    size: Size
    angle: float = 0.0
    kind: ShapeKind = field(default=ShapeKind.RECTANGLE, init=False)


@dataclass(frozen=True)
class CircleShape:
    """Circle centred on the figure center"""
    radius: float
    kind: ShapeKind = field(default=ShapeKind.CIRCLE, init=False)


Shape = Union[RectangleShape, CircleShape]


@dataclass(frozen=True)
class Figure:
    """
    One drawable shape of a scene.

    `center` is both the anchor of the geometry and the origin that
    move animations of this figure are measured from.
    """
    center: Point
    color: Color
    shape: Shape

    def bounding_box(self) -> Tuple[Point, Size]:
        """
        Axis-aligned box of the unrotated geometry.

        Returns:
            (origin, size) where origin is the top-left corner
        """
        if isinstance(self.shape, RectangleShape):
            size = self.shape.size
        elif isinstance(self.shape, CircleShape):
            size = Size(2 * self.shape.radius, 2 * self.shape.radius)
        else:
            raise TypeError(f"Unsupported shape: {type(self.shape).__name__}")

        origin = Point(self.center.x - size.width / 2, self.center.y - size.height / 2)
        return origin, size
