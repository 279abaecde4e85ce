"""Domain models - Figures, animations and scenes"""

from models.domain.figure import Figure, RectangleShape, CircleShape, Shape
from models.domain.animation import (
    Animation,
    MoveTransform,
    RotateTransform,
    ScaleTransform,
    Transform,
)
from models.domain.scene import Layer, Scene

__all__ = [
    "Figure",
    "RectangleShape",
    "CircleShape",
    "Shape",
    "Animation",
    "MoveTransform",
    "RotateTransform",
    "ScaleTransform",
    "Transform",
    "Layer",
    "Scene",
]
