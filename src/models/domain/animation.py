"""
Animation domain models

Immutable transform animations parsed from scene descriptions.
"""

from dataclasses import dataclass, field
from typing import Union

from models.enums import TransformKind


@dataclass(frozen=True)
class MoveTransform:
    """Translation delta relative to the owning figure's center"""
    dx: float
    dy: float
    kind: TransformKind = field(default=TransformKind.MOVE, init=False)


@dataclass(frozen=True)
class RotateTransform:
    """Target rotation in radians"""
    angle: float
    kind: TransformKind = field(default=TransformKind.ROTATE, init=False)


@dataclass(frozen=True)
class ScaleTransform:
    """Uniform target scale factor"""
    factor: float
    kind: TransformKind = field(default=TransformKind.SCALE, init=False)


Transform = Union[MoveTransform, RotateTransform, ScaleTransform]


@dataclass(frozen=True)
class Animation:
    """
    One animated property of a figure.

    Attributes:
        duration: One-way duration in seconds
        cycles: Play forward then reverse back (autoreverse) instead of hold-at-end
        transform: What is animated and towards which value
    """
    duration: float
    cycles: bool
    transform: Transform

    @property
    def visible_duration(self) -> float:
        """Time until the animation looks finished (go-and-return doubles it)"""
        return 2 * self.duration if self.cycles else self.duration
