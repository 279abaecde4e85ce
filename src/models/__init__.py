"""
Models package - Data models for scene descriptions
"""

from .enums import ShapeKind, TransformKind, SceneErrorKind, LogLevel, LogCategory
from .color import Color
from .geometry import Point, Size, degrees_to_radians

__all__ = [
    'ShapeKind',
    'TransformKind',
    'SceneErrorKind',
    'LogLevel',
    'LogCategory',
    'Color',
    'Point',
    'Size',
    'degrees_to_radians',
]
