"""Parsing layer - scene description text to domain models"""

from parsing.errors import (
    SceneError,
    SceneParseError,
    SceneFormatError,
    SceneResourceNotFoundError,
    SceneResourceUnreadableError,
)
from parsing.description_parser import (
    tokenize,
    parse_number,
    parse_duration,
    parse_color,
    parse_figure,
    parse_animation,
)
from parsing.scene_parser import parse_scene

__all__ = [
    "SceneError",
    "SceneParseError",
    "SceneFormatError",
    "SceneResourceNotFoundError",
    "SceneResourceUnreadableError",
    "tokenize",
    "parse_number",
    "parse_duration",
    "parse_color",
    "parse_figure",
    "parse_animation",
    "parse_scene",
]
