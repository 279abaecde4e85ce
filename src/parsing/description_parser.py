"""
Description Parser

Turns one line of a scene description into a Figure or an Animation.

Figure lines:
    rectangle <x> <y> <width> <height> <angle_deg> <color>
    circle <x> <y> <radius> <color>

Animation lines (evaluated against the owning figure's center):
    move <x> <y> <duration_ms> [cycle]
    rotate <angle_deg> <duration_ms> [cycle]
    scale <factor> <duration_ms> [cycle]

Any token after the required parameters of an animation switches it to
cycling (autoreverse); its value is not inspected. Numeric tokens that do
not parse become 0 and unknown colors become black - only unknown kinds
and missing parameters are fatal.
"""

import math
import re
from typing import Callable, Dict, List

from models.color import Color
from models.domain import (
    Animation,
    CircleShape,
    Figure,
    MoveTransform,
    RectangleShape,
    RotateTransform,
    ScaleTransform,
)
from models.enums import LogCategory, SceneErrorKind, ShapeKind, TransformKind
from models.geometry import Point, Size, degrees_to_radians
from parsing.errors import SceneParseError
from utils.enum_helper import EnumHelper
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.PARSER)


# Parameter counts (tokens after the kind word)
FIGURE_PARAM_COUNT: Dict[ShapeKind, int] = {
    ShapeKind.RECTANGLE: 6,
    ShapeKind.CIRCLE: 4,
}

ANIMATION_PARAM_COUNT: Dict[TransformKind, int] = {
    TransformKind.MOVE: 3,
    TransformKind.ROTATE: 2,
    TransformKind.SCALE: 2,
}

NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# === TOKENS ===

def tokenize(line: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens"""
    return line.split()


def parse_number(token: str) -> float:
    """
    Parse a numeric field.

    Only plain ASCII decimals (optional sign, fraction, exponent) are
    accepted. Anything else, including non-finite results, yields 0.0
    instead of an error.
    """
    value = float(token) if NUMBER_PATTERN.fullmatch(token) else math.nan
    if not math.isfinite(value):
        log.debug("Unparsable number, using 0", token=token)
        return 0.0
    return value


def parse_duration(token: str) -> float:
    """Parse a millisecond field into seconds"""
    return parse_number(token) / 1000


def parse_color(token: str) -> Color:
    color = Color.from_name(token)
    if color.value != token:
        log.debug("Unknown color, using black", token=token)
    return color


def _split_record(line: str, kind_enum, error_kind: SceneErrorKind, what: str):
    tokens = tokenize(line)
    if not tokens:
        raise SceneParseError(
            SceneErrorKind.EMPTY_LINE,
            f"Expected {what} line, got an empty line",
            {"line": line},
        )

    try:
        kind = EnumHelper.from_value(kind_enum, tokens[0])
    except ValueError:
        raise SceneParseError(
            error_kind,
            f"Unknown {what} '{tokens[0]}'",
            {"line": line, "expected": EnumHelper.values(kind_enum)},
        ) from None

    return kind, tokens[1:]


def _require(params: List[str], count: int, kind, line: str) -> None:
    if len(params) < count:
        raise SceneParseError(
            SceneErrorKind.MISSING_TOKEN,
            f"'{kind.value}' needs {count} parameters, got {len(params)}",
            {"line": line},
        )


# === FIGURES ===

def _rectangle(params: List[str]) -> Figure:
    return Figure(
        center=Point(parse_number(params[0]), parse_number(params[1])),
        color=parse_color(params[5]),
        shape=RectangleShape(
            size=Size(parse_number(params[2]), parse_number(params[3])),
            angle=degrees_to_radians(parse_number(params[4])),
        ),
    )


def _circle(params: List[str]) -> Figure:
    return Figure(
        center=Point(parse_number(params[0]), parse_number(params[1])),
        color=parse_color(params[3]),
        shape=CircleShape(radius=parse_number(params[2])),
    )


_FIGURE_BUILDERS: Dict[ShapeKind, Callable[[List[str]], Figure]] = {
    ShapeKind.RECTANGLE: _rectangle,
    ShapeKind.CIRCLE: _circle,
}


def parse_figure(line: str) -> Figure:
    """
    Parse a figure line.

    Raises:
        SceneParseError: unknown figure kind, empty line or missing parameters
    """
    kind, params = _split_record(line, ShapeKind, SceneErrorKind.UNKNOWN_FIGURE, "figure")
    _require(params, FIGURE_PARAM_COUNT[kind], kind, line)
    return _FIGURE_BUILDERS[kind](params)


# === ANIMATIONS ===

def _move(params: List[str], center: Point, cycles: bool) -> Animation:
    target = Point(parse_number(params[0]), parse_number(params[1]))
    delta = center.offset_to(target)
    return Animation(
        duration=parse_duration(params[2]),
        cycles=cycles,
        transform=MoveTransform(dx=delta.x, dy=delta.y),
    )


def _rotate(params: List[str], center: Point, cycles: bool) -> Animation:
    return Animation(
        duration=parse_duration(params[1]),
        cycles=cycles,
        transform=RotateTransform(angle=degrees_to_radians(parse_number(params[0]))),
    )


def _scale(params: List[str], center: Point, cycles: bool) -> Animation:
    return Animation(
        duration=parse_duration(params[1]),
        cycles=cycles,
        transform=ScaleTransform(factor=parse_number(params[0])),
    )


_ANIMATION_BUILDERS: Dict[TransformKind, Callable[[List[str], Point, bool], Animation]] = {
    TransformKind.MOVE: _move,
    TransformKind.ROTATE: _rotate,
    TransformKind.SCALE: _scale,
}


def parse_animation(line: str, center: Point) -> Animation:
    """
    Parse an animation line for a figure centred at `center`.

    Move targets are absolute in the file and stored as a delta from `center`.

    Raises:
        SceneParseError: unknown animation kind, empty line or missing parameters
    """
    kind, params = _split_record(line, TransformKind, SceneErrorKind.UNKNOWN_ANIMATION, "animation")
    required = ANIMATION_PARAM_COUNT[kind]
    _require(params, required, kind, line)
    return _ANIMATION_BUILDERS[kind](params, center, len(params) > required)
