"""
Scene block parser

Layout (strictly positional, no blank or comment lines between records):

    <width> <height>
    <layer_count>
    <figure line>            -+
    <animation_count>         | repeated layer_count times
    <animation line> * count -+

Lines after the last declared layer are ignored.
"""

from typing import List

from models.domain import Layer, Scene
from models.enums import LogCategory, SceneErrorKind
from models.geometry import Size
from parsing.description_parser import INTEGER_PATTERN, parse_animation, parse_figure, tokenize
from parsing.errors import SceneError, SceneFormatError
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.PARSER)


class _LineCursor:
    """Sequential reader over scene lines that fails loudly when it runs out"""

    def __init__(self, lines: List[str]):
        self.lines = lines
        self.index = 0

    def next(self, what: str) -> str:
        if self.index >= len(self.lines):
            raise SceneFormatError(
                SceneErrorKind.TRUNCATED,
                f"Scene ended early, expected {what}",
                {"line_index": self.index, "line_count": len(self.lines)},
            )
        line = self.lines[self.index]
        self.index += 1
        return line


def _header_error(message: str, line: str, line_index: int) -> SceneFormatError:
    return SceneFormatError(
        SceneErrorKind.MALFORMED_HEADER,
        message,
        {"line": line, "line_index": line_index},
    )


def _parse_int(token: str, message: str, line: str, line_index: int) -> int:
    if not INTEGER_PATTERN.fullmatch(token):
        raise _header_error(message, line, line_index)
    return int(token)


def _parse_count(line: str, what: str, line_index: int) -> int:
    tokens = tokenize(line)
    if len(tokens) != 1:
        raise _header_error(f"Expected integer {what}", line, line_index)

    value = _parse_int(tokens[0], f"Expected integer {what}", line, line_index)
    if value < 0:
        raise _header_error(f"Negative {what}", line, line_index)
    return value


def _parse_size(line: str) -> Size:
    message = "Expected '<width> <height>' integers"
    tokens = tokenize(line)
    if len(tokens) < 2:
        raise _header_error(message, line, 0)

    return Size(
        _parse_int(tokens[0], message, line, 0),
        _parse_int(tokens[1], message, line, 0),
    )


def parse_scene(text: str) -> Scene:
    """
    Parse a whole scene block.

    The result is all or nothing: any error aborts the parse and no
    partial Scene is returned.

    Raises:
        SceneFormatError: bad header / counts, or fewer lines than declared
        SceneParseError: a figure or animation line is invalid
    """
    cursor = _LineCursor(text.splitlines())

    size = _parse_size(cursor.next("scene size"))
    layer_count = _parse_count(cursor.next("layer count"), "layer count", cursor.index - 1)

    layers: List[Layer] = []
    for layer_index in range(layer_count):
        try:
            figure_line = cursor.next(f"figure of layer {layer_index}")
            figure = parse_figure(figure_line)

            animation_count = _parse_count(
                cursor.next(f"animation count of layer {layer_index}"),
                "animation count",
                cursor.index - 1,
            )
            animations = tuple(
                parse_animation(cursor.next(f"animation {i} of layer {layer_index}"), figure.center)
                for i in range(animation_count)
            )
        except SceneError as ex:
            ex.details.setdefault("line_index", cursor.index - 1)
            ex.with_details(layer_index=layer_index, layer_count=layer_count)
            raise

        layers.append(Layer(figure=figure, animations=animations))

    log.debug("Parsed scene", size=f"{size.width:g}x{size.height:g}", layers=len(layers))
    return Scene(size=size, layers=tuple(layers))
