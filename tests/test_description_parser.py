"""
Tests for figure / animation line parsing.

Covers:
- Figure lines (rectangle, circle) including degree -> radian conversion
- Animation lines with move deltas and the trailing cycle token
- Zero / black fallbacks for bad fields
- Fatal errors for unknown kinds and missing parameters
"""

import math

import pytest

from models.color import Color
from models.domain import (
    CircleShape,
    Figure,
    MoveTransform,
    RectangleShape,
    RotateTransform,
    ScaleTransform,
)
from models.enums import SceneErrorKind, ShapeKind, TransformKind
from models.geometry import Point, Size
from parsing.description_parser import (
    parse_animation,
    parse_duration,
    parse_figure,
    parse_number,
    tokenize,
)
from parsing.errors import SceneParseError


class TestTokens:

    def test_tokenize_collapses_whitespace_runs(self):
        assert tokenize("  circle\t10   20 5  red \n") == ["circle", "10", "20", "5", "red"]

    def test_tokenize_empty_line(self):
        assert tokenize("   ") == []

    def test_parse_number_falls_back_to_zero(self):
        assert parse_number("abc") == 0.0
        assert parse_number("12.5") == 12.5
        assert parse_number("-3") == -3.0

    @pytest.mark.parametrize("token", ["nan", "inf", "-Infinity", "1e999", "1_000", "\u0661\u0662", "0x10", " 5"])
    def test_parse_number_rejects_non_plain_decimals(self, token):
        assert parse_number(token) == 0.0

    def test_parse_number_accepts_plain_decimal_forms(self):
        assert parse_number("+2") == 2.0
        assert parse_number(".5") == 0.5
        assert parse_number("5.") == 5.0
        assert parse_number("1e3") == 1000.0

    def test_non_finite_coordinate_reparses_equal(self):
        line = "circle nan inf 1 red"

        assert parse_figure(line) == parse_figure(line)
        assert parse_figure(line).center == Point(0, 0)

    def test_parse_duration_milliseconds_to_seconds(self):
        assert parse_duration("500") == pytest.approx(0.5)
        assert parse_duration("soon") == 0.0


class TestFigureParsing:

    def test_circle(self):
        figure = parse_figure("circle 10 20 5 red")

        assert figure == Figure(center=Point(10, 20), color=Color.RED, shape=CircleShape(radius=5))
        assert figure.shape.kind == ShapeKind.CIRCLE

    def test_rectangle_angle_in_radians(self):
        figure = parse_figure("rectangle 0 0 10 20 90 white")

        assert isinstance(figure.shape, RectangleShape)
        assert figure.shape.size == Size(10, 20)
        assert figure.shape.angle == pytest.approx(math.pi / 2)
        assert figure.color == Color.WHITE

    def test_unknown_color_falls_back_to_black(self):
        figure = parse_figure("circle 10 20 5 cyan")
        assert figure.color == Color.BLACK

    def test_color_match_is_case_sensitive(self):
        assert parse_figure("circle 0 0 1 Red").color == Color.BLACK

    def test_unparsable_coordinate_falls_back_to_zero(self):
        figure = parse_figure("circle abc 20 5 yellow")

        assert figure.center == Point(0, 20)
        assert figure.color == Color.YELLOW

    def test_extra_figure_tokens_ignored(self):
        assert parse_figure("circle 1 2 3 red whatever") == parse_figure("circle 1 2 3 red")

    def test_unknown_figure_is_fatal(self):
        with pytest.raises(SceneParseError) as exc_info:
            parse_figure("triangle 0 0 10 red")

        assert exc_info.value.kind == SceneErrorKind.UNKNOWN_FIGURE
        assert exc_info.value.code == "UNKNOWN_FIGURE"
        assert exc_info.value.details["line"] == "triangle 0 0 10 red"

    def test_missing_parameters_are_fatal(self):
        with pytest.raises(SceneParseError) as exc_info:
            parse_figure("rectangle 0 0 10 20 90")

        assert exc_info.value.kind == SceneErrorKind.MISSING_TOKEN

    def test_empty_line_is_fatal(self):
        with pytest.raises(SceneParseError) as exc_info:
            parse_figure("")

        assert exc_info.value.kind == SceneErrorKind.EMPTY_LINE

    def test_bounding_box(self):
        rect = parse_figure("rectangle 50 50 20 10 0 red")
        circle = parse_figure("circle 50 50 5 red")

        assert rect.bounding_box() == (Point(40, 45), Size(20, 10))
        assert circle.bounding_box() == (Point(45, 45), Size(10, 10))


class TestAnimationParsing:

    CENTER = Point(10, 20)

    def test_move_stores_delta_from_center(self):
        animation = parse_animation("move 15 20 500", self.CENTER)

        assert animation.transform == MoveTransform(dx=5, dy=0)
        assert animation.transform.kind == TransformKind.MOVE
        assert animation.duration == pytest.approx(0.5)
        assert animation.cycles is False

    def test_move_extra_token_cycles(self):
        plain = parse_animation("move 15 20 500", self.CENTER)
        cycling = parse_animation("move 15 20 500 x", self.CENTER)

        assert cycling.transform == plain.transform
        assert cycling.duration == plain.duration
        assert cycling.cycles is True

    def test_rotate(self):
        animation = parse_animation("rotate 180 2000", self.CENTER)

        assert isinstance(animation.transform, RotateTransform)
        assert animation.transform.angle == pytest.approx(math.pi)
        assert animation.duration == pytest.approx(2.0)
        assert animation.cycles is False

    def test_rotate_cycle_token_value_not_inspected(self):
        assert parse_animation("rotate 90 100 0", self.CENTER).cycles is True

    def test_scale_cycles(self):
        animation = parse_animation("scale 1.5 300 yes", self.CENTER)

        assert animation.transform == ScaleTransform(factor=1.5)
        assert animation.duration == pytest.approx(0.3)
        assert animation.cycles is True

    def test_rotate_and_scale_ignore_center(self):
        assert parse_animation("scale 2 100", Point(0, 0)) == parse_animation("scale 2 100", self.CENTER)

    def test_unparsable_duration_is_zero(self):
        assert parse_animation("scale 2 fast", self.CENTER).duration == 0.0

    def test_unknown_animation_is_fatal(self):
        with pytest.raises(SceneParseError) as exc_info:
            parse_animation("fade 0.5 100", self.CENTER)

        assert exc_info.value.kind == SceneErrorKind.UNKNOWN_ANIMATION
        assert "move" in exc_info.value.details["expected"]

    def test_missing_duration_is_fatal(self):
        with pytest.raises(SceneParseError) as exc_info:
            parse_animation("move 15 20", self.CENTER)

        assert exc_info.value.kind == SceneErrorKind.MISSING_TOKEN

    def test_visible_duration(self):
        assert parse_animation("rotate 90 500", self.CENTER).visible_duration == pytest.approx(0.5)
        assert parse_animation("scale 2 300 c", self.CENTER).visible_duration == pytest.approx(0.6)
