"""
Color model - Closed set of named figure colors

Scene descriptions name colors by lowercase word. Anything outside the
known set degrades to black instead of failing the load.
"""

from enum import Enum
from typing import Tuple

from utils.enum_helper import EnumHelper


class Color(Enum):
    """
    Named figure color

    Examples:
        Color.from_name("red")      # Color.RED
        Color.from_name("cyan")     # Color.BLACK (fallback)
        Color.RED.to_rgb()          # (255, 0, 0)
    """

    BLACK = "black"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"

    # === CONSTRUCTORS ===

    @classmethod
    def from_name(cls, name: str) -> 'Color':
        """
        Resolve a color word from a description line

        Matching is exact on the lowercase word ("Red" is not red).

        Args:
            name: Color token as written in the file

        Returns:
            Matching Color, or BLACK if the word is unknown
        """
        return EnumHelper.from_value(cls, name, default=cls.BLACK)

    @classmethod
    def black(cls) -> 'Color':
        return cls.BLACK

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        """Get (r, g, b) with values 0-255 for the host renderer"""
        return _RGB[self]

    def to_rgba_float(self) -> Tuple[float, float, float, float]:
        """Get (r, g, b, a) with values 0.0-1.0 for hosts using float channels"""
        r, g, b = self.to_rgb()
        return (r / 255, g / 255, b / 255, 1.0)

    def __str__(self) -> str:
        return self.value


_RGB = {
    Color.BLACK: (0, 0, 0),
    Color.RED: (255, 0, 0),
    Color.WHITE: (255, 255, 255),
    Color.YELLOW: (255, 255, 0),
}
