"""Scene domain models"""

from dataclasses import dataclass
from typing import Tuple

from models.domain.animation import Animation
from models.domain.figure import Figure
from models.geometry import Size


@dataclass(frozen=True)
class Layer:
    """Figure plus its concurrently running animations"""
    figure: Figure
    animations: Tuple[Animation, ...] = ()


@dataclass(frozen=True)
class Scene:
    """
    Fixed-size canvas with a stack of layers.

    Layer order is paint order: the first layer is at the bottom.
    """
    size: Size
    layers: Tuple[Layer, ...] = ()
