"""
Serialization utilities - Scene model and playable descriptors to plain dicts

Provides conversion for hosts that take JSON-like payloads:
- Enums -> names
- Figures, animations, scenes -> dicts
- PlayableAnimation -> dict
"""

from typing import Any, Dict, Optional, List
from enum import Enum

from models.domain import (
    Animation,
    CircleShape,
    Figure,
    Layer,
    MoveTransform,
    RectangleShape,
    RotateTransform,
    ScaleTransform,
    Scene,
)
from engine.timeline import PlayableAnimation, layer_total_duration, scene_total_duration


class Serializer:
    """Central enum and model serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    # ========================================================================
    # FIGURE SERIALIZATION
    # ========================================================================

    @staticmethod
    def figure_to_dict(figure: Figure) -> Dict[str, Any]:
        """
        Serialize figure to dict

        Returns:
            Dict with center, color (name + rgb) and shape fields
        """
        shape = figure.shape
        shape_dict: Dict[str, Any] = {"kind": shape.kind.name}
        if isinstance(shape, RectangleShape):
            shape_dict["size"] = [shape.size.width, shape.size.height]
            shape_dict["angle"] = shape.angle
        elif isinstance(shape, CircleShape):
            shape_dict["radius"] = shape.radius
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")

        return {
            "center": [figure.center.x, figure.center.y],
            "color": {"name": Serializer.enum_to_str(figure.color), "rgb": list(figure.color.to_rgb())},
            "shape": shape_dict,
        }

    # ========================================================================
    # ANIMATION SERIALIZATION
    # ========================================================================

    @staticmethod
    def animation_to_dict(animation: Animation) -> Dict[str, Any]:
        """Serialize animation to dict (transform fields flattened)"""
        transform = animation.transform
        result: Dict[str, Any] = {
            "kind": transform.kind.name,
            "duration": animation.duration,
            "cycles": animation.cycles,
        }

        if isinstance(transform, MoveTransform):
            result["delta"] = [transform.dx, transform.dy]
        elif isinstance(transform, RotateTransform):
            result["angle"] = transform.angle
        elif isinstance(transform, ScaleTransform):
            result["factor"] = transform.factor
        else:
            raise TypeError(f"Unsupported transform: {type(transform).__name__}")

        return result

    @staticmethod
    def playable_to_dict(playable: PlayableAnimation) -> Dict[str, Any]:
        """Serialize host descriptor to dict"""
        to_value = playable.to_value
        return {
            "kind": playable.transform_kind.name,
            "key_path": playable.key_path,
            "to_value": list(to_value) if isinstance(to_value, tuple) else to_value,
            "duration": playable.duration,
            "autoreverses": playable.autoreverses,
            "fill_forwards": playable.fill_forwards,
            "removed_on_completion": playable.removed_on_completion,
        }

    # ========================================================================
    # SCENE SERIALIZATION
    # ========================================================================

    @staticmethod
    def layer_to_dict(layer: Layer) -> Dict[str, Any]:
        return {
            "figure": Serializer.figure_to_dict(layer.figure),
            "animations": [Serializer.animation_to_dict(a) for a in layer.animations],
            "total_duration": layer_total_duration(layer),
        }

    @staticmethod
    def scene_to_dict(scene: Scene) -> Dict[str, Any]:
        """
        Serialize scene to dict

        Returns:
            Dict with size, total_duration and layers in z-order
        """
        layers: List[Dict[str, Any]] = [Serializer.layer_to_dict(layer) for layer in scene.layers]
        return {
            "size": [scene.size.width, scene.size.height],
            "total_duration": scene_total_duration(scene),
            "layers": layers,
        }
