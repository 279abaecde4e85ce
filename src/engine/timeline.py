"""
Animation Timeline Deriver

Computes total durations and the playable descriptors a host animation
primitive consumes. All animations of a layer start together when the
layer is attached; attaching is the host's job (see engine.playback).

Playable descriptors hold at the end value (fill forwards, never removed
on completion). With autoreverse they return to the start value after
the second half.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from models.domain import (
    Animation,
    Layer,
    MoveTransform,
    RotateTransform,
    ScaleTransform,
    Scene,
    Transform,
)
from models.enums import LogCategory, TransformKind
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.TIMELINE)

TransformValue = Union[float, Tuple[float, float]]

# Host property each transform drives
KEY_PATHS = {
    TransformKind.MOVE: "position",
    TransformKind.ROTATE: "transform.rotation.z",
    TransformKind.SCALE: "transform",
}

IDENTITY_VALUES = {
    TransformKind.MOVE: (0.0, 0.0),
    TransformKind.ROTATE: 0.0,
    TransformKind.SCALE: (1.0, 1.0),
}


# === TOTAL DURATIONS ===

def layer_total_duration(layer: Layer) -> float:
    """Longest visible duration among the layer's animations (0 if none)"""
    return max((a.visible_duration for a in layer.animations), default=0.0)


def scene_total_duration(scene: Scene) -> float:
    """Longest layer total in the scene (0 if no layers)"""
    return max((layer_total_duration(layer) for layer in scene.layers), default=0.0)


# === PLAYABLE DESCRIPTORS ===

@dataclass(frozen=True)
class PlayableAnimation:
    """
    (target, duration, reverse-flag) handed to the host animation primitive

    Attributes:
        transform_kind: Which transform this animates
        key_path: Host property name driven by the animation
        to_value: Target value - (dx, dy) move delta, rotation angle in
            radians, or (sx, sy) scale
        duration: One-way duration in seconds
        autoreverses: Go to target then back to start
    """
    transform_kind: TransformKind
    key_path: str
    to_value: TransformValue
    duration: float
    autoreverses: bool
    fill_forwards: bool = True
    removed_on_completion: bool = False

    @property
    def from_value(self) -> TransformValue:
        return IDENTITY_VALUES[self.transform_kind]

    def progress_at(self, local_time: float) -> float:
        """
        Linear progress (0.0 = start value, 1.0 = target) at local time.

        Without autoreverse the progress holds at 1.0 after `duration`;
        with it, progress falls back over a second `duration` and holds at 0.0.
        """
        if local_time <= 0:
            return 0.0

        d = self.duration
        if d <= 0:
            return 0.0 if self.autoreverses else 1.0

        if not self.autoreverses:
            return min(local_time / d, 1.0)

        if local_time < d:
            return local_time / d
        if local_time < 2 * d:
            return 1.0 - (local_time - d) / d
        return 0.0

    def value_at(self, local_time: float) -> TransformValue:
        """Interpolated transform value at local time"""
        p = self.progress_at(local_time)
        start, end = self.from_value, self.to_value
        if isinstance(end, tuple):
            return (start[0] + (end[0] - start[0]) * p, start[1] + (end[1] - start[1]) * p)
        return start + (end - start) * p


def _to_value(transform: Transform) -> TransformValue:
    if isinstance(transform, MoveTransform):
        return (transform.dx, transform.dy)
    if isinstance(transform, RotateTransform):
        return transform.angle
    if isinstance(transform, ScaleTransform):
        return (transform.factor, transform.factor)
    raise TypeError(f"Unsupported transform: {type(transform).__name__}")


def derive_playable(animation: Animation) -> PlayableAnimation:
    """Build the host descriptor for one animation"""
    transform = animation.transform
    return PlayableAnimation(
        transform_kind=transform.kind,
        key_path=KEY_PATHS[transform.kind],
        to_value=_to_value(transform),
        duration=animation.duration,
        autoreverses=animation.cycles,
    )


def derive_layer(layer: Layer) -> Tuple[PlayableAnimation, ...]:
    """Descriptors for every animation of a layer, in file order"""
    return tuple(derive_playable(a) for a in layer.animations)


def derive_scene(scene: Scene) -> Tuple[Tuple[PlayableAnimation, ...], ...]:
    """Per-layer descriptors, in z-order"""
    playables = tuple(derive_layer(layer) for layer in scene.layers)
    log.debug(
        "Derived scene timeline",
        layers=len(playables),
        animations=sum(len(p) for p in playables),
        total_duration=f"{scene_total_duration(scene):.3f}s",
    )
    return playables
