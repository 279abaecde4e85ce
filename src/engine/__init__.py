"""Timeline derivation and playback control"""

from engine.timeline import (
    PlayableAnimation,
    layer_total_duration,
    scene_total_duration,
    derive_playable,
    derive_layer,
    derive_scene,
)
from engine.playback import LayerClock, AttachedLayer, PlaybackController

__all__ = [
    "PlayableAnimation",
    "layer_total_duration",
    "scene_total_duration",
    "derive_playable",
    "derive_layer",
    "derive_scene",
    "LayerClock",
    "AttachedLayer",
    "PlaybackController",
]
