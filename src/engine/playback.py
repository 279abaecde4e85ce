"""
Playback Controller

Pause / resume over all layers attached for the displayed scene.

Each attached layer carries a LayerClock using host-style media timing:

    local_time = (parent_time - begin_time) * speed + time_offset

Pausing freezes local time by zeroing the speed and storing the current
local time in time_offset. Resuming shifts begin_time by the paused
interval so progress continues exactly where it stopped. Redundant
pause() / resume() calls are no-ops.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from engine.timeline import PlayableAnimation, TransformValue, derive_layer, layer_total_duration
from models.domain import Layer, Scene
from models.enums import LogCategory
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.PLAYBACK)


@dataclass
class LayerClock:
    """Media timing of one attached layer"""
    speed: float = 1.0
    time_offset: float = 0.0
    begin_time: float = 0.0

    @property
    def paused(self) -> bool:
        return self.speed == 0.0

    def local_time(self, parent_time: float) -> float:
        """Convert clock time to this layer's local time"""
        return (parent_time - self.begin_time) * self.speed + self.time_offset

    def pause(self, now: float) -> None:
        if self.paused:
            return
        paused_time = self.local_time(now)
        self.speed = 0.0
        self.time_offset = paused_time

    def resume(self, now: float) -> None:
        if not self.paused:
            return
        paused_time = self.time_offset
        self.speed = 1.0
        self.time_offset = 0.0
        self.begin_time = 0.0
        self.begin_time = self.local_time(now) - paused_time


@dataclass
class AttachedLayer:
    """A layer whose animations all started at `start_time` (layer local time)"""
    layer: Layer
    playables: Tuple[PlayableAnimation, ...]
    start_time: float
    clock: LayerClock = field(default_factory=LayerClock)

    @property
    def total_duration(self) -> float:
        return layer_total_duration(self.layer)


class PlaybackController:
    """
    Drives the attached layers of one displayed scene.

    Example:
        controller = PlaybackController()
        attached = controller.attach_scene(scene)

        controller.pause()    # touch down
        controller.resume()   # touch up

        values = controller.values(attached[0])
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        """
        Args:
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self.clock = clock
        self._attached: List[AttachedLayer] = []
        self._paused = False

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def attached(self) -> List[AttachedLayer]:
        return list(self._attached)

    # === Attach ===

    def attach(self, layer: Layer) -> AttachedLayer:
        """Start all animations of `layer` now"""
        now = self.clock()
        clock = LayerClock()
        attached = AttachedLayer(
            layer=layer,
            playables=derive_layer(layer),
            start_time=clock.local_time(now),
            clock=clock,
        )
        if self._paused:
            clock.pause(now)

        self._attached.append(attached)
        log.debug("Layer attached", animations=len(attached.playables), paused=self._paused)
        return attached

    def attach_scene(self, scene: Scene) -> List[AttachedLayer]:
        """Attach every layer of the scene in z-order"""
        return [self.attach(layer) for layer in scene.layers]

    def detach_all(self) -> None:
        self._attached.clear()
        self._paused = False

    # === Control API ===

    def pause(self) -> None:
        """Freeze every attached layer at its current progress"""
        if self._paused:
            log.debug("pause() ignored, already paused")
            return

        now = self.clock()
        for attached in self._attached:
            attached.clock.pause(now)
        self._paused = True
        log.debug("Playback paused", layers=len(self._attached))

    def resume(self) -> None:
        """Continue every attached layer from where pause() froze it"""
        if not self._paused:
            log.debug("resume() ignored, not paused")
            return

        now = self.clock()
        for attached in self._attached:
            attached.clock.resume(now)
        self._paused = False
        log.debug("Playback resumed", layers=len(self._attached))

    # === Sampling ===

    def elapsed(self, attached: AttachedLayer) -> float:
        """Animation time elapsed on a layer since it was attached"""
        return attached.clock.local_time(self.clock()) - attached.start_time

    def progress(self, attached: AttachedLayer) -> Tuple[float, ...]:
        t = self.elapsed(attached)
        return tuple(p.progress_at(t) for p in attached.playables)

    def values(self, attached: AttachedLayer) -> Tuple[TransformValue, ...]:
        t = self.elapsed(attached)
        return tuple(p.value_at(t) for p in attached.playables)

    def is_finished(self) -> bool:
        """True once every attached layer has played its full visible duration"""
        return all(self.elapsed(a) >= a.total_duration for a in self._attached)
