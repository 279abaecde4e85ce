"""
Tests for pause / resume over attached layers.

Uses a manually advanced clock so the frozen interval is exact.
"""

import pytest

from engine.playback import LayerClock, PlaybackController
from parsing.scene_parser import parse_scene


class TestLayerClock:

    def test_running_clock_follows_parent(self):
        clock = LayerClock()

        assert clock.local_time(12.0) == 12.0

    def test_pause_freezes_local_time(self):
        clock = LayerClock()
        clock.pause(5.0)

        assert clock.paused
        assert clock.local_time(5.0) == 5.0
        assert clock.local_time(50.0) == 5.0

    def test_resume_continues_from_pause_point(self):
        clock = LayerClock()
        clock.pause(5.0)
        clock.resume(8.0)

        assert not clock.paused
        assert clock.local_time(8.0) == pytest.approx(5.0)
        assert clock.local_time(9.5) == pytest.approx(6.5)

    def test_repeated_pause_resume(self):
        clock = LayerClock()
        clock.pause(1.0)
        clock.resume(3.0)
        clock.pause(4.0)
        clock.resume(10.0)

        # 1s before first pause + 1s between resume and second pause
        assert clock.local_time(10.0) == pytest.approx(2.0)

    def test_redundant_calls_are_noops(self):
        clock = LayerClock()
        clock.resume(2.0)
        assert clock.local_time(3.0) == 3.0

        clock.pause(3.0)
        clock.pause(7.0)
        assert clock.local_time(9.0) == 3.0


class TestPlaybackController:

    @pytest.fixture
    def scene(self, scene_text):
        return parse_scene(scene_text)

    def test_attach_starts_all_animations_together(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        bottom, top = controller.attach_scene(scene)

        assert controller.progress(bottom) == (0.0, 0.0)

        fake_clock.advance(0.25)
        # move 1s cycling, scale 0.5s
        assert controller.progress(bottom) == pytest.approx((0.25, 0.5))
        assert controller.elapsed(top) == pytest.approx(0.25)

    def test_pause_freezes_progress(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        bottom, _ = controller.attach_scene(scene)

        fake_clock.advance(0.25)
        controller.pause()
        frozen = controller.values(bottom)

        fake_clock.advance(30.0)

        assert controller.is_paused
        assert controller.values(bottom) == frozen

    def test_resume_continues_as_if_no_time_passed(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        bottom, top = controller.attach_scene(scene)

        fake_clock.advance(0.25)
        controller.pause()
        fake_clock.advance(30.0)
        controller.resume()

        assert controller.elapsed(bottom) == pytest.approx(0.25)
        fake_clock.advance(0.5)
        assert controller.elapsed(top) == pytest.approx(0.75)

    def test_redundant_pause_and_resume(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        (bottom, _) = controller.attach_scene(scene)

        controller.resume()
        fake_clock.advance(1.0)
        controller.pause()
        fake_clock.advance(1.0)
        controller.pause()
        fake_clock.advance(1.0)
        controller.resume()
        controller.resume()

        assert controller.elapsed(bottom) == pytest.approx(1.0)

    def test_attach_while_paused_starts_frozen(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        controller.pause()
        attached = controller.attach(scene.layers[0])

        fake_clock.advance(5.0)
        assert controller.elapsed(attached) == 0.0

        controller.resume()
        fake_clock.advance(0.5)
        assert controller.elapsed(attached) == pytest.approx(0.5)

    def test_is_finished_after_total_duration(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        controller.attach_scene(scene)

        fake_clock.advance(1.9)
        assert not controller.is_finished()

        fake_clock.advance(0.2)
        assert controller.is_finished()

    def test_detach_all(self, scene, fake_clock):
        controller = PlaybackController(clock=fake_clock)
        controller.attach_scene(scene)
        controller.pause()
        controller.detach_all()

        assert controller.attached == []
        assert not controller.is_paused
