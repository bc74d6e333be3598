import pytest

from fantasmagorie.easing import ease_in_quad, linear
from fantasmagorie.keyframe import (
    Direction,
    Keyframe,
    KeyframeTrack,
    LoopMode,
    PlaybackState,
    Timeline,
)


def _linear_timeline(loop_mode=LoopMode.ONCE):
    timeline = Timeline(1000.0)
    timeline.add_track(KeyframeTrack("x", 1000.0).keyframe(0.0, 0.0).keyframe(1.0, 100.0))
    timeline.loop_mode = loop_mode
    return timeline


def test_keyframe_interpolation():
    track = (
        KeyframeTrack("opacity", 1000.0)
        .keyframe(0.0, 0.0)
        .keyframe(0.5, 1.0)
        .keyframe(1.0, 0.5)
    )
    assert track.sample(0.0) == 0.0
    assert track.sample(0.5) == 1.0
    assert track.sample(1.0) == 0.5
    assert abs(track.sample(0.25) - 0.5) < 0.01


def test_timeline_playback():
    timeline = _linear_timeline()
    timeline.play()
    timeline.update(500.0)
    assert abs(timeline.get("x") - 50.0) < 0.01


def test_keyframe_default_and_with_easing():
    kf = Keyframe(0.2, 3.0)
    assert kf.easing is linear
    eased = kf.with_easing(ease_in_quad)
    assert eased.easing is ease_in_quad
    assert (eased.time, eased.value) == (0.2, 3.0)


def test_keyframes_sorted_on_insert():
    track = KeyframeTrack("x", 100.0).keyframe(1.0, 10.0).keyframe(0.0, 0.0)
    assert [kf.time for kf in track.keyframes] == [0.0, 1.0]
    assert track.sample(0.5) == pytest.approx(5.0)


def test_empty_and_single_track():
    assert KeyframeTrack("a", 100.0).sample(0.3) == 0.0
    assert KeyframeTrack("a", 100.0).keyframe(0.4, 7.0).sample(0.9) == 7.0


def test_sample_clamps_time():
    track = KeyframeTrack("x", 100.0).keyframe(0.0, 2.0).keyframe(1.0, 4.0)
    assert track.sample(-1.0) == 2.0
    assert track.sample(5.0) == 4.0


def test_sample_beyond_last_keyframe_holds_value():
    track = KeyframeTrack("x", 100.0).keyframe(0.0, 0.0).keyframe(0.5, 8.0)
    assert track.sample(0.9) == 8.0


def test_eased_keyframe():
    track = KeyframeTrack("x", 100.0).keyframe(0.0, 0.0).keyframe_eased(1.0, 100.0, ease_in_quad)
    assert track.sample(0.5) == pytest.approx(25.0)


def test_once_stops_at_end():
    timeline = _linear_timeline()
    timeline.play()
    timeline.update(1500.0)
    assert timeline.current_time_ms == 1000.0
    assert timeline.is_complete()
    assert not timeline.is_playing()
    assert timeline.get("x") == pytest.approx(100.0)


def test_loop_wraps_time():
    timeline = _linear_timeline(LoopMode.LOOP)
    timeline.play()
    timeline.update(1200.0)
    assert timeline.progress() == pytest.approx(0.2)
    assert timeline.is_playing()


def test_ping_pong_reverses():
    timeline = _linear_timeline(LoopMode.PING_PONG)
    timeline.play()
    timeline.update(1200.0)
    assert timeline.current_time_ms == 1000.0
    assert timeline.direction is Direction.REVERSE
    timeline.update(300.0)
    assert timeline.get("x") == pytest.approx(70.0)
    timeline.update(800.0)
    assert timeline.current_time_ms == 0.0
    assert timeline.direction is Direction.FORWARD


def test_pause_and_stopped_ignore_updates():
    timeline = _linear_timeline()
    timeline.update(300.0)
    assert timeline.current_time_ms == 0.0
    timeline.play()
    timeline.update(300.0)
    timeline.pause()
    timeline.update(300.0)
    assert timeline.current_time_ms == 300.0
    assert timeline.state is PlaybackState.PAUSED


def test_stop_resets():
    timeline = _linear_timeline(LoopMode.PING_PONG)
    timeline.play()
    timeline.update(1100.0)
    timeline.stop()
    assert timeline.current_time_ms == 0.0
    assert timeline.direction is Direction.FORWARD
    assert timeline.state is PlaybackState.STOPPED
    assert not timeline.is_complete()


def test_seek_clamps():
    timeline = _linear_timeline()
    timeline.seek(-50.0)
    assert timeline.current_time_ms == 0.0
    timeline.seek(5000.0)
    assert timeline.current_time_ms == 1000.0
    timeline.seek(250.0)
    assert timeline.get("x") == pytest.approx(25.0)


def test_speed_scales_delta():
    timeline = _linear_timeline()
    timeline.speed = 2.0
    timeline.play()
    timeline.update(100.0)
    assert timeline.current_time_ms == pytest.approx(200.0)


def test_get_missing_and_get_all():
    timeline = _linear_timeline()
    timeline.add_track(KeyframeTrack("y", 1000.0).keyframe(0.0, 10.0).keyframe(1.0, 20.0))
    timeline.seek(500.0)
    assert timeline.get("missing") is None
    values = timeline.get_all()
    assert values == pytest.approx({"x": 50.0, "y": 15.0})