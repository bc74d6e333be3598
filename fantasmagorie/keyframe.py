"""Keyframe tracks and timelines with looping and ping-pong playback."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

from fantasmagorie.easing import EasingFn, linear

__all__ = [
    "Keyframe",
    "LoopMode",
    "PlaybackState",
    "Direction",
    "KeyframeTrack",
    "Timeline",
]


@dataclass(frozen=True)
class Keyframe:
    """A value at a point in time, eased in from the previous keyframe."""

    time: float
    value: float
    easing: EasingFn = linear

    def with_easing(self, easing: EasingFn) -> Keyframe:
        return dataclasses.replace(self, easing=easing)


class LoopMode(enum.Enum):
    ONCE = "once"
    LOOP = "loop"
    PING_PONG = "ping_pong"


class PlaybackState(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class Direction(enum.Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class KeyframeTrack:
    """Keyframes for one property, kept sorted by time."""

    def __init__(self, name: str, duration_ms: float) -> None:
        self.name = name
        self.duration_ms = duration_ms
        self.keyframes: list[Keyframe] = []

    def add_keyframe(self, keyframe: Keyframe) -> KeyframeTrack:
        self.keyframes.append(keyframe)
        self.keyframes.sort(key=lambda kf: kf.time)
        return self

    def keyframe(self, time: float, value: float) -> KeyframeTrack:
        return self.add_keyframe(Keyframe(time, value))

    def keyframe_eased(self, time: float, value: float, easing: EasingFn) -> KeyframeTrack:
        return self.add_keyframe(Keyframe(time, value, easing))

    def sample(self, t: float) -> float:
        """Interpolated value at normalized time t, clamped to [0, 1]."""
        if not self.keyframes:
            return 0.0
        if len(self.keyframes) == 1:
            return self.keyframes[0].value

        t = min(max(t, 0.0), 1.0)
        prev_idx = 0
        next_idx = 0
        for i, kf in enumerate(self.keyframes):
            if kf.time <= t:
                prev_idx = i
            next_idx = i
            if kf.time >= t:
                break

        prev = self.keyframes[prev_idx]
        if prev_idx == next_idx:
            return prev.value
        nxt = self.keyframes[next_idx]

        local_t = (t - prev.time) / (nxt.time - prev.time) if nxt.time > prev.time else 0.0
        return prev.value + (nxt.value - prev.value) * nxt.easing(local_t)


class Timeline:
    """Plays several keyframe tracks against a shared clock."""

    def __init__(self, duration_ms: float) -> None:
        self.tracks: dict[str, KeyframeTrack] = {}
        self.duration_ms = duration_ms
        self.current_time_ms = 0.0
        self.state = PlaybackState.STOPPED
        self.direction = Direction.FORWARD
        self.loop_mode = LoopMode.ONCE
        self.speed = 1.0

    def add_track(self, track: KeyframeTrack) -> None:
        self.tracks[track.name] = track

    def play(self) -> None:
        self.state = PlaybackState.PLAYING

    def pause(self) -> None:
        self.state = PlaybackState.PAUSED

    def stop(self) -> None:
        self.state = PlaybackState.STOPPED
        self.current_time_ms = 0.0
        self.direction = Direction.FORWARD

    def seek(self, time_ms: float) -> None:
        self.current_time_ms = min(max(time_ms, 0.0), self.duration_ms)

    def update(self, delta_ms: float) -> None:
        if self.state is not PlaybackState.PLAYING:
            return
        delta = delta_ms * self.speed

        if self.direction is Direction.FORWARD:
            self.current_time_ms += delta
            if self.current_time_ms >= self.duration_ms:
                if self.loop_mode is LoopMode.ONCE:
                    self.current_time_ms = self.duration_ms
                    self.state = PlaybackState.STOPPED
                elif self.loop_mode is LoopMode.LOOP:
                    self.current_time_ms %= self.duration_ms
                else:
                    self.current_time_ms = self.duration_ms
                    self.direction = Direction.REVERSE
        else:
            self.current_time_ms -= delta
            if self.current_time_ms <= 0.0:
                if self.loop_mode is LoopMode.ONCE:
                    self.current_time_ms = 0.0
                    self.state = PlaybackState.STOPPED
                elif self.loop_mode is LoopMode.LOOP:
                    self.current_time_ms = self.duration_ms
                else:
                    self.current_time_ms = 0.0
                    self.direction = Direction.FORWARD

    def get(self, track_name: str) -> float | None:
        """Current value of a track, or None if there is no such track."""
        track = self.tracks.get(track_name)
        if track is None:
            return None
        return track.sample(self.progress())

    def get_all(self) -> dict[str, float]:
        t = self.progress()
        return {name: track.sample(t) for name, track in self.tracks.items()}

    def progress(self) -> float:
        return self.current_time_ms / self.duration_ms

    def is_complete(self) -> bool:
        return self.state is PlaybackState.STOPPED and self.current_time_ms >= self.duration_ms

    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING