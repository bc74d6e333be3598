# fantasmagorie

Animation building blocks for user interfaces. The package has no dependencies.

- **`fantasmagorie.easing`** holds the standard easing curves: `linear`,
  `ease_in_*`, `ease_out_*` and `ease_in_out_*` in the quad, cubic, quart, quint,
  sine, expo and circ families (for in-out there are only quad, cubic, quart and
  sine), plus `ease_in_elastic`, `ease_out_elastic`, `ease_in_back`,
  `ease_out_back`, `ease_in_bounce` and `ease_out_bounce`. Each one maps a
  normalised time `t` in `[0, 1]` to an eased value.
- **`fantasmagorie.keyframe`** provides `Keyframe`, `KeyframeTrack` and `Timeline`,
  along with the enums `LoopMode`, `PlaybackState` and `Direction`.
- **`fantasmagorie.spring`** provides `SpringConfig`, `Spring`, `Spring2D` and
  `SpringColor`. It also has preset configurations: `DEFAULT`, `GENTLE`, `WOBBLY`,
  `STIFF`, `SLOW`, `MOLASSES`, `NO_WOBBLE`, `IOS_DEFAULT`, `MATERIAL` and `BOUNCY`.
- **`fantasmagorie.groups`** provides `Tween`, `SequentialGroup`, `ParallelGroup`,
  `StaggeredGroup`, the abstract base `Animation`, the `AnimationState` enum and
  `AnimationManager`.

## Installation

```
pip install fantasmagorie
```

## Keyframe timeline

```python
from fantasmagorie.keyframe import KeyframeTrack, LoopMode, Timeline

timeline = Timeline(1000.0)
timeline.add_track(KeyframeTrack("x", 1000.0).keyframe(0.0, 0.0).keyframe(1.0, 100.0))
timeline.play()
timeline.update(500.0)
print(timeline.get("x"))  # 50.0
```

Keyframe times are normalised to the range 0 to 1. A track samples at the
timeline's progress, `current_time_ms / duration_ms`.

`keyframe_eased(time, value, easing)` sets the curve used to reach that
keyframe. `Timeline.get` returns `None` for a track name that does not exist.
`get_all` returns a dict of every track's current value.

Playback is controlled with `play`, `pause`, `stop` and `seek`:

- `stop` rewinds the timeline to the start.
- Set `timeline.loop_mode` to a `LoopMode`: `ONCE`, `LOOP` or `PING_PONG`.
- `timeline.speed` scales each update.

## Springs

```python
from fantasmagorie.spring import STIFF, Spring

spring = Spring(STIFF)
spring.value = 0.0
spring.target = 100.0
for _ in range(60):
    spring.update(1 / 60)
print(round(spring.value))  # close to 100
```

`Spring.update` takes one explicit Euler step. It stops moving once both the
displacement and the velocity are below their thresholds; `set_thresholds`
changes them.

`jump_to` puts the spring at rest at a value. `SpringConfig` reports whether a
configuration is under-, over- or critically damped.

- `Spring2D` animates a point.
- `SpringColor` animates RGBA channels. Its `update` returns each channel clamped
  to `[0, 1]`.

## Tweens and groups

```python
from fantasmagorie.groups import SequentialGroup, Tween

group = SequentialGroup(Tween(0.0, 50.0, 500.0), Tween(50.0, 100.0, 500.0))
group.start()
group.update(500.0)
group.update(500.0)
print(group.is_complete())  # True
```

A `Tween` interpolates between numbers or tuples of numbers. It takes an optional
`easing` function and `delay_ms`. Its `update` returns the current value.

- `SequentialGroup` runs its animations one after another.
- `ParallelGroup` runs them together and reports the progress of its slowest member.
- `StaggeredGroup` starts each animation after its own delay. Delays come from
  `add(delay_ms, animation)` or from `stagger(stagger_ms, animations)`. Its
  progress is the mean progress of its members.

Groups nest, because each group is itself an `Animation`.

`AnimationManager` keeps named animations:

- `update` advances all of them.
- `cleanup` removes the ones that have completed.
- An unknown name counts as complete, with progress 1.0.

## What the package does not do

The package computes animated values only. It draws nothing. It has no widgets,
window, event loop or rendering backend. Applying the values it produces is up
to the calling code.

## Running the tests

```
pip install -e ".[test]"
pytest
```