"""Tweens and their composition into sequential, parallel and staggered groups."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar, Union

from fantasmagorie.easing import EasingFn, linear

__all__ = [
    "AnimationState",
    "Animation",
    "Tween",
    "SequentialGroup",
    "ParallelGroup",
    "StaggeredGroup",
    "AnimationManager",
]

Animatable = Union[float, tuple]
T = TypeVar("T", float, tuple)


def _lerp(start, end, t: float):
    """Interpolate numbers, or tuples of numbers component-wise."""
    if isinstance(start, tuple):
        return tuple(_lerp(a, b, t) for a, b in zip(start, end))
    return start + (end - start) * t


def _clamp01(x: float) -> float:
    return min(max(x, 0.0), 1.0)


class AnimationState(enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Animation(ABC):
    """Common interface of everything that can be run inside a group."""

    state: AnimationState

    @abstractmethod
    def start(self) -> None:
        """Begin running."""

    @abstractmethod
    def update(self, delta_ms: float):
        """Advance by ``delta_ms`` milliseconds."""

    def is_complete(self) -> bool:
        return self.state is AnimationState.COMPLETED

    def is_running(self) -> bool:
        return self.state is AnimationState.RUNNING

    @abstractmethod
    def progress(self) -> float:
        """Completion fraction in [0, 1]."""


class Tween(Animation, Generic[T]):
    """Interpolates from ``start_value`` to ``end_value`` over a duration."""

    def __init__(
        self,
        start_value: T,
        end_value: T,
        duration_ms: float,
        easing: EasingFn = linear,
        delay_ms: float = 0.0,
    ) -> None:
        self.start_value = start_value
        self.end_value = end_value
        self.duration_ms = duration_ms
        self.easing = easing
        self.delay_ms = delay_ms
        self.elapsed_ms = 0.0
        self.state = AnimationState.PENDING

    def start(self) -> None:
        self.state = AnimationState.RUNNING

    def update(self, delta_ms: float) -> T:
        """Advance and return the current value; the start value when not running."""
        if self.state is not AnimationState.RUNNING:
            return self.start_value
        self.elapsed_ms += delta_ms
        if self.elapsed_ms < self.delay_ms:
            return self.start_value
        t = _clamp01((self.elapsed_ms - self.delay_ms) / self.duration_ms)
        eased = self.easing(t)
        if t >= 1.0:
            self.state = AnimationState.COMPLETED
            return self.end_value
        return _lerp(self.start_value, self.end_value, eased)

    def is_complete(self) -> bool:
        return super().is_complete()

    def is_running(self) -> bool:
        return super().is_running()

    def progress(self) -> float:
        effective = max(self.elapsed_ms - self.delay_ms, 0.0)
        return _clamp01(effective / self.duration_ms)


class SequentialGroup(Animation):
    """Runs its animations one after another."""

    def __init__(self, *args: Animation) -> None:
        self.animations: list[Animation] = list(args)
        self.current_index = 0
        self.state = AnimationState.PENDING

    def add(self, animation: Animation) -> SequentialGroup:
        self.animations.append(animation)
        return self

    def start(self) -> None:
        self.state = AnimationState.RUNNING
        self.current_index = 0
        if self.animations:
            self.animations[0].start()

    def update(self, delta_ms: float) -> None:
        if self.state is not AnimationState.RUNNING:
            return
        if self.current_index >= len(self.animations):
            return
        current = self.animations[self.current_index]
        current.update(delta_ms)
        if current.is_complete():
            self.current_index += 1
            if self.current_index >= len(self.animations):
                self.state = AnimationState.COMPLETED
            else:
                self.animations[self.current_index].start()

    def is_complete(self) -> bool:
        return super().is_complete()

    def is_running(self) -> bool:
        return super().is_running()

    def progress(self) -> float:
        if not self.animations:
            return 1.0
        if self.current_index < len(self.animations):
            current = self.animations[self.current_index].progress()
        else:
            current = 0.0
        return (self.current_index + current) / len(self.animations)


class ParallelGroup(Animation):
    """Runs all its animations at once; complete when all are."""

    def __init__(self, *args: Animation) -> None:
        self.animations: list[Animation] = list(args)
        self.state = AnimationState.PENDING

    def add(self, animation: Animation) -> ParallelGroup:
        self.animations.append(animation)
        return self

    def start(self) -> None:
        self.state = AnimationState.RUNNING
        for anim in self.animations:
            anim.start()

    def update(self, delta_ms: float) -> None:
        if self.state is not AnimationState.RUNNING:
            return
        all_complete = True
        for anim in self.animations:
            anim.update(delta_ms)
            if not anim.is_complete():
                all_complete = False
        if all_complete:
            self.state = AnimationState.COMPLETED

    def is_complete(self) -> bool:
        return super().is_complete()

    def is_running(self) -> bool:
        return super().is_running()

    def progress(self) -> float:
        """Progress of the slowest member."""
        return min((a.progress() for a in self.animations), default=1.0)


class StaggeredGroup(Animation):
    """Runs animations in parallel, each starting after its own delay."""

    def __init__(self) -> None:
        self.animations: list[tuple[float, Animation]] = []
        self.state = AnimationState.PENDING
        self.elapsed_ms = 0.0

    def add(self, delay_ms: float, animation: Animation) -> StaggeredGroup:
        self.animations.append((delay_ms, animation))
        return self

    def stagger(self, stagger_ms: float, animations: Iterable[Animation]) -> StaggeredGroup:
        """Add animations whose delays grow by ``stagger_ms`` each."""
        for i, anim in enumerate(animations):
            self.animations.append((i * stagger_ms, anim))
        return self

    def start(self) -> None:
        self.state = AnimationState.RUNNING
        self.elapsed_ms = 0.0

    def update(self, delta_ms: float) -> None:
        if self.state is not AnimationState.RUNNING:
            return
        self.elapsed_ms += delta_ms
        all_complete = True
        for delay, anim in self.animations:
            if self.elapsed_ms >= delay:
                if not anim.is_running() and not anim.is_complete():
                    anim.start()
                anim.update(delta_ms)
            if not anim.is_complete():
                all_complete = False
        if all_complete and self.animations:
            self.state = AnimationState.COMPLETED

    def is_complete(self) -> bool:
        return super().is_complete()

    def is_running(self) -> bool:
        return super().is_running()

    def progress(self) -> float:
        """Mean progress of all members."""
        if not self.animations:
            return 1.0
        return sum(a.progress() for _, a in self.animations) / len(self.animations)


class AnimationManager:
    """Holds named animations and drives them together."""

    def __init__(self) -> None:
        self.animations: dict[str, Animation] = {}

    def add(self, name: str, animation: Animation) -> None:
        self.animations[name] = animation

    def start(self, name: str) -> None:
        anim = self.animations.get(name)
        if anim is not None:
            anim.start()

    def update(self, delta_ms: float) -> None:
        for anim in self.animations.values():
            anim.update(delta_ms)

    def cleanup(self) -> None:
        """Drop every completed animation."""
        self.animations = {
            name: anim for name, anim in self.animations.items() if not anim.is_complete()
        }

    def is_complete(self, name: str) -> bool:
        """Whether the named animation is done; unknown names count as done."""
        anim = self.animations.get(name)
        return True if anim is None else anim.is_complete()

    def progress(self, name: str) -> float:
        anim = self.animations.get(name)
        return 1.0 if anim is None else anim.progress()