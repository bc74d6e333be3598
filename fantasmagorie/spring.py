"""Damped spring simulation for scalar, 2D and colour values."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "SpringConfig",
    "Spring",
    "Spring2D",
    "SpringColor",
    "DEFAULT",
    "GENTLE",
    "WOBBLY",
    "STIFF",
    "SLOW",
    "MOLASSES",
    "NO_WOBBLE",
    "IOS_DEFAULT",
    "MATERIAL",
    "BOUNCY",
]


@dataclass(frozen=True)
class SpringConfig:
    """Stiffness, damping coefficient and mass of a spring."""

    stiffness: float
    damping: float
    mass: float

    def critical_damping(self) -> float:
        return 2.0 * math.sqrt(self.stiffness * self.mass)

    def is_critically_damped(self) -> bool:
        return abs(self.damping - self.critical_damping()) < 0.001

    def is_overdamped(self) -> bool:
        return self.damping > self.critical_damping()

    def is_underdamped(self) -> bool:
        return self.damping < self.critical_damping()


DEFAULT = SpringConfig(170.0, 26.0, 1.0)
GENTLE = SpringConfig(120.0, 14.0, 1.0)
WOBBLY = SpringConfig(180.0, 12.0, 1.0)
STIFF = SpringConfig(210.0, 20.0, 1.0)
SLOW = SpringConfig(280.0, 60.0, 1.0)
MOLASSES = SpringConfig(280.0, 120.0, 1.0)
NO_WOBBLE = SpringConfig(170.0, 26.0, 1.0)
IOS_DEFAULT = SpringConfig(400.0, 30.0, 1.0)
MATERIAL = SpringConfig(600.0, 40.0, 1.0)
BOUNCY = SpringConfig(300.0, 10.0, 1.0)


class Spring:
    """A one-dimensional spring pulling ``value`` towards ``target``."""

    def __init__(self, config: SpringConfig) -> None:
        self.config = config
        self.value = 0.0
        self.target = 0.0
        self.velocity = 0.0
        self.rest_threshold = 0.001
        self.velocity_threshold = 0.001

    def jump_to(self, value: float) -> None:
        """Place the spring at rest on ``value``."""
        self.value = value
        self.target = value
        self.velocity = 0.0

    def update(self, delta_seconds: float) -> float:
        """Advance the simulation by one step and return the new value."""
        if self.is_at_rest():
            return self.value
        cfg = self.config
        spring_force = -cfg.stiffness * (self.value - self.target)
        damping_force = -cfg.damping * self.velocity
        acceleration = (spring_force + damping_force) / cfg.mass
        self.velocity += acceleration * delta_seconds
        self.value += self.velocity * delta_seconds
        return self.value

    def is_at_rest(self) -> bool:
        return (
            abs(self.value - self.target) < self.rest_threshold
            and abs(self.velocity) < self.velocity_threshold
        )

    def set_thresholds(self, rest: float, velocity: float) -> None:
        self.rest_threshold = rest
        self.velocity_threshold = velocity


class Spring2D:
    """Two independent springs for a point."""

    def __init__(self, config: SpringConfig) -> None:
        self.x = Spring(config)
        self.y = Spring(config)

    def set_value(self, x: float, y: float) -> None:
        self.x.value = x
        self.y.value = y

    def set_target(self, x: float, y: float) -> None:
        self.x.target = x
        self.y.target = y

    def jump_to(self, x: float, y: float) -> None:
        self.x.jump_to(x)
        self.y.jump_to(y)

    def set_velocity(self, vx: float, vy: float) -> None:
        self.x.velocity = vx
        self.y.velocity = vy

    def update(self, delta_seconds: float) -> tuple[float, float]:
        return self.x.update(delta_seconds), self.y.update(delta_seconds)

    def is_at_rest(self) -> bool:
        return self.x.is_at_rest() and self.y.is_at_rest()

    @property
    def value(self) -> tuple[float, float]:
        return self.x.value, self.y.value

    @property
    def velocity(self) -> tuple[float, float]:
        return self.x.velocity, self.y.velocity


class SpringColor:
    """Four springs for RGBA channels, reported clamped to [0, 1]."""

    def __init__(self, config: SpringConfig) -> None:
        self.channels = tuple(Spring(config) for _ in range(4))

    def set_value(self, r: float, g: float, b: float, a: float) -> None:
        for spring, v in zip(self.channels, (r, g, b, a)):
            spring.value = v

    def set_target(self, r: float, g: float, b: float, a: float) -> None:
        for spring, v in zip(self.channels, (r, g, b, a)):
            spring.target = v

    def update(self, delta_seconds: float) -> tuple[float, float, float, float]:
        r, g, b, a = (
            min(max(spring.update(delta_seconds), 0.0), 1.0) for spring in self.channels
        )
        return r, g, b, a

    def is_at_rest(self) -> bool:
        return all(spring.is_at_rest() for spring in self.channels)