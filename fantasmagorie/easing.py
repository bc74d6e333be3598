"""Easing curves mapping normalized time in [0, 1] to animation progress."""

from __future__ import annotations

import math
from typing import Callable

EasingFn = Callable[[float], float]

__all__ = [
    "EasingFn",
    "linear",
    "ease_in_quad",
    "ease_in_cubic",
    "ease_in_quart",
    "ease_in_quint",
    "ease_in_sine",
    "ease_in_expo",
    "ease_in_circ",
    "ease_out_quad",
    "ease_out_cubic",
    "ease_out_quart",
    "ease_out_quint",
    "ease_out_sine",
    "ease_out_expo",
    "ease_out_circ",
    "ease_in_out_quad",
    "ease_in_out_cubic",
    "ease_in_out_quart",
    "ease_in_out_sine",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_back",
    "ease_out_back",
    "ease_out_bounce",
    "ease_in_bounce",
]

_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def linear(t: float) -> float:
    """Linear interpolation."""
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_in_quint(t: float) -> float:
    return t * t * t * t * t


def ease_in_sine(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2.0)


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


def ease_in_circ(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))


def ease_out_quad(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_out_quart(t: float) -> float:
    return 1.0 - (1.0 - t) ** 4


def ease_out_quint(t: float) -> float:
    return 1.0 - (1.0 - t) ** 5


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2.0)


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(max(0.0, 1.0 - (t - 1.0) * (t - 1.0)))


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8.0 * t**4
    return 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def ease_in_elastic(t: float) -> float:
    """Spring-like overshoot at the start."""
    if t in (0.0, 1.0):
        return t
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _ELASTIC_C4)


def ease_out_elastic(t: float) -> float:
    """Spring-like overshoot at the end."""
    if t in (0.0, 1.0):
        return t
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * _ELASTIC_C4) + 1.0


def ease_in_back(t: float) -> float:
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def ease_out_back(t: float) -> float:
    return 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2


def ease_out_bounce(t: float) -> float:
    if t < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2.0 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - t)