"""
Easing curves for keyframe tweens.

Every base curve maps [0, 1] onto [0, 1] with f(0) = 0 and f(1) = 1 and is
written in its "ease-in" form. The direction wrapper derives the ease-out
and ease-in-out variants from it.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

EasingFn = Callable[[float], float]


class TweenType(str, Enum):
    """Interpolation strategy from one keyframe toward the next."""
    DISCRETE = "discrete"
    LINEAR = "linear"
    SMOOTH = "smooth"
    CUBIC = "cubic"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    ELASTIC = "elastic"
    BOUNCE = "bounce"

    @classmethod
    def _missing_(cls, value):
        # Older documents call the quadratic curve "quadratic"
        if value == "quadratic":
            return cls.SMOOTH
        return None


class EaseDirection(str, Enum):
    """Which end(s) of the span the easing curve is applied to."""
    IN = "in"
    OUT = "out"
    IN_OUT = "in-out"


def linear(t: float) -> float:
    return t


def smooth(t: float) -> float:
    return t * t


def cubic(t: float) -> float:
    return t * t * t


def exponential(t: float) -> float:
    return 0.0 if t == 0 else 2 ** (10 * (t - 1))


def circular(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def elastic(t: float) -> float:
    if t == 0 or t == 1:
        return t
    period = 0.3
    s = period / 4
    return -(2 ** (10 * (t - 1)) * math.sin((t - 1 - s) * (2 * math.pi) / period))


def bounce_out(t: float) -> float:
    """Standard four-bounce ease-out curve."""
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def bounce(t: float) -> float:
    return 1 - bounce_out(1 - t)


BASE_CURVES: dict[TweenType, EasingFn] = {
    TweenType.LINEAR: linear,
    TweenType.SMOOTH: smooth,
    TweenType.CUBIC: cubic,
    TweenType.EXPONENTIAL: exponential,
    TweenType.CIRCULAR: circular,
    TweenType.ELASTIC: elastic,
    TweenType.BOUNCE: bounce,
}


def apply_direction(fn: EasingFn, direction: EaseDirection | str) -> EasingFn:
    """Wrap a base curve for the given ease direction.

    - in: the curve unchanged
    - out: 1 - f(1 - t)
    - in-out: f(2t) / 2 on the first half, (2 - f(2(1 - t))) / 2 on the second
    """
    direction = EaseDirection(direction)
    if direction is EaseDirection.IN:
        return fn
    if direction is EaseDirection.OUT:
        return lambda t: 1 - fn(1 - t)

    def in_out(t: float) -> float:
        if t < 0.5:
            return fn(t * 2) / 2
        return (2 - fn((1 - t) * 2)) / 2

    return in_out


def get_easing(tween: TweenType | str, direction: EaseDirection | str) -> EasingFn:
    """Easing function for a tween type and direction.

    ``discrete`` yields a function that always returns 0 (hold the start value).
    """
    tween = TweenType(tween)
    if tween is TweenType.DISCRETE:
        return lambda t: 0.0
    return apply_direction(BASE_CURVES[tween], direction)


def eased_t(t: float, tween: TweenType | str, direction: EaseDirection | str) -> float:
    """Ease a linear interpolation parameter (clamped to [0, 1] first)."""
    return get_easing(tween, direction)(max(0.0, min(1.0, t)))
