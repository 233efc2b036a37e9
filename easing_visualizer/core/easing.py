"""
Easing curves: base functions, ease-type application and the Drift family.

Base curves are written as ease-in shapes over t in [0, 1]. ``apply_ease``
turns them into In / Out / InOut variants the same way ScriptMapper does.
"""

import math
from typing import Callable, Dict

from .types import EaseType, ParameterSet

BACK_C1 = 1.70158
BACK_C3 = BACK_C1 + 1
ELASTIC_C4 = (2 * math.pi) / 3
BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75


def apply_ease(t: float, base: Callable[[float], float], ease: EaseType) -> float:
    """
    Apply a base curve with the given ease type.

    Args:
        t: Input value 0-1
        base: Ease-in shaped curve
        ease: EaseType.IN, OUT or BOTH

    Returns:
        Eased value
    """
    if ease == EaseType.OUT:
        return 1 - base(1 - t)
    if ease == EaseType.BOTH:
        if t < 0.5:
            return base(2 * t) / 2
        return 1 - base(2 * (1 - t)) / 2
    return base(t)


# ============================================================================
# BASE CURVES
# ============================================================================

def linear(t: float) -> float:
    return t


def sine(t: float) -> float:
    return math.sin(math.pi * t / 2)


def quadratic(t: float) -> float:
    return t * t


def cubic(t: float) -> float:
    return t * t * t


def quartic(t: float) -> float:
    return t * t * t * t


def quintic(t: float) -> float:
    return t * t * t * t * t


def exponential(t: float) -> float:
    """2^(10(t-1)), pinned to 0 and 1 at the ends."""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return pow(2, 10 * (t - 1))


def circular(t: float) -> float:
    return 1 - math.sqrt(max(0.0, 1 - t * t))


def square_root(t: float) -> float:
    return math.sqrt(max(0.0, t))


def back(t: float) -> float:
    """Pulls back below zero before accelerating."""
    return BACK_C3 * t * t * t - BACK_C1 * t * t


def elastic(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return -pow(2, 10 * t - 10) * math.sin((t * 10 - 10.75) * ELASTIC_C4)


def bounce(t: float) -> float:
    """Piecewise parabolic bounce."""
    if t < 1 / BOUNCE_D1:
        return BOUNCE_N1 * t * t
    if t < 2 / BOUNCE_D1:
        t -= 1.5 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / BOUNCE_D1:
        t -= 2.25 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / BOUNCE_D1
    return BOUNCE_N1 * t * t + 0.984375


def hermite(t: float) -> float:
    return t * t * (3 - 2 * t)


def bezier(t: float) -> float:
    return 3 * t * t * (1 - t) + t * t * t


def trigonometric(t: float) -> float:
    return (1 - math.cos(math.pi * t)) / 2


# ============================================================================
# DRIFT
# ============================================================================

def drift(t: float, params: ParameterSet) -> float:
    """
    Two-parameter Drift curve.

    x (0-10) places the knee horizontally, y (0-10) sets the value at the
    knee. Before the knee the curve rises quadratically to y, after it runs
    linearly to (1, 1).

    Args:
        t: Input value 0-1
        params: Drift parameters

    Returns:
        Drift value
    """
    x_param, y_param = params.normalized

    if t < x_param:
        return (t / x_param) ** 2 * y_param

    span = 1 - x_param
    if span <= 0:
        # Knee sits at t = 1
        return 1.0
    return y_param + ((t - x_param) / span) * (1 - y_param)


# Base curves keyed by function id (drift is parametric and handled apart)
EASING_CURVES: Dict[str, Callable[[float], float]] = {
    "linear": linear,
    "sine": sine,
    "quadratic": quadratic,
    "cubic": cubic,
    "quartic": quartic,
    "quintic": quintic,
    "exponential": exponential,
    "circular": circular,
    "sqrt": square_root,
    "back": back,
    "elastic": elastic,
    "bounce": bounce,
    "hermite": hermite,
    "bezier": bezier,
    "trigonometric": trigonometric,
    "ease-in": quadratic,
}


def ease_curve(function_id: str, t: float, params: ParameterSet, ease: EaseType) -> float:
    """Evaluate an easing-family curve by id. Raises KeyError for unknown ids."""
    if function_id == "drift":
        return apply_ease(t, lambda u: drift(u, params), ease)
    return apply_ease(t, EASING_CURVES[function_id], ease)


__all__ = [
    "apply_ease",
    "drift",
    "ease_curve",
    "EASING_CURVES",
    "BACK_C1",
    "BACK_C3",
    "ELASTIC_C4",
    "BOUNCE_N1",
    "BOUNCE_D1",
]
