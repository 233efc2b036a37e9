"""
LED intensity curves.

An LED cycle runs dark -> peak -> dark. Each curve here describes the
attack (rising) half over u in [0, 1], normalized so the peak is 1;
``cycle_value`` mirrors it to get the full pulse.
"""

import math
from typing import Callable, Dict


def led_linear(u: float) -> float:
    return u


def led_sine(u: float) -> float:
    return math.sin(math.pi * u / 2)


def led_exponential(u: float) -> float:
    return u * u


def led_inverse_exp(u: float) -> float:
    return 1 - (1 - u) ** 2


def led_quadratic_ease(u: float) -> float:
    if u < 0.5:
        return 2 * u * u
    return 1 - 2 * (1 - u) ** 2


def led_cubic(u: float) -> float:
    return u * u * u


def led_elastic(u: float) -> float:
    """Flickering ramp: |sin(6.5πu)| under a linear envelope."""
    return abs(math.sin(6.5 * math.pi * u)) * u


LED_CURVES: Dict[str, Callable[[float], float]] = {
    "led-linear": led_linear,
    "led-sine": led_sine,
    "led-exponential": led_exponential,
    "led-inverse-exp": led_inverse_exp,
    "led-quadratic-ease": led_quadratic_ease,
    "led-cubic": led_cubic,
    "led-elastic": led_elastic,
}


def cycle_value(attack: Callable[[float], float], phase: float) -> float:
    """
    Full LED pulse from an attack curve.

    Args:
        attack: Rising-half curve, 0 -> 1
        phase: Position in the cycle, 0-1

    Returns:
        Intensity, 0 at both ends of the cycle and 1 at phase 0.5
    """
    if phase < 0.5:
        return attack(2 * phase)
    return attack(2 * (1 - phase))


__all__ = [
    "LED_CURVES",
    "cycle_value",
]
