"""
Input signal generators for live previews.

Each signal maps a caller-supplied time value ``t`` (and a cycle
multiplier) to a normalized input in [0, 1]. The caller owns the clock;
these are plain functions of t.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, List

import numpy as np

from .exceptions import ParameterError


def triangle(t: float, cycle_multiplier: float = 1.0) -> float:
    """Up 0 -> 1 over one unit of t, then back down."""
    x = (t * cycle_multiplier) % 2
    return x if x < 1 else 2 - x


def ramp(t: float, cycle_multiplier: float = 1.0) -> float:
    return (t * cycle_multiplier) % 1


def sawtooth(t: float, cycle_multiplier: float = 1.0) -> float:
    return 1 - ((t * cycle_multiplier) % 1)


def sine_wave(t: float, cycle_multiplier: float = 1.0) -> float:
    return (math.sin(2 * math.pi * t * cycle_multiplier) + 1) / 2


def square(t: float, cycle_multiplier: float = 1.0) -> float:
    return 0.0 if ((t * cycle_multiplier) % 1) < 0.5 else 1.0


def smooth(t: float, cycle_multiplier: float = 1.0) -> float:
    """Smoothstep of the ramp."""
    x = (t * cycle_multiplier) % 1
    return x * x * (3 - 2 * x)


@dataclass(frozen=True)
class InputSignal:
    """A named input generator."""
    id: str
    name: str
    formula: str
    generate: Callable[[float, float], float]


INPUT_SIGNALS: Dict[str, InputSignal] = {
    s.id: s
    for s in (
        InputSignal("triangle", "Triangle Wave", "x = (t × c) % 2, triangle", triangle),
        InputSignal("linear", "Linear", "x = (t × c) % 1", ramp),
        InputSignal("sawtooth", "Sawtooth", "x = 1 - ((t × c) % 1)", sawtooth),
        InputSignal("sine", "Sine Wave", "x = (sin(2πt × c) + 1) / 2", sine_wave),
        InputSignal("square", "Square Wave", "x = ((t × c) % 1) < 0.5 ? 0 : 1", square),
        InputSignal("ease-in-out", "Ease In-Out", "x = smoothstep(t × c)", smooth),
    )
}


def list_signals() -> List[str]:
    """Get list of available input signal ids, in registration order."""
    return list(INPUT_SIGNALS.keys())


def get_signal(signal_id: str) -> InputSignal:
    try:
        return INPUT_SIGNALS[signal_id]
    except KeyError:
        raise ParameterError(
            f"Unknown input signal: {signal_id}",
            parameter="signal",
            value=signal_id,
            available=list_signals(),
        ) from None


def generate_input(signal_id: str, t: float, cycle_multiplier: float = 1.0) -> float:
    """
    Generate a normalized input value.

    Args:
        signal_id: One of list_signals()
        t: Time value supplied by the caller
        cycle_multiplier: Cycles per unit of t

    Returns:
        Input value 0-1

    Raises:
        ParameterError: If the signal id is unknown
    """
    return float(get_signal(signal_id).generate(t, cycle_multiplier))


def generate_input_array(
    signal_id: str,
    times: np.ndarray,
    cycle_multiplier: float = 1.0,
) -> np.ndarray:
    """
    Generate input values for an array of time values.

    Returns:
        Array of input values 0-1, same shape as ``times``

    Raises:
        ParameterError: If the signal id is unknown
    """
    get_signal(signal_id)
    pos = np.asarray(times, dtype=np.float64) * cycle_multiplier
    phase = np.mod(pos, 1)

    if signal_id == "triangle":
        tri = np.mod(pos, 2)
        result = np.where(tri < 1, tri, 2 - tri)

    elif signal_id == "linear":
        result = phase

    elif signal_id == "sawtooth":
        result = 1 - phase

    elif signal_id == "sine":
        result = (np.sin(2 * np.pi * pos) + 1) / 2

    elif signal_id == "square":
        result = np.where(phase < 0.5, 0.0, 1.0)

    else:
        result = phase * phase * (3 - 2 * phase)

    return result


__all__ = [
    "InputSignal",
    "INPUT_SIGNALS",
    "list_signals",
    "get_signal",
    "generate_input",
    "generate_input_array",
]
