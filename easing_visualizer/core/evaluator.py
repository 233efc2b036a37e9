"""
Function evaluator - turns (function, parameters, input) into an output.

Evaluation is pure: the same three arguments always give the same result,
nothing is cached and nothing is retained between calls. Inputs are clamped
to [0, 1] and every function is pinned to 0 at input 0 and 1 at input 1.
"""

import math
from typing import Any, Optional, Tuple, Union

import numpy as np

from .easing import EASING_CURVES, ease_curve
from .exceptions import FunctionNotFoundError, ParameterError
from .led import LED_CURVES, cycle_value
from .logging_config import get_logger, log_performance
from .registry import REGISTRY, FunctionRegistry
from .types import EaseType, FunctionDescriptor, FunctionFamily, ParameterSet

logger = get_logger(__name__)

FunctionRef = Union[str, FunctionDescriptor]


def clamp_input(value: Any) -> float:
    """Clamp an input value to [0, 1]. NaN and non-numbers map to 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric input {value!r}, using 0")
        return 0.0
    if math.isnan(number):
        return 0.0
    return min(max(number, 0.0), 1.0)


def _resolve(function: FunctionRef, registry: Optional[FunctionRegistry]) -> FunctionDescriptor:
    return (registry or REGISTRY).resolve(function)


def _raw_value(descriptor: FunctionDescriptor, params: ParameterSet, t: float, ease: EaseType) -> float:
    if descriptor.family == FunctionFamily.LED:
        curve = LED_CURVES.get(descriptor.id)
        if curve is None:
            raise FunctionNotFoundError(descriptor.id, family=descriptor.family.value)
        return curve(t)

    if descriptor.id != "drift" and descriptor.id not in EASING_CURVES:
        raise FunctionNotFoundError(descriptor.id, family=descriptor.family.value)
    return ease_curve(descriptor.id, t, params, ease)


def evaluate(
    function: FunctionRef,
    parameters: Any = None,
    value: Any = 0.0,
    ease: Union[EaseType, str] = EaseType.IN,
    registry: Optional[FunctionRegistry] = None,
) -> float:
    """
    Evaluate a registered function.

    Args:
        function: Function id or FunctionDescriptor
        parameters: ParameterSet, mapping with "x"/"y", or None. Ignored by
            non-parametric functions; out-of-range values are clamped.
        value: Input 0-1. Out-of-range values are clamped.
        ease: Ease type for easing-family functions (LED curves ignore it)
        registry: Registry used to resolve ids (default catalog if None)

    Returns:
        Output value. Exactly 0.0 at input 0 and 1.0 at input 1. Overshoot
        (back, elastic) is preserved.

    Raises:
        FunctionNotFoundError: If the function id (or descriptor) is not registered
    """
    descriptor = _resolve(function, registry)
    ease = EaseType.coerce(ease)
    params = ParameterSet.coerce(parameters)
    t = clamp_input(value)

    # Check the function exists even when the result is pinned
    result = _raw_value(descriptor, params, t, ease)

    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if not math.isfinite(result):
        logger.debug(f"{descriptor.id} produced {result} at t={t}, using 0")
        return 0.0
    return float(result)


def led_cycle(
    function: FunctionRef,
    phase: Any,
    registry: Optional[FunctionRegistry] = None,
) -> float:
    """
    Full LED pulse (dark -> peak -> dark) for an LED-family function.

    Args:
        function: LED function id or descriptor
        phase: Position in the cycle, clamped to 0-1

    Returns:
        Intensity, 0 at phase 0 and 1, 1 at phase 0.5

    Raises:
        FunctionNotFoundError: If the id is unknown
        ParameterError: If the function is not an LED curve
    """
    descriptor = _resolve(function, registry)
    if descriptor.family != FunctionFamily.LED:
        raise ParameterError(
            f"{descriptor.id} is not an LED curve",
            parameter="function",
            value=descriptor.id,
        )
    return cycle_value(
        lambda u: evaluate(descriptor, None, u, registry=registry), clamp_input(phase)
    )


@log_performance
def sample_curve(
    function: FunctionRef,
    parameters: Any = None,
    ease: Union[EaseType, str] = EaseType.IN,
    samples: int = 101,
    registry: Optional[FunctionRegistry] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a function over [0, 1] for graph previews.

    Returns:
        (inputs, outputs) arrays of length ``samples``

    Raises:
        ParameterError: If samples < 2
        FunctionNotFoundError: If the function id (or descriptor) is not registered
    """
    if samples < 2:
        raise ParameterError("samples must be at least 2", parameter="samples", value=samples)

    descriptor = _resolve(function, registry)
    params = ParameterSet.coerce(parameters)
    ease = EaseType.coerce(ease)

    inputs = np.linspace(0.0, 1.0, samples)
    outputs = np.fromiter(
        (evaluate(descriptor, params, t, ease, registry) for t in inputs),
        dtype=np.float64,
        count=samples,
    )
    return inputs, outputs


__all__ = [
    "clamp_input",
    "evaluate",
    "led_cycle",
    "sample_curve",
]
