"""
Preview aggregator - pairs evaluated outputs with display metadata.

Model-agnostic: produces plain dataclasses the UI layer can draw as
preview bars, LED glows or graph points.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .core import (
    DEFAULT_GAMMA,
    EaseType,
    FunctionDescriptor,
    FunctionRegistry,
    ParameterError,
    REGISTRY,
    SelectionError,
    apply_filters,
    clamp_input,
    evaluate,
    generate_input,
    get_logger,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class PreviewSample:
    """One evaluated point, ready for display."""
    function_id: str
    name: str
    color: str
    input: float  # Clamped input
    output: float  # Raw evaluator output
    filtered_output: float  # Output after enabled filters

    def to_dict(self) -> dict:
        return {
            "function_id": self.function_id,
            "name": self.name,
            "color": self.color,
            "input": self.input,
            "output": self.output,
            "filtered_output": self.filtered_output,
        }


class PreviewAggregator:
    """
    Evaluate functions for live previews.

    Usage:
        aggregator = PreviewAggregator(filters=["gamma"], gamma=2.2)
        sample = aggregator.preview("drift", {"x": 3, "y": 7}, 0.5)
        # sample.output, sample.filtered_output, sample.color
    """

    def __init__(
        self,
        registry: Optional[FunctionRegistry] = None,
        filters: Sequence[str] = (),
        gamma: float = DEFAULT_GAMMA,
    ):
        if gamma <= 0:
            raise ParameterError("gamma must be positive", parameter="gamma", value=gamma)
        self.registry = registry or REGISTRY
        self.filters = tuple(filters)
        self.gamma = gamma

    def preview(
        self,
        function_id: str,
        parameters: Any = None,
        value: Any = 0.0,
        ease=EaseType.IN,
    ) -> PreviewSample:
        """
        Evaluate one function for display.

        Raises:
            FunctionNotFoundError: If the function id is unknown
        """
        descriptor = self.registry.lookup(function_id)
        output = evaluate(descriptor, parameters, value, ease, self.registry)
        filtered = apply_filters(output, self.filters, {"gamma": self.gamma})
        return PreviewSample(
            function_id=descriptor.id,
            name=descriptor.name,
            color=descriptor.color,
            input=clamp_input(value),
            output=output,
            filtered_output=filtered,
        )

    def preview_signal(
        self,
        function_id: str,
        time: float,
        parameters: Any = None,
        ease=EaseType.IN,
        signal: str = "triangle",
        cycle_multiplier: float = 1.0,
    ) -> PreviewSample:
        """
        Evaluate one function against an input signal at a caller-supplied time.

        Raises:
            FunctionNotFoundError: If the function id is unknown
            ParameterError: If the signal id is unknown
        """
        value = generate_input(signal, time, cycle_multiplier)
        return self.preview(function_id, parameters, value, ease)

    def preview_many(self, requests: Iterable[Tuple]) -> List[PreviewSample]:
        """
        Evaluate a stream of (function_id, parameters, value[, ease]) tuples.

        Raises:
            FunctionNotFoundError: On the first unknown function id
        """
        return [self.preview(*request) for request in requests]


@dataclass
class ComparisonSession:
    """
    Tracks which functions are in use in a comparison view.

    Only used to disable re-selection; it never affects evaluation.
    """
    registry: FunctionRegistry = field(default_factory=lambda: REGISTRY)
    _used: List[str] = field(default_factory=list, init=False, repr=False)

    @property
    def used_ids(self) -> Tuple[str, ...]:
        """Ids in selection order."""
        return tuple(self._used)

    def is_used(self, function_id: str) -> bool:
        return function_id in self._used

    def select(self, function_id: str) -> FunctionDescriptor:
        """
        Mark a function as in use.

        Raises:
            FunctionNotFoundError: If the id is unknown
            SelectionError: If the function is already in use
        """
        descriptor = self.registry.lookup(function_id)
        if function_id in self._used:
            raise SelectionError(f"{function_id} is already in use", function_id=function_id)
        self._used.append(function_id)
        logger.debug(f"Selected {function_id} ({len(self._used)} in use)")
        return descriptor

    def release(self, function_id: str) -> bool:
        """Stop using a function. Returns False if it was not in use."""
        if function_id not in self._used:
            return False
        self._used.remove(function_id)
        return True

    def clear(self):
        self._used.clear()

    def options(self) -> List[Tuple[FunctionDescriptor, bool]]:
        """(descriptor, disabled) for every function, in registry order."""
        return [(d, d.id in self._used) for d in self.registry.list_all()]


__all__ = [
    "PreviewSample",
    "PreviewAggregator",
    "ComparisonSession",
]
