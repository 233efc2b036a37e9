"""
Output filters applied after evaluation (e.g., gamma correction for LEDs).
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from .exceptions import ParameterError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_GAMMA = 2.2


def gamma_correction(value: float, params: Optional[Mapping[str, float]] = None) -> float:
    """
    sign(v) * |v|^(1/gamma).

    Raises:
        ParameterError: If gamma <= 0
    """
    gamma = (params or {}).get("gamma", DEFAULT_GAMMA)
    if gamma <= 0:
        raise ParameterError("gamma must be positive", parameter="gamma", value=gamma)
    sign = -1.0 if value < 0 else 1.0
    return sign * math.pow(abs(value), 1 / gamma)


def identity(value: float, params: Optional[Mapping[str, float]] = None) -> float:
    return value


@dataclass(frozen=True)
class OutputFilter:
    """A named output filter."""
    id: str
    name: str
    apply: Callable[[float, Optional[Mapping[str, float]]], float]
    parameter_names: List[str] = field(default_factory=list)


OUTPUT_FILTERS: Dict[str, OutputFilter] = {
    "gamma": OutputFilter("gamma", "Gamma Correction", gamma_correction, ["gamma"]),
    "identity": OutputFilter("identity", "None", identity, []),
}


def list_filters() -> List[str]:
    return list(OUTPUT_FILTERS.keys())


def apply_filters(
    value: float,
    filter_ids: Iterable[str],
    params: Optional[Mapping[str, float]] = None,
) -> float:
    """
    Apply output filters in order.

    Unknown filter ids are skipped.

    Args:
        value: Evaluated output
        filter_ids: Filter ids to apply, in order
        params: Filter parameters (e.g., {"gamma": 2.2})

    Returns:
        Filtered value
    """
    result = value
    for filter_id in filter_ids:
        output_filter = OUTPUT_FILTERS.get(filter_id)
        if output_filter is None:
            logger.debug(f"Skipping unknown filter: {filter_id}")
            continue
        result = output_filter.apply(result, params)
    return result


__all__ = [
    "DEFAULT_GAMMA",
    "OutputFilter",
    "OUTPUT_FILTERS",
    "list_filters",
    "apply_filters",
]
