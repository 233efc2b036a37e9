"""
Core components - function catalog, evaluation, input signals and filters.
"""

from .exceptions import (
    EasingVisualizerException,
    FunctionNotFoundError,
    ParameterError,
    RegistryError,
    SelectionError,
    ConfigError,
)

from .logging_config import (
    get_logger,
    configure_logging,
    log_performance,
    LogContext,
)

from .types import (
    PARAM_MIN,
    PARAM_MAX,
    EaseType,
    FunctionFamily,
    ParameterSet,
    FunctionDescriptor,
)

from .registry import (
    FunctionRegistry,
    DEFAULT_FUNCTIONS,
    REGISTRY,
    lookup,
    list_all,
    list_compatible,
)

from .evaluator import (
    clamp_input,
    evaluate,
    led_cycle,
    sample_curve,
)

from .signals import (
    InputSignal,
    INPUT_SIGNALS,
    list_signals,
    generate_input,
    generate_input_array,
)

from .filters import (
    DEFAULT_GAMMA,
    OUTPUT_FILTERS,
    list_filters,
    apply_filters,
)

__all__ = [
    # Exceptions
    "EasingVisualizerException",
    "FunctionNotFoundError",
    "ParameterError",
    "RegistryError",
    "SelectionError",
    "ConfigError",
    # Logging
    "get_logger",
    "configure_logging",
    "log_performance",
    "LogContext",
    # Types
    "PARAM_MIN",
    "PARAM_MAX",
    "EaseType",
    "FunctionFamily",
    "ParameterSet",
    "FunctionDescriptor",
    # Registry
    "FunctionRegistry",
    "DEFAULT_FUNCTIONS",
    "REGISTRY",
    "lookup",
    "list_all",
    "list_compatible",
    # Evaluator
    "clamp_input",
    "evaluate",
    "led_cycle",
    "sample_curve",
    # Input signals
    "InputSignal",
    "INPUT_SIGNALS",
    "list_signals",
    "generate_input",
    "generate_input_array",
    # Output filters
    "DEFAULT_GAMMA",
    "OUTPUT_FILTERS",
    "list_filters",
    "apply_filters",
]
