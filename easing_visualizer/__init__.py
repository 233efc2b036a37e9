"""
Easing Visualizer.

Evaluation core for comparing easing and LED response curves, with
ScriptMapper export. UI layers call in with the current function,
parameters and input value and draw what comes back.

Usage:
    from easing_visualizer import evaluate, format_command, PreviewAggregator

    # Evaluate Drift at the midpoint
    y = evaluate("drift", {"x": 3, "y": 7}, 0.5)

    # ScriptMapper export
    format_command("quadratic", "easeout")   # "OutQuad"
    format_command("drift", parameters={"x": 3, "y": 7})  # "ease_3_7"

    # Live preview with gamma correction
    aggregator = PreviewAggregator(filters=["gamma"])
    sample = aggregator.preview("sine", None, 0.25)
"""

from .core import (
    # Exceptions
    EasingVisualizerException,
    FunctionNotFoundError,
    ParameterError,
    RegistryError,
    SelectionError,
    ConfigError,
    # Logging
    configure_logging,
    # Types
    EaseType,
    FunctionFamily,
    ParameterSet,
    FunctionDescriptor,
    # Registry
    FunctionRegistry,
    REGISTRY,
    lookup,
    list_all,
    list_compatible,
    # Evaluator
    evaluate,
    led_cycle,
    sample_curve,
    # Input signals
    list_signals,
    generate_input,
    # Output filters
    list_filters,
    apply_filters,
)

from .adapters import (
    ParsedCommand,
    ScriptMapperAdapter,
    get_scriptmapper_name,
    is_scriptmapper_compatible,
    format_compatible,
    format_command,
    format_short_command,
    parse_command,
    extract_easing_from_bookmark,
)

from .preview import (
    PreviewSample,
    PreviewAggregator,
    ComparisonSession,
)

from .config import (
    PreviewConfig,
    load_config,
    save_config,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "EasingVisualizerException",
    "FunctionNotFoundError",
    "ParameterError",
    "RegistryError",
    "SelectionError",
    "ConfigError",
    # Logging
    "configure_logging",
    # Types
    "EaseType",
    "FunctionFamily",
    "ParameterSet",
    "FunctionDescriptor",
    # Registry
    "FunctionRegistry",
    "REGISTRY",
    "lookup",
    "list_all",
    "list_compatible",
    # Evaluator
    "evaluate",
    "led_cycle",
    "sample_curve",
    # Input signals
    "list_signals",
    "generate_input",
    # Output filters
    "list_filters",
    "apply_filters",
    # Adapters
    "ParsedCommand",
    "ScriptMapperAdapter",
    "get_scriptmapper_name",
    "is_scriptmapper_compatible",
    "format_compatible",
    "format_command",
    "format_short_command",
    "parse_command",
    "extract_easing_from_bookmark",
    # Preview
    "PreviewSample",
    "PreviewAggregator",
    "ComparisonSession",
    # Config
    "PreviewConfig",
    "load_config",
    "save_config",
]
