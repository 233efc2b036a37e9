"""Preview configuration.

Holds the caller's preview defaults (ease type, drift parameters, output
filters, input signal) and reads/writes them as JSON.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Union

from .core import (
    DEFAULT_GAMMA,
    ConfigError,
    EaseType,
    FunctionRegistry,
    ParameterSet,
    get_logger,
    list_filters,
    list_signals,
)
from .preview import PreviewAggregator, PreviewSample

logger = get_logger(__name__)


@dataclass
class PreviewConfig:
    """Preview settings.

    Example:
        config = PreviewConfig(ease="easeout", filters=["gamma"], gamma=2.4)
        aggregator = config.aggregator()
    """

    ease: str = EaseType.IN.value
    drift_x: int = 6
    drift_y: int = 6

    # Output filters, applied in order
    filters: List[str] = field(default_factory=list)
    gamma: float = DEFAULT_GAMMA

    # Graph sampling resolution
    samples: int = 101

    # Input signal for animated previews
    signal: str = "triangle"
    cycle_multiplier: float = 1.0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError for values the preview cannot use."""
        if self.ease not in {e.value for e in EaseType}:
            raise ConfigError(f"Unknown ease type: {self.ease}", field="ease")
        unknown = [f for f in self.filters if f not in list_filters()]
        if unknown:
            raise ConfigError(f"Unknown filters: {', '.join(unknown)}", field="filters")
        if self.gamma <= 0:
            raise ConfigError("gamma must be positive", field="gamma")
        if self.samples < 2:
            raise ConfigError("samples must be at least 2", field="samples")
        if self.signal not in list_signals():
            raise ConfigError(f"Unknown input signal: {self.signal}", field="signal")

    @property
    def ease_type(self) -> EaseType:
        return EaseType(self.ease)

    @property
    def drift_params(self) -> ParameterSet:
        """Drift parameters, clamped to the slider range."""
        return ParameterSet(self.drift_x, self.drift_y)

    def aggregator(self, registry: Optional[FunctionRegistry] = None) -> PreviewAggregator:
        return PreviewAggregator(registry=registry, filters=self.filters, gamma=self.gamma)

    def preview_at(
        self,
        function_id: str,
        time: float,
        registry: Optional[FunctionRegistry] = None,
    ) -> PreviewSample:
        """Preview a function driven by the configured input signal at ``time``."""
        return self.aggregator(registry).preview_signal(
            function_id,
            time,
            self.drift_params,
            self.ease_type,
            signal=self.signal,
            cycle_multiplier=self.cycle_multiplier,
        )

    def to_dict(self) -> Dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "ease": self.ease,
            "drift_x": self.drift_x,
            "drift_y": self.drift_y,
            "filters": list(self.filters),
            "gamma": self.gamma,
            "samples": self.samples,
            "signal": self.signal,
            "cycle_multiplier": self.cycle_multiplier,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "PreviewConfig":
        """Create from dictionary. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object")
        known = {f.name for f in fields(cls)}
        ignored = sorted(set(data) - known)
        if ignored:
            logger.debug(f"Ignoring unknown config keys: {ignored}")
        try:
            return cls(**{k: v for k, v in data.items() if k in known})
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e


def load_config(path: Union[str, Path]) -> PreviewConfig:
    """Load preview configuration from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config: {e}", path=path) from e
    return PreviewConfig.from_dict(data)


def save_config(config: PreviewConfig, path: Union[str, Path]) -> None:
    """Save preview configuration to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved preview config to {path}")


__all__ = [
    "PreviewConfig",
    "load_config",
    "save_config",
]
