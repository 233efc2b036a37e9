"""
Export Adapter Protocol - defines the interface for external command formats.

An adapter decides which registered functions have a representation in its
target syntax and renders (function, parameters) combinations into it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from ..core.exceptions import FunctionNotFoundError
from ..core.registry import REGISTRY, FunctionRegistry
from ..core.types import EaseType, FunctionDescriptor, ParameterSet


@dataclass
class AdapterConfig:
    """Configuration for export adapters."""
    # Target tool name, used in messages
    target_name: str = ""

    # Function id -> external name overrides (on top of the registry)
    name_overrides: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ParsedCommand:
    """A command string decoded back into visualizer terms."""
    function_id: str
    ease: EaseType
    params: Optional[ParameterSet] = None


@runtime_checkable
class ExportAdapter(Protocol):
    """
    Protocol for external command format adapters.

    Usage:
        adapter = ScriptMapperAdapter()
        if adapter.is_compatible("sine"):
            command = adapter.format_command("sine", EaseType.OUT)
    """

    @property
    def config(self) -> AdapterConfig:
        """Get adapter configuration."""
        ...

    def is_compatible(self, function_id: str) -> bool:
        """Whether a function has a representation in the target syntax."""
        ...

    def external_name(self, function_id: str) -> Optional[str]:
        """External identifier for a function, or None if not representable."""
        ...

    def format_compatible(self, function_id: str, parameters: Any = None) -> Optional[str]:
        """
        Render a function and its parameters as ``Name(x,y)``.

        Returns:
            The string, or None when the function is unknown or not
            representable
        """
        ...

    def format_command(
        self,
        function_id: str,
        ease: EaseType = EaseType.IN,
        parameters: Any = None,
    ) -> Optional[str]:
        """Render a command in the target syntax, or None."""
        ...

    def parse_command(self, command: str) -> Optional[ParsedCommand]:
        """Decode a command in the target syntax, or None if invalid."""
        ...


class BaseAdapter:
    """
    Base class for export adapters with registry-backed compatibility.

    Subclass this and implement ``format_command`` / ``parse_command``.
    """

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        registry: Optional[FunctionRegistry] = None,
    ):
        self._config = config or AdapterConfig()
        self._registry = registry or REGISTRY

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def registry(self) -> FunctionRegistry:
        return self._registry

    def _descriptor(self, function_id: str) -> Optional[FunctionDescriptor]:
        try:
            return self._registry.lookup(function_id)
        except FunctionNotFoundError:
            return None

    def is_compatible(self, function_id: str) -> bool:
        descriptor = self._descriptor(function_id)
        return descriptor is not None and descriptor.externally_compatible

    def external_name(self, function_id: str) -> Optional[str]:
        descriptor = self._descriptor(function_id)
        if descriptor is None or not descriptor.externally_compatible:
            return None
        return self._config.name_overrides.get(function_id, descriptor.export_name)

    def compatible_names(self) -> Tuple[Tuple[str, str], ...]:
        """(function id, external name) pairs in registry order."""
        return tuple(
            (d.id, self.external_name(d.id)) for d in self._registry.list_compatible()
        )

    def format_compatible(self, function_id: str, parameters: Any = None) -> Optional[str]:
        name = self.external_name(function_id)
        if name is None:
            return None
        params = ParameterSet.coerce(parameters)
        return f"{name}({params.x},{params.y})"

    def format_command(
        self,
        function_id: str,
        ease: EaseType = EaseType.IN,
        parameters: Any = None,
    ) -> Optional[str]:
        raise NotImplementedError

    def parse_command(self, command: str) -> Optional[ParsedCommand]:
        raise NotImplementedError


__all__ = [
    "AdapterConfig",
    "ParsedCommand",
    "ExportAdapter",
    "BaseAdapter",
]
