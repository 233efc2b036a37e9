"""
ScriptMapper Adapter - exports functions as Beat Saber ScriptMapper commands.

ScriptMapper names easings with an In / Out / InOut prefix (or the short
I / O / IO form used in map bookmarks) followed by a base name such as
``Sine`` or ``Quad``. The parametric Drift function has its own
``ease_{x}_{y}`` form.

Usage:
    adapter = ScriptMapperAdapter()
    adapter.format_command("quadratic", EaseType.OUT)        # "OutQuad"
    adapter.format_short_command("cubic", EaseType.BOTH)     # "IOCubic"
    adapter.format_command("drift", parameters={"x": 3, "y": 7})  # "ease_3_7"
    adapter.parse_command("IBack")  # ParsedCommand("back", EaseType.IN)
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from ..core.logging_config import get_logger
from ..core.registry import FunctionRegistry
from ..core.types import PARAM_MAX, EaseType, ParameterSet
from .protocol import AdapterConfig, BaseAdapter, ParsedCommand

logger = get_logger(__name__)

DRIFT_ID = "drift"
DRIFT_PATTERN = re.compile(r"ease_(0|[1-9][0-9]*)_(0|[1-9][0-9]*)")

LONG_PREFIXES = {
    EaseType.IN: "In",
    EaseType.OUT: "Out",
    EaseType.BOTH: "InOut",
}

SHORT_PREFIXES = {
    EaseType.IN: "I",
    EaseType.OUT: "O",
    EaseType.BOTH: "IO",
}

# Longest prefixes first so "InOutSine" is not read as "In" + "OutSine"
PARSE_PREFIXES = (
    ("InOut", EaseType.BOTH),
    ("IO", EaseType.BOTH),
    ("In", EaseType.IN),
    ("I", EaseType.IN),
    ("Out", EaseType.OUT),
    ("O", EaseType.OUT),
)


@dataclass
class ScriptMapperConfig(AdapterConfig):
    """ScriptMapper-specific configuration."""
    target_name: str = "ScriptMapper"

    # Fallback command for bookmarks with no compatible easing
    fallback_command: str = "easeLinear"


class ScriptMapperAdapter(BaseAdapter):
    """Adapter for ScriptMapper easing commands."""

    def __init__(
        self,
        config: Optional[ScriptMapperConfig] = None,
        registry: Optional[FunctionRegistry] = None,
    ):
        super().__init__(config or ScriptMapperConfig(), registry)

    def _format(self, function_id: str, ease, parameters, prefixes) -> Optional[str]:
        if function_id == DRIFT_ID and self.is_compatible(DRIFT_ID):
            if parameters is None:
                return None
            params = ParameterSet.coerce(parameters)
            return f"ease_{params.x}_{params.y}"

        name = self.external_name(function_id)
        if name is None:
            return None
        return f"{prefixes[EaseType.coerce(ease)]}{name}"

    def format_command(
        self,
        function_id: str,
        ease: EaseType = EaseType.IN,
        parameters: Any = None,
    ) -> Optional[str]:
        """
        Format as a long-form ScriptMapper command.

        Args:
            function_id: Internal function id
            ease: Ease type (In / Out / InOut prefix)
            parameters: Drift parameters (required for drift)

        Returns:
            Command like "InSine", "OutQuad", "ease_6_6", or None if the
            function is not compatible (or drift has no parameters)
        """
        return self._format(function_id, ease, parameters, LONG_PREFIXES)

    def format_short_command(
        self,
        function_id: str,
        ease: EaseType = EaseType.IN,
        parameters: Any = None,
    ) -> Optional[str]:
        """Same as format_command with the I / O / IO prefixes used in bookmarks."""
        return self._format(function_id, ease, parameters, SHORT_PREFIXES)

    def format_bookmark_easing(
        self,
        function_id: str,
        ease: EaseType = EaseType.IN,
        parameters: Any = None,
    ) -> str:
        """Short command, or the configured fallback when not representable."""
        command = self.format_short_command(function_id, ease, parameters)
        return command if command is not None else self.config.fallback_command

    def _function_for_name(self, base_name: str) -> Optional[str]:
        for function_id, name in self.compatible_names():
            if name == base_name:
                return function_id
        return None

    def parse_command(self, command: str) -> Optional[ParsedCommand]:
        """
        Decode a ScriptMapper command.

        Args:
            command: e.g. "InSine", "IOQuad", "ease_3_7"

        Returns:
            ParsedCommand, or None if the command is not a known easing
        """
        if not command:
            return None

        drift_match = DRIFT_PATTERN.fullmatch(command)
        if drift_match:
            x, y = int(drift_match.group(1)), int(drift_match.group(2))
            if x > PARAM_MAX or y > PARAM_MAX:
                logger.debug(f"{self.config.target_name} drift command out of range: {command}")
                return None
            return ParsedCommand(DRIFT_ID, EaseType.IN, ParameterSet(x, y))

        for prefix, ease in PARSE_PREFIXES:
            if command.startswith(prefix):
                base_name = command[len(prefix):]
                if not base_name:
                    return None
                function_id = self._function_for_name(base_name)
                if function_id is None:
                    return None
                return ParsedCommand(function_id, ease)

        return None

    def extract_easing_from_bookmark(self, bookmark_name: str) -> Optional[str]:
        """
        Find the easing command in a comma-separated bookmark name.

        The easing usually comes last, so parts are scanned from the end.

        Example:
            extract_easing_from_bookmark("dpos_-0.5_3_-3,spin60,IBack")  # "IBack"
            extract_easing_from_bookmark("dpos_0_0_0")                   # None
        """
        for part in reversed(bookmark_name.split(",")):
            part = part.strip()
            if self.parse_command(part) is not None:
                return part
        return None


# Default adapter over the default registry
SCRIPTMAPPER = ScriptMapperAdapter()


def get_scriptmapper_name(function_id: str) -> Optional[str]:
    """ScriptMapper base name for a function id, or None if not compatible."""
    return SCRIPTMAPPER.external_name(function_id)


def is_scriptmapper_compatible(function_id: str) -> bool:
    return SCRIPTMAPPER.is_compatible(function_id)


def format_compatible(function_id: str, parameters: Any = None) -> Optional[str]:
    """
    Render a compatible function and its parameters as ``Name(x,y)``.

    Returns None (not an error) for unknown or incompatible functions.
    """
    return SCRIPTMAPPER.format_compatible(function_id, parameters)


def format_command(function_id: str, ease=EaseType.IN, parameters: Any = None) -> Optional[str]:
    return SCRIPTMAPPER.format_command(function_id, ease, parameters)


def format_short_command(function_id: str, ease=EaseType.IN, parameters: Any = None) -> Optional[str]:
    return SCRIPTMAPPER.format_short_command(function_id, ease, parameters)


def parse_command(command: str) -> Optional[ParsedCommand]:
    return SCRIPTMAPPER.parse_command(command)


def extract_easing_from_bookmark(bookmark_name: str) -> Optional[str]:
    return SCRIPTMAPPER.extract_easing_from_bookmark(bookmark_name)


__all__ = [
    "ScriptMapperConfig",
    "ScriptMapperAdapter",
    "SCRIPTMAPPER",
    "get_scriptmapper_name",
    "is_scriptmapper_compatible",
    "format_compatible",
    "format_command",
    "format_short_command",
    "parse_command",
    "extract_easing_from_bookmark",
]
