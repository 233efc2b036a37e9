"""
External command format adapters.

Adapters translate (function, parameters) combinations into the syntax of
external tools.
"""

from .protocol import (
    AdapterConfig,
    ParsedCommand,
    ExportAdapter,
    BaseAdapter,
)
from .scriptmapper import (
    ScriptMapperConfig,
    ScriptMapperAdapter,
    SCRIPTMAPPER,
    get_scriptmapper_name,
    is_scriptmapper_compatible,
    format_compatible,
    format_command,
    format_short_command,
    parse_command,
    extract_easing_from_bookmark,
)

__all__ = [
    # Protocol
    "AdapterConfig",
    "ParsedCommand",
    "ExportAdapter",
    "BaseAdapter",
    # ScriptMapper
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
