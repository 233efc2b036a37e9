"""
Tests for ScriptMapper compatibility and command formatting.

Run with: pytest tests/test_scriptmapper.py -v
"""

import pytest

from easing_visualizer.adapters import (
    AdapterConfig,
    ExportAdapter,
    ParsedCommand,
    ScriptMapperAdapter,
    ScriptMapperConfig,
    extract_easing_from_bookmark,
    format_command,
    format_compatible,
    format_short_command,
    get_scriptmapper_name,
    is_scriptmapper_compatible,
    parse_command,
)
from easing_visualizer.core import EaseType, ParameterSet, REGISTRY, list_all


class TestCompatibility:

    def test_names(self):
        assert get_scriptmapper_name("sine") == "Sine"
        assert get_scriptmapper_name("quadratic") == "Quad"
        assert get_scriptmapper_name("drift") == "Drift"

    def test_incompatible_names(self):
        assert get_scriptmapper_name("linear") is None
        assert get_scriptmapper_name("hermite") is None
        assert get_scriptmapper_name("nonexistent") is None

    def test_is_compatible(self):
        assert is_scriptmapper_compatible("exponential") is True
        assert is_scriptmapper_compatible("sqrt") is False
        assert is_scriptmapper_compatible("led-sine") is False
        assert is_scriptmapper_compatible("nonexistent") is False

    def test_adapter_satisfies_protocol(self):
        assert isinstance(ScriptMapperAdapter(), ExportAdapter)


class TestFormatCompatible:

    def test_contains_name_and_params(self):
        result = format_compatible("sine", {"x": 3, "y": 7})
        assert result == "Sine(3,7)"
        assert "3" in result and "7" in result and "Sine" in result

    def test_drift(self):
        assert format_compatible("drift", ParameterSet(10, 0)) == "Drift(10,0)"

    def test_ease_in(self):
        result = format_compatible("ease-in", {"x": 3, "y": 7})
        assert result == "Quad(3,7)"
        assert "3" in result and "7" in result
        assert get_scriptmapper_name("ease-in") in result

    def test_default_params(self):
        assert format_compatible("quadratic") == "Quad(6,6)"

    def test_is_pure(self):
        first = format_compatible("back", {"x": 4, "y": 9})
        assert first == format_compatible("back", {"x": 4, "y": 9})

    def test_absent_for_incompatible(self):
        for descriptor in list_all():
            result = format_compatible(descriptor.id, {"x": 3, "y": 7})
            if descriptor.externally_compatible:
                assert result
            else:
                assert result is None

    def test_absent_for_unknown(self):
        assert format_compatible("nonexistent", {"x": 1, "y": 2}) is None

    def test_exact_param_range(self):
        for x in range(0, 11):
            for y in range(0, 11):
                assert format_compatible("drift", {"x": x, "y": y}) == f"Drift({x},{y})"

    def test_out_of_range_clamped(self):
        assert format_compatible("drift", {"x": 12, "y": -1}) == "Drift(10,0)"


class TestFormatCommand:

    def test_easein(self):
        assert format_command("sine", EaseType.IN) == "InSine"
        assert format_command("quadratic", "easein") == "InQuad"

    def test_easeout(self):
        assert format_command("exponential", EaseType.OUT) == "OutExpo"
        assert format_command("bounce", EaseType.OUT) == "OutBounce"

    def test_easeboth(self):
        assert format_command("circular", EaseType.BOTH) == "InOutCirc"
        assert format_command("elastic", EaseType.BOTH) == "InOutElastic"

    def test_short(self):
        assert format_short_command("sine", EaseType.IN) == "ISine"
        assert format_short_command("quadratic", EaseType.OUT) == "OQuad"
        assert format_short_command("cubic", EaseType.BOTH) == "IOCubic"

    def test_incompatible(self):
        assert format_command("linear", EaseType.IN) is None
        assert format_short_command("hermite", EaseType.OUT) is None

    def test_drift(self):
        assert format_command("drift", EaseType.IN, {"x": 6, "y": 6}) == "ease_6_6"
        assert format_command("drift", EaseType.OUT, {"x": 3, "y": 7}) == "ease_3_7"
        assert format_short_command("drift", EaseType.IN, {"x": 0, "y": 10}) == "ease_0_10"

    def test_drift_without_params(self):
        assert format_command("drift", EaseType.IN) is None

    def test_bookmark_fallback(self):
        adapter = ScriptMapperAdapter()
        assert adapter.format_bookmark_easing("linear") == "easeLinear"
        assert adapter.format_bookmark_easing("back", EaseType.IN) == "IBack"


class TestParseCommand:

    @pytest.mark.parametrize("command, function_id, ease", [
        ("InSine", "sine", EaseType.IN),
        ("InQuad", "quadratic", EaseType.IN),
        ("OutSine", "sine", EaseType.OUT),
        ("OutExpo", "exponential", EaseType.OUT),
        ("InOutSine", "sine", EaseType.BOTH),
        ("InOutCirc", "circular", EaseType.BOTH),
        ("IBack", "back", EaseType.IN),
        ("OQuad", "quadratic", EaseType.OUT),
        ("IOCubic", "cubic", EaseType.BOTH),
    ])
    def test_standard(self, command, function_id, ease):
        assert parse_command(command) == ParsedCommand(function_id, ease)

    @pytest.mark.parametrize("command", [
        "InvalidCommand", "InUnknown", "OutLinear", "Sine", "In", "IO", "",
    ])
    def test_invalid(self, command):
        assert parse_command(command) is None

    def test_drift(self):
        parsed = parse_command("ease_3_7")
        assert parsed.function_id == "drift"
        assert parsed.ease == EaseType.IN
        assert parsed.params == ParameterSet(3, 7)

    @pytest.mark.parametrize("command", [
        "ease_6", "ease_6_", "ease__6", "ease", "ease_15_3", "ease_03_7", "ease_3_07", "ease_00_0",
    ])
    def test_invalid_drift(self, command):
        assert parse_command(command) is None

    def test_round_trip(self):
        for function_id, _ in ScriptMapperAdapter().compatible_names():
            for ease in EaseType:
                command = format_command(function_id, ease, {"x": 3, "y": 7})
                parsed = parse_command(command)
                assert format_command(parsed.function_id, parsed.ease, parsed.params) == command
                if function_id not in ("drift", "ease-in"):
                    assert parsed.function_id == function_id
                    assert parsed.ease == ease

    def test_ease_in_alias_parses_to_quadratic(self):
        assert format_command("ease-in", EaseType.IN) == "InQuad"
        assert parse_command("InQuad") == ParsedCommand("quadratic", EaseType.IN)

    def test_drift_zero_params(self):
        assert parse_command("ease_0_10").params == ParameterSet(0, 10)

    def test_drift_round_trip(self):
        parsed = parse_command("ease_3_7")
        assert format_command(parsed.function_id, parsed.ease, parsed.params) == "ease_3_7"


class TestBookmarkExtraction:

    def test_last_part(self):
        assert extract_easing_from_bookmark("dpos_-0.5_3_-3,spin60,IBack") == "IBack"

    def test_two_parts(self):
        assert extract_easing_from_bookmark("spin60,IOQuad") == "IOQuad"

    def test_drift(self):
        assert extract_easing_from_bookmark("ease_3_7") == "ease_3_7"

    def test_whitespace_stripped(self):
        assert extract_easing_from_bookmark("spin60, OSine ") == "OSine"

    def test_none(self):
        assert extract_easing_from_bookmark("dpos_0_0_0") is None


class TestAdapterConfig:

    def test_name_override(self):
        adapter = ScriptMapperAdapter(ScriptMapperConfig(name_overrides={"quadratic": "Quadratic"}))
        assert adapter.format_command("quadratic", EaseType.IN) == "InQuadratic"
        assert adapter.parse_command("InQuadratic") == ParsedCommand("quadratic", EaseType.IN)

    def test_default_config(self):
        adapter = ScriptMapperAdapter()
        assert adapter.config.target_name == "ScriptMapper"
        assert isinstance(adapter.config, AdapterConfig)
        assert adapter.registry is REGISTRY
