"""Tests for the function registry and core types."""

import pytest

from easing_visualizer.core import (
    FunctionDescriptor,
    FunctionFamily,
    FunctionNotFoundError,
    FunctionRegistry,
    ParameterSet,
    REGISTRY,
    RegistryError,
    list_all,
    list_compatible,
    lookup,
)


COMPATIBLE_NAMES = {
    "sine": "Sine",
    "quadratic": "Quad",
    "cubic": "Cubic",
    "quartic": "Quart",
    "quintic": "Quint",
    "exponential": "Expo",
    "circular": "Circ",
    "back": "Back",
    "elastic": "Elastic",
    "bounce": "Bounce",
    "ease-in": "Quad",
    "drift": "Drift",
}

INCOMPATIBLE_IDS = ["linear", "sqrt", "hermite", "bezier", "trigonometric"]


@pytest.fixture
def small_registry():
    return FunctionRegistry([
        FunctionDescriptor("a", "A", "y = x", "red"),
        FunctionDescriptor("b", "B", "y = x²", "blue", externally_compatible=True, external_name="Bee"),
        FunctionDescriptor("c", "C", "y = x³", "green"),
        FunctionDescriptor("d", "D", "y = x⁴", "gold", externally_compatible=True),
    ])


class TestLookup:

    def test_lookup_known(self):
        descriptor = lookup("drift")
        assert descriptor.name == "Drift"
        assert descriptor.is_parametric is True
        assert descriptor.default_params == ParameterSet(6, 6)

    def test_lookup_unknown(self):
        with pytest.raises(FunctionNotFoundError):
            lookup("nonexistent")

    def test_lookup_unhashable(self):
        with pytest.raises(FunctionNotFoundError):
            REGISTRY.lookup(["sine"])

    def test_contains(self):
        assert "sine" in REGISTRY
        assert "nonexistent" not in REGISTRY

    def test_resolve_id_and_descriptor(self):
        descriptor = REGISTRY.lookup("cubic")
        assert REGISTRY.resolve("cubic") is descriptor
        assert REGISTRY.resolve(descriptor) is descriptor

    def test_resolve_foreign_descriptor(self, small_registry):
        with pytest.raises(FunctionNotFoundError):
            small_registry.resolve(REGISTRY.lookup("cubic"))

    def test_ease_in_registered(self):
        descriptor = lookup("ease-in")
        assert descriptor.externally_compatible is True
        assert descriptor.family == FunctionFamily.EASING


class TestOrderedViews:

    def test_all_is_stable(self):
        assert list_all() == list_all()
        assert list_all()[0].id == "linear"

    def test_ids_unique(self):
        ids = REGISTRY.ids()
        assert len(ids) == len(set(ids))

    def test_compatible_is_ordered_subset(self):
        all_ids = [d.id for d in list_all()]
        compatible_ids = [d.id for d in list_compatible()]
        positions = [all_ids.index(i) for i in compatible_ids]
        assert positions == sorted(positions)
        assert all(d.externally_compatible for d in list_compatible())

    def test_compatible_count(self):
        assert len(list_compatible()) == 12

    def test_views_are_immutable(self):
        assert isinstance(list_all(), tuple)
        assert isinstance(list_compatible(), tuple)

    def test_small_registry_views(self, small_registry):
        assert [d.id for d in small_registry.list_all()] == ["a", "b", "c", "d"]
        assert [d.id for d in small_registry.list_compatible()] == ["b", "d"]
        assert len(small_registry) == 4

    def test_family_views(self):
        led = REGISTRY.list_family(FunctionFamily.LED)
        assert len(led) == 7
        assert all(d.id.startswith("led-") for d in led)
        assert len(REGISTRY.list_family("easing")) == 17


class TestCatalog:

    def test_compatible_names(self):
        for function_id, name in COMPATIBLE_NAMES.items():
            descriptor = lookup(function_id)
            assert descriptor.externally_compatible, function_id
            assert descriptor.export_name == name

    def test_incompatible(self):
        for function_id in INCOMPATIBLE_IDS:
            descriptor = lookup(function_id)
            assert descriptor.externally_compatible is False
            assert descriptor.export_name is None

    def test_only_drift_is_parametric(self):
        parametric = [d.id for d in list_all() if d.is_parametric]
        assert parametric == ["drift"]

    def test_colors_pass_through(self):
        assert lookup("sine").color == "oklch(0.75 0.15 280)"


class TestConstruction:

    def test_duplicate_ids_rejected(self):
        with pytest.raises(RegistryError):
            FunctionRegistry([
                FunctionDescriptor("a", "A", "", ""),
                FunctionDescriptor("a", "A again", "", ""),
            ])

    def test_external_name_ignored_when_incompatible(self):
        descriptor = FunctionDescriptor("z", "Z", "", "", external_name="Zed")
        assert descriptor.export_name is None
        assert descriptor.to_dict()["external_name"] is None

    def test_external_name_falls_back_to_id(self, small_registry):
        assert small_registry.lookup("d").export_name == "d"
        assert small_registry.lookup("b").export_name == "Bee"

    def test_descriptor_is_frozen(self):
        descriptor = lookup("sine")
        with pytest.raises(AttributeError):
            descriptor.name = "Changed"


class TestParameterSet:

    def test_coerce_defaults(self):
        assert ParameterSet.coerce(None) == ParameterSet(6, 6)
        assert ParameterSet.coerce({}) == ParameterSet(6, 6)

    def test_coerce_partial_mapping(self):
        assert ParameterSet.coerce({"x": 3}) == ParameterSet(3, 6)

    def test_clamps(self):
        params = ParameterSet(-5, 42)
        assert (params.x, params.y) == (0, 10)

    def test_normalized(self):
        assert ParameterSet(3, 7).normalized == pytest.approx((0.3, 0.7))

    def test_non_numeric_uses_minimum(self):
        assert ParameterSet.coerce({"x": "abc", "y": 2}).x == 0
