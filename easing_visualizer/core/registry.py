"""
Function registry - the closed catalog of easing and LED functions.

The catalog is built once at import. Lookups go through an id map and the
two ordered views (all / ScriptMapper-compatible) are precomputed tuples,
so the registry is safe to read from any number of callers.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Tuple, Union

from .exceptions import FunctionNotFoundError, RegistryError
from .logging_config import get_logger
from .types import FunctionDescriptor, FunctionFamily, ParameterSet

logger = get_logger(__name__)


class FunctionRegistry:
    """
    Immutable, ordered catalog of FunctionDescriptors.

    Usage:
        registry = FunctionRegistry(descriptors)
        sine = registry.lookup("sine")
        names = [d.name for d in registry.list_compatible()]
    """

    def __init__(self, descriptors: Iterable[FunctionDescriptor]):
        ordered = tuple(descriptors)
        by_id = {}
        for descriptor in ordered:
            if descriptor.id in by_id:
                raise RegistryError(
                    f"Duplicate function id: {descriptor.id}",
                    {"function_id": descriptor.id},
                )
            by_id[descriptor.id] = descriptor

        self._by_id = MappingProxyType(by_id)
        self._all = ordered
        self._compatible = tuple(d for d in ordered if d.externally_compatible)

        logger.debug(
            f"Registry built with {len(self._all)} functions "
            f"({len(self._compatible)} ScriptMapper compatible)"
        )

    def lookup(self, function_id: str) -> FunctionDescriptor:
        """
        Get a descriptor by id.

        Raises:
            FunctionNotFoundError: If the id is not registered
        """
        try:
            return self._by_id[function_id]
        except (KeyError, TypeError):
            raise FunctionNotFoundError(function_id) from None

    def resolve(self, function: Union[str, FunctionDescriptor]) -> FunctionDescriptor:
        """Accept an id or a descriptor and return the registered descriptor."""
        if isinstance(function, FunctionDescriptor):
            return self.lookup(function.id)
        return self.lookup(function)

    def list_all(self) -> Tuple[FunctionDescriptor, ...]:
        """All descriptors in registration order."""
        return self._all

    def list_compatible(self) -> Tuple[FunctionDescriptor, ...]:
        """ScriptMapper-compatible descriptors, in registration order."""
        return self._compatible

    def list_family(self, family: Union[FunctionFamily, str]) -> Tuple[FunctionDescriptor, ...]:
        """Descriptors of one family, in registration order."""
        family = FunctionFamily(family)
        return tuple(d for d in self._all if d.family == family)

    def ids(self) -> Tuple[str, ...]:
        return tuple(d.id for d in self._all)

    def __contains__(self, function_id) -> bool:
        return function_id in self._by_id

    def __iter__(self) -> Iterator[FunctionDescriptor]:
        return iter(self._all)

    def __len__(self) -> int:
        return len(self._all)


# ============================================================================
# DEFAULT CATALOG
# ============================================================================

def _easing(id, name, formula, hue, external_name=None, **kwargs) -> FunctionDescriptor:
    return FunctionDescriptor(
        id=id,
        name=name,
        formula=formula,
        color=f"oklch(0.75 0.15 {hue})",
        family=FunctionFamily.EASING,
        externally_compatible=external_name is not None,
        external_name=external_name,
        **kwargs,
    )


def _led(id, name, formula, hue) -> FunctionDescriptor:
    return FunctionDescriptor(
        id=id,
        name=name,
        formula=formula,
        color=f"oklch(0.75 0.15 {hue})",
        family=FunctionFamily.LED,
    )


DEFAULT_FUNCTIONS: Tuple[FunctionDescriptor, ...] = (
    # Easing family
    _easing("linear", "Linear", "y = x", 200),
    _easing("sine", "Sine", "y = sin(πx/2)", 280, "Sine"),
    _easing("quadratic", "Quadratic", "y = x²", 160, "Quad"),
    _easing("cubic", "Cubic", "y = x³", 120, "Cubic"),
    _easing("quartic", "Quartic", "y = x⁴", 80, "Quart"),
    _easing("quintic", "Quintic", "y = x⁵", 50, "Quint"),
    _easing("exponential", "Exponential", "y = 2^(10(x-1))", 20, "Expo"),
    _easing("circular", "Circular", "y = 1 - √(1-x²)", 340, "Circ"),
    _easing("sqrt", "Square Root", "y = √x", 40),
    _easing("back", "Back", "y = x²(2.70158x - 1.70158)", 300, "Back"),
    _easing("elastic", "Elastic", "y = -2^(10x-10)sin((10x-10.75)×2π/3)", 260, "Elastic"),
    _easing("bounce", "Bounce", "Piecewise bounce function", 220, "Bounce"),
    _easing("hermite", "Hermite", "y = x²(3 - 2x)", 180),
    _easing("bezier", "Bezier", "y = 3x²(1-x) + x³", 140),
    _easing("trigonometric", "Trigonometric", "y = (1 - cos(πx))/2", 60),
    # Alias of quadratic; ScriptMapper parses "Quad" back to quadratic
    _easing("ease-in", "Ease In", "y = x²", 100, "Quad"),
    _easing(
        "drift",
        "Drift",
        "y = x < X ? (x/X)²·Y : Y + (x-X)/(1-X)·(1-Y)",
        320,
        "Drift",
        is_parametric=True,
        default_params=ParameterSet(),
    ),
    # LED family (attack half of the cycle)
    _led("led-linear", "Linear", "y = u", 200),
    _led("led-sine", "Sine Wave", "y = sin(πu/2)", 280),
    _led("led-exponential", "Exponential", "y = u²", 160),
    _led("led-inverse-exp", "Inverse Exponential", "y = 1 - (1-u)²", 120),
    _led("led-quadratic-ease", "Quadratic Ease In-Out", "y = u < 0.5 ? 2u² : 1 - 2(1-u)²", 80),
    _led("led-cubic", "Cubic", "y = u³", 60),
    _led("led-elastic", "Elastic", "y = |sin(6.5πu)| × u", 240),
)

REGISTRY = FunctionRegistry(DEFAULT_FUNCTIONS)


def lookup(function_id: str) -> FunctionDescriptor:
    """Look up a function in the default registry."""
    return REGISTRY.lookup(function_id)


def list_all() -> Tuple[FunctionDescriptor, ...]:
    """All functions in the default registry."""
    return REGISTRY.list_all()


def list_compatible() -> Tuple[FunctionDescriptor, ...]:
    """ScriptMapper-compatible functions in the default registry."""
    return REGISTRY.list_compatible()


__all__ = [
    "FunctionRegistry",
    "DEFAULT_FUNCTIONS",
    "REGISTRY",
    "lookup",
    "list_all",
    "list_compatible",
]
