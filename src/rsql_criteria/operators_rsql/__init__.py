"""
Built-in RSQL operator renderers.

Provides concrete OperatorRenderer subclasses for each RSQLOperator
and a factory function to create registries.

Usage::

    from rsql_criteria.operators_rsql import build_default_registry

    registry = build_default_registry()
    suffix = registry.render(RSQLOperator.CONTAINS, "a", "a", True)
"""

from __future__ import annotations

from ..renderer import OperatorRendererRegistry
from .comparison import (
    EqualRenderer,
    GreaterThanEqualToRenderer,
    GreaterThanRenderer,
    LessThanEqualToRenderer,
    LessThanRenderer,
    NotEqualRenderer,
)
from .null import (
    IsEmptyRenderer,
    IsNotEmptyRenderer,
    IsNotNullRenderer,
    IsNullRenderer,
)
from .set import InRenderer, NotInRenderer
from .string import (
    ContainsRenderer,
    DoesNotContainRenderer,
    EndsWithRenderer,
    LikeRenderer,
    StartsWithRenderer,
)


def build_default_registry() -> OperatorRendererRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance each call, so callers may register overrides
    without affecting other registries.
    """
    registry = OperatorRendererRegistry()
    registry.register_all(
        # Comparison
        EqualRenderer(),
        NotEqualRenderer(),
        GreaterThanRenderer(),
        GreaterThanEqualToRenderer(),
        LessThanRenderer(),
        LessThanEqualToRenderer(),
        # String
        LikeRenderer(),
        StartsWithRenderer(),
        EndsWithRenderer(),
        ContainsRenderer(),
        DoesNotContainRenderer(),
        # Set
        InRenderer(),
        NotInRenderer(),
        # Null / empty
        IsEmptyRenderer(),
        IsNotEmptyRenderer(),
        IsNullRenderer(),
        IsNotNullRenderer(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "OperatorRendererRegistry",
]
