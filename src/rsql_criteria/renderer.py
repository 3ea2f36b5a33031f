"""
Operator rendering strategy.

Provides the ``CustomOperator`` protocol, the ``OperatorRenderer`` base for
built-in operators, and a registry that maps ``RSQLOperator`` → renderer.

Built-in and custom operators share one signature: they receive the raw
value, its encoded literal and the quoting flag from
:func:`~rsql_criteria.encoding.encode_value`, and return the text that
follows the field name (operator token plus value).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .exceptions import OperatorNotFoundError

if TYPE_CHECKING:
    from .operators import RSQLOperator


@runtime_checkable
class CustomOperator(Protocol):
    """
    Caller-supplied operator grammar.

    Any object with a matching ``render`` method can be passed to a
    :class:`~rsql_criteria.expression.FilterExpression` in place of a
    built-in operator; the expression prefixes the returned text with the
    field name.
    """

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        """Return the operator-and-value suffix for *value*."""
        ...


class OperatorRenderer(ABC):
    """
    Strategy interface for a built-in operator.

    Each operator is an isolated class with a single ``render`` method.
    """

    @property
    @abstractmethod
    def name(self) -> RSQLOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        """
        Render the operator token and value.

        Args:
            value: The raw value held by the expression.
            encoded_value: The value's RSQL literal (unquoted).
            should_quote: Whether the literal's type calls for quoting.

        Returns:
            The suffix placed after the field name.
        """
        ...


class OperatorRendererRegistry:
    """
    Registry of OperatorRenderer instances keyed by RSQLOperator.

    Usage::

        registry = OperatorRendererRegistry()
        registry.register(ContainsRenderer())

        suffix = registry.render(RSQLOperator.CONTAINS, "a", "a", True)
    """

    def __init__(self) -> None:
        self._renderers: dict[RSQLOperator, OperatorRenderer] = {}

    # -- registration --------------------------------------------------------

    def register(self, renderer: OperatorRenderer) -> None:
        """Register a renderer, replacing any existing one for its operator."""
        self._renderers[renderer.name] = renderer

    def register_all(self, *renderers: OperatorRenderer) -> None:
        for renderer in renderers:
            self.register(renderer)

    def unregister(self, name: RSQLOperator) -> None:
        self._renderers.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: RSQLOperator) -> OperatorRenderer | None:
        return self._renderers.get(name)

    def has(self, name: RSQLOperator) -> bool:
        return name in self._renderers

    @property
    def supported_operators(self) -> set[RSQLOperator]:
        return set(self._renderers.keys())

    # -- rendering shortcut --------------------------------------------------

    def render(
        self,
        name: RSQLOperator,
        value: Any,
        encoded_value: str,
        should_quote: bool,
        *,
        field: str | None = None,
    ) -> str:
        """
        Look up the renderer and render.

        ``field`` only labels the error raised for an unregistered operator.

        Raises:
            OperatorNotFoundError: If the operator is not registered.
        """
        renderer = self.get(name)
        if renderer is None:
            raise OperatorNotFoundError(
                name.value,
                [op.value for op in self.supported_operators],
                field=field,
            )
        return renderer.render(value, encoded_value, should_quote)
