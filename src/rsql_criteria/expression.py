"""
A single ``field`` / operator / value predicate.

Example::

    FilterExpression("code", RSQLOperator.CONTAINS, "a").build()
    # → 'code==%22*a*%22'
"""

from __future__ import annotations

import copy
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from .base import Composable
from .encoding import UNSET, encode_value
from .exceptions import InvalidExpressionError, OperatorNotFoundError, ValidationError
from .operators import RSQLOperator
from .operators_rsql import build_default_registry
from .renderer import CustomOperator

if TYPE_CHECKING:
    from .renderer import OperatorRendererRegistry

_OPERATORS_BY_VALUE: dict[str, RSQLOperator] = {m.value: m for m in RSQLOperator}

# Shared by every expression built without an injected registry.
_DEFAULT_REGISTRY = build_default_registry()


class ExpressionOptions(BaseModel):
    """Rendering options for a single expression."""

    model_config = ConfigDict(frozen=True)

    include_timestamp: bool = False


class FilterExpression(Composable):
    """
    One RSQL predicate.

    Exactly one of ``operator`` (a built-in) and ``custom_operator`` is
    set. Built-in operators are rendered through an
    :class:`~rsql_criteria.renderer.OperatorRendererRegistry`; when none is
    injected the module-wide default registry is shared. Copies made by
    ``copy.deepcopy`` (and so by ``&`` / ``|``) keep the same registry and
    custom operator; only the value is copied.
    """

    def __init__(
        self,
        field: str,
        operator: RSQLOperator | str | CustomOperator,
        value: Any = UNSET,
        options: ExpressionOptions | None = None,
        *,
        registry: OperatorRendererRegistry | None = None,
    ) -> None:
        if not field:
            raise ValidationError(
                "Filter field must be a non-empty string", path="field"
            )
        self.field = field
        self.operator: RSQLOperator | None = None
        self.custom_operator: CustomOperator | None = None
        if isinstance(operator, RSQLOperator):
            self.operator = operator
        elif isinstance(operator, str):
            self.operator = _lookup_operator(operator, field)
        elif isinstance(operator, CustomOperator):
            self.custom_operator = operator
        else:
            raise InvalidExpressionError(field, operator)
        self.value = value
        self.options = options if options is not None else ExpressionOptions()
        self._registry = registry if registry is not None else _DEFAULT_REGISTRY

    def build(self) -> str:
        """Render ``field`` followed by the operator token and value."""
        encoded = encode_value(
            self.value, include_timestamp=self.options.include_timestamp
        )
        if self.custom_operator is not None:
            suffix = self.custom_operator.render(
                self.value, encoded.text, encoded.should_quote
            )
        else:
            assert self.operator is not None
            suffix = self._registry.render(
                self.operator,
                self.value,
                encoded.text,
                encoded.should_quote,
                field=self.field,
            )
        return self.field + suffix

    def __deepcopy__(self, memo: dict[int, Any]) -> FilterExpression:
        clone = copy.copy(self)
        memo[id(self)] = clone
        clone.value = copy.deepcopy(self.value, memo)
        return clone

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "field": self.field,
            "op": self.operator.value if self.operator is not None else "custom",
        }
        if self.value is not UNSET:
            result["val"] = _json_value(self.value)
        if self.options.include_timestamp:
            result["include_timestamp"] = True
        return result

    def __repr__(self) -> str:
        op = self.operator.name if self.operator is not None else self.custom_operator
        return f"FilterExpression({self.field!r}, {op}, {self.value!r})"


def _lookup_operator(name: str, field: str) -> RSQLOperator:
    key = name.strip().lower()
    try:
        return _OPERATORS_BY_VALUE[key]
    except KeyError:
        raise OperatorNotFoundError(
            name, list(_OPERATORS_BY_VALUE), field=field
        ) from None


def _json_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, list | tuple):
        return [_json_value(v) for v in value if v is not UNSET]
    return value
