"""
Errors raised while assembling criteria.

Rendering a correctly built criteria never raises; everything here is
reported when an expression, sort clause or keyword label is created.
Each exception carries a stable ``code`` and a ``to_dict()`` payload so
API clients can surface the problem next to the offending filter.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CriteriaError(Exception):
    """Base exception for all criteria errors."""

    code = "CRITERIA_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class ValidationError(CriteriaError):
    """
    A criteria part was given a value it cannot render.

    ``path`` names the part: the filter or sort field, or the criteria
    setting (``page_size``, ``keywords``) that was rejected.
    """

    code = "INVALID_CRITERIA"

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "path": self.path}


class InvalidExpressionError(ValidationError):
    """
    A filter expression has no operator to render.

    Raised at construction when the operator is neither a built-in
    :class:`~rsql_criteria.operators.RSQLOperator` nor an object
    implementing the custom operator ``render`` method.
    """

    code = "INVALID_EXPRESSION"

    def __init__(self, field: str, operator: Any) -> None:
        self.field = field
        self.operator = operator
        message = (
            f"Expression on field '{field}' needs a built-in operator or a "
            f"custom operator with a render() method, got {operator!r}"
        )
        super().__init__(message, path=field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "field": self.field,
            "operator": repr(self.operator),
        }


class OperatorNotFoundError(CriteriaError):
    """
    An operator name or registry lookup matched no RSQL renderer.

    ``field`` is set when the name came from a filter expression, and
    ``suggestions`` holds the closest built-in operator names.
    """

    code = "UNKNOWN_OPERATOR"

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        field: str | None = None,
    ) -> None:
        self.operator = operator
        self.field = field
        self.valid_operators = sorted(valid_operators)
        self.suggestions = get_close_matches(
            operator.strip().lower(), valid_operators, n=3, cutoff=0.6
        )

        target = f" on field '{field}'" if field else ""
        message = f"No RSQL renderer for operator '{operator}'{target}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if self.valid_operators:
            message += f" Registered operators: {', '.join(self.valid_operators)}"
        else:
            message += " The renderer registry is empty."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "operator": self.operator,
            "field": self.field,
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }
