"""Set operators: in, not in."""

from __future__ import annotations

from typing import Any

from ..operators import RSQLOperator
from ..renderer import OperatorRenderer


class InRenderer(OperatorRenderer):
    """Expects a sequence value, whose elements are encoded one by one."""

    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.IN

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return f"=in=({encoded_value})"


class NotInRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.NOT_IN

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return f"=out=({encoded_value})"
