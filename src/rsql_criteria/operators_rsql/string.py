"""String operators: like, starts with, ends with, contains, does not contain.

All of them quote the value regardless of its type and use ``*`` as the
RSQL wildcard.
"""

from __future__ import annotations

from typing import Any

from ..encoding import percent_encode, quote
from ..operators import RSQLOperator
from ..renderer import OperatorRenderer


class LikeRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.LIKE

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "==" + percent_encode(quote(encoded_value))


class StartsWithRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.STARTS_WITH

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "==" + percent_encode(quote(f"{encoded_value}*"))


class EndsWithRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.ENDS_WITH

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "==" + percent_encode(quote(f"*{encoded_value}"))


class ContainsRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.CONTAINS

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "==" + percent_encode(quote(f"*{encoded_value}*"))


class DoesNotContainRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.DOES_NOT_CONTAIN

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "!=" + percent_encode(quote(f"*{encoded_value}*"))
