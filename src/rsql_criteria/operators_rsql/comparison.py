"""Comparison operators: equal, not equal, >, >=, <, <=."""

from __future__ import annotations

from typing import Any

from ..encoding import percent_encode, quote
from ..operators import RSQLOperator
from ..renderer import OperatorRenderer


def _quote_if(should_quote: bool, encoded_value: str) -> str:
    return quote(encoded_value) if should_quote else encoded_value


class EqualRenderer(OperatorRenderer):
    """Equality is sent as a single-element ``=in=`` so lists work too."""

    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.EQUAL

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "=in=" + percent_encode(_quote_if(should_quote, encoded_value))


class NotEqualRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.NOT_EQUAL

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return "!=" + percent_encode(_quote_if(should_quote, encoded_value))


class GreaterThanRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.GREATER_THAN

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return percent_encode(">") + encoded_value


class GreaterThanEqualToRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.GREATER_THAN_EQUAL_TO

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return percent_encode(">=") + encoded_value


class LessThanRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.LESS_THAN

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return percent_encode("<") + encoded_value


class LessThanEqualToRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.LESS_THAN_EQUAL_TO

    def render(self, value: Any, encoded_value: str, should_quote: bool) -> str:
        return percent_encode("<=") + encoded_value
