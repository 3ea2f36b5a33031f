"""Null / empty check operators: is_empty, is_not_empty, is_null, is_not_null."""

from __future__ import annotations

from typing import Any

from ..encoding import percent_encode
from ..operators import RSQLOperator
from ..renderer import OperatorRenderer

_EMPTY_STRING = percent_encode('""')


class IsEmptyRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.IS_EMPTY

    def render(self, _value: Any, _encoded_value: str, _should_quote: bool) -> str:
        return "==" + _EMPTY_STRING


class IsNotEmptyRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.IS_NOT_EMPTY

    def render(self, _value: Any, _encoded_value: str, _should_quote: bool) -> str:
        return "!=" + _EMPTY_STRING


class IsNullRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.IS_NULL

    def render(self, _value: Any, _encoded_value: str, _should_quote: bool) -> str:
        return "==null"


class IsNotNullRenderer(OperatorRenderer):
    @property
    def name(self) -> RSQLOperator:
        return RSQLOperator.IS_NOT_NULL

    def render(self, _value: Any, _encoded_value: str, _should_quote: bool) -> str:
        return "!=null"
