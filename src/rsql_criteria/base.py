from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from .operators import Connective

if TYPE_CHECKING:
    from .expression import FilterExpression
    from .filter_list import FilterList


class Composable:
    """Base class for filter nodes with ``&`` / ``|`` composition support.

    The result is a new :class:`~rsql_criteria.filter_list.FilterList`
    holding copies of both operands.
    """

    def __and__(self, other: FilterExpression | FilterList) -> FilterList:
        return self._combine(other, Connective.AND)

    def __or__(self, other: FilterExpression | FilterList) -> FilterList:
        return self._combine(other, Connective.OR)

    def _combine(
        self, other: FilterExpression | FilterList, connective: Connective
    ) -> FilterList:
        from .filter_list import FilterList

        combined = FilterList()
        combined.add(copy.deepcopy(self))  # type: ignore[arg-type]
        combined.add(copy.deepcopy(other), connective)
        return combined
