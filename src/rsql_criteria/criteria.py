"""
Criteria: where clause, ordering and pagination rendered as one query string.

Sections are emitted in a fixed order and only when set::

    $where=...&$orderBy=...&$pageSize=10&$includeTotalCount=true&$pageNumber=2

Two criteria combine with ``and_()`` / ``or_()`` (or ``&`` / ``|``) into a
new criteria; neither operand is modified.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .filter_list import FilterList
from .operators import Connective
from .order_by import OrderByList

logger = logging.getLogger("rsql_criteria.criteria")


class CriteriaKeywords(BaseModel):
    """Query-string labels for each criteria section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    where: str = Field(default="$where", min_length=1)
    order_by: str = Field(default="$orderBy", min_length=1)
    page_size: str = Field(default="$pageSize", min_length=1)
    include_total_count: str = Field(default="$includeTotalCount", min_length=1)
    page_number: str = Field(default="$pageNumber", min_length=1)


def _positive_int(value: int | None, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(
            f"{name} must be a positive integer, got {value!r}", path=name
        )
    return value


class Criteria:
    """
    Filters, ordering and pagination for one API request.

    Keyword labels come from *keywords*, with individual labels overridden
    by the ``*_keyword`` arguments::

        Criteria(where_keyword="$filter", page_size_keyword="$take")

    Raises:
        ValidationError: If a label is empty.
    """

    def __init__(
        self,
        keywords: CriteriaKeywords | None = None,
        *,
        where_keyword: str | None = None,
        order_by_keyword: str | None = None,
        page_size_keyword: str | None = None,
        include_total_count_keyword: str | None = None,
        page_number_keyword: str | None = None,
    ) -> None:
        base = keywords if keywords is not None else CriteriaKeywords()
        overrides = {
            name: label
            for name, label in (
                ("where", where_keyword),
                ("order_by", order_by_keyword),
                ("page_size", page_size_keyword),
                ("include_total_count", include_total_count_keyword),
                ("page_number", page_number_keyword),
            )
            if label is not None
        }
        if overrides:
            try:
                base = CriteriaKeywords.model_validate(
                    {**base.model_dump(), **overrides}
                )
            except PydanticValidationError as exc:
                raise ValidationError(
                    f"Invalid criteria keywords: {exc}", path="keywords"
                ) from exc
        self.keywords = base
        self.filters = FilterList()
        self.order_by = OrderByList()
        self.include_total_count = True
        self._page_size: int | None = None
        self._page_number: int | None = None

    # -- pagination ----------------------------------------------------------

    @property
    def page_size(self) -> int | None:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int | None) -> None:
        self._page_size = _positive_int(value, "page_size")

    @property
    def page_number(self) -> int | None:
        return self._page_number

    @page_number.setter
    def page_number(self, value: int | None) -> None:
        self._page_number = _positive_int(value, "page_number")

    # -- rendering -----------------------------------------------------------

    def build(self) -> str:
        """Render the query string, without a leading ``?``."""
        kw = self.keywords
        sections: list[str] = []
        where = self.filters.build()
        if where:
            sections.append(f"{kw.where}={where}")
        if self.order_by:
            sections.append(f"{kw.order_by}={self.order_by.build()}")
        if self._page_size is not None:
            sections.append(f"{kw.page_size}={self._page_size}")
            if self.include_total_count:
                sections.append(f"{kw.include_total_count}=true")
        if self._page_number is not None:
            sections.append(f"{kw.page_number}={self._page_number}")
        query = "&".join(sections)
        logger.debug("Built criteria query string %r", query)
        return query

    # -- merging -------------------------------------------------------------

    def and_(self, other: Criteria) -> Criteria:
        """
        Return a new criteria whose where clause is ``(self AND other)``.

        Neither operand is modified; use the return value::

            merged = first.and_(second)   # first.build() is unchanged
        """
        return self._merge(other, Connective.AND)

    def or_(self, other: Criteria) -> Criteria:
        """
        Return a new criteria whose where clause is ``(self OR other)``.

        Like :meth:`and_`, the receiver is left as it was.
        """
        return self._merge(other, Connective.OR)

    def __and__(self, other: Criteria) -> Criteria:
        return self.and_(other)

    def __or__(self, other: Criteria) -> Criteria:
        return self.or_(other)

    def _merge(self, other: Criteria, connective: Connective) -> Criteria:
        """
        Combine where clauses; everything else is taken from ``self``.

        - both non-empty: a grouped two-entry list of copies of both;
        - one non-empty: a copy of that side's filters;
        - both empty: empty filters.
        """
        merged = self.copy()
        if not self.filters.is_empty and not other.filters.is_empty:
            combined = FilterList(grouped=True)
            combined.add(self.filters.copy())
            combined.add(other.filters.copy(), connective)
            merged.filters = combined
        elif not other.filters.is_empty:
            merged.filters = other.filters.copy()
        elif self.filters.is_empty:
            merged.filters = FilterList()
        logger.debug(
            "Merged criteria with %s: where=%r",
            connective.value,
            merged.filters.build(),
        )
        return merged

    def copy(self) -> Criteria:
        """Return an independent copy."""
        clone = Criteria(self.keywords)
        clone.filters = self.filters.copy()
        clone.order_by = self.order_by.copy()
        clone.include_total_count = self.include_total_count
        clone.page_size = self._page_size
        clone.page_number = self._page_number
        return clone

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        result: dict[str, Any] = {"keywords": self.keywords.model_dump()}
        if not self.filters.is_empty:
            result["filters"] = self.filters.to_dict()
        if self.order_by:
            result["order_by"] = [
                [field, direction.value] for field, direction in self.order_by
            ]
        if self._page_size is not None:
            result["page_size"] = self._page_size
            result["include_total_count"] = self.include_total_count
        if self._page_number is not None:
            result["page_number"] = self._page_number
        return result

    def __repr__(self) -> str:
        return f"Criteria({self.build()!r})"
