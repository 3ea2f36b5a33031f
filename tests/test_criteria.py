"""Tests for Criteria rendering and merging."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from rsql_criteria import (
    Criteria,
    CriteriaKeywords,
    FilterExpression,
    RSQLOperator,
    ValidationError,
)
from rsql_criteria.encoding import percent_encode

CODE_A = "code==" + percent_encode('"*a*"')
DESC_B = "description==" + percent_encode('"*b*"')
CODE_ASC = percent_encode("code asc")
PAGING = "&$pageSize=10&$includeTotalCount=true&$pageNumber=1"


def _code_equals(value: str) -> FilterExpression:
    return FilterExpression("code", RSQLOperator.EQUAL, value)


@pytest.fixture
def description_criteria() -> Criteria:
    criteria = Criteria()
    criteria.filters.and_(FilterExpression("description", RSQLOperator.CONTAINS, "b"))
    return criteria


# -- sections ----------------------------------------------------------------


def test_builds_nothing_by_default():
    assert Criteria().build() == ""


def test_where_clause():
    criteria = Criteria()
    criteria.filters.and_(_code_equals("abc"))
    assert criteria.build() == "$where=code=in=%22abc%22"


def test_order_by_clause():
    criteria = Criteria()
    criteria.order_by.add("code", "asc")
    assert criteria.build() == f"$orderBy={CODE_ASC}"


def test_several_order_by_entries():
    criteria = Criteria()
    criteria.order_by.add("code").add("name", "DESC")
    assert criteria.build() == "$orderBy=code%20asc%2C%20name%20desc"


def test_where_and_order_by():
    criteria = Criteria()
    criteria.order_by.add("code", "asc")
    criteria.filters.and_(_code_equals("abc"))
    assert criteria.build() == f"$where=code=in=%22abc%22&$orderBy={CODE_ASC}"


def test_page_size_includes_total_count():
    criteria = Criteria()
    criteria.page_size = 10
    assert criteria.build() == "$pageSize=10&$includeTotalCount=true"


def test_total_count_can_be_turned_off():
    criteria = Criteria()
    criteria.page_size = 10
    criteria.include_total_count = False
    assert criteria.build() == "$pageSize=10"


def test_total_count_needs_page_size():
    criteria = Criteria()
    criteria.page_number = 3
    assert criteria.build() == "$pageNumber=3"


def test_all_pagination_parts():
    criteria = Criteria()
    criteria.page_size = 10
    criteria.page_number = 2
    assert criteria.build() == "$pageSize=10&$includeTotalCount=true&$pageNumber=2"


def test_build_is_repeatable(paged_criteria: Criteria):
    assert paged_criteria.build() == paged_criteria.build()


# -- keywords ----------------------------------------------------------------


def test_overridden_where_keyword():
    criteria = Criteria(where_keyword="$filter")
    criteria.filters.and_(_code_equals("abc"))
    assert criteria.build() == "$filter=code=in=%22abc%22"


def test_overridden_order_by_keyword():
    criteria = Criteria(order_by_keyword="$order")
    criteria.order_by.add("code", "asc")
    assert criteria.build() == f"$order={CODE_ASC}"


def test_overridden_pagination_keywords():
    criteria = Criteria(
        page_size_keyword="$take", include_total_count_keyword="total"
    )
    criteria.page_size = 10
    assert criteria.build() == "$take=10&total=true"


def test_keywords_model_with_overrides():
    keywords = CriteriaKeywords(page_size="$take", include_total_count="total")
    criteria = Criteria(keywords, page_number_keyword="$skip")
    criteria.page_size = 10
    criteria.page_number = 2
    assert criteria.build() == "$take=10&total=true&$skip=2"


def test_empty_keyword_rejected():
    with pytest.raises(ValidationError):
        Criteria(where_keyword="")


def test_every_keyword_argument_relabels_its_section():
    criteria = Criteria(
        where_keyword="$filter",
        order_by_keyword="$sort",
        page_size_keyword="$take",
        include_total_count_keyword="total",
        page_number_keyword="$skip",
    )
    criteria.filters.and_(_code_equals("abc"))
    criteria.order_by.add("code")
    criteria.page_size = 10
    criteria.page_number = 2
    assert criteria.build() == (
        f"$filter=code=in=%22abc%22&$sort={CODE_ASC}&$take=10&total=true&$skip=2"
    )


def test_unknown_keyword_field_rejected():
    with pytest.raises(PydanticValidationError):
        CriteriaKeywords(filter="$filter")


# -- pagination validation ---------------------------------------------------


@pytest.mark.parametrize("value", [0, -1, True, 2.5, "10"])
def test_page_size_must_be_positive_int(value):
    criteria = Criteria()
    with pytest.raises(ValidationError):
        criteria.page_size = value


def test_page_number_can_be_cleared():
    criteria = Criteria()
    criteria.page_number = 4
    criteria.page_number = None
    assert criteria.build() == ""


# -- merging -----------------------------------------------------------------


def test_and_wraps_both_where_clauses(paged_criteria, description_criteria):
    merged = paged_criteria.and_(description_criteria)
    assert merged.build() == (
        f"$where=({CODE_A}%20and%20{DESC_B})&$orderBy={CODE_ASC}{PAGING}"
    )


def test_or_wraps_both_where_clauses(paged_criteria, description_criteria):
    merged = paged_criteria | description_criteria
    assert merged.build() == (
        f"$where=({CODE_A}%20or%20{DESC_B})&$orderBy={CODE_ASC}{PAGING}"
    )


@pytest.mark.parametrize("method", ["and_", "or_"])
def test_merge_disregards_blank_filters(paged_criteria, method):
    merged = getattr(paged_criteria, method)(Criteria())
    assert merged.build() == f"$where={CODE_A}&$orderBy={CODE_ASC}{PAGING}"


def test_merge_into_blank_takes_other_filters(description_criteria):
    merged = Criteria() & description_criteria
    assert merged.build() == f"$where={DESC_B}"


def test_merge_of_blank_criteria_is_blank():
    assert (Criteria() | Criteria()).build() == ""


def test_merge_keeps_receiver_settings(paged_criteria):
    other = Criteria(where_keyword="$filter")
    other.page_size = 99
    other.order_by.add("name", "desc")
    other.filters.and_(_code_equals("x"))
    merged = paged_criteria & other
    assert merged.keywords == paged_criteria.keywords
    assert merged.page_size == 10
    assert list(merged.order_by) == list(paged_criteria.order_by)


def test_merge_leaves_operands_untouched(paged_criteria, description_criteria):
    before = paged_criteria.build()
    merged = paged_criteria & description_criteria
    assert paged_criteria.build() == before
    assert description_criteria.build() == f"$where={DESC_B}"

    description_criteria.filters.and_(_code_equals("late"))
    paged_criteria.order_by.add("name")
    assert "late" not in merged.build()
    assert "name" not in merged.build()


def test_chained_merges_nest_groups(paged_criteria, description_criteria):
    third = Criteria()
    third.filters.and_(FilterExpression("active", RSQLOperator.EQUAL, True))
    merged = (paged_criteria & description_criteria) | third
    where = merged.build().split("&")[0]
    assert where == (
        f"$where=(({CODE_A}%20and%20{DESC_B})%20or%20active=in=true)"
    )


# -- serialisation -----------------------------------------------------------


def test_to_dict(paged_criteria):
    data = paged_criteria.to_dict()
    assert data["keywords"]["where"] == "$where"
    assert data["order_by"] == [["code", "asc"]]
    assert data["page_size"] == 10
    assert data["include_total_count"] is True
    assert data["page_number"] == 1
    assert data["filters"]["conditions"][0]["field"] == "code"


def test_to_dict_omits_unset_sections():
    assert Criteria().to_dict() == {"keywords": CriteriaKeywords().model_dump()}
