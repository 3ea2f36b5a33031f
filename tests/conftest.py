"""Shared fixtures for criteria tests."""

from __future__ import annotations

import pytest

from rsql_criteria import Criteria, FilterExpression, RSQLOperator
from rsql_criteria.operators_rsql import build_default_registry


@pytest.fixture
def registry():
    """Default operator renderer registry for building expressions."""
    return build_default_registry()


@pytest.fixture
def paged_criteria() -> Criteria:
    """Criteria with filters, ordering and pagination all set."""
    criteria = Criteria()
    criteria.page_size = 10
    criteria.page_number = 1
    criteria.order_by.add("code", "asc")
    criteria.filters.and_(FilterExpression("code", RSQLOperator.CONTAINS, "a"))
    return criteria
