"""Tests for the criteria exception hierarchy."""

from __future__ import annotations

from rsql_criteria import (
    CriteriaError,
    InvalidExpressionError,
    OperatorNotFoundError,
    ValidationError,
)


def test_base_error_to_dict():
    err = CriteriaError("boom")
    assert err.to_dict() == {"error": "CRITERIA_ERROR", "message": "boom"}


def test_validation_error_to_dict():
    err = ValidationError("bad page size", path="page_size")
    assert isinstance(err, CriteriaError)
    assert err.to_dict() == {
        "error": "INVALID_CRITERIA",
        "message": "bad page size",
        "path": "page_size",
    }


def test_invalid_expression_error():
    err = InvalidExpressionError("code", None)
    assert isinstance(err, ValidationError)
    assert "field 'code'" in str(err)
    assert err.to_dict() == {
        "error": "INVALID_EXPRESSION",
        "field": "code",
        "operator": "None",
    }


def test_operator_not_found_suggestions():
    err = OperatorNotFoundError("equals", ["equal", "not_equal", "like"])
    assert err.suggestions[0] == "equal"
    assert "Did you mean: equal" in str(err)
    data = err.to_dict()
    assert data["error"] == "UNKNOWN_OPERATOR"
    assert data["field"] is None
    assert data["valid_operators"] == ["equal", "like", "not_equal"]


def test_operator_not_found_names_the_field():
    err = OperatorNotFoundError("equals", ["equal"], field="status")
    assert "operator 'equals' on field 'status'" in str(err)
    assert err.to_dict()["field"] == "status"


def test_operator_not_found_without_suggestions():
    err = OperatorNotFoundError("zzz", ["equal"])
    assert err.suggestions == []
    assert "Did you mean" not in str(err)


def test_operator_not_found_on_empty_registry():
    err = OperatorNotFoundError("equal", [])
    assert "registry is empty" in str(err)
    assert err.to_dict()["valid_operators"] == []
