from .criteria import Criteria, CriteriaKeywords
from .encoding import (
    UNSET,
    EncodedValue,
    encode_value,
    escape_string,
    format_date,
    format_number,
    format_timestamp,
    percent_encode,
    quote,
)
from .exceptions import (
    CriteriaError,
    InvalidExpressionError,
    OperatorNotFoundError,
    ValidationError,
)
from .expression import ExpressionOptions, FilterExpression
from .filter_list import FilterEntry, FilterList
from .operators import Connective, RSQLOperator, SortDirection
from .operators_rsql import build_default_registry
from .order_by import OrderByList
from .query_string import append_to_url
from .renderer import CustomOperator, OperatorRenderer, OperatorRendererRegistry

__all__ = [
    # Core types
    "RSQLOperator",
    "Connective",
    "SortDirection",
    "FilterExpression",
    "ExpressionOptions",
    "FilterList",
    "FilterEntry",
    "OrderByList",
    "Criteria",
    "CriteriaKeywords",
    # Operator strategy
    "CustomOperator",
    "OperatorRenderer",
    "OperatorRendererRegistry",
    "build_default_registry",
    # Encoding
    "UNSET",
    "EncodedValue",
    "encode_value",
    "escape_string",
    "format_date",
    "format_number",
    "format_timestamp",
    "percent_encode",
    "quote",
    # Exceptions
    "CriteriaError",
    "ValidationError",
    "InvalidExpressionError",
    "OperatorNotFoundError",
    # Utilities
    "append_to_url",
]
