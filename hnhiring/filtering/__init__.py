"""Filtering, sorting and filter-state encoding for postings.

This module provides:
- FilterSpecification / FilterState: filter criteria and view selection
- FilterEngine / filter_postings / filter_by_view: predicate evaluation
- sort_postings: relevance, newest and salary orders
- encode_filters / decode_filters / filters_equal: flat string codec
"""

from .codec import (
    FILTER_PARAM_KEYS,
    decode_filters,
    encode_filters,
    filters_equal,
    from_query_string,
    has_filter_params,
    is_view_mode,
    to_query_string,
)
from .engine import PREDICATES, FilterEngine, filter_by_view, filter_postings
from .models import (
    FilterResult,
    FilterSpecification,
    FilterState,
    SortOrder,
    ViewMode,
    VisaPreference,
    default_filters,
)
from .sorting import salary_sort_value, sort_postings

__all__ = [
    "FilterSpecification",
    "FilterState",
    "FilterResult",
    "SortOrder",
    "ViewMode",
    "VisaPreference",
    "default_filters",
    "FilterEngine",
    "PREDICATES",
    "filter_postings",
    "filter_by_view",
    "sort_postings",
    "salary_sort_value",
    "encode_filters",
    "decode_filters",
    "filters_equal",
    "has_filter_params",
    "is_view_mode",
    "to_query_string",
    "from_query_string",
    "FILTER_PARAM_KEYS",
]
