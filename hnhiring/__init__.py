"""Structured job postings from "Who is hiring?" thread comments.

The package turns raw comment hits into immutable JobPosting records and
filters, sorts and encodes filter state over them:

    >>> from hnhiring import parse_job_from_comment, filter_postings, FilterSpecification
    >>> posting = parse_job_from_comment({"id": "1", "story_id": 2, "comment_text": "Acme | Dev"})
    >>> filter_postings([posting], FilterSpecification(company="acme")) == [posting]
    True
"""

from hnhiring.domain.models import (
    CommentHit,
    EmploymentType,
    ExperienceLevel,
    JobFlags,
    JobPosting,
    SalaryRange,
    SourceMetadata,
    WorkMode,
)
from hnhiring.extraction.builder import JobPostingBuilder, apply_flag_state, parse_job_from_comment
from hnhiring.filtering.codec import decode_filters, encode_filters, filters_equal
from hnhiring.filtering.engine import FilterEngine, filter_by_view, filter_postings
from hnhiring.filtering.models import (
    FilterSpecification,
    FilterState,
    SortOrder,
    ViewMode,
    VisaPreference,
    default_filters,
)
from hnhiring.filtering.sorting import sort_postings
from hnhiring.normalization.text import html_to_plain_text
from hnhiring.tech.matcher import TechKeywordMatcher, extract_tech_keywords

__version__ = "0.1.0"

__all__ = [
    "CommentHit",
    "JobPosting",
    "JobFlags",
    "SalaryRange",
    "SourceMetadata",
    "WorkMode",
    "EmploymentType",
    "ExperienceLevel",
    "JobPostingBuilder",
    "parse_job_from_comment",
    "apply_flag_state",
    "html_to_plain_text",
    "TechKeywordMatcher",
    "extract_tech_keywords",
    "FilterSpecification",
    "FilterState",
    "SortOrder",
    "ViewMode",
    "VisaPreference",
    "default_filters",
    "FilterEngine",
    "filter_postings",
    "filter_by_view",
    "sort_postings",
    "encode_filters",
    "decode_filters",
    "filters_equal",
]
