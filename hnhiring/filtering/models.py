"""Data models for filtering and sorting postings.

- FilterSpecification: the criteria a caller filters postings by
- FilterState: a specification plus the month and view selection
- FilterResult: outcome of evaluating one posting
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from hnhiring.domain.models import EmploymentType, ExperienceLevel, WorkMode


class VisaPreference(str, Enum):
    """Visa sponsorship requirement."""

    ANY = "any"
    YES = "yes"
    NO = "no"


class SortOrder(str, Enum):
    """Order of filtered postings."""

    RELEVANCE = "relevance"
    NEWEST = "newest"
    SALARY_DESC = "salary-desc"
    SALARY_ASC = "salary-asc"


class ViewMode(str, Enum):
    """Subset of postings selected by caller-owned flags."""

    ALL = "all"
    STARRED = "starred"
    APPLIED = "applied"
    NOTES = "notes"


class FilterSpecification(BaseModel):
    """Criteria applied to postings.

    Empty or default fields do not constrain the result. List fields are
    OR'ed within the field except ``tech``, where every label is required.

    Attributes:
        query: Free-text terms, all of which must appear
        company: Case-insensitive substring of the company name
        locations: Case-insensitive substrings, any of which may match
        remote_modes: Accepted work modes
        remote_only: Require remote-only postings
        timezone: Case-insensitive substring of the posting timezone
        visa: Visa sponsorship requirement
        employment_types: Accepted employment types
        experience_levels: Accepted experience levels
        tech: Technology labels, all of which are required
        salary_min: Lower bound of the wanted salary interval
        salary_max: Upper bound of the wanted salary interval
        sort: Order of the filtered postings
    """

    query: str = ""
    company: Optional[str] = None
    locations: List[str] = Field(default_factory=list)
    remote_modes: List[WorkMode] = Field(default_factory=list)
    remote_only: bool = False
    timezone: Optional[str] = None
    visa: VisaPreference = VisaPreference.ANY
    employment_types: List[EmploymentType] = Field(default_factory=list)
    experience_levels: List[ExperienceLevel] = Field(default_factory=list)
    tech: List[str] = Field(default_factory=list)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    sort: SortOrder = SortOrder.RELEVANCE

    model_config = {"frozen": True}

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        return v.strip()

    @field_validator("company", "timezone")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Blank company or timezone means no constraint."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("locations", "tech")
    @classmethod
    def drop_blank_items(cls, v: List[str]) -> List[str]:
        """Trim list items and drop empty ones."""
        return [item.strip() for item in v if item and item.strip()]


def default_filters() -> FilterSpecification:
    """The baseline specification: everything matches, relevance order."""
    return FilterSpecification()


class FilterState(BaseModel):
    """A filter specification plus the thread month and view selection."""

    filters: FilterSpecification = Field(default_factory=default_filters)
    month: Optional[str] = Field(None, description="Thread month key (YYYY-MM)")
    view: ViewMode = ViewMode.ALL

    model_config = {"frozen": True}

    @field_validator("month")
    @classmethod
    def blank_month_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


@dataclass
class FilterResult:
    """Result of evaluating one posting against a FilterSpecification.

    Attributes:
        is_match: True if every predicate passed
        failed_predicates: Names of the predicates that rejected the posting
    """

    is_match: bool
    failed_predicates: List[str] = field(default_factory=list)
