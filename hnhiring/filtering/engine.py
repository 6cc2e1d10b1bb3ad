"""Filter engine for evaluating postings against a FilterSpecification.

Each predicate is a plain function taking the posting and the
specification. A predicate whose filter field is empty, None or default
passes every posting. The engine reads the specification but never
modifies it, and never modifies postings.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from hnhiring.domain.models import JobPosting
from hnhiring.logging import get_logger

from .models import FilterResult, FilterSpecification, ViewMode, VisaPreference
from .sorting import sort_postings

logger = get_logger(__name__, component="filtering")

Predicate = Callable[[JobPosting, FilterSpecification], bool]


def _normalize(value: str) -> str:
    return value.strip().lower()


def matches_query(posting: JobPosting, spec: FilterSpecification) -> bool:
    """Every whitespace-separated query term occurs in the posting."""
    terms = [_normalize(term) for term in spec.query.split()]
    terms = [term for term in terms if term]
    if not terms:
        return True

    haystack = _normalize(
        " ".join(
            [
                posting.company or "",
                posting.role or "",
                " ".join(posting.locations),
                " ".join(posting.tech_stack),
                posting.text,
            ]
        )
    )
    return all(term in haystack for term in terms)


def matches_company(posting: JobPosting, spec: FilterSpecification) -> bool:
    if not spec.company:
        return True
    return _normalize(spec.company) in _normalize(posting.company or "")


def matches_locations(posting: JobPosting, spec: FilterSpecification) -> bool:
    """Any wanted location is a substring of any posting location."""
    if not spec.locations:
        return True
    candidates = [_normalize(location) for location in posting.locations]
    return any(
        _normalize(wanted) in candidate for wanted in spec.locations for candidate in candidates
    )


def matches_remote_modes(posting: JobPosting, spec: FilterSpecification) -> bool:
    if not spec.remote_modes:
        return True
    return posting.work_mode in spec.remote_modes


def matches_remote_only(posting: JobPosting, spec: FilterSpecification) -> bool:
    return not spec.remote_only or posting.remote_only


def matches_experience(posting: JobPosting, spec: FilterSpecification) -> bool:
    """Postings without a level fail a non-empty level filter."""
    if not spec.experience_levels:
        return True
    if posting.experience_level is None:
        return False
    return posting.experience_level in spec.experience_levels


def matches_employment(posting: JobPosting, spec: FilterSpecification) -> bool:
    if not spec.employment_types:
        return True
    return any(value in spec.employment_types for value in posting.employment_types)


def matches_visa(posting: JobPosting, spec: FilterSpecification) -> bool:
    """Unknown visa stance only passes the "any" preference."""
    if spec.visa is VisaPreference.ANY:
        return True
    if spec.visa is VisaPreference.YES:
        return posting.visa is True
    return posting.visa is False


def matches_tech(posting: JobPosting, spec: FilterSpecification) -> bool:
    """Every wanted label is in the tech stack (case-insensitive, exact)."""
    if not spec.tech:
        return True
    stack = {_normalize(label) for label in posting.tech_stack}
    return all(_normalize(label) in stack for label in spec.tech)


def matches_timezone(posting: JobPosting, spec: FilterSpecification) -> bool:
    if not spec.timezone:
        return True
    if not posting.timezone:
        return False
    return _normalize(spec.timezone) in _normalize(posting.timezone)


def matches_salary(posting: JobPosting, spec: FilterSpecification) -> bool:
    """The posting salary interval overlaps [salary_min, salary_max].

    Bounds are inclusive. A posting without a usable salary fails whenever
    either bound is set.
    """
    if spec.salary_min is None and spec.salary_max is None:
        return True
    if posting.salary is None:
        return False

    bounds = posting.salary.bounds()
    if bounds is None:
        return False
    low, high = bounds

    if spec.salary_min is not None and high < spec.salary_min:
        return False
    if spec.salary_max is not None and low > spec.salary_max:
        return False
    return True


# Evaluated in order; names appear in FilterResult.failed_predicates
PREDICATES: Tuple[Tuple[str, Predicate], ...] = (
    ("query", matches_query),
    ("company", matches_company),
    ("locations", matches_locations),
    ("remote_modes", matches_remote_modes),
    ("remote_only", matches_remote_only),
    ("experience_levels", matches_experience),
    ("employment_types", matches_employment),
    ("visa", matches_visa),
    ("tech", matches_tech),
    ("timezone", matches_timezone),
    ("salary", matches_salary),
)


class FilterEngine:
    """Evaluates postings against a FilterSpecification.

    Responsibilities:
    - Run every predicate and record which ones failed
    - Return the matching subset in input order
    - Log the filtering outcome
    """

    def __init__(
        self, spec: FilterSpecification, logger_instance: Optional[logging.Logger] = None
    ):
        """Initialize FilterEngine.

        Args:
            spec: Criteria to evaluate postings against
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.spec = spec
        self.logger = logger_instance or logger

    def evaluate(self, posting: JobPosting) -> FilterResult:
        """Evaluate one posting against every predicate.

        Args:
            posting: Posting to evaluate

        Returns:
            FilterResult with the match decision and failed predicate names
        """
        failed = [name for name, predicate in PREDICATES if not predicate(posting, self.spec)]
        return FilterResult(is_match=not failed, failed_predicates=failed)

    def filter(self, postings: Iterable[JobPosting]) -> List[JobPosting]:
        """Return the matching postings, in input order."""
        items = list(postings)
        matched = [posting for posting in items if self.evaluate(posting).is_match]

        self.logger.info(
            f"Filtered {len(items)} postings, {len(matched)} matched",
            extra={
                "event": "filtering.completed",
                "total": len(items),
                "matched": len(matched),
            },
        )
        return matched


def filter_postings(
    postings: Iterable[JobPosting], spec: FilterSpecification
) -> List[JobPosting]:
    """Filter postings by ``spec`` and order them by ``spec.sort``."""
    return sort_postings(FilterEngine(spec).filter(postings), spec.sort)


def filter_by_view(
    postings: Iterable[JobPosting], view: ViewMode = ViewMode.ALL
) -> List[JobPosting]:
    """Select postings by their caller-applied flags.

    ``starred`` and ``applied`` test the flag of the same name; ``notes``
    keeps postings whose notes are non-blank.
    """
    view = ViewMode(view)
    items = list(postings)

    if view is ViewMode.STARRED:
        return [posting for posting in items if posting.flags.starred]
    if view is ViewMode.APPLIED:
        return [posting for posting in items if posting.flags.applied]
    if view is ViewMode.NOTES:
        return [
            posting for posting in items if posting.flags.notes and posting.flags.notes.strip()
        ]
    return items
