"""Heuristic field classifiers for hiring-thread comments.

Every classifier is a pure function over normalized text that always
returns a value; when nothing matches it falls back to an absent value, a
default enum member or an empty collection. None of them raise for
malformed input.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from hnhiring.domain.models import (
    EmploymentType,
    ExperienceLevel,
    SalaryRange,
    WorkMode,
)
from hnhiring.normalization.models import NormalizedText
from hnhiring.normalization.text import sanitize_line

from .rules import (
    DEFAULT_EMPLOYMENT_TYPES,
    EMPLOYMENT_TYPE_RULES,
    EXPERIENCE_PRECEDENCE,
    HEADER_DELIMITER,
    LOCATION_DELIMITER,
    LOCATION_FALLBACK_LINES,
    LOCATION_HINT,
    LOCATION_LINE,
    REMOTE_ONLY_RULE,
    TIMEZONE_PATTERN,
    VISA_NEGATIVE,
    VISA_POSITIVE,
    WORK_MODE_RULES,
)
from .salary import parse_salary


@dataclass(frozen=True)
class HeaderParts:
    """Segments of the first line of a comment.

    Attributes:
        company: First segment, if any
        role: Second segment, if any
        location_parts: Remaining segments, candidate location fragments
    """

    company: Optional[str] = None
    role: Optional[str] = None
    location_parts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExtractedFields:
    """Everything the classifiers recovered from one comment."""

    company: Optional[str]
    role: Optional[str]
    locations: List[str]
    work_mode: WorkMode
    remote_only: bool
    employment_types: List[EmploymentType]
    experience_level: Optional[ExperienceLevel]
    timezone: Optional[str]
    visa: Optional[bool]
    salary: Optional[SalaryRange]


def parse_header(first_line: str) -> HeaderParts:
    """Split the header line into company, role and location fragments.

    Example:
        >>> parse_header("Acme Corp | Backend Engineer | Berlin")
        HeaderParts(company='Acme Corp', role='Backend Engineer', location_parts=('Berlin',))
    """
    cleaned = sanitize_line(first_line or "")
    if not cleaned:
        return HeaderParts()

    parts = [sanitize_line(part) for part in HEADER_DELIMITER.split(cleaned)]
    parts = [part for part in parts if part]
    if not parts:
        return HeaderParts()

    return HeaderParts(
        company=parts[0],
        role=parts[1] if len(parts) > 1 else None,
        location_parts=tuple(parts[2:]),
    )


def split_locations(value: str) -> List[str]:
    """Split a location string on commas, slashes, pipes, bullets, "or" and "and"."""
    parts = (sanitize_line(part) for part in LOCATION_DELIMITER.split(value or ""))
    return [part for part in parts if part]


def _from_header(lines: Sequence[str], header_parts: Sequence[str]) -> Iterable[str]:
    return header_parts


def _from_location_lines(lines: Sequence[str], header_parts: Sequence[str]) -> Iterable[str]:
    for line in lines:
        match = LOCATION_LINE.match(line)
        if match:
            yield match.group(1)


def _from_hint_lines(lines: Sequence[str], header_parts: Sequence[str]) -> Iterable[str]:
    for line in lines[LOCATION_FALLBACK_LINES]:
        if LOCATION_HINT.search(line):
            yield line


LocationSource = Callable[[Sequence[str], Sequence[str]], Iterable[str]]

# (name, source, only when nothing was found so far), applied in order
LOCATION_RULES: Tuple[Tuple[str, LocationSource, bool], ...] = (
    ("header", _from_header, False),
    ("location-line", _from_location_lines, False),
    ("hint-lines", _from_hint_lines, True),
)


def extract_locations(lines: Sequence[str], header_parts: Sequence[str] = ()) -> List[str]:
    """Collect locations from the header, "Location:" lines and, as a
    fallback, the second and third lines when they look location-ish.

    Results are deduplicated case-insensitively, keeping first-seen order.
    """
    results: List[str] = []
    seen = set()

    for _name, source, fallback_only in LOCATION_RULES:
        if fallback_only and results:
            continue
        for value in source(lines, header_parts):
            for location in split_locations(value):
                key = location.lower()
                if key not in seen:
                    seen.add(key)
                    results.append(location)

    return results


def infer_work_mode(text: str, locations: Sequence[str]) -> Tuple[WorkMode, bool]:
    """Classify the work mode and whether the role is remote-only.

    Args:
        text: Lowercased posting text
        locations: Extracted locations

    Returns:
        Tuple of (work mode, remote_only)
    """
    remote = WORK_MODE_RULES[WorkMode.REMOTE].matches(text)
    hybrid = WORK_MODE_RULES[WorkMode.HYBRID].matches(text)
    onsite = WORK_MODE_RULES[WorkMode.ONSITE].matches(text)

    if remote and (hybrid or onsite):
        return WorkMode.HYBRID, False

    if remote:
        remote_only = REMOTE_ONLY_RULE.matches(text) or all(
            "remote" in location.lower() for location in locations
        )
        return WorkMode.REMOTE, remote_only

    if hybrid:
        return WorkMode.HYBRID, False

    return WorkMode.ONSITE, False


def infer_employment_types(text: str) -> List[EmploymentType]:
    """Every employment type mentioned, defaulting to full-time."""
    matches = [
        EmploymentType(rule.value) for rule in EMPLOYMENT_TYPE_RULES if rule.matches(text)
    ]
    return matches or list(DEFAULT_EMPLOYMENT_TYPES)


def infer_experience_level(text: str) -> Optional[ExperienceLevel]:
    """First level in EXPERIENCE_PRECEDENCE whose keywords occur in ``text``."""
    for rule in EXPERIENCE_PRECEDENCE:
        if rule.matches(text):
            return ExperienceLevel(rule.value)
    return None


def infer_timezone(text: str) -> Optional[str]:
    """First timezone token in the text, uppercased."""
    match = TIMEZONE_PATTERN.search(text or "")
    if not match:
        return None
    return match.group(0).upper()


def infer_visa(text: str) -> Optional[bool]:
    """False for an explicit refusal, True for an offer, None when unstated."""
    if VISA_NEGATIVE.search(text or ""):
        return False
    if VISA_POSITIVE.search(text or ""):
        return True
    return None


def extract_fields(normalized: NormalizedText) -> ExtractedFields:
    """Run every classifier except technology matching over one comment."""
    header = parse_header(normalized.first_line)
    locations = extract_locations(normalized.lines, header.location_parts)
    work_mode, remote_only = infer_work_mode(normalized.lowercase, locations)

    return ExtractedFields(
        company=header.company or None,
        role=header.role or None,
        locations=locations,
        work_mode=work_mode,
        remote_only=remote_only,
        employment_types=infer_employment_types(normalized.lowercase),
        experience_level=infer_experience_level(normalized.lowercase),
        timezone=infer_timezone(normalized.plain_text),
        visa=infer_visa(normalized.lowercase),
        salary=parse_salary(normalized.plain_text),
    )
