"""Flat string encoding of filter state.

Filter state travels as a map of string parameters (for example a URL
query string). Encoding omits every field at its default, so the default
state encodes to an empty map. Decoding is a partial update: only fields
whose key is present replace the corresponding baseline value.

Parameter keys, in encoding order:

    query, company, locations, modes, remoteOnly, timezone, visa,
    employment, experience, tech, salaryMin, salaryMax, sort, month, view
"""

import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar
from urllib.parse import parse_qsl, urlencode

from hnhiring.domain.models import EmploymentType, ExperienceLevel, WorkMode

from .models import FilterSpecification, FilterState, SortOrder, ViewMode, VisaPreference

E = TypeVar("E", bound=Enum)

# Parameter key -> FilterSpecification field
FILTER_PARAM_FIELDS: Dict[str, str] = {
    "query": "query",
    "company": "company",
    "locations": "locations",
    "modes": "remote_modes",
    "remoteOnly": "remote_only",
    "timezone": "timezone",
    "visa": "visa",
    "employment": "employment_types",
    "experience": "experience_levels",
    "tech": "tech",
    "salaryMin": "salary_min",
    "salaryMax": "salary_max",
    "sort": "sort",
}

FILTER_PARAM_KEYS = frozenset(FILTER_PARAM_FIELDS)
MONTH_KEY = "month"
VIEW_KEY = "view"

LIST_FIELDS = ("locations", "remote_modes", "employment_types", "experience_levels", "tech")

_INTEGER = re.compile(r"\d+")
_TRUE_VALUES = ("1", "true")


def _join(values) -> str:
    return ",".join(value.value if isinstance(value, Enum) else value for value in values)


def encode_filters(
    spec: FilterSpecification,
    month: Optional[str] = None,
    view: ViewMode = ViewMode.ALL,
) -> Dict[str, str]:
    """Encode a specification (plus month and view) as string parameters.

    Fields at their default are omitted; the query is trimmed.

    Example:
        >>> encode_filters(FilterSpecification(tech=["React"], remote_only=True))
        {'remoteOnly': '1', 'tech': 'React'}
    """
    params: Dict[str, str] = {}

    query = spec.query.strip()
    if query:
        params["query"] = query
    if spec.company:
        params["company"] = spec.company
    if spec.locations:
        params["locations"] = _join(spec.locations)
    if spec.remote_modes:
        params["modes"] = _join(spec.remote_modes)
    if spec.remote_only:
        params["remoteOnly"] = "1"
    if spec.timezone:
        params["timezone"] = spec.timezone
    if spec.visa is not VisaPreference.ANY:
        params["visa"] = spec.visa.value
    if spec.employment_types:
        params["employment"] = _join(spec.employment_types)
    if spec.experience_levels:
        params["experience"] = _join(spec.experience_levels)
    if spec.tech:
        params["tech"] = _join(spec.tech)
    if spec.salary_min is not None:
        params["salaryMin"] = str(spec.salary_min)
    if spec.salary_max is not None:
        params["salaryMax"] = str(spec.salary_max)
    if spec.sort is not SortOrder.RELEVANCE:
        params["sort"] = spec.sort.value
    if month:
        params[MONTH_KEY] = month
    if view and ViewMode(view) is not ViewMode.ALL:
        params[VIEW_KEY] = ViewMode(view).value

    return params


def parse_list(value: Optional[str]) -> List[str]:
    """Split a comma-joined value, trimming items and dropping empties."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_enum_list(value: Optional[str], enum_type: Type[E]) -> List[E]:
    """Parse a comma-joined list of enum values, dropping unknown items."""
    known = {member.value: member for member in enum_type}
    result: List[E] = []
    for item in parse_list(value):
        member = known.get(item.lower())
        if member is not None:
            result.append(member)
    return result


def parse_enum(value: Optional[str], enum_type: Type[E], default: E) -> E:
    """Parse a single enum value, falling back to ``default`` when unknown."""
    try:
        return enum_type(value)
    except ValueError:
        return default


def parse_integer(value: Optional[str]) -> Optional[int]:
    """Parse a non-negative integer; malformed or empty values become None."""
    if value is None:
        return None
    cleaned = value.strip()
    if not _INTEGER.fullmatch(cleaned):
        return None
    return int(cleaned)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value if value else None


def decode_filters(
    params: Mapping[str, str], baseline: Optional[FilterState] = None
) -> FilterState:
    """Apply string parameters on top of a baseline state.

    Only keys present in ``params`` change the result; the others keep the
    baseline value. Unknown list items are dropped and unknown visa, sort
    or view values fall back to their defaults. Decoding never raises for
    malformed values.

    Args:
        params: Parameter map, as produced by encode_filters
        baseline: State to update (defaults to FilterState())

    Returns:
        New FilterState
    """
    baseline = baseline if baseline is not None else FilterState()
    updates: Dict[str, Any] = {}

    if "query" in params:
        updates["query"] = params["query"] or ""
    if "company" in params:
        updates["company"] = _blank_to_none(params["company"])
    if "locations" in params:
        updates["locations"] = parse_list(params["locations"])
    if "modes" in params:
        updates["remote_modes"] = parse_enum_list(params["modes"], WorkMode)
    if "remoteOnly" in params:
        updates["remote_only"] = (params["remoteOnly"] or "").lower() in _TRUE_VALUES
    if "timezone" in params:
        updates["timezone"] = _blank_to_none(params["timezone"])
    if "visa" in params:
        updates["visa"] = parse_enum(params["visa"], VisaPreference, VisaPreference.ANY)
    if "employment" in params:
        updates["employment_types"] = parse_enum_list(params["employment"], EmploymentType)
    if "experience" in params:
        updates["experience_levels"] = parse_enum_list(params["experience"], ExperienceLevel)
    if "tech" in params:
        updates["tech"] = parse_list(params["tech"])
    if "salaryMin" in params:
        updates["salary_min"] = parse_integer(params["salaryMin"])
    if "salaryMax" in params:
        updates["salary_max"] = parse_integer(params["salaryMax"])
    if "sort" in params:
        updates["sort"] = parse_enum(params["sort"], SortOrder, SortOrder.RELEVANCE)

    filters = FilterSpecification.model_validate({**baseline.filters.model_dump(), **updates})

    month = baseline.month
    if MONTH_KEY in params:
        month = _blank_to_none(params[MONTH_KEY])

    view = baseline.view
    if VIEW_KEY in params:
        view = parse_enum(params[VIEW_KEY], ViewMode, ViewMode.ALL)

    return FilterState(filters=filters, month=month, view=view)


def filters_equal(a: FilterSpecification, b: FilterSpecification) -> bool:
    """Compare specifications, treating list fields as sets."""
    for name in FilterSpecification.model_fields:
        left = getattr(a, name)
        right = getattr(b, name)
        if name in LIST_FIELDS:
            if set(left) != set(right):
                return False
        elif left != right:
            return False
    return True


def has_filter_params(params: Mapping[str, str]) -> bool:
    """True when any key describes a filter field (month and view excluded)."""
    return any(key in FILTER_PARAM_KEYS for key in params)


def is_view_mode(value: Optional[str]) -> bool:
    """True for the names of the view modes."""
    return value is not None and value in {mode.value for mode in ViewMode}


def to_query_string(
    spec: FilterSpecification,
    month: Optional[str] = None,
    view: ViewMode = ViewMode.ALL,
) -> str:
    """Encode filter state as a URL query string (without a leading ``?``)."""
    return urlencode(encode_filters(spec, month=month, view=view))


def from_query_string(query_string: str, baseline: Optional[FilterState] = None) -> FilterState:
    """Decode a URL query string; the first occurrence of a repeated key wins."""
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return decode_filters(params, baseline=baseline)
