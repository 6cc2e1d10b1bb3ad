"""Pattern tables for the field classifiers.

The tables are ordered where order is a policy decision (experience level
precedence, employment type output order) and each entry can be tested on
its own. Keyword rules run against lowercased text unless noted.
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

from hnhiring.domain.models import EmploymentType, ExperienceLevel, WorkMode


@dataclass(frozen=True)
class KeywordRule:
    """A classifier outcome and the patterns that select it."""

    value: str
    patterns: Tuple[re.Pattern, ...]

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


def _rule(value, *expressions: str) -> KeywordRule:
    return KeywordRule(
        value=value,
        patterns=tuple(re.compile(expression, re.IGNORECASE) for expression in expressions),
    )


# Header and location splitting
HEADER_DELIMITER = re.compile(r"[–—‒‐\-|•·]+")
LOCATION_DELIMITER = re.compile(r"[,/|•·]|(?:\s+or\s+)|(?:\s+and\s+)", re.IGNORECASE)
LOCATION_LINE = re.compile(r"^locations?:\s*(.+)$", re.IGNORECASE)
LOCATION_HINT = re.compile(r"\b(remote|onsite|hybrid|usa|europe|asia|canada)\b", re.IGNORECASE)

# Lines (by index) scanned by the location fallback rule
LOCATION_FALLBACK_LINES = slice(1, 3)

# Work mode
WORK_MODE_RULES: Dict[WorkMode, KeywordRule] = {
    WorkMode.REMOTE: _rule(WorkMode.REMOTE, r"\bremote\b"),
    WorkMode.HYBRID: _rule(WorkMode.HYBRID, r"\bhybrid\b"),
    WorkMode.ONSITE: _rule(WorkMode.ONSITE, r"\b(?:on[-\s]?site|in[-\s]?office)\b"),
}

REMOTE_ONLY_RULE = _rule(
    "remote-only",
    r"\bremote[-\s]?only\b",
    r"\bfully remote\b",
    r"\b100% remote\b",
    r"\bremote-first\b",
)

# Employment types, in output order
EMPLOYMENT_TYPE_RULES: Tuple[KeywordRule, ...] = (
    _rule(EmploymentType.FULL_TIME, r"\bfull[-\s]?time\b"),
    _rule(EmploymentType.PART_TIME, r"\bpart[-\s]?time\b"),
    _rule(EmploymentType.CONTRACT, r"\b(?:contract|freelance|consultant)\b"),
    _rule(EmploymentType.INTERNSHIP, r"\b(?:intern(?:ship)?|co[-\s]?op)\b"),
)

DEFAULT_EMPLOYMENT_TYPES = (EmploymentType.FULL_TIME,)

# Experience level precedence: the first matching level wins, so a posting
# mentioning "senior" and "manager" is classified as manager.
EXPERIENCE_PRECEDENCE: Tuple[KeywordRule, ...] = (
    _rule(ExperienceLevel.LEAD, r"\blead\b", r"\bprincipal\b", r"\bstaff\b"),
    _rule(ExperienceLevel.MANAGER, r"\bmanager\b", r"\bhead of\b", r"\bdirector\b"),
    _rule(ExperienceLevel.SENIOR, r"\bsenior\b", r"\bsr\.?(?!\w)"),
    _rule(ExperienceLevel.MID, r"\bmid\b", r"\bmid[-\s]?level\b"),
    _rule(ExperienceLevel.JUNIOR, r"\bjunior\b", r"\bnew grad\b", r"\bentry[-\s]?level\b"),
)

# Timezone tokens, matched against the original-case text
TIMEZONE_PATTERN = re.compile(
    r"\b(?:UTC[+-]\d{1,2}(?::?\d{2})?|GMT|CET|CEST|EST|EDT|PST|PDT|CST|CDT|IST|AEST|AEDT)\b",
    re.IGNORECASE,
)

# Visa stance: the negative rule is checked first
VISA_NEGATIVE = re.compile(
    r"\b(?:no (?:visa|sponsorship)|cannot sponsor|unable to sponsor)\b", re.IGNORECASE
)
VISA_POSITIVE = re.compile(r"\bvisa (?:sponsorship|support|available|provided)\b", re.IGNORECASE)

# Salary tokens: optional currency code, optional symbol, 2-3 digit figure
# with optional thousands group and decimals, optional k/m magnitude (a
# letter right after the k/m means it is part of a word such as "months")
CURRENCY_CODES = (
    "USD", "EUR", "GBP", "CAD", "AUD", "CHF", "SEK", "NOK", "DKK", "JPY", "INR", "SGD", "HKD",
)
SALARY_PATTERN = re.compile(
    rf"(?:(?P<code>{'|'.join(CURRENCY_CODES)})\s*)?"
    r"(?P<symbol>[$€£])?\s?"
    r"(?P<amount>\d{2,3}(?:[.,]\d{3})?)(?:[.,](?P<fraction>\d+))?\s?"
    r"(?:(?P<suffix>[km])(?![a-z]))?",
    re.IGNORECASE,
)

CURRENCY_FROM_SYMBOL: Dict[str, str] = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
}

SALARY_MULTIPLIERS: Dict[str, int] = {
    "k": 1_000,
    "m": 1_000_000,
}
