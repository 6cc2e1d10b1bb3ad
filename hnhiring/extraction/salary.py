"""Salary range parsing."""

import math
import re
from typing import List, Optional

from hnhiring.domain.models import SalaryRange

from .rules import CURRENCY_FROM_SYMBOL, SALARY_MULTIPLIERS, SALARY_PATTERN

_NON_NUMERIC = re.compile(r"[^0-9.,km]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_salary_value(value: str) -> Optional[int]:
    """Parse a salary figure such as "$140k", "120,000" or "1.5m".

    Everything except digits, ``.``, ``,``, ``k`` and ``m`` is dropped. A
    trailing ``k`` multiplies by 1,000 and a trailing ``m`` by 1,000,000;
    commas are treated as thousands separators.

    Returns:
        The figure as an integer, or None when no number is present
    """
    cleaned = _NON_NUMERIC.sub("", (value or "").lower())
    if not cleaned:
        return None

    suffix = cleaned[-1]
    multiplier = SALARY_MULTIPLIERS.get(suffix, 1)
    numeric_part = cleaned[:-1] if suffix in SALARY_MULTIPLIERS else cleaned

    match = _LEADING_NUMBER.match(numeric_part.replace(",", ""))
    if not match:
        return None

    return _round_half_up(float(match.group(0)) * multiplier)


def _figure_text(match: re.Match) -> str:
    """The matched token from the amount onwards (currency code excluded)."""
    return match.string[match.start("amount"):match.end()]


def _currency_for(match: re.Match) -> Optional[str]:
    code = match.group("code")
    if code:
        return code.upper()
    symbol = match.group("symbol")
    if symbol:
        return CURRENCY_FROM_SYMBOL.get(symbol, symbol)
    return None


def find_salary_tokens(text: str) -> List[re.Match]:
    """All salary-looking tokens in ``text``, in order of appearance."""
    if not text:
        return []
    return list(SALARY_PATTERN.finditer(text))


def parse_salary(text: str) -> Optional[SalaryRange]:
    """Recover a salary range from free text.

    The first token becomes ``min`` and the second ``max``; with a single
    token ``max`` repeats ``min``. Currency comes from the first token.

    Example:
        >>> parse_salary("Compensation: $140k - $170k")
        SalaryRange(min=140000, max=170000, currency='USD', raw='$140k - $170k')

    Returns:
        SalaryRange, or None when the text holds no salary token
    """
    matches = find_salary_tokens(text)
    if not matches:
        return None

    first = matches[0]
    second = matches[1] if len(matches) > 1 else None

    minimum = parse_salary_value(_figure_text(first))
    maximum = parse_salary_value(_figure_text(second)) if second is not None else None

    return SalaryRange(
        min=minimum,
        max=maximum if maximum is not None else minimum,
        currency=_currency_for(first),
        raw=" - ".join(match.group(0).strip() for match in matches),
    )
