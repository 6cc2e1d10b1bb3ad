"""Ordering of filtered postings.

All orders are stable and return a new list; the input is never mutated.
Postings whose sort key is unavailable (no salary, unparsable timestamp)
always go last, in their input order.
"""

from typing import Callable, Iterable, List, Optional, Union

from hnhiring.domain.models import JobPosting
from hnhiring.utils.timestamps import parse_iso_datetime

from .models import SortOrder


def salary_sort_value(posting: JobPosting) -> Optional[float]:
    """Mean of the available salary bounds, or None without a salary."""
    if posting.salary is None:
        return None
    bounds = posting.salary.bounds()
    if bounds is None:
        return None
    low, high = bounds
    return (low + high) / 2


def created_sort_value(posting: JobPosting) -> Optional[float]:
    """Creation time as unix seconds, or None when unparsable."""
    created = parse_iso_datetime(posting.created_at)
    if created is None:
        return None
    return created.timestamp()


def _sort_by(
    postings: List[JobPosting],
    key: Callable[[JobPosting], Optional[float]],
    descending: bool,
) -> List[JobPosting]:
    keyed = []
    missing = []
    for posting in postings:
        value = key(posting)
        if value is None:
            missing.append(posting)
        else:
            keyed.append((value, posting))

    # reverse=True keeps equal keys in input order
    keyed.sort(key=lambda pair: pair[0], reverse=descending)
    return [posting for _value, posting in keyed] + missing


def sort_postings(
    postings: Iterable[JobPosting], order: Union[SortOrder, str] = SortOrder.RELEVANCE
) -> List[JobPosting]:
    """Return postings in the requested order.

    Args:
        postings: Postings to order
        order: relevance (input order), newest, salary-desc or salary-asc

    Returns:
        New list of the same postings
    """
    items = list(postings)
    order = SortOrder(order)

    if order is SortOrder.NEWEST:
        return _sort_by(items, created_sort_value, descending=True)
    if order is SortOrder.SALARY_DESC:
        return _sort_by(items, salary_sort_value, descending=True)
    if order is SortOrder.SALARY_ASC:
        return _sort_by(items, salary_sort_value, descending=False)
    return items
