"""Display tags derived from extracted fields."""

from typing import Iterable, List, Optional

from hnhiring.domain.models import EmploymentType, ExperienceLevel, WorkMode
from hnhiring.tech.matcher import sort_labels

REMOTE_ONLY_TAG = "remote-only"
VISA_TAG = "visa"
NO_VISA_TAG = "no-visa"


def build_tags(
    tech_stack: Iterable[str],
    work_mode: WorkMode,
    remote_only: bool,
    employment_types: Iterable[EmploymentType],
    experience_level: Optional[ExperienceLevel] = None,
    timezone: Optional[str] = None,
    visa: Optional[bool] = None,
) -> List[str]:
    """Flatten extracted fields into a sorted, deduplicated tag list.

    Unknown visa stance contributes no tag.

    Example:
        >>> build_tags(["React"], WorkMode.REMOTE, True, [EmploymentType.FULL_TIME])
        ['full-time', 'React', 'remote', 'remote-only']
    """
    tags = set(tech_stack)
    tags.add(WorkMode(work_mode).value)

    if remote_only:
        tags.add(REMOTE_ONLY_TAG)

    tags.update(EmploymentType(value).value for value in employment_types)

    if experience_level is not None:
        tags.add(ExperienceLevel(experience_level).value)

    if timezone:
        tags.add(timezone)

    if visa is True:
        tags.add(VISA_TAG)
    elif visa is False:
        tags.add(NO_VISA_TAG)

    return sort_labels(tags)
