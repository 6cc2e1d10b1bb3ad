"""Domain models for hiring-thread postings."""

from .models import (
    CommentHit,
    EmploymentType,
    ExperienceLevel,
    JobFlags,
    JobPosting,
    SalaryRange,
    SourceMetadata,
    WorkMode,
)

__all__ = [
    "CommentHit",
    "JobPosting",
    "JobFlags",
    "SalaryRange",
    "SourceMetadata",
    "WorkMode",
    "EmploymentType",
    "ExperienceLevel",
]
