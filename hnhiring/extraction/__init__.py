"""Field extraction and posting assembly.

This module provides:
- extract_fields and the individual classifiers (header, locations, ...)
- parse_salary: salary range recovery
- build_tags: display tag synthesis
- JobPostingBuilder / parse_job_from_comment: CommentHit -> JobPosting
- apply_flag_state: merge caller-owned bookmark flags
"""

from .builder import (
    DEFAULT_PERMALINK_BASE_URL,
    JobPostingBuilder,
    apply_flag_state,
    parse_job_from_comment,
)
from .fields import (
    ExtractedFields,
    HeaderParts,
    extract_fields,
    extract_locations,
    infer_employment_types,
    infer_experience_level,
    infer_timezone,
    infer_visa,
    infer_work_mode,
    parse_header,
    split_locations,
)
from .rules import EXPERIENCE_PRECEDENCE
from .salary import parse_salary, parse_salary_value
from .tags import build_tags

__all__ = [
    "JobPostingBuilder",
    "parse_job_from_comment",
    "apply_flag_state",
    "DEFAULT_PERMALINK_BASE_URL",
    "ExtractedFields",
    "HeaderParts",
    "extract_fields",
    "parse_header",
    "split_locations",
    "extract_locations",
    "infer_work_mode",
    "infer_employment_types",
    "infer_experience_level",
    "infer_timezone",
    "infer_visa",
    "parse_salary",
    "parse_salary_value",
    "build_tags",
    "EXPERIENCE_PRECEDENCE",
]
