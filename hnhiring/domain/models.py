"""Core domain models for comments and the postings parsed from them.

- CommentHit: raw comment record supplied by the caller (search API hit)
- JobPosting: immutable structured record built from one comment
- SalaryRange, JobFlags, SourceMetadata: value objects carried by a posting
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class WorkMode(str, Enum):
    """Where the work is performed."""

    ONSITE = "onsite"
    HYBRID = "hybrid"
    REMOTE = "remote"


class EmploymentType(str, Enum):
    """Employment arrangement offered by a posting."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ExperienceLevel(str, Enum):
    """Seniority a posting asks for."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    MANAGER = "manager"


class SalaryRange(BaseModel):
    """Salary figures recovered from posting text.

    ``min`` and ``max`` keep the order they were found in; they are not
    swapped when the text lists the larger figure first.
    """

    min: Optional[int] = Field(None, description="First salary figure (annual base units)")
    max: Optional[int] = Field(None, description="Second salary figure, or min when only one")
    currency: Optional[str] = Field(None, description="Currency code such as USD")
    raw: Optional[str] = Field(None, description="Matched substrings joined with ' - '")

    model_config = {"frozen": True}

    def bounds(self) -> Optional[tuple]:
        """Return the salary as an ordered ``(low, high)`` interval.

        A missing bound falls back to the other one. Returns None when
        neither figure is present.
        """
        low = self.min if self.min is not None else self.max
        high = self.max if self.max is not None else self.min
        if low is None or high is None:
            return None
        return (min(low, high), max(low, high))


class JobFlags(BaseModel):
    """Bookmark state owned by the caller; never inferred from text."""

    starred: bool = False
    applied: bool = False
    notes: Optional[str] = None

    model_config = {"frozen": True}


class SourceMetadata(BaseModel):
    """Where a posting came from."""

    comment_id: str
    story_id: int
    story_title: Optional[str] = None
    story_url: Optional[str] = None
    author: str = ""
    parent_id: Optional[int] = None

    model_config = {"frozen": True}


class CommentHit(BaseModel):
    """Raw comment record as delivered by the thread search API.

    Only the fields the parser reads are declared; anything else in the
    payload is ignored.
    """

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "objectID"),
        description="Comment identifier",
    )
    parent_id: Optional[int] = Field(None, description="Parent item identifier")
    story_id: int = Field(..., description="Identifier of the hiring thread")
    story_title: Optional[str] = None
    story_url: Optional[str] = None
    created_at: str = Field("", description="Creation timestamp (ISO-8601)")
    created_at_i: Optional[int] = Field(None, description="Creation timestamp (unix seconds)")
    author: str = ""
    url: Optional[str] = Field(None, description="Explicit permalink, when provided")
    comment_text: Optional[str] = Field(None, description="Comment body as HTML")
    text: Optional[str] = Field(None, description="Alternative body field")

    model_config = {"populate_by_name": True}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Accept numeric ids and strip whitespace."""
        if v is None:
            raise ValueError("id is required")
        value = str(v).strip()
        if not value:
            raise ValueError("id cannot be empty or whitespace-only")
        return value

    @property
    def body_html(self) -> str:
        """HTML body, preferring comment_text over text."""
        return self.comment_text or self.text or ""


class JobPosting(BaseModel):
    """Structured job record parsed from one hiring-thread comment.

    Every field is fixed once built. ``flags`` belongs to the caller, who
    can derive an updated copy with :meth:`with_flags`.
    """

    id: str
    story_id: int
    parent_id: Optional[int] = None
    company: Optional[str] = None
    role: Optional[str] = None
    locations: List[str] = Field(default_factory=list)
    work_mode: WorkMode = WorkMode.ONSITE
    remote_only: bool = False
    timezone: Optional[str] = None
    visa: Optional[bool] = Field(None, description="None means the text does not say")
    employment_types: List[EmploymentType] = Field(
        default_factory=lambda: [EmploymentType.FULL_TIME]
    )
    experience_level: Optional[ExperienceLevel] = None
    tech_stack: List[str] = Field(default_factory=list)
    salary: Optional[SalaryRange] = None
    text: str = ""
    html: Optional[str] = None
    created_at: str = ""
    url: str = ""
    source: SourceMetadata
    tags: List[str] = Field(default_factory=list)
    flags: JobFlags = Field(default_factory=JobFlags)

    model_config = {"frozen": True}

    @field_validator("employment_types")
    @classmethod
    def default_employment_types(cls, v: List[EmploymentType]) -> List[EmploymentType]:
        """An empty employment type list means full-time."""
        return v or [EmploymentType.FULL_TIME]

    def with_flags(self, **changes: Any) -> "JobPosting":
        """Return a copy with updated flags (starred, applied, notes)."""
        flags = JobFlags(**{**self.flags.model_dump(), **changes})
        return self.model_copy(update={"flags": flags})

    def summary(self) -> Dict[str, Any]:
        """Compact dict used in log records."""
        return {
            "posting_id": self.id,
            "company": self.company,
            "role": self.role,
            "work_mode": self.work_mode.value,
        }
