"""Build structured JobPosting records from raw comment hits.

The builder wires the pipeline together for a single comment:

1. Normalize the HTML body into plain text and its variants
2. Run the field classifiers (header, locations, work mode, ...)
3. Match technology labels on the full plain text
4. Synthesize tags
5. Assemble an immutable JobPosting
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from hnhiring.domain.models import CommentHit, JobFlags, JobPosting, SourceMetadata
from hnhiring.logging import get_logger
from hnhiring.normalization.models import NormalizedText
from hnhiring.tech.matcher import TechKeywordMatcher
from hnhiring.utils.timestamps import format_timestamp, unix_to_timestamp

from .fields import extract_fields
from .tags import build_tags

logger = get_logger(__name__, component="extraction")

DEFAULT_PERMALINK_BASE_URL = "https://news.ycombinator.com/item?id="

HitLike = Union[CommentHit, Mapping[str, Any]]


class JobPostingBuilder:
    """Turns CommentHit records into JobPosting records.

    Building is deterministic: the same hit always yields a field-for-field
    identical posting. Flags are never inferred; every posting starts with
    default JobFlags.
    """

    def __init__(
        self,
        tech_matcher: Optional[TechKeywordMatcher] = None,
        permalink_base_url: str = DEFAULT_PERMALINK_BASE_URL,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize JobPostingBuilder.

        Args:
            tech_matcher: Matcher for technology labels (defaults to the built-in dictionary)
            permalink_base_url: Prefix joined with the comment id when a hit has no url
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.tech_matcher = tech_matcher if tech_matcher is not None else TechKeywordMatcher()
        self.permalink_base_url = permalink_base_url
        self.logger = logger_instance or logger

    def build(self, hit: HitLike) -> JobPosting:
        """Build a posting from one comment.

        Args:
            hit: CommentHit or a raw mapping accepted by CommentHit

        Returns:
            JobPosting

        Raises:
            ValidationError: If a raw mapping does not describe a valid comment
        """
        if not isinstance(hit, CommentHit):
            hit = CommentHit.model_validate(hit)

        html = hit.body_html
        normalized = NormalizedText.from_html(html)
        fields = extract_fields(normalized)
        tech_stack = self.tech_matcher.extract(normalized.plain_text)

        tags = build_tags(
            tech_stack=tech_stack,
            work_mode=fields.work_mode,
            remote_only=fields.remote_only,
            employment_types=fields.employment_types,
            experience_level=fields.experience_level,
            timezone=fields.timezone,
            visa=fields.visa,
        )

        posting = JobPosting(
            id=hit.id,
            story_id=hit.story_id,
            parent_id=hit.parent_id,
            company=fields.company,
            role=fields.role,
            locations=fields.locations,
            work_mode=fields.work_mode,
            remote_only=fields.remote_only,
            timezone=fields.timezone,
            visa=fields.visa,
            employment_types=fields.employment_types,
            experience_level=fields.experience_level,
            tech_stack=tech_stack,
            salary=fields.salary,
            text=normalized.plain_text,
            html=html or None,
            created_at=self.created_at_for(hit),
            url=self.permalink_for(hit),
            source=SourceMetadata(
                comment_id=hit.id,
                story_id=hit.story_id,
                story_title=hit.story_title or None,
                story_url=hit.story_url or None,
                author=hit.author,
                parent_id=hit.parent_id,
            ),
            tags=tags,
        )

        if normalized.is_empty:
            self.logger.warning(
                f"Comment {hit.id} has an empty body",
                extra={"event": "extraction.posting.empty_body", "posting_id": hit.id},
            )

        self.logger.debug(
            f"Built posting {posting.id}",
            extra={
                "event": "extraction.posting.built",
                **posting.summary(),
                "tech_count": len(tech_stack),
                "has_salary": posting.salary is not None,
            },
        )
        return posting

    def build_many(self, records: Iterable[HitLike]) -> List[JobPosting]:
        """Build postings for many comments, skipping invalid records.

        Records that fail CommentHit validation are logged and skipped; the
        remaining records are still built.
        """
        postings: List[JobPosting] = []
        skipped = 0

        for index, record in enumerate(records):
            try:
                postings.append(self.build(record))
            except ValidationError as e:
                skipped += 1
                self.logger.warning(
                    f"Skipping invalid comment record at index {index}",
                    extra={
                        "event": "extraction.record.invalid",
                        "index": index,
                        "error_count": e.error_count(),
                        "error": str(e).splitlines()[0],
                    },
                )

        self.logger.info(
            f"Built {len(postings)} postings",
            extra={
                "event": "extraction.batch.completed",
                "built": len(postings),
                "skipped": skipped,
            },
        )
        return postings

    def permalink_for(self, hit: CommentHit) -> str:
        """Explicit url, else the permalink base joined with the comment id."""
        if hit.url:
            return hit.url
        if hit.id and self.permalink_base_url:
            return f"{self.permalink_base_url}{hit.id}"
        return ""

    @staticmethod
    def created_at_for(hit: CommentHit) -> str:
        """The ISO timestamp, derived from ``created_at_i`` when it is missing."""
        if hit.created_at:
            return hit.created_at
        if hit.created_at_i is not None:
            return format_timestamp(unix_to_timestamp(hit.created_at_i))
        return ""


_default_builder = JobPostingBuilder()


def parse_job_from_comment(hit: HitLike) -> JobPosting:
    """Build a posting with the default builder.

    Example:
        >>> hit = {"id": "1", "story_id": 9, "comment_text": "Acme | Dev"}
        >>> posting = parse_job_from_comment(hit)
        >>> posting.company, posting.role
        ('Acme', 'Dev')
    """
    return _default_builder.build(hit)


FlagState = Mapping[str, Union[JobFlags, Mapping[str, Any]]]


def apply_flag_state(postings: Iterable[JobPosting], state: FlagState) -> List[JobPosting]:
    """Merge caller-owned bookmark flags into postings.

    Postings without an entry in ``state`` are returned unchanged; the
    others are replaced with copies carrying the stored flags.

    Args:
        postings: Postings to decorate
        state: Mapping of posting id to JobFlags or a dict of flag values

    Returns:
        New list in input order

    Raises:
        ValidationError: If an entry is not a valid set of flag values
    """
    result: List[JobPosting] = []
    for posting in postings:
        flags = state.get(posting.id)
        if flags is None:
            result.append(posting)
            continue
        if not isinstance(flags, JobFlags):
            flags = JobFlags.model_validate(flags)
        result.append(posting.with_flags(**flags.model_dump()))
    return result
