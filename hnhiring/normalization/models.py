"""Text variants prepared for the extraction rules."""

from dataclasses import dataclass, field
from typing import List

from .text import html_to_plain_text


@dataclass(frozen=True)
class NormalizedText:
    """Plain text of a comment with the variants the classifiers need.

    Attributes:
        plain_text: Newline-joined sanitized lines (original casing)
        lowercase: Lowercased plain_text for keyword rules
        lines: Non-empty lines of plain_text, in order
    """

    plain_text: str
    lowercase: str
    lines: List[str] = field(default_factory=list)

    @classmethod
    def from_plain_text(cls, plain_text: str) -> "NormalizedText":
        """Build the variants from already-normalized text."""
        lines = [line.strip() for line in plain_text.split("\n") if line.strip()]
        return cls(plain_text=plain_text, lowercase=plain_text.lower(), lines=lines)

    @classmethod
    def from_html(cls, fragment: str) -> "NormalizedText":
        """Normalize an HTML fragment and build the variants."""
        return cls.from_plain_text(html_to_plain_text(fragment))

    @property
    def first_line(self) -> str:
        """The header line, or an empty string for empty text."""
        return self.lines[0] if self.lines else ""

    @property
    def is_empty(self) -> bool:
        return not self.lines
