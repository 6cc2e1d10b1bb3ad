"""Text normalization for comment bodies.

This module provides:
- html_to_plain_text: HTML fragment to line-oriented plain text
- NormalizedText: plain, lowercase and per-line variants for extraction
"""

from .models import NormalizedText
from .text import decode_html_entities, html_to_plain_text, normalize_whitespace, sanitize_line

__all__ = [
    "NormalizedText",
    "html_to_plain_text",
    "decode_html_entities",
    "normalize_whitespace",
    "sanitize_line",
]
