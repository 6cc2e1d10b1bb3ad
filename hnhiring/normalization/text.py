"""HTML-to-text conversion for comment bodies.

Comment bodies arrive as small HTML fragments. They are converted into
line-oriented plain text so the extraction rules can work line by line:

1. Block and break tags become newlines, list items get a bullet
2. Remaining tags are stripped
3. Terminated HTML entities are decoded (named, decimal and hex)
4. Tag-like markup produced by decoding is stripped again
5. Each line is sanitized; empty lines are dropped
"""

import html
import re
from html.entities import html5

BULLET = "•"

_BLOCK_CLOSE = re.compile(r"</(?:p|div|li|ul|ol|br)\s*>", re.IGNORECASE)
_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_HEADING_CLOSE = re.compile(r"</h\d\s*>", re.IGNORECASE)
_LIST_ITEM_OPEN = re.compile(r"<li\b[^>]*>", re.IGNORECASE)
_PARAGRAPH_OPEN = re.compile(r"<p\b[^>]*>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]+>")
_ENTITY = re.compile(r"&(?:#\d+|#[xX][0-9a-fA-F]+|[a-zA-Z][a-zA-Z0-9]*);")
# After entity decoding only strip things that look like real tags, so text
# such as "salary < 100k > 50k" survives.
_TAG_LIKE = re.compile(r"</?[a-zA-Z!][^<>]*>")

_LEADING_MARKERS = re.compile(r"^[•\-*]+\s*")
_TRAILING_PUNCTUATION = re.compile(r"\s+[:|-]\s*$")
_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(value: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE.sub(" ", value).strip()


def _decode_reference(match: re.Match) -> str:
    reference = match.group(0)
    if reference.startswith("&#"):
        return html.unescape(reference)
    name = reference[1:]
    return html5.get(name) or html5.get(name.lower()) or reference


def decode_html_entities(value: str) -> str:
    """Decode named, decimal and hex character references.

    Only terminated references (``&name;``, ``&#NN;``, ``&#xHH;``) are
    decoded, so query strings such as ``?a=1&para=2`` are left alone.
    Unknown names stay as written. Decoding repeats until no reference
    changes, so double-escaped text (``&amp;amp;``) is fully decoded.

    Example:
        >>> decode_html_entities("AT&amp;amp;T &AMP; caf&eacute;")
        'AT&T & café'
    """
    if not value:
        return ""

    decoded = value
    while True:
        updated = _ENTITY.sub(_decode_reference, decoded)
        if updated == decoded:
            return decoded
        decoded = updated


def sanitize_line(line: str) -> str:
    """Trim a line and drop leading bullets and trailing separator punctuation.

    Example:
        >>> sanitize_line("  •  Remote (US) -  ")
        'Remote (US)'
    """
    cleaned = line.strip()
    cleaned = _LEADING_MARKERS.sub("", cleaned)
    cleaned = _TRAILING_PUNCTUATION.sub("", cleaned)
    return normalize_whitespace(cleaned)


def html_to_plain_text(fragment: str) -> str:
    """Convert an HTML fragment into newline-separated plain text.

    Never raises; empty or None input yields an empty string.

    Example:
        >>> html_to_plain_text("<p>Acme &amp; Co</p><ul><li>Remote</li></ul>")
        'Acme & Co\\nRemote'
    """
    if not fragment:
        return ""

    text = _BLOCK_CLOSE.sub("\n", fragment)
    text = _BREAK.sub("\n", text)
    text = _HEADING_CLOSE.sub("\n", text)
    text = _LIST_ITEM_OPEN.sub(f"\n{BULLET} ", text)
    text = _PARAGRAPH_OPEN.sub("\n", text)
    text = _ANY_TAG.sub("", text)

    text = decode_html_entities(text)
    text = _TAG_LIKE.sub("", text)

    lines = (sanitize_line(segment) for segment in text.splitlines())
    return "\n".join(line for line in lines if line)
