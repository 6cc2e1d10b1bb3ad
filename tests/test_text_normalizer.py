"""Unit tests for HTML-to-text normalization.

Tests:
- Block, break and list markup becoming line structure
- Entity decoding (named, decimal, hex) and unknown entities
- Line sanitization (bullets, trailing separators, whitespace)
- NormalizedText variants
"""

import re

import pytest

from hnhiring.normalization import (
    NormalizedText,
    decode_html_entities,
    html_to_plain_text,
    normalize_whitespace,
    sanitize_line,
)

TAG_SYNTAX = re.compile(r"<[a-zA-Z/!][^<>]*>")


class TestHtmlToPlainText:
    """Test html_to_plain_text conversion."""

    @pytest.mark.parametrize("fragment", ["", None])
    def test_empty_input(self, fragment):
        assert html_to_plain_text(fragment) == ""

    def test_paragraphs_and_list_items(self):
        html = "<p>Acme &amp; Co</p><ul><li>Remote</li><li>Berlin</li></ul>"
        assert html_to_plain_text(html) == "Acme & Co\nRemote\nBerlin"

    def test_line_breaks(self):
        assert html_to_plain_text("a<br>b<br/>c<BR />d") == "a\nb\nc\nd"

    def test_headings_and_divs(self):
        assert html_to_plain_text("<h2>Title</h2><div>Body</div>tail") == "Title\nBody\ntail"

    def test_inline_tags_are_stripped(self):
        html = 'Apply <a href="https://example.com/jobs" rel="nofollow">here</a> <i>now</i>'
        assert html_to_plain_text(html) == "Apply here now"

    def test_named_and_numeric_entities(self):
        html = "&quot;x&quot; &#x27;y&#x27; &#65;&#x42; caf&eacute;&nbsp;bar"
        assert html_to_plain_text(html) == "\"x\" 'y' AB café bar"

    def test_encoded_tags_are_removed_after_decoding(self):
        assert html_to_plain_text("&lt;b&gt;bold&lt;/b&gt; text") == "bold text"

    def test_comparison_signs_survive(self):
        assert html_to_plain_text("salary &lt; 100k &gt; 50k") == "salary < 100k > 50k"

    def test_unknown_named_entity_is_left_as_is(self):
        assert html_to_plain_text("Tom &foo; Jerry") == "Tom &foo; Jerry"

    def test_double_escaped_entities_are_fully_decoded(self):
        assert html_to_plain_text("AT&amp;amp;T") == "AT&T"
        assert html_to_plain_text("&amp;lt;b&amp;gt;bold&amp;lt;/b&amp;gt;") == "bold"

    @pytest.mark.parametrize(
        "text",
        [
            "https://jobs.example/apply?a=1&para=2",
            "R&D team",
            "Tom &amp Jerry",
            "&copy 2025",
        ],
    )
    def test_unterminated_references_are_left_as_is(self, text):
        assert decode_html_entities(text) == text

    def test_uppercase_entity_names(self):
        assert decode_html_entities("A &AMP; B") == "A & B"
        assert decode_html_entities("&Eacute;cole &EACUTE;") == "École é"

    def test_whitespace_is_collapsed_and_empty_lines_dropped(self):
        html = "<p>a    b\t c</p><p>   </p><p></p>d"
        assert html_to_plain_text(html) == "a b c\nd"

    def test_hn_comment_markup(self):
        html = (
            "Acme | Backend Engineer | NYC<p>We&#x27;re hiring!</p>"
            "<p>Apply: <a href=\"mailto:jobs@acme.test\">jobs@acme.test</a></p>"
        )
        assert html_to_plain_text(html) == (
            "Acme | Backend Engineer | NYC\nWe're hiring!\nApply: jobs@acme.test"
        )

    @pytest.mark.parametrize(
        "fragment",
        [
            "<p>One</p><p>Two &amp; three</p>",
            "<ul><li><b>Bold</b> &lt;i&gt;item&lt;/i&gt;</li></ul>",
            "<div class='x'>&#60;script&#62;alert(1)&#60;/script&#62;</div>",
            "plain &amp;amp; double",
        ],
    )
    def test_output_has_no_tag_syntax(self, fragment):
        assert TAG_SYNTAX.search(html_to_plain_text(fragment)) is None


class TestLineHelpers:
    """Test line sanitization helpers."""

    def test_sanitize_line_strips_bullets_and_trailing_separator(self):
        assert sanitize_line("  •  Remote (US) -  ") == "Remote (US)"

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("- Berlin", "Berlin"),
            ("** Senior", "Senior"),
            ("Location :", "Location"),
            ("Acme |", "Acme"),
            ("Full-time", "Full-time"),
            ("   ", ""),
        ],
    )
    def test_sanitize_line_cases(self, line, expected):
        assert sanitize_line(line) == expected

    def test_normalize_whitespace(self):
        assert normalize_whitespace("  a \n\t b  ") == "a b"

    def test_decode_html_entities_empty(self):
        assert decode_html_entities("") == ""


class TestNormalizedText:
    """Test NormalizedText variants."""

    def test_from_html(self):
        normalized = NormalizedText.from_html("<p>Acme | Dev</p><p>Remote OK</p>")

        assert normalized.plain_text == "Acme | Dev\nRemote OK"
        assert normalized.lowercase == "acme | dev\nremote ok"
        assert normalized.lines == ["Acme | Dev", "Remote OK"]
        assert normalized.first_line == "Acme | Dev"
        assert normalized.is_empty is False

    def test_empty(self):
        normalized = NormalizedText.from_html("")

        assert normalized.plain_text == ""
        assert normalized.lines == []
        assert normalized.first_line == ""
        assert normalized.is_empty is True
