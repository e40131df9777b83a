"""
Unit tests for description text normalization and summaries
"""

import pytest

from naws.summarizers import ELLIPSIS, format_description, html_to_text, summarize_text


def words(count: int, prefix: str = "w") -> str:
    return " ".join(f"{prefix}{i}" for i in range(1, count + 1))


class TestHtmlToText:
    @pytest.mark.parametrize(
        "html, expected",
        [
            ("<p>Hello <b>world</b></p>", "Hello world"),
            ("Line one<br>Line two", "Line one Line two"),
            ("Line one<br/>Line two", "Line one Line two"),
            ("Line one<br />Line two", "Line one Line two"),
            ("<p>First</p><p>Second</p>", "First Second"),
            ("<div>a</div><div>b</div>", "a b"),
            ("<ul><li>one</li><li>two</li></ul>", "one two"),
            ("<em>in</em>line and <strong>bo</strong>ld", "inline and bold"),
            ("plain text", "plain text"),
        ],
    )
    def test_markup(self, html, expected):
        assert html_to_text(html) == expected

    def test_decodes_entities(self):
        html = "&lt;tag&gt; &amp; &quot;q&quot; &#39;s&#39; a&nbsp;b"
        assert html_to_text(html) == "<tag> & \"q\" 's' a b"

    def test_collapses_whitespace(self):
        assert html_to_text("  <p>\n\tspaced\n\n   out  </p>\n") == "spaced out"

    def test_link_text_is_kept(self):
        html = '<p>Read the <a href="https://docs.aws.amazon.com">documentation</a>.</p>'
        assert html_to_text(html) == "Read the documentation."


class TestSummarizeText:
    def test_short_text_unchanged(self):
        text = words(50)
        assert summarize_text(text) == text

    def test_truncates_to_fifty_words(self):
        result = summarize_text(words(60))
        assert result == words(50) + ELLIPSIS

    def test_cuts_at_last_sentence_end(self):
        text = "Alpha beta gamma. Delta epsilon. " + words(60)
        assert summarize_text(text) == "Alpha beta gamma. Delta epsilon..."

    def test_ignores_periods_inside_words(self):
        text = "Version v1.2 ships " + words(60)
        result = summarize_text(text)
        assert result == " ".join(text.split()[:50]) + ELLIPSIS

    def test_period_ending_the_window(self):
        text = words(49) + " last. " + words(10, prefix="x")
        assert summarize_text(text) == words(49) + " last" + ELLIPSIS

    def test_custom_word_count(self):
        assert summarize_text("one two three four", max_words=2) == "one two" + ELLIPSIS

    @pytest.mark.parametrize("count", [51, 75, 200])
    def test_long_text_bounded(self, count):
        result = summarize_text("Intro sentence here. " + words(count))
        assert result.endswith(ELLIPSIS)
        assert len(result[: -len(ELLIPSIS)].split()) <= 50


class TestFormatDescription:
    def test_none_is_empty(self):
        assert format_description(None) == ""
        assert format_description(None, full=True) == ""

    def test_empty_markup_is_empty(self):
        assert format_description("<p> </p>") == ""

    def test_short_description_same_in_both_modes(self):
        html = "<p>Hello <b>world</b></p>"
        assert format_description(html, full=False) == format_description(html, full=True) == "Hello world"

    def test_full_description_not_truncated(self):
        html = f"<p>{words(80)}</p>"
        assert format_description(html, full=True) == words(80)

    def test_summary_of_long_description(self):
        html = f"<p>{words(80)}</p>"
        assert format_description(html) == words(50) + ELLIPSIS
