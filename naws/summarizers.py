from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

SUMMARY_WORDS = 50
ELLIPSIS = "..."

# Elements that start a new line when rendered; everything else is inline.
_BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "ol", "p", "pre", "section", "table", "td", "th",
    "tr", "ul",
]


def html_to_text(html: str) -> str:
    """
    Reduce an HTML fragment to a single line of plain text.

    Block elements and <br> become whitespace so words on either side stay
    separate; inline tags are dropped without a separator. Entities are decoded
    and whitespace runs collapse to one space.
    """
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    return " ".join(soup.get_text().split())


def _last_sentence_end(text: str) -> int:
    i = text.rfind(".")
    while i != -1:
        if i == len(text) - 1 or text[i + 1] == " ":
            return i
        i = text.rfind(".", 0, i)
    return -1


def summarize_text(text: str, max_words: int = SUMMARY_WORDS) -> str:
    """
    Shorten text to at most `max_words` words.

    Text within the limit is returned as is. Longer text is cut back to the
    last sentence-ending period inside the word window when there is one, and
    always ends with an ellipsis.
    """
    words = text.split()
    if len(words) <= max_words:
        return text

    summary = " ".join(words[:max_words])
    cut = _last_sentence_end(summary)
    if cut > 0:
        summary = summary[:cut].rstrip()
    return summary + ELLIPSIS


def format_description(description: Optional[str], full: bool = False) -> str:
    """Plain-text rendering of a description; empty when there is nothing to show."""
    if description is None:
        return ""
    text = html_to_text(description)
    if full:
        return text
    return summarize_text(text)
