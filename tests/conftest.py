from typing import Iterable, Optional

import httpx
import pytest


def make_item(
    title: Optional[str] = "Title",
    link: Optional[str] = "https://aws.amazon.com/about-aws/whats-new/item",
    description: Optional[str] = None,
    pub_date: Optional[str] = None,
    categories: Iterable[str] = (),
) -> str:
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if description is not None:
        parts.append(f"<description><![CDATA[{description}]]></description>")
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    for category in categories:
        parts.append(f"<category>{category}</category>")
    parts.append("</item>")
    return "".join(parts)


def make_feed(*items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel>'
        "<title>Recent Announcements</title>"
        "<link>https://aws.amazon.com/about-aws/whats-new/recent/</link>"
        f"{''.join(items)}"
        "</channel></rss>"
    )


def numbered_feed(count: int) -> str:
    return make_feed(*(make_item(title=f"Announcement {i}", link=f"https://example.com/{i}") for i in range(1, count + 1)))


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose responses come from a handler instead of the network."""
    clients = []

    def _make(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def feed_client(mock_client):
    """Client that answers every request with the given body and status."""

    def _make(body, status_code: int = 200) -> httpx.Client:
        content = body.encode("utf-8") if isinstance(body, str) else body
        return mock_client(lambda request: httpx.Response(status_code, content=content))

    return _make
