from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .fetcher import fetch_feed
from .filters import Page, filter_announcements, paginate
from .parser import parse_feed

DEFAULT_FEED_URL = "https://aws.amazon.com/about-aws/whats-new/recent/feed/"
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Config:
    url: str = DEFAULT_FEED_URL
    limit: int = DEFAULT_LIMIT
    verbose: bool = False
    no_color: bool = False
    filter: Optional[str] = None
    full_description: bool = False
    show_description: bool = False
    json: bool = False


class AnnouncementFetcher:
    """
    High-level API: fetch one RSS feed and return the page of announcements to show.

    Pipeline: fetch → parse → filter (optional) → paginate
    """

    def __init__(
        self,
        *,
        filter: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.filter = filter
        self.limit = limit
        self.client = client

    @classmethod
    def from_config(cls, config: Config, *, client: Optional[httpx.Client] = None) -> "AnnouncementFetcher":
        return cls(filter=config.filter, limit=config.limit, client=client)

    def fetch(self, url: str = DEFAULT_FEED_URL) -> Page:
        content = fetch_feed(url, client=self.client)
        items = parse_feed(content)
        filtered = filter_announcements(items, self.filter)
        return paginate(filtered, self.limit)
