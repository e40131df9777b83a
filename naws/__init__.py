"""
naws

A small command-line reader for the AWS "What's New" RSS feed.

Core ideas:
- Input: an RSS 2.0 feed URL (AWS "What's New" by default)
- Process: fetch → parse → normalize → filter (optional) → paginate
- Output: a page of Announcement records, rendered as terminal text or JSON

Example
-------
from naws import AnnouncementFetcher

fetcher = AnnouncementFetcher(filter="lambda", limit=5)
page = fetcher.fetch("https://aws.amazon.com/about-aws/whats-new/recent/feed/")

for item in page.items:
    print(item.publication_date, item.title)
"""
__version__ = "0.1.0"

from .models import Announcement
from .core import AnnouncementFetcher, Config
from .exceptions import FetchError, ParseError

__all__ = [
    "Announcement",
    "AnnouncementFetcher",
    "Config",
    "FetchError",
    "ParseError",
]
