from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .models import Announcement


def _contains(text: str, query: str) -> bool:
    return query in text.lower()


def matches_filter(announcement: Announcement, query: str) -> bool:
    """
    Case-insensitive substring match against the title, the description
    (when present) and each category. No regex, no word boundaries.
    """
    q = query.lower()
    if _contains(announcement.title, q):
        return True
    if announcement.description is not None and _contains(announcement.description, q):
        return True
    return any(_contains(c, q) for c in announcement.categories)


def filter_announcements(items: Iterable[Announcement], query: Optional[str]) -> List[Announcement]:
    """Keep the announcements matching `query`, in order. None keeps everything."""
    if query is None:
        return list(items)
    return [a for a in items if matches_filter(a, query)]


@dataclass(frozen=True)
class Page:
    """The slice of filtered announcements that gets rendered."""
    items: List[Announcement]
    total: int

    @property
    def remaining(self) -> int:
        return self.total - len(self.items)


def paginate(items: Sequence[Announcement], limit: int) -> Page:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    display_count = min(len(items), limit)
    return Page(items=list(items[:display_count]), total=len(items))
