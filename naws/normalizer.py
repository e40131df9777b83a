from __future__ import annotations

from typing import Any, Dict

from .models import Announcement

UNTITLED = "#Untitled"
NO_LINK = "#NoLink"


def to_announcement(entry: Dict[str, Any]) -> Announcement:
    """
    Convert a parsed entry dict into an Announcement.
    Defaults:
    - title -> "#Untitled" when missing or blank
    - link -> "#NoLink" when missing or blank
    - categories -> empty tuple
    description and pub_date stay None when missing.
    """
    title = entry.get("title") or UNTITLED
    link = entry.get("link") or NO_LINK
    categories = tuple(entry.get("categories") or ())

    return Announcement(
        title=title,
        link=link,
        description=entry.get("description"),
        publication_date=entry.get("pub_date"),
        categories=categories,
    )
