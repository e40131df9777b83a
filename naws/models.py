from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Announcement:
    """
    One item of the feed, normalized into a stable record.

    `title` and `link` are always set (placeholders substitute missing values).
    `description` and `publication_date` are None when the feed omitted them,
    which is not the same as an empty string.
    """
    title: str
    link: str
    description: Optional[str] = None
    publication_date: Optional[str] = None
    categories: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "publication_date": self.publication_date,
            "categories": list(self.categories),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Announcement":
        return cls(
            title=data["title"],
            link=data["link"],
            description=data.get("description"),
            publication_date=data.get("publication_date"),
            categories=tuple(data.get("categories") or ()),
        )
