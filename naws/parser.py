from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Union

from .exceptions import ParseError
from .models import Announcement
from .normalizer import to_announcement

logger = logging.getLogger(__name__)


def _field_text(element: ET.Element) -> str:
    # Text split across CDATA sections or nested markup is joined with a space.
    fragments = (fragment.strip() for fragment in element.itertext())
    return " ".join(fragment for fragment in fragments if fragment)


def _first_text(item: ET.Element, tag: str) -> Optional[str]:
    element = item.find(tag)
    if element is None:
        return None
    return _field_text(element)


def parse_entry(item: ET.Element) -> Dict[str, Any]:
    """
    Map one <item> element to a dict with the fields an Announcement needs.
    Fields: title, link, description, pub_date (None when the element is missing), categories (list)
    """
    return {
        "title": _first_text(item, "title"),
        "link": _first_text(item, "link"),
        "description": _first_text(item, "description"),
        "pub_date": _first_text(item, "pubDate"),
        "categories": [_field_text(c) for c in item.findall("category")],
    }


def parse_feed(content: Union[bytes, str]) -> List[Announcement]:
    """
    Parse an RSS 2.0 document into announcements, preserving feed order.

    Bytes are decoded according to the XML declaration; bytes invalid for that
    encoding fail the parse rather than being dropped. Raises ParseError for
    malformed XML, a root other than <rss>, or a missing <channel>.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML: {e}", position=getattr(e, "position", None)) from e

    if root.tag != "rss":
        raise ParseError(f"Expected <rss> root element, found <{root.tag}>")

    channel = root.find("channel")
    if channel is None:
        raise ParseError("Feed has no <channel> element")

    items = [to_announcement(parse_entry(item)) for item in channel.findall("item")]
    logger.info("Found %d announcements", len(items))
    return items
