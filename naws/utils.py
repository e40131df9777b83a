from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def _parse_rfc3339(value: str) -> Optional[datetime]:
    if not _RFC3339_RE.match(value):
        return None
    candidate = value[:10] + "T" + value[11:]
    if candidate[-1] in "Zz":
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def format_date(raw_date: str) -> str:
    """
    Render a feed date for display.

    RFC 3339 timestamps become "YYYY-MM-DD HH:MM UTC". Anything else longer
    than 10 characters is cut to its first 16 characters, which is only a
    rough guess at the date part (for an RFC 822 pubDate it keeps
    "Fri, 17 Oct 2025"). Short strings pass through unchanged.
    """
    dt = _parse_rfc3339(raw_date)
    if dt is not None:
        return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    if len(raw_date) > 10:
        return raw_date[:16]
    return raw_date
