from __future__ import annotations

import logging
from typing import Optional

import httpx

from . import __version__
from .exceptions import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = f"Mozilla/5.0 (compatible; naws/{__version__}; +https://github.com/toddlers/naws)"


def fetch_feed(url: str, *, client: Optional[httpx.Client] = None) -> bytes:
    """
    Download a feed with a single GET and return the raw body.

    The body is returned undecoded so the parser can honour the document's own
    encoding declaration. Raises FetchError on transport failures and on any
    non-2xx status.
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(follow_redirects=True)

    logger.info("Fetching RSS feed from %s", url)
    try:
        response = client.get(url, headers={"User-Agent": USER_AGENT})
    except httpx.HTTPError as e:
        raise FetchError(f"{type(e).__name__}: {e}") from e
    finally:
        if owns_client:
            client.close()

    if not response.is_success:
        raise FetchError(
            f"HTTP request failed with status: {response.status_code} {response.reason_phrase}".rstrip(),
            status_code=response.status_code,
        )

    content = response.content
    logger.info("Successfully fetched RSS feed (%d bytes)", len(content))
    return content
