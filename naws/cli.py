from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

import httpx

from . import __version__
from .core import DEFAULT_FEED_URL, DEFAULT_LIMIT, AnnouncementFetcher, Config
from .display import BOLD, RED, Renderer, style
from .exceptions import FetchError, ParseError
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naws",
        description="Show the latest AWS \"What's New\" announcements from an RSS feed.",
    )
    parser.add_argument("-u", "--url", default=DEFAULT_FEED_URL, help="RSS feed URL (default: %(default)s)")
    parser.add_argument(
        "-l",
        "--limit",
        type=_non_negative_int,
        default=DEFAULT_LIMIT,
        help="Number of announcements to display (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("-f", "--filter", help="Only show announcements containing this text (case-insensitive).")
    parser.add_argument(
        "-F",
        "--full-description",
        action="store_true",
        help="Show the full description instead of a summary.",
    )
    parser.add_argument("-d", "--show-description", action="store_true", help="Show the description of each announcement.")
    parser.add_argument("-j", "--json", action="store_true", help="Print the announcements as JSON.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    args = build_parser().parse_args(argv)
    return Config(
        url=args.url,
        limit=args.limit,
        verbose=args.verbose,
        no_color=args.no_color,
        filter=args.filter,
        full_description=args.full_description,
        show_description=args.show_description,
        json=args.json,
    )


def run(
    config: Config,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    client: Optional[httpx.Client] = None,
) -> int:
    """
    Fetch, filter and render according to `config`. Returns the process exit code.

    Fetch and parse failures are reported on `err` as a single ERROR line and
    nothing is written to `out`.
    """
    err = err if err is not None else sys.stderr
    color = not config.no_color

    logger.info("Fetching AWS RSS feeds from: %s", config.url)
    logger.info("Limit: %d items", config.limit)

    fetcher = AnnouncementFetcher.from_config(config, client=client)
    try:
        page = fetcher.fetch(config.url)
    except FetchError as e:
        print(f"{style('ERROR:', RED, BOLD, color=color)} Failed to fetch RSS feed: {e}", file=err)
        return 1
    except ParseError as e:
        print(f"{style('ERROR:', RED, BOLD, color=color)} Failed to parse RSS feed: {e}", file=err)
        return 1

    renderer = Renderer(
        out,
        color=color,
        show_description=config.show_description,
        full_description=config.full_description,
    )
    if config.json:
        renderer.render_json(page.items)
    else:
        renderer.render(page)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    configure_logging(config.verbose)
    return run(config)
