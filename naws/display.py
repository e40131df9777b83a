from __future__ import annotations

import json
import sys
from typing import List, Optional, Sequence, TextIO

from .filters import Page
from .models import Announcement
from .summarizers import format_description
from .utils import format_date

# ANSI SGR codes
BOLD = "1"
DIM = "2"
UNDERLINE = "4"
RED = "31"
BLUE = "34"
MAGENTA = "35"
CYAN = "36"
WHITE = "37"
BRIGHT_YELLOW = "93"
BRIGHT_WHITE = "97"


def style(text: str, *codes: str, color: bool = True) -> str:
    if not color or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def format_announcement(
    item: Announcement,
    index: int,
    total: int,
    *,
    color: bool = True,
    show_description: bool = False,
    full_description: bool = False,
) -> List[str]:
    """
    Lines for one announcement: link, title with its (index/total) position,
    then date, categories and description when there is something to show.
    """
    lines = [
        f"{style('📢', BRIGHT_YELLOW, BOLD, color=color)} "
        f"{style(f'[{item.link}]', BLUE, UNDERLINE, color=color)}",
        f"   {style(item.title, BRIGHT_WHITE, BOLD, color=color)} "
        f"{style(f'({index}/{total})', DIM, color=color)}",
    ]

    if item.publication_date is not None:
        lines.append(f"  {style(format_date(item.publication_date), CYAN, color=color)}")

    if item.categories:
        categories = ", ".join(item.categories)
        lines.append(f"  {style('🏷️', MAGENTA, color=color)} {style(categories, MAGENTA, color=color)}")

    if show_description:
        description = format_description(item.description, full_description)
        if description:
            lines.append(f"  {style('📄', BRIGHT_YELLOW, color=color)} {style(description, WHITE, color=color)}")

    return lines


class Renderer:
    """
    Writes announcements to a text stream, either decorated for a terminal or as JSON.

    Colour is fixed at construction; nothing is read from the environment
    or from the stream.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        *,
        color: bool = True,
        show_description: bool = False,
        full_description: bool = False,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.color = color
        self.show_description = show_description
        self.full_description = full_description

    def _print(self, line: str = "") -> None:
        print(line, file=self.out)

    def render(self, page: Page) -> None:
        display_count = len(page.items)
        for i, item in enumerate(page.items, start=1):
            if i > 1:
                self._print()
            lines = format_announcement(
                item,
                i,
                display_count,
                color=self.color,
                show_description=self.show_description,
                full_description=self.full_description,
            )
            for line in lines:
                self._print(line)

        if page.remaining > 0:
            if display_count:
                self._print()
            self._print(f"...and {page.remaining} more announcements")

    def render_json(self, items: Sequence[Announcement]) -> None:
        payload = [item.to_dict() for item in items]
        self._print(json.dumps(payload, indent=2, ensure_ascii=False))
