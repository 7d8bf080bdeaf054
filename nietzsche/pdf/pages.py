"""Page range parsing."""

from __future__ import annotations

import re

_RANGE = re.compile(r"[0-9]+-[0-9]+")
_SINGLE = re.compile(r"[0-9]+")


def parse_page_range(page_range: str) -> list[str]:
    """Expand a page list such as ``"1,3-5,7"`` into ``["1", "3", "4", "5", "7"]``."""
    if page_range == "":
        raise ValueError("page range cannot be empty")

    pages: list[str] = []
    for raw in page_range.split(","):
        segment = raw.strip()
        if _RANGE.fullmatch(segment):
            start_text, end_text = segment.split("-")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError("invalid range: start page is greater than end page")
            pages.extend(str(page) for page in range(start, end + 1))
        elif _SINGLE.fullmatch(segment):
            pages.append(segment)
        else:
            raise ValueError("invalid page range format")
    return pages