"""Cursor pagination over an already-ordered launch list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from space_trips.domain.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from space_trips.domain.exceptions import InvalidCursorError
from space_trips.domain.models import Launch, LaunchPage


def normalize_page_size(
    page_size: Optional[int],
    *,
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    if page_size is None or page_size <= 0:
        return default
    return min(page_size, maximum)


def _start_index(results: Sequence[Launch], after: Optional[str]) -> int:
    if after is None:
        return 0
    for idx, launch in enumerate(results):
        if launch.cursor == after:
            return idx + 1
    raise InvalidCursorError(after)


def paginate(
    results: Sequence[Launch],
    after: Optional[str] = None,
    page_size: Optional[int] = DEFAULT_PAGE_SIZE,
    *,
    max_page_size: int = MAX_PAGE_SIZE,
) -> LaunchPage:
    """
    Slice ``results`` into one page starting right after the ``after`` cursor.

    ``has_more`` compares the page's last cursor with the last cursor of the
    whole result set instead of looking past the slice, so a client following
    cursors over a recomputed result set still terminates.
    """
    size = normalize_page_size(page_size, maximum=max_page_size)
    start = _start_index(results, after)
    launches = list(results[start:start + size])

    if not launches:
        return LaunchPage(launches=[], cursor=None, has_more=False)

    cursor = launches[-1].cursor
    return LaunchPage(
        launches=launches,
        cursor=cursor,
        has_more=cursor != results[-1].cursor,
    )


__all__ = ["normalize_page_size", "paginate"]
