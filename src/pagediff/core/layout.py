"""Capture of per-page text layouts.

A layout maps every character offset of a page's text to the on-screen
rectangles of the run that contains it.  The rendering side supplies runs of
text in reading order through a :class:`TextRunProvider`; nothing here knows
about PDF objects or DOM nodes.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence

from .types import RECT_PRECISION, BBox, NormalizedRect, PageTextLayout, TextRun, TextSpan

logger = logging.getLogger(__name__)


class TextRunProvider(Protocol):
    """Source of text runs for a single rendered page."""

    def iter_runs(self) -> Iterator[TextRun]:
        ...


class RunList:
    """Provider backed by an in-memory sequence of runs."""

    def __init__(self, runs: Iterable[TextRun]):
        self._runs: List[TextRun] = list(runs)

    def __len__(self) -> int:
        return len(self._runs)

    def iter_runs(self) -> Iterator[TextRun]:
        return iter(self._runs)


def normalize_rect(rect: BBox, content_box: BBox) -> NormalizedRect:
    """Express ``rect`` in percent of ``content_box``.

    Both boxes are ``(x0, y0, x1, y1)`` in the same coordinate system.
    """

    box_x0, box_y0, box_x1, box_y1 = content_box
    box_width = box_x1 - box_x0
    box_height = box_y1 - box_y0
    x0, y0, x1, y1 = rect
    return NormalizedRect(
        left=round((x0 - box_x0) / box_width * 100, RECT_PRECISION),
        top=round((y0 - box_y0) / box_height * 100, RECT_PRECISION),
        width=round((x1 - x0) / box_width * 100, RECT_PRECISION),
        height=round((y1 - y0) / box_height * 100, RECT_PRECISION),
    )


def _visible_rects(rects: Sequence[BBox], content_box: BBox) -> List[NormalizedRect]:
    normalized = (normalize_rect(rect, content_box) for rect in rects)
    return [rect for rect in normalized if rect.is_visible()]


def capture_text_layout(
    page_number: int,
    provider: TextRunProvider,
    content_box: BBox,
) -> Optional[PageTextLayout]:
    """Build the :class:`PageTextLayout` of a rendered page.

    Returns ``None`` while the page has no laid out content box yet; callers
    retry on the next render.  Runs without visible rectangles still advance
    the text offset so span offsets always index into the full page text.
    """

    x0, y0, x1, y1 = content_box
    width = x1 - x0
    height = y1 - y0
    if not width or not height:
        logger.debug("page %d: content box not laid out yet", page_number)
        return None

    spans: List[TextSpan] = []
    parts: List[str] = []
    cursor = 0
    for run in provider.iter_runs():
        content = run.text or ""
        length = len(content)
        if length > 0:
            rects = _visible_rects(run.rects, content_box)
            if rects:
                spans.append(
                    TextSpan(
                        start=cursor,
                        end=cursor + length,
                        text=content,
                        rects=tuple(rects),
                    )
                )
        parts.append(content)
        cursor += length

    logger.debug("page %d: captured %d spans over %d chars", page_number, len(spans), cursor)
    return PageTextLayout(
        page=page_number,
        width=width,
        height=height,
        text="".join(parts),
        spans=tuple(spans),
    )
