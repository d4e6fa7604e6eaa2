"""Projection of character offsets onto layout rectangles."""
from __future__ import annotations

from typing import Iterable, List

from .types import RECT_PRECISION, NormalizedRect, OffsetRange, PageTextLayout


def rects_for_range(layout: PageTextLayout, start: int, end: int) -> List[NormalizedRect]:
    """Return the rectangles covering ``[start, end)`` on ``layout``.

    Partial overlaps are interpolated linearly along each span rectangle since
    no per-glyph metrics are available.  A span that overlaps the range in a
    single point keeps its full rectangle width.
    """

    if start == end:
        return []

    rects: List[NormalizedRect] = []
    for span in layout.spans:
        if span.end <= start or span.start >= end:
            continue
        span_length = (span.end - span.start) or 1
        overlap_start = max(start, span.start)
        overlap_end = min(end, span.end)
        start_ratio = (overlap_start - span.start) / span_length
        end_ratio = (overlap_end - span.start) / span_length
        width_ratio = max(end_ratio - start_ratio, 0)
        for rect in span.rects:
            left = rect.left + rect.width * start_ratio
            width = rect.width * width_ratio if width_ratio > 0 else rect.width
            rects.append(
                NormalizedRect(
                    left=round(left, RECT_PRECISION),
                    top=rect.top,
                    width=round(width, RECT_PRECISION),
                    height=rect.height,
                )
            )
    return [rect for rect in rects if rect.is_visible()]


def rects_for_ranges(layout: PageTextLayout, ranges: Iterable[OffsetRange]) -> List[NormalizedRect]:
    """Project several ranges at once, keeping their order."""

    rects: List[NormalizedRect] = []
    for offset_range in ranges:
        rects.extend(rects_for_range(layout, offset_range.start, offset_range.end))
    return rects
