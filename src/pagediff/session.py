"""Per document pair diff state.

A :class:`DiffSession` holds the captured layouts of both documents and the
page keyed highlight rectangles derived from them.  Layouts arrive as pages
render, in any order; a page is diffed as soon as every layout it needs is
available.  A page with nothing to highlight has no entry at all.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .config import DiffParams
from .core.diff import diff_texts
from .core.projection import rects_for_ranges
from .core.types import NormalizedRect, OffsetRange, PageTextLayout
from .summary import CompareSummary

logger = logging.getLogger(__name__)


def _whole_page(layout: PageTextLayout) -> List[OffsetRange]:
    if not layout.text:
        return []
    return [OffsetRange(0, len(layout.text))]


class DiffSession:
    def __init__(self, params: Optional[DiffParams] = None):
        self.params = (params or DiffParams()).validate()
        self.base_layouts: Dict[int, PageTextLayout] = {}
        self.target_layouts: Dict[int, PageTextLayout] = {}
        self.base_highlights: Dict[int, List[NormalizedRect]] = {}
        self.target_highlights: Dict[int, List[NormalizedRect]] = {}
        self.summary: Optional[CompareSummary] = None
        self.base_page_count = 0
        self.target_page_count = 0

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def store_base_layout(self, layout: Optional[PageTextLayout]) -> None:
        if layout is None:
            return
        self.base_layouts[layout.page] = layout
        self.update_page(layout.page)

    def store_target_layout(self, layout: Optional[PageTextLayout]) -> None:
        if layout is None:
            return
        self.target_layouts[layout.page] = layout
        self.update_page(layout.page)

    def set_summary(
        self,
        summary: Optional[CompareSummary],
        *,
        base_page_count: int,
        target_page_count: int,
    ) -> None:
        self.summary = summary
        self.base_page_count = base_page_count
        self.target_page_count = target_page_count
        self.update_all()

    # ------------------------------------------------------------------
    # Diffing
    # ------------------------------------------------------------------

    def update_all(self) -> None:
        self.clear_highlights()
        if self.summary is None:
            return
        for page_number in self.summary.changed_pages:
            self.update_page(page_number)

    def update_page(self, page_number: int) -> None:
        """Recompute the highlights of ``page_number`` if its layouts are ready."""

        if self.summary is None or page_number not in self.summary.changed_pages:
            self._set_highlights(page_number, [], [])
            return

        base_exists = page_number <= self.base_page_count
        target_exists = page_number <= self.target_page_count
        base_layout = self.base_layouts.get(page_number) if base_exists else None
        target_layout = self.target_layouts.get(page_number) if target_exists else None

        if base_exists and target_exists:
            if base_layout is None or target_layout is None:
                logger.debug("page %d: waiting for both layouts", page_number)
                return
            ranges = diff_texts(
                base_layout.text,
                target_layout.text,
                cell_budget=self.params.cell_budget,
            )
            self._set_highlights(
                page_number,
                rects_for_ranges(base_layout, ranges.base),
                rects_for_ranges(target_layout, ranges.target),
            )
            return

        if base_exists:
            if base_layout is None:
                return
            logger.debug("page %d: removed from target", page_number)
            self._set_highlights(page_number, rects_for_ranges(base_layout, _whole_page(base_layout)), [])
            return

        if target_exists:
            if target_layout is None:
                return
            logger.debug("page %d: added in target", page_number)
            self._set_highlights(page_number, [], rects_for_ranges(target_layout, _whole_page(target_layout)))

    def _set_highlights(
        self,
        page_number: int,
        base_rects: Sequence[NormalizedRect],
        target_rects: Sequence[NormalizedRect],
    ) -> None:
        for highlights, rects in (
            (self.base_highlights, base_rects),
            (self.target_highlights, target_rects),
        ):
            if rects:
                highlights[page_number] = list(rects)
            else:
                highlights.pop(page_number, None)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def clear_highlights(self) -> None:
        self.base_highlights.clear()
        self.target_highlights.clear()

    def invalidate_layouts(self) -> None:
        """Forget every layout, e.g. after a zoom change re-renders all pages."""

        self.base_layouts.clear()
        self.target_layouts.clear()
        self.clear_highlights()

    def reset(self) -> None:
        self.invalidate_layouts()
        self.summary = None
        self.base_page_count = 0
        self.target_page_count = 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def base_rects_for(self, page_number: int) -> List[NormalizedRect]:
        return self.base_highlights.get(page_number, [])

    def target_rects_for(self, page_number: int) -> List[NormalizedRect]:
        return self.target_highlights.get(page_number, [])
