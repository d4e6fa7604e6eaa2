"""Word level PDF text comparison projected onto page highlight rectangles."""

from __future__ import annotations

from .config import DiffParams, get_preset, iter_presets
from .core import (
    DEFAULT_CELL_BUDGET,
    DiffRanges,
    NormalizedRect,
    OffsetRange,
    PageTextLayout,
    RunList,
    TextRun,
    TextRunProvider,
    TextSpan,
    TextToken,
    capture_text_layout,
    diff_texts,
    rects_for_range,
    rects_for_ranges,
    simple_diff_ranges,
    tokenize,
)
from .errors import DocumentLoadError, InvalidParamsError, PageDiffError
from .search import SearchHit, rects_for_query, search_pages
from .session import DiffSession
from .summary import CompareSummary, summarize_pages

__all__ = [
    "DEFAULT_CELL_BUDGET",
    "CompareSummary",
    "DiffParams",
    "DiffRanges",
    "DiffSession",
    "DocumentLoadError",
    "InvalidParamsError",
    "NormalizedRect",
    "OffsetRange",
    "PageDiffError",
    "PageTextLayout",
    "RunList",
    "SearchHit",
    "TextRun",
    "TextRunProvider",
    "TextSpan",
    "TextToken",
    "capture_text_layout",
    "diff_texts",
    "get_preset",
    "iter_presets",
    "rects_for_query",
    "rects_for_range",
    "rects_for_ranges",
    "search_pages",
    "simple_diff_ranges",
    "summarize_pages",
    "tokenize",
]

__version__ = "0.1.0"
