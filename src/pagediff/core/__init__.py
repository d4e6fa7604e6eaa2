"""Text layout capture, offset projection and token diffing."""

from .diff import (
    DEFAULT_CELL_BUDGET,
    TokenMatches,
    build_ranges_from_matches,
    compute_token_matches,
    diff_texts,
    simple_diff_ranges,
)
from .layout import RunList, TextRunProvider, capture_text_layout, normalize_rect
from .projection import rects_for_range, rects_for_ranges
from .tokens import tokenize
from .types import (
    BBox,
    DiffRanges,
    NormalizedRect,
    OffsetRange,
    PageTextLayout,
    TextRun,
    TextSpan,
    TextToken,
)

__all__ = [
    "DEFAULT_CELL_BUDGET",
    "TokenMatches",
    "build_ranges_from_matches",
    "compute_token_matches",
    "diff_texts",
    "simple_diff_ranges",
    "RunList",
    "TextRunProvider",
    "capture_text_layout",
    "normalize_rect",
    "rects_for_range",
    "rects_for_ranges",
    "tokenize",
    "BBox",
    "DiffRanges",
    "NormalizedRect",
    "OffsetRange",
    "PageTextLayout",
    "TextRun",
    "TextSpan",
    "TextToken",
]
