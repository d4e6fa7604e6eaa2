"""Case-insensitive text search over extracted pages."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterator, List, Sequence

from .core.projection import rects_for_range
from .core.types import NormalizedRect, PageTextLayout


@dataclass(frozen=True)
class SearchHit:
    id: str
    page: int
    context: str
    index: int


def _find_all(text: str, needle: str) -> Iterator[int]:
    idx = text.find(needle)
    while idx != -1:
        yield idx
        idx = text.find(needle, idx + len(needle))


def search_pages(page_texts: Sequence[str], query: str, *, context_chars: int = 40) -> List[SearchHit]:
    """Return every occurrence of ``query`` in ``page_texts``.

    Pages are numbered from 1, matches do not overlap and ``context`` holds
    the lowercased surrounding text.
    """

    if not query or not query.strip():
        return []
    normalized = query.lower()
    hits: List[SearchHit] = []
    for page, page_text in enumerate(page_texts, start=1):
        text = page_text.lower()
        for idx in _find_all(text, normalized):
            context_start = max(0, idx - context_chars)
            context = text[context_start : idx + len(normalized) + context_chars]
            hits.append(
                SearchHit(
                    id=uuid.uuid4().hex,
                    page=page,
                    context=context,
                    index=len(hits) + 1,
                )
            )
    return hits


def rects_for_query(layout: PageTextLayout, query: str) -> List[NormalizedRect]:
    """Highlight rectangles for every occurrence of ``query`` on ``layout``."""

    if not query:
        return []
    normalized = query.lower()
    text = layout.text.lower()
    rects: List[NormalizedRect] = []
    for idx in _find_all(text, normalized):
        rects.extend(rects_for_range(layout, idx, idx + len(normalized)))
    return rects
