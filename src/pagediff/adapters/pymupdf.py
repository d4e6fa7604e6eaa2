"""PyMuPDF backed text run provider.

Each PyMuPDF text span becomes one run whose bounding box is its only
rectangle.  A rect-less ``"\\n"`` run closes every line so words on
consecutive lines never merge into a single token.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

import fitz  # PyMuPDF

from ..core.layout import capture_text_layout
from ..core.types import PageTextLayout, TextRun
from ..errors import DocumentLoadError

logger = logging.getLogger(__name__)

LINE_BREAK = "\n"


class PyMuPDFRunProvider:
    def __init__(self, page: fitz.Page):
        self.page = page

    def iter_runs(self) -> Iterator[TextRun]:
        data = self.page.get_text("dict")
        for block in data.get("blocks", []):
            # image blocks carry no text
            if block.get("type", 0) != 0:
                continue
            for line in block.get("lines", []):
                emitted = False
                for span in line.get("spans", []):
                    text = span.get("text", "")
                    if not text:
                        continue
                    x0, y0, x1, y1 = span["bbox"]
                    yield TextRun(text=text, rects=((float(x0), float(y0), float(x1), float(y1)),))
                    emitted = True
                if emitted:
                    yield TextRun(text=LINE_BREAK)


def capture_page_layout(page: fitz.Page, page_number: int) -> PageTextLayout | None:
    """Capture ``page`` using its own rectangle as the content box."""

    rect = page.rect
    return capture_text_layout(
        page_number,
        PyMuPDFRunProvider(page),
        (rect.x0, rect.y0, rect.x1, rect.y1),
    )


def open_document(path: str | Path) -> fitz.Document:
    try:
        return fitz.open(str(path))
    except Exception as exc:
        raise DocumentLoadError(f"Failed to load PDF: {exc}") from exc


def load_layouts(path: str | Path) -> Tuple[Dict[int, PageTextLayout], int]:
    """Capture every page of ``path``.

    Returns the layouts keyed by 1-based page number together with the page
    count.  Pages without a usable size are left out of the mapping.
    """

    doc = open_document(path)
    try:
        layouts: Dict[int, PageTextLayout] = {}
        for index, page in enumerate(doc):
            page_number = index + 1
            layout = capture_page_layout(page, page_number)
            if layout is None:
                logger.warning("Skipping page %d of %s: empty page box", page_number, path)
                continue
            layouts[page_number] = layout
        return layouts, len(doc)
    finally:
        doc.close()


def page_texts(layouts: Dict[int, PageTextLayout], page_count: int) -> List[str]:
    """Texts of pages ``1..page_count``; missing layouts read as empty."""

    return [
        layouts[number].text if number in layouts else ""
        for number in range(1, page_count + 1)
    ]
