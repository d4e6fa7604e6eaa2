from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

BBox = Tuple[float, float, float, float]  # (x0, y0, x1, y1)

RECT_PRECISION = 4


@dataclass(frozen=True)
class NormalizedRect:
    """Rectangle expressed in percent of the page content box."""

    left: float
    top: float
    width: float
    height: float

    def is_visible(self) -> bool:
        return self.width > 0 and self.height > 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class TextSpan:
    start: int
    end: int
    text: str
    rects: Tuple[NormalizedRect, ...]


@dataclass(frozen=True)
class PageTextLayout:
    page: int
    width: float
    height: float
    text: str
    spans: Tuple[TextSpan, ...]


@dataclass(frozen=True)
class TextToken:
    value: str
    start: int
    end: int


@dataclass(frozen=True)
class OffsetRange:
    start: int
    end: int

    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class DiffRanges:
    base: List[OffsetRange] = field(default_factory=list)
    target: List[OffsetRange] = field(default_factory=list)


@dataclass(frozen=True)
class TextRun:
    """A run of text as delivered by the rendering side."""

    text: str
    rects: Sequence[BBox] = ()
