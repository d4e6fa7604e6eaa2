"""Page level classification of two extracted documents."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)

NOTE_NO_DIFFERENCES = "No differences found"
NOTE_TEXT_ONLY = "Text comparison result (layout differences not detected)"
NOTE_NO_BASE = "No base document loaded"


@dataclass(frozen=True)
class CompareSummary:
    added_pages: int
    removed_pages: int
    changed_pages: List[int] = field(default_factory=list)
    note: str = ""

    @classmethod
    def empty(cls, note: str) -> "CompareSummary":
        return cls(added_pages=0, removed_pages=0, changed_pages=[], note=note)

    def has_changes(self) -> bool:
        return bool(self.changed_pages or self.added_pages or self.removed_pages)

    def to_dict(self) -> Dict[str, object]:
        return {
            "added_pages": self.added_pages,
            "removed_pages": self.removed_pages,
            "changed_pages": list(self.changed_pages),
            "note": self.note,
        }


def summarize_pages(base_texts: Sequence[str], target_texts: Sequence[str]) -> CompareSummary:
    """Flag the 1-based page numbers whose texts differ.

    Pages present on only one side compare against an empty string and are
    therefore always reported as changed.
    """

    if not base_texts:
        return CompareSummary.empty(NOTE_NO_BASE)

    max_pages = max(len(base_texts), len(target_texts))
    changed: List[int] = []
    for index in range(max_pages):
        base_text = base_texts[index] if index < len(base_texts) else ""
        target_text = target_texts[index] if index < len(target_texts) else ""
        if base_text != target_text:
            changed.append(index + 1)

    added = max(len(target_texts) - len(base_texts), 0)
    removed = max(len(base_texts) - len(target_texts), 0)
    summary = CompareSummary(
        added_pages=added,
        removed_pages=removed,
        changed_pages=changed,
        note=NOTE_TEXT_ONLY if changed or added or removed else NOTE_NO_DIFFERENCES,
    )
    logger.debug(
        "summary: %d changed, %d added, %d removed", len(changed), added, removed
    )
    return summary
