"""JSON report helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .search import SearchHit
from .session import DiffSession


def session_to_dict(session: DiffSession, hits: Optional[Sequence[SearchHit]] = None) -> Dict[str, object]:
    pages = sorted(set(session.base_highlights) | set(session.target_highlights))
    data: Dict[str, object] = {
        "params": session.params.to_dict(),
        "summary": session.summary.to_dict() if session.summary else None,
        "pages": [
            {
                "page": page,
                "base": [rect.to_dict() for rect in session.base_rects_for(page)],
                "target": [rect.to_dict() for rect in session.target_rects_for(page)],
            }
            for page in pages
        ],
    }
    if hits is not None:
        search: List[Dict[str, object]] = [
            {"page": hit.page, "index": hit.index, "context": hit.context} for hit in hits
        ]
        data["search"] = search
    return data


def write_json_report(
    session: DiffSession,
    path: str | Path,
    hits: Optional[Sequence[SearchHit]] = None,
) -> None:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    data = session_to_dict(session, hits)
    with out_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)


def diff_session_to_json(session: DiffSession, hits: Optional[Sequence[SearchHit]] = None) -> str:
    return json.dumps(session_to_dict(session, hits), ensure_ascii=False, indent=2)
