import json

from pagediff import CompareSummary, DiffSession, RunList, TextRun, capture_text_layout
from pagediff.report import diff_session_to_json, write_json_report


def _session():
    session = DiffSession()
    session.set_summary(
        CompareSummary(added_pages=0, removed_pages=0, changed_pages=[1], note="changed"),
        base_page_count=1,
        target_page_count=1,
    )
    box = (0, 0, 100, 100)
    session.store_base_layout(capture_text_layout(1, RunList([TextRun("a b", [(0, 0, 30, 10)])]), box))
    session.store_target_layout(capture_text_layout(1, RunList([TextRun("a c", [(0, 0, 30, 10)])]), box))
    return session


def test_write_json_report(tmp_path):
    out = tmp_path / "nested" / "report.json"
    write_json_report(_session(), out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["note"] == "changed"
    assert data["pages"] == [
        {
            "page": 1,
            "base": [{"left": 20.0, "top": 0.0, "width": 10.0, "height": 10.0}],
            "target": [{"left": 20.0, "top": 0.0, "width": 10.0, "height": 10.0}],
        }
    ]
    assert "search" not in data


def test_empty_session_json():
    data = json.loads(diff_session_to_json(DiffSession()))
    assert data["summary"] is None
    assert data["pages"] == []
