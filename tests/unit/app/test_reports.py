from datetime import UTC, datetime

from app.reports import render_report, write_report
from core.dtos import ReportItemDTO
from core.enums import ItemKind

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


def test_render_report_lists_items():
    items = [
        ReportItemDTO(id=1, name="Gear <small>", kind=ItemKind.PART, stock=3, last_updated=NOW),
        ReportItemDTO(id=2, name="Widget Kit", kind=ItemKind.PRODUCT, stock=1, last_updated=None),
    ]
    html = render_report("Recently updated", items, generated_at=NOW)
    assert "<h1>Recently updated</h1>" in html
    assert "Gear &lt;small&gt;" in html
    assert "<td>Product</td>" in html
    assert "2026-10-18 12:00" in html


def test_render_report_empty():
    html = render_report("Recently updated", [], generated_at=NOW)
    assert "Nothing to report." in html


def test_write_report_creates_parent(tmp_path):
    path = write_report(tmp_path / "reports" / "r.html", "<p>x</p>")
    assert path.read_text(encoding="utf-8") == "<p>x</p>"
