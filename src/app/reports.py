"""HTML rendering of inventory reports (Jinja templates in src/app/templates)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.dtos import ReportItemDTO

_TEMPLATE_DIR = (Path(__file__).resolve().parent / "templates").resolve()

_jinja_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    enable_async=False,
)


def _fmt_ts(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else ""


_jinja_env.filters["ts"] = _fmt_ts


def render_report(
    title: str, items: Sequence[ReportItemDTO], *, generated_at: datetime
) -> str:
    tmpl = _jinja_env.get_template("report.html")
    return tmpl.render(title=title, items=items, generated_at=generated_at)


def write_report(path: Path, html: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
