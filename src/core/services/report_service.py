from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from typing import Protocol

from core.dtos import ReportItemDTO
from core.enums import ItemKind


class ReportsRepo(Protocol):
    def items_updated_since(self, since: datetime) -> list[ReportItemDTO]: ...
    def stock_levels(self, kind: ItemKind) -> list[ReportItemDTO]: ...


class ReportService:
    """
    Read-only reports: recently updated items and per-kind stock levels.

    HTML output goes through an injected renderer so this layer stays free of
    templating.
    """

    def __init__(
        self,
        reports: ReportsRepo,
        *,
        window_days: int = 7,
        renderer: Callable[..., str] | None = None,
    ) -> None:
        self._reports = reports
        self._renderer = renderer
        self.window_days = window_days
        self.window = timedelta(days=window_days)

    def updated_last_window(self, now: datetime) -> list[ReportItemDTO]:
        return self._reports.items_updated_since(now - self.window)

    def part_stock(self) -> list[ReportItemDTO]:
        return self._reports.stock_levels(ItemKind.PART)

    def product_stock(self) -> list[ReportItemDTO]:
        return self._reports.stock_levels(ItemKind.PRODUCT)

    def render_html(self, items: Sequence[ReportItemDTO], generated_at: datetime) -> str:
        if self._renderer is None:
            raise RuntimeError("ReportService was built without a renderer")
        title = f"Items updated in the last {self.window_days} day(s)"
        return self._renderer(title, items, generated_at=generated_at)
