from __future__ import annotations

from datetime import datetime

from app.adapters import row_to_report_item
from core.dtos import ReportItemDTO
from core.enums import ItemKind

from .base import BaseRepo, to_timestamp


class ReportsRepo(BaseRepo):
    def items_updated_since(self, since: datetime) -> list[ReportItemDTO]:
        """
        Parts then products whose last_updated is at or after ``since``.
        Columns: id, name, stock, last_updated
        """
        stamp = to_timestamp(since)
        parts = self._all(
            """
            SELECT id, name, stock, last_updated
            FROM parts
            WHERE last_updated >= ?
            ORDER BY id
            """,
            [stamp],
        )
        products = self._all(
            """
            SELECT id, name, stock, last_updated
            FROM products
            WHERE last_updated >= ?
            ORDER BY id
            """,
            [stamp],
        )
        return [row_to_report_item(r, ItemKind.PART) for r in parts] + [
            row_to_report_item(r, ItemKind.PRODUCT) for r in products
        ]

    def stock_levels(self, kind: ItemKind) -> list[ReportItemDTO]:
        """All parts or all products with their stock, ordered by id."""
        table = "parts" if kind is ItemKind.PART else "products"
        rows = self._all(f"SELECT id, name, stock, last_updated FROM {table} ORDER BY id")
        return [row_to_report_item(r, kind) for r in rows]
