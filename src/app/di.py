from __future__ import annotations

import sqlite3

from app.reports import render_report
from app.settings import get_settings
from core.services.inventory_service import InventoryService
from core.services.report_service import ReportService
from infra.db.conn import get_conn
from infra.db.repositories import PartsRepo, ProductPartsRepo, ProductsRepo, ReportsRepo

# -----------------------------
# Factories used by the form layer
# -----------------------------


def inventory_service_for_conn(conn: sqlite3.Connection) -> InventoryService:
    parts = PartsRepo(conn)
    products = ProductsRepo(conn, parts=parts, links=ProductPartsRepo(conn))
    return InventoryService(parts=parts, products=products)


def report_service_for_conn(conn: sqlite3.Connection) -> ReportService:
    return ReportService(
        ReportsRepo(conn),
        window_days=get_settings().report_window_days,
        renderer=render_report,
    )


def get_inventory_service() -> InventoryService:
    return inventory_service_for_conn(get_conn())


def get_report_service() -> ReportService:
    return report_service_for_conn(get_conn())
