"""
Write an HTML report of parts and products updated in the configured window
(``APP_REPORT_WINDOW_DAYS``, default 7) to ``settings.reports_dir``.

Usage:

    PYTHONPATH=src python3 -m scripts.weekly_report
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from app.di import report_service_for_conn
from app.logging_config import configure_logging
from app.reports import write_report
from app.settings import get_settings
from infra.db.conn import get_conn

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    now = datetime.now(UTC)
    conn = get_conn(settings.db_path)
    try:
        service = report_service_for_conn(conn)
        items = service.updated_last_window(now)
    finally:
        conn.close()

    html = service.render_html(items, now)
    path = write_report(settings.reports_dir / f"updated_{now:%Y%m%d}.html", html)
    logger.info("Wrote %d item(s) to %s", len(items), path)


if __name__ == "__main__":
    main()
