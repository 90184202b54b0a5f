"""
Populate the SQLite database with sample parts and products.

It writes to the configured SQLite database (see `app.settings`). Re-running
adds another copy of every sample record.

Usage:

    PYTHONPATH=src python3 -m scripts.sample_data [user_id]
"""

from __future__ import annotations

import sys

from app.di import inventory_service_for_conn
from app.logging_config import configure_logging
from app.settings import get_settings
from core.dtos import InHousePartDTO, OutsourcedPartDTO, ProductDTO, SessionContext
from infra.db.conn import get_conn
from infra.db.schema import init_db

SETTINGS = get_settings()


def main(user_id: int = 1) -> None:
    configure_logging(SETTINGS)
    ctx = SessionContext.now(user_id)
    conn = get_conn(SETTINGS.db_path)
    try:
        init_db(conn)
        service = inventory_service_for_conn(conn)

        bolt = service.add_part(
            InHousePartDTO(name="Hex Bolt M6", price=0.25, stock=200, min=50, max=500, machine_id=12),
            ctx=ctx,
        )
        bracket = service.add_part(
            InHousePartDTO(name="Steel Bracket", price=3.10, stock=40, min=10, max=100, machine_id=7),
            ctx=ctx,
        )
        motor = service.add_part(
            OutsourcedPartDTO(
                name="DC Motor 12V", price=18.50, stock=12, min=5, max=30, company_name="Voltline"
            ),
            ctx=ctx,
        )

        service.add_product(
            ProductDTO(
                name="Widget Kit",
                price=49.99,
                stock=5,
                min=1,
                max=20,
                associated_parts=[bolt, bolt, bracket],
            ),
            ctx=ctx,
        )
        service.add_product(
            ProductDTO(
                name="Fan Assembly",
                price=89.00,
                stock=3,
                min=1,
                max=10,
                associated_parts=[motor, bracket, bolt, bolt, bolt, bolt],
            ),
            ctx=ctx,
        )
    finally:
        conn.close()

    print("Sample data inserted.")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
