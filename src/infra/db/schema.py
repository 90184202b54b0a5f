"""
SQLite schema for the parts/products inventory.

parts
    id INTEGER PRIMARY KEY          – assigned on insert
    name, price, stock, min, max
    machine_id   INTEGER            – in-house parts only
    company_name TEXT               – outsourced parts only
    create_date, created_by, last_updated, last_updated_by

products
    id INTEGER PRIMARY KEY
    name, price, stock, min, max
    create_date, created_by, last_updated, last_updated_by

product_parts
    id INTEGER PRIMARY KEY          – surrogate; picks which duplicate to drop
    product_id INTEGER REFERENCES products(id)
    part_id    INTEGER REFERENCES parts(id)
    (no uniqueness: a product may list the same part several times)

users
    user_id INTEGER PRIMARY KEY
    user_name TEXT UNIQUE, password TEXT

Timestamps are UTC ISO-8601 strings.
"""

from __future__ import annotations

import sqlite3

SCHEMA_SQL = """
PRAGMA foreign_keys = ON;

CREATE TABLE IF NOT EXISTS users(
    user_id   INTEGER PRIMARY KEY,
    user_name TEXT NOT NULL UNIQUE,
    password  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS parts(
    id              INTEGER PRIMARY KEY,
    name            TEXT    NOT NULL,
    price           REAL    NOT NULL,
    stock           INTEGER NOT NULL,
    min             INTEGER NOT NULL,
    max             INTEGER NOT NULL,
    machine_id      INTEGER,
    company_name    TEXT,
    create_date     TEXT,
    created_by      INTEGER,
    last_updated    TEXT,
    last_updated_by INTEGER
);

CREATE TABLE IF NOT EXISTS products(
    id              INTEGER PRIMARY KEY,
    name            TEXT    NOT NULL,
    price           REAL    NOT NULL,
    stock           INTEGER NOT NULL,
    min             INTEGER NOT NULL,
    max             INTEGER NOT NULL,
    create_date     TEXT,
    created_by      INTEGER,
    last_updated    TEXT,
    last_updated_by INTEGER
);

CREATE TABLE IF NOT EXISTS product_parts(
    id         INTEGER PRIMARY KEY,
    product_id INTEGER NOT NULL REFERENCES products(id),
    part_id    INTEGER NOT NULL REFERENCES parts(id)
);

CREATE INDEX IF NOT EXISTS idx_product_parts_product ON product_parts(product_id);
CREATE INDEX IF NOT EXISTS idx_product_parts_part    ON product_parts(part_id);
CREATE INDEX IF NOT EXISTS idx_parts_updated         ON parts(last_updated);
CREATE INDEX IF NOT EXISTS idx_products_updated      ON products(last_updated);
"""


def init_db(conn: sqlite3.Connection) -> None:
    """Create all tables if they don't already exist."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()


if __name__ == "__main__":
    from app.logging_config import configure_logging
    from app.settings import get_settings
    from infra.db.conn import get_conn

    settings = get_settings()
    configure_logging(settings)
    with get_conn(settings.db_path) as conn:
        init_db(conn)
    print(f"Database schema created at {settings.db_path}.")
