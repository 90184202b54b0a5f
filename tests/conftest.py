import os
import sys
import tempfile
from datetime import UTC, datetime

import pytest

# Ensure 'src/' is on sys.path for imports like 'from core import dtos'
_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC_PATH = os.path.join(_REPO_ROOT, "src")
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from core.dtos import InHousePartDTO, OutsourcedPartDTO, SessionContext  # noqa: E402
from infra.db.conn import get_conn  # noqa: E402
from infra.db.schema import init_db  # noqa: E402

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


# --- SQLite test DB fixtures ---


@pytest.fixture()
def temp_db_path():
    fd, path = tempfile.mkstemp(prefix="inventory_", suffix=".db")
    os.close(fd)
    try:
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass


@pytest.fixture()
def conn_rw(temp_db_path):
    """Read/write SQLite connection with the full schema and no rows."""
    conn = get_conn(temp_db_path)
    init_db(conn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture()
def ctx():
    return SessionContext(user_id=1, at=FIXED_NOW)


@pytest.fixture()
def in_house_part():
    return InHousePartDTO(name="Test InHouse Part", price=10.50, stock=5, min=1, max=10, machine_id=101)


@pytest.fixture()
def outsourced_part():
    return OutsourcedPartDTO(
        name="Test Outsourced Part", price=20.00, stock=10, min=5, max=20, company_name="TestCo"
    )
