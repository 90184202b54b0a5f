import logging
from datetime import UTC, datetime

import pytest

from app import adapters as adapters_mod
from core.dtos import InHousePartDTO, OutsourcedPartDTO
from core.enums import ItemKind, PartKind


def _row(**overrides):
    row = {
        "id": 5,
        "name": "Gear",
        "price": 2.5,
        "stock": 4,
        "min": 1,
        "max": 10,
        "machine_id": None,
        "company_name": None,
    }
    row.update(overrides)
    return row


@pytest.mark.parametrize(
    "machine_id,company_name,expected",
    [
        (7, None, PartKind.IN_HOUSE),
        (7, "ACME", PartKind.IN_HOUSE),  # machine id wins
        (None, "ACME", PartKind.OUTSOURCED),
        (0, "ACME", PartKind.OUTSOURCED),  # zero is not a machine id
        (None, None, PartKind.INDETERMINATE),
        (0, None, PartKind.INDETERMINATE),
        (None, "", PartKind.INDETERMINATE),
        (None, "   ", PartKind.INDETERMINATE),
        (0, "  ", PartKind.INDETERMINATE),
    ],
)
def test_discriminate_part(machine_id, company_name, expected):
    row = _row(machine_id=machine_id, company_name=company_name)
    assert adapters_mod.discriminate_part(row) is expected


def test_discriminate_part_tolerates_missing_columns():
    assert adapters_mod.discriminate_part({"id": 1}) is PartKind.INDETERMINATE


def test_row_to_part_in_house():
    part = adapters_mod.row_to_part(_row(machine_id=7))
    assert isinstance(part, InHousePartDTO)
    assert (part.id, part.name, part.machine_id) == (5, "Gear", 7)


def test_row_to_part_outsourced():
    part = adapters_mod.row_to_part(_row(company_name="ACME"))
    assert isinstance(part, OutsourcedPartDTO)
    assert part.company_name == "ACME"
    assert part.price == 2.5


def test_row_to_part_indeterminate_is_logged_and_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="app.adapters"):
        assert adapters_mod.row_to_part(_row()) is None
    assert "Part 5" in caplog.text


def test_part_columns_null_the_other_variant():
    ih = InHousePartDTO(name="G", price=1.0, stock=1, min=0, max=1, machine_id=3)
    out = OutsourcedPartDTO(name="G", price=1.0, stock=1, min=0, max=1, company_name="Z")
    assert adapters_mod.part_columns(ih) == (3, None)
    assert adapters_mod.part_columns(out) == (None, "Z")


def test_row_to_product_defaults_to_empty_parts():
    product = adapters_mod.row_to_product({"id": 2, "name": "Kit", "price": 9.0, "stock": 1, "min": 0, "max": 3})
    assert product.associated_parts == []


def test_row_to_report_item_parses_iso_timestamp():
    item = adapters_mod.row_to_report_item(
        {"id": 1, "name": "Gear", "stock": 3, "last_updated": "2026-10-18T12:00:00+00:00"},
        ItemKind.PART,
    )
    assert item.last_updated == datetime(2026, 10, 18, 12, 0, tzinfo=UTC)
    assert item.kind is ItemKind.PART


def test_rows_to_helper():
    rows = [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]
    assert adapters_mod.rows_to(lambda r: (r["id"], r["name"]), rows) == [(1, "A"), (2, "B")]
