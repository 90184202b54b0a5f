from datetime import UTC, datetime

import pytest
from pydantic import TypeAdapter, ValidationError

from core import dtos as dtos_mod
from core.dtos import InHousePartDTO, OutsourcedPartDTO, ProductDTO, SessionContext
from core.enums import ItemKind

_PART_ADAPTER = TypeAdapter(dtos_mod.PartDTO)


def test_part_union_picks_variant_from_kind():
    ih = _PART_ADAPTER.validate_python(
        {"kind": "in_house", "name": "Gear", "price": 2.5, "stock": 3, "min": 1, "max": 9, "machine_id": 4}
    )
    out = _PART_ADAPTER.validate_python(
        {"kind": "outsourced", "name": "Cog", "price": 1, "stock": 3, "min": 1, "max": 9, "company_name": "ACME"}
    )
    assert isinstance(ih, InHousePartDTO)
    assert isinstance(out, OutsourcedPartDTO)
    assert out.price == 1.0


def test_part_union_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        _PART_ADAPTER.validate_python(
            {"kind": "borrowed", "name": "X", "price": 1.0, "stock": 1, "min": 0, "max": 1}
        )


def test_new_parts_start_unassigned():
    part = InHousePartDTO(name="Gear", price=1.0, stock=1, min=0, max=2, machine_id=3)
    assert part.id == 0
    assert part.kind == "in_house"


def test_parts_are_equal_by_id_only():
    a = InHousePartDTO(id=3, name="Gear", price=1.0, stock=1, min=0, max=2, machine_id=3)
    b = OutsourcedPartDTO(id=3, name="Other", price=9.0, stock=2, min=0, max=5, company_name="Z")
    c = InHousePartDTO(id=4, name="Gear", price=1.0, stock=1, min=0, max=2, machine_id=3)
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_name_whitespace_is_stripped():
    part = OutsourcedPartDTO(name="  Cog  ", price=1.0, stock=1, min=0, max=2, company_name=" ACME ")
    assert part.name == "Cog"
    assert part.company_name == "ACME"


@pytest.mark.parametrize("value", [None, []])
def test_product_associated_parts_never_none(value):
    product = ProductDTO(name="Kit", price=5.0, stock=1, min=0, max=3, associated_parts=value)
    assert product.associated_parts == []


def test_product_defaults_to_empty_associations():
    assert ProductDTO(name="Kit", price=5.0, stock=1, min=0, max=3).associated_parts == []


def test_product_keeps_duplicate_parts():
    part = InHousePartDTO(id=1, name="Gear", price=1.0, stock=1, min=0, max=2, machine_id=3)
    product = ProductDTO(name="Kit", price=5.0, stock=1, min=0, max=3, associated_parts=[part, part])
    assert len(product.associated_parts) == 2


def test_session_context_now_is_utc():
    ctx = SessionContext.now(7)
    assert ctx.user_id == 7
    assert ctx.at.tzinfo is not None
    assert ctx.at.utcoffset().total_seconds() == 0


def test_report_item_kind():
    item = dtos_mod.ReportItemDTO(
        id=1, name="Gear", kind=ItemKind.PART, stock=3, last_updated=datetime(2026, 1, 1, tzinfo=UTC)
    )
    assert item.kind.value == "Part"


def test_in_house_part_rejects_zero_machine_id():
    with pytest.raises(ValidationError):
        InHousePartDTO(name="Gear", price=1.0, stock=1, min=0, max=2, machine_id=0)


@pytest.mark.parametrize("company_name", ["", "   "])
def test_outsourced_part_rejects_blank_company(company_name):
    with pytest.raises(ValidationError):
        OutsourcedPartDTO(name="Cog", price=1.0, stock=1, min=0, max=2, company_name=company_name)
