import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime

from core.dtos import InHousePartDTO, OutsourcedPartDTO, PartDTO, ProductDTO, ReportItemDTO
from core.enums import ItemKind, PartKind

logger = logging.getLogger(__name__)


def _get(row: Mapping, key: str, default=None):
    # sqlite3.Row has no .get()
    try:
        value = row[key]
    except (KeyError, IndexError):
        return default
    return default if value is None else value


def discriminate_part(row: Mapping) -> PartKind:
    """Decide which part variant a flat ``parts`` row represents.

    A present, non-zero machine_id wins; otherwise a non-blank company_name
    marks the row outsourced. Anything else is indeterminate.
    """
    machine_id = _get(row, "machine_id")
    if machine_id is not None and int(machine_id) != 0:
        return PartKind.IN_HOUSE
    company_name = _get(row, "company_name")
    if company_name is not None and str(company_name).strip():
        return PartKind.OUTSOURCED
    return PartKind.INDETERMINATE


def part_columns(part: PartDTO) -> tuple[int | None, str | None]:
    """Return ``(machine_id, company_name)`` with the other variant's column nulled."""
    if isinstance(part, InHousePartDTO):
        return part.machine_id, None
    return None, part.company_name


def row_to_part(row: Mapping) -> PartDTO | None:
    kind = discriminate_part(row)
    common = dict(
        id=int(_get(row, "id", 0)),
        name=_get(row, "name", ""),
        price=float(_get(row, "price", 0.0)),
        stock=int(_get(row, "stock", 0)),
        min=int(_get(row, "min", 0)),
        max=int(_get(row, "max", 0)),
    )
    if kind is PartKind.IN_HOUSE:
        return InHousePartDTO(machine_id=int(row["machine_id"]), **common)
    if kind is PartKind.OUTSOURCED:
        return OutsourcedPartDTO(company_name=str(row["company_name"]), **common)
    logger.warning("Part %s has neither machine_id nor company_name; skipping", common["id"])
    return None


def row_to_product(row: Mapping, associated_parts: Sequence[PartDTO] | None = None) -> ProductDTO:
    return ProductDTO(
        id=int(_get(row, "id", 0)),
        name=_get(row, "name", ""),
        price=float(_get(row, "price", 0.0)),
        stock=int(_get(row, "stock", 0)),
        min=int(_get(row, "min", 0)),
        max=int(_get(row, "max", 0)),
        associated_parts=list(associated_parts or []),
    )


def row_to_report_item(row: Mapping, kind: ItemKind) -> ReportItemDTO:
    last_updated = _get(row, "last_updated")
    if isinstance(last_updated, str):
        last_updated = datetime.fromisoformat(last_updated)
    return ReportItemDTO(
        id=int(_get(row, "id", 0)),
        name=_get(row, "name", ""),
        kind=kind,
        stock=int(_get(row, "stock", 0)),
        last_updated=last_updated,
    )


def rows_to(dto_fn: Callable[[Mapping], object], rows: Iterable[Mapping]) -> list[object]:
    return [dto_fn(row) for row in rows]
