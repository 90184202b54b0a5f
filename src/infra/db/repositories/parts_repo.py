from __future__ import annotations

import logging

from app.adapters import part_columns, row_to_part, rows_to
from core.dtos import PartDTO, SessionContext
from core.errors import IndeterminateVariantError, NotFoundError, PolicyViolationError
from infra.db.session import transaction

from .base import BaseRepo, name_filter, to_timestamp

logger = logging.getLogger(__name__)


class PartsRepo(BaseRepo):
    def add(self, part: PartDTO, ctx: SessionContext) -> int:
        """Insert a part and return its newly assigned id."""
        machine_id, company_name = part_columns(part)
        stamp = to_timestamp(ctx.at)
        with transaction(self.conn):
            _, part_id = self._write(
                """
                INSERT INTO parts (name, price, stock, min, max, machine_id, company_name,
                                   create_date, created_by, last_updated, last_updated_by)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    part.name,
                    part.price,
                    part.stock,
                    part.min,
                    part.max,
                    machine_id,
                    company_name,
                    stamp,
                    ctx.user_id,
                    stamp,
                    ctx.user_id,
                ],
            )
        logger.info("Added %s part %s (%s)", part.kind, part_id, part.name)
        return int(part_id)

    def _row(self, part_id: int) -> dict | None:
        return self._one(
            """
            SELECT id, name, price, stock, min, max, machine_id, company_name
            FROM parts
            WHERE id = ?
            """,
            [part_id],
        )

    def get(self, part_id: int) -> PartDTO | None:
        row = self._row(part_id)
        if not row:
            return None
        return row_to_part(row)

    def require(self, part_id: int) -> PartDTO:
        """Like get(), but tell "absent" apart from "unreadable variant"."""
        row = self._row(part_id)
        if not row:
            raise NotFoundError("Part", part_id)
        part = row_to_part(row)
        if part is None:
            raise IndeterminateVariantError(part_id)
        return part

    def find_by_name_contains(self, fragment: str, case_insensitive: bool = True) -> list[PartDTO]:
        clause, params = name_filter(fragment, case_insensitive)
        rows = self._all(
            f"""
            SELECT id, name, price, stock, min, max, machine_id, company_name
            FROM parts
            WHERE {clause}
            ORDER BY id
            """,
            params,
        )
        return [p for p in rows_to(row_to_part, rows) if p is not None]

    def update(self, part: PartDTO, ctx: SessionContext) -> bool:
        """Replace every field of the part with this id.

        Both variant columns are written, so switching variant clears the other.
        """
        machine_id, company_name = part_columns(part)
        with transaction(self.conn):
            count, _ = self._write(
                """
                UPDATE parts
                SET name = ?, price = ?, stock = ?, min = ?, max = ?,
                    machine_id = ?, company_name = ?,
                    last_updated = ?, last_updated_by = ?
                WHERE id = ?
                """,
                [
                    part.name,
                    part.price,
                    part.stock,
                    part.min,
                    part.max,
                    machine_id,
                    company_name,
                    to_timestamp(ctx.at),
                    ctx.user_id,
                    part.id,
                ],
            )
        return count > 0

    def products_referencing(self, part_id: int) -> list[int]:
        """Ids of products whose association multiset contains this part."""
        rows = self._all(
            """
            SELECT DISTINCT product_id
            FROM product_parts
            WHERE part_id = ?
            ORDER BY product_id
            """,
            [part_id],
        )
        return [int(r["product_id"]) for r in rows]

    def delete(self, part_id: int) -> bool:
        with transaction(self.conn):
            referencing = self.products_referencing(part_id)
            if referencing:
                logger.warning("Refusing to delete part %s; used by products %s", part_id, referencing)
                raise PolicyViolationError(
                    f"Part {part_id} is associated with product(s) {referencing}; remove it there first."
                )
            count, _ = self._write("DELETE FROM parts WHERE id = ?", [part_id])
        return count > 0

    def list_all(self) -> list[PartDTO]:
        ids = [r["id"] for r in self._all("SELECT id FROM parts ORDER BY id")]
        return [p for p in (self.get(i) for i in ids) if p is not None]
