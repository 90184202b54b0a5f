from __future__ import annotations

from .base import BaseRepo


class ProductPartsRepo(BaseRepo):
    """Row-level operations on the product_parts link table.

    None of these commit; callers wrap them in a transaction.
    """

    def part_ids_for(self, product_id: int) -> list[int]:
        rows = self._all(
            """
            SELECT part_id
            FROM product_parts
            WHERE product_id = ?
            ORDER BY id
            """,
            [product_id],
        )
        return [int(r["part_id"]) for r in rows]

    def add_link(self, product_id: int, part_id: int) -> int:
        _, link_id = self._write(
            "INSERT INTO product_parts (product_id, part_id) VALUES (?, ?)",
            [product_id, part_id],
        )
        return int(link_id)

    def remove_link(self, product_id: int, part_id: int) -> bool:
        """Delete one occurrence: the matching row with the lowest id."""
        count, _ = self._write(
            """
            DELETE FROM product_parts
            WHERE id = (
                SELECT MIN(id) FROM product_parts
                WHERE product_id = ? AND part_id = ?
            )
            """,
            [product_id, part_id],
        )
        return count > 0

    def count_for(self, product_id: int) -> int:
        row = self._one(
            "SELECT COUNT(*) AS c FROM product_parts WHERE product_id = ?",
            [product_id],
        )
        return int(row["c"]) if row and row["c"] is not None else 0
