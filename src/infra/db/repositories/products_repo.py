from __future__ import annotations

import logging
import sqlite3

from app.adapters import row_to_product
from core.dtos import PartDTO, ProductDTO, SessionContext
from core.errors import NotFoundError, PolicyViolationError
from core.services.association_reconciler import LinkDiff, diff, ref_id
from infra.db.session import transaction

from .base import BaseRepo, name_filter, to_timestamp
from .parts_repo import PartsRepo
from .product_parts_repo import ProductPartsRepo

logger = logging.getLogger(__name__)


class ProductsRepo(BaseRepo):
    def __init__(
        self,
        conn: sqlite3.Connection,
        parts: PartsRepo | None = None,
        links: ProductPartsRepo | None = None,
    ):
        super().__init__(conn)
        self.parts = parts or PartsRepo(conn)
        self.links = links or ProductPartsRepo(conn)

    def add(self, product: ProductDTO, ctx: SessionContext) -> int:
        """Insert the product row plus one link row per associated part.

        Duplicates in associated_parts are kept as duplicate links. The whole
        sequence is one transaction.
        """
        stamp = to_timestamp(ctx.at)
        with transaction(self.conn):
            _, product_id = self._write(
                """
                INSERT INTO products (name, price, stock, min, max,
                                      create_date, created_by, last_updated, last_updated_by)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    product.name,
                    product.price,
                    product.stock,
                    product.min,
                    product.max,
                    stamp,
                    ctx.user_id,
                    stamp,
                    ctx.user_id,
                ],
            )
            for part in product.associated_parts:
                self.links.add_link(product_id, part.id)
        logger.info(
            "Added product %s (%s) with %d linked part(s)",
            product_id,
            product.name,
            len(product.associated_parts),
        )
        return int(product_id)

    def associated_parts(self, product_id: int) -> list[PartDTO]:
        # Links to unreadable parts are dropped, same as list_all() for parts.
        parts = (self.parts.get(pid) for pid in self.links.part_ids_for(product_id))
        return [p for p in parts if p is not None]

    def get(self, product_id: int) -> ProductDTO | None:
        row = self._one(
            """
            SELECT id, name, price, stock, min, max
            FROM products
            WHERE id = ?
            """,
            [product_id],
        )
        if not row:
            return None
        return row_to_product(row, self.associated_parts(product_id))

    def find_by_name_contains(
        self, fragment: str, case_insensitive: bool = True
    ) -> list[ProductDTO]:
        clause, params = name_filter(fragment, case_insensitive)
        rows = self._all(
            f"""
            SELECT id, name, price, stock, min, max
            FROM products
            WHERE {clause}
            ORDER BY id
            """,
            params,
        )
        return [row_to_product(r, self.associated_parts(r["id"])) for r in rows]

    def update(self, product: ProductDTO, ctx: SessionContext) -> LinkDiff:
        """Replace scalar fields, then reconcile the persisted links against
        ``product.associated_parts``. Removals run before additions, all in
        one transaction. Returns the applied diff; raises NotFoundError when no
        product has this id.
        """
        with transaction(self.conn):
            count, _ = self._write(
                """
                UPDATE products
                SET name = ?, price = ?, stock = ?, min = ?, max = ?,
                    last_updated = ?, last_updated_by = ?
                WHERE id = ?
                """,
                [
                    product.name,
                    product.price,
                    product.stock,
                    product.min,
                    product.max,
                    to_timestamp(ctx.at),
                    ctx.user_id,
                    product.id,
                ],
            )
            if count == 0:
                raise NotFoundError("Product", product.id)
            current = self.links.part_ids_for(product.id)
            plan = diff(current, product.associated_parts)
            for ref in plan.to_remove:
                self.links.remove_link(product.id, ref_id(ref))
            for ref in plan.to_add:
                self.links.add_link(product.id, ref_id(ref))
        if plan.is_empty:
            logger.debug("Product %s links unchanged", product.id)
        else:
            logger.info("Reconciled product %s links: %s", product.id, plan.summary)
        return plan

    def delete(self, product_id: int) -> bool:
        with transaction(self.conn):
            linked = self.links.count_for(product_id)
            if linked:
                logger.warning("Refusing to delete product %s; %d linked part(s)", product_id, linked)
                raise PolicyViolationError(
                    f"Product {product_id} still has {linked} associated part(s); remove them first."
                )
            count, _ = self._write("DELETE FROM products WHERE id = ?", [product_id])
        return count > 0

    def list_all(self) -> list[ProductDTO]:
        ids = [r["id"] for r in self._all("SELECT id FROM products ORDER BY id")]
        return [p for p in (self.get(i) for i in ids) if p is not None]

    def products_for_part(self, part_id: int) -> list[ProductDTO]:
        products = (self.get(pid) for pid in self.parts.products_referencing(part_id))
        return [p for p in products if p is not None]
