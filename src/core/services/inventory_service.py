from __future__ import annotations

from typing import Protocol

from core.dtos import PartDTO, ProductDTO, SessionContext
from core.errors import NotFoundError
from core.services.association_reconciler import LinkDiff


# Keep repos abstract to avoid tight coupling
class PartsRepo(Protocol):
    def add(self, part: PartDTO, ctx: SessionContext) -> int: ...
    def get(self, part_id: int) -> PartDTO | None: ...
    def require(self, part_id: int) -> PartDTO: ...
    def find_by_name_contains(self, fragment: str, case_insensitive: bool = True) -> list[PartDTO]: ...
    def update(self, part: PartDTO, ctx: SessionContext) -> bool: ...
    def delete(self, part_id: int) -> bool: ...
    def list_all(self) -> list[PartDTO]: ...
    def products_referencing(self, part_id: int) -> list[int]: ...


class ProductsRepo(Protocol):
    def add(self, product: ProductDTO, ctx: SessionContext) -> int: ...
    def get(self, product_id: int) -> ProductDTO | None: ...
    def find_by_name_contains(
        self, fragment: str, case_insensitive: bool = True
    ) -> list[ProductDTO]: ...
    def update(self, product: ProductDTO, ctx: SessionContext) -> LinkDiff: ...
    def delete(self, product_id: int) -> bool: ...
    def list_all(self) -> list[ProductDTO]: ...
    def products_for_part(self, part_id: int) -> list[ProductDTO]: ...


class InventoryService:
    """
    Entry point for the form layer: it hands over validated payloads and the
    session context, and reads back current state.
    """

    def __init__(self, parts: PartsRepo, products: ProductsRepo) -> None:
        self._parts = parts
        self._products = products

    # Parts
    def add_part(self, part: PartDTO, *, ctx: SessionContext) -> PartDTO:
        part_id = self._parts.add(part, ctx)
        return self._parts.require(part_id)

    def get_part(self, part_id: int) -> PartDTO:
        return self._parts.require(part_id)

    def search_parts(self, text: str) -> list[PartDTO]:
        return self._parts.find_by_name_contains(text)

    def list_parts(self) -> list[PartDTO]:
        return self._parts.list_all()

    def update_part(self, part: PartDTO, *, ctx: SessionContext) -> PartDTO:
        if not self._parts.update(part, ctx):
            raise NotFoundError("Part", part.id)
        return self._parts.require(part.id)

    def delete_part(self, part_id: int) -> bool:
        return self._parts.delete(part_id)

    def products_using_part(self, part_id: int) -> list[ProductDTO]:
        return self._products.products_for_part(part_id)

    # Products
    def add_product(self, product: ProductDTO, *, ctx: SessionContext) -> ProductDTO:
        product_id = self._products.add(product, ctx)
        return self.get_product(product_id)

    def get_product(self, product_id: int) -> ProductDTO:
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def search_products(self, text: str) -> list[ProductDTO]:
        return self._products.find_by_name_contains(text)

    def list_products(self) -> list[ProductDTO]:
        return self._products.list_all()

    def update_product(self, product: ProductDTO, *, ctx: SessionContext) -> LinkDiff:
        return self._products.update(product, ctx)

    def delete_product(self, product_id: int) -> bool:
        return self._products.delete(product_id)
