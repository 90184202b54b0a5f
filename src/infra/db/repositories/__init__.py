from .parts_repo import PartsRepo
from .product_parts_repo import ProductPartsRepo
from .products_repo import ProductsRepo
from .reports_repo import ReportsRepo

__all__ = ["PartsRepo", "ProductPartsRepo", "ProductsRepo", "ReportsRepo"]
