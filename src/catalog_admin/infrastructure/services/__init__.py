"""🗂️ Сервіси поверх HTTP-шлюзу."""

from .product_catalog_service import ProductCatalogService

__all__ = ["ProductCatalogService"]
