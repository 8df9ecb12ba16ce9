# 🛒 catalog_admin/infrastructure/api/catalog_api.py
"""
🛒 CatalogApi: іменовані виклики над `RequestExecutor` для колекцій застосунку.

🔹 `products`: товари; `store_info`: колекція, перший елемент якої описує магазин.
🔹 Повертає сирі JSON-записи або результат `decode`, який передає сервіс каталогу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, Mapping, Optional                           # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from .request_executor import Decoder, Record, RequestExecutor

PRODUCTS_COLLECTION = "products"
STORE_INFO_COLLECTION = "store_info"


class CatalogApi:
    """🛒 Тонкий фасад: кожен метод робить рівно один виклик виконавця."""

    def __init__(
        self,
        executor: RequestExecutor,
        *,
        products_collection: str = PRODUCTS_COLLECTION,
        store_info_collection: str = STORE_INFO_COLLECTION,
    ) -> None:
        self.executor = executor
        self.products_collection = products_collection
        self.store_info_collection = store_info_collection

    async def get_products(self, *, decode: Optional[Decoder] = None) -> Any:
        return await self.executor.list(self.products_collection, decode=decode)

    async def get_product(self, product_id: Any, *, decode: Optional[Decoder] = None) -> Any:
        return await self.executor.get(self.products_collection, product_id, decode=decode)

    async def get_store_info(self) -> Optional[Record]:
        """Перший елемент колекції `store_info` або None, якщо вона порожня."""
        records = await self.executor.list(self.store_info_collection)
        return records[0] if records else None

    async def create_product(self, payload: Mapping[str, Any]) -> Record:
        return await self.executor.create(self.products_collection, payload)

    async def update_product(self, product_id: Any, updates: Mapping[str, Any]) -> Record:
        return await self.executor.update(self.products_collection, product_id, updates)

    async def delete_product(self, product_id: Any) -> None:
        await self.executor.remove(self.products_collection, product_id)


__all__ = ["CatalogApi", "PRODUCTS_COLLECTION", "STORE_INFO_COLLECTION"]
