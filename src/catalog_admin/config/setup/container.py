# 📦 catalog_admin/config/setup/container.py
"""
📦 Контейнер залежностей адмін-клієнта каталогу.

🔹 Створює сервіси в правильному порядку DI: виконавець → API-фасад → сервіс каталогу.
🔹 Читає всі параметри з `ConfigService`-подібного обʼєкта (`.get(key, default)`).
🔹 Володіє HTTP-клієнтом виконавця і закриває його в `close()`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                             # 🌐 Опційний транспорт (тести)

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import Any, Optional                                         # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from catalog_admin.domain.products import FilterCriteria
from catalog_admin.domain.products.services.dashboard_stats import (
    FEATURED_PREVIEW_LIMIT,
    LOW_STOCK_THRESHOLD,
)
from catalog_admin.infrastructure.api import (
    PRODUCTS_COLLECTION,
    STORE_INFO_COLLECTION,
    CatalogApi,
    RequestExecutor,
)
from catalog_admin.infrastructure.services import ProductCatalogService
from catalog_admin.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(LOG_NAME)


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """Повертає ціле число або запасне значення, якщо каст неможливий."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def bootstrap_logging(config: Any) -> logging.Logger:
    """Зчитує вузол `logging` і запускає кореневий логер."""
    node = config.get("logging", {}) or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """Координує ініціалізацію виконавця запитів і сервісу каталогу."""

    def __init__(self, config: Any, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        logger.debug("🚀 Стартуємо побудову контейнера залежностей")
        self.executor = RequestExecutor.from_config(config, transport=transport)
        self.api = CatalogApi(
            self.executor,
            products_collection=str(config.get("collections.products", PRODUCTS_COLLECTION)),
            store_info_collection=str(config.get("collections.store_info", STORE_INFO_COLLECTION)),
        )
        self.catalog = ProductCatalogService(
            self.api,
            criteria=self._default_criteria(),
            low_stock_threshold=_int_or_default(
                config.get("catalog.low_stock_threshold", None), LOW_STOCK_THRESHOLD
            ),
            featured_limit=_int_or_default(
                config.get("catalog.featured_preview", None), FEATURED_PREVIEW_LIMIT
            ),
        )
        logger.debug("✅ Контейнер готовий")

    def _default_criteria(self) -> FilterCriteria:
        defaults = FilterCriteria()
        min_price = self.config.get("catalog.default_filters.min_price", None)
        max_price = self.config.get("catalog.default_filters.max_price", None)
        return FilterCriteria(
            min_price=defaults.min_price if min_price is None else min_price,
            max_price=defaults.max_price if max_price is None else max_price,
        )

    async def close(self) -> None:
        await self.executor.close()

    async def __aenter__(self) -> "Container":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


__all__ = ["Container", "bootstrap_logging"]
