# 📊 catalog_admin/domain/products/services/dashboard_stats.py
"""
📊 Підсумки для головної панелі: кількість товарів, низький залишок, featured-прев'ю.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                   # 🧱 DTO підсумків
from typing import Iterable, Tuple                                  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.domain.products.entities import Product

LOW_STOCK_THRESHOLD = 10                                            # 📉 Менше цього: «мало на складі»
FEATURED_PREVIEW_LIMIT = 3                                          # ⭐ Скільки featured показати


@dataclass(frozen=True)
class DashboardStats:
    total_products: int
    low_stock_count: int
    featured: Tuple[Product, ...]
    category_count: int

    @property
    def featured_count(self) -> int:
        return len(self.featured)


def compute_dashboard_stats(
    snapshot: Iterable[Product],
    *,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    featured_limit: int = FEATURED_PREVIEW_LIMIT,
) -> DashboardStats:
    """Рахує підсумки по знімку; featured беруться в порядку знімка."""
    products = tuple(snapshot)
    featured = tuple(p for p in products if p.featured)[: max(0, featured_limit)]
    return DashboardStats(
        total_products=len(products),
        low_stock_count=sum(1 for p in products if p.stock < low_stock_threshold),
        featured=featured,
        category_count=len({p.category for p in products}),
    )


__all__ = ["DashboardStats", "compute_dashboard_stats", "LOW_STOCK_THRESHOLD", "FEATURED_PREVIEW_LIMIT"]
