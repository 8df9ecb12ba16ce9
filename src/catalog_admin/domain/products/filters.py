# 🔎 catalog_admin/domain/products/filters.py
"""
🔎 Чисті функції фільтрації знімка товарів.

🔹 Предикат: логічне AND незалежних клаузул (текст, категорія, ціна, featured).
🔹 Фільтр стабільний: відносний порядок знімка зберігається, пересортування немає.
🔹 Клауза ціни активна завжди; `min_price > max_price` просто дає порожній результат.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, replace                          # 🧱 Value-object критеріїв
from decimal import Decimal                                         # 💰 Межі ціни
from typing import Any, FrozenSet, Iterable, Tuple                  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.errors import ValidationError
from .entities import Product, to_bool, to_decimal

DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("1000")


@dataclass(frozen=True)
class FilterCriteria:
    """🎛️ Критерії перегляду; живуть лише в межах сесії перегляду."""

    query: str = ""
    category: str = ""
    min_price: Decimal = DEFAULT_MIN_PRICE
    max_price: Decimal = DEFAULT_MAX_PRICE
    featured_only: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_price", to_decimal(self.min_price, "min_price"))
        object.__setattr__(self, "max_price", to_decimal(self.max_price, "max_price"))
        object.__setattr__(self, "query", "" if self.query is None else str(self.query))
        object.__setattr__(self, "category", "" if self.category is None else str(self.category))
        object.__setattr__(self, "featured_only", to_bool(self.featured_only, "featured_only"))

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        unknown = set(changes) - {"query", "category", "min_price", "max_price", "featured_only"}
        if unknown:
            name = sorted(unknown)[0]
            raise ValidationError(name, f"{name} is not a filter field")
        return replace(self, **changes)

    # ================================
    # 🧩 КЛАУЗУЛИ
    # ================================
    def matches_text(self, product: Product) -> bool:
        if not self.query:
            return True
        needle = self.query.lower()
        return needle in product.name.lower() or needle in product.description.lower()

    def matches_category(self, product: Product) -> bool:
        return not self.category or product.category == self.category

    def matches_price(self, product: Product) -> bool:
        return self.min_price <= product.price <= self.max_price

    def matches_featured(self, product: Product) -> bool:
        return not self.featured_only or product.featured

    def matches(self, product: Product) -> bool:
        return (
            self.matches_text(product)
            and self.matches_category(product)
            and self.matches_price(product)
            and self.matches_featured(product)
        )


def apply_filters(snapshot: Iterable[Product], criteria: FilterCriteria) -> Tuple[Product, ...]:
    """Повертає підпослідовність знімка, що задовольняє критерії (порядок збережено)."""
    return tuple(product for product in snapshot if criteria.matches(product))


def derive_categories(snapshot: Iterable[Product]) -> FrozenSet[str]:
    """Множина різних категорій у знімку (дублікати схлопуються)."""
    return frozenset(product.category for product in snapshot)


__all__ = [
    "DEFAULT_MAX_PRICE",
    "DEFAULT_MIN_PRICE",
    "FilterCriteria",
    "apply_filters",
    "derive_categories",
]
