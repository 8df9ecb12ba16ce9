# 📦 catalog_admin/domain/products/__init__.py
"""📦 Товари: сутності, критерії фільтрації, сесія редагування."""

from .edit_session import EditSession, EditState
from .entities import MUTABLE_FIELDS, Product, ProductDraft, ProductId, StoreInfo
from .filters import FilterCriteria, apply_filters, derive_categories

__all__ = [
    "EditSession",
    "EditState",
    "MUTABLE_FIELDS",
    "Product",
    "ProductDraft",
    "ProductId",
    "StoreInfo",
    "FilterCriteria",
    "apply_filters",
    "derive_categories",
]
