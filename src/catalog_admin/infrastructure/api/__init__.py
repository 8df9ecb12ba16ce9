# 🌐 catalog_admin/infrastructure/api/__init__.py
"""🌐 HTTP-шлюз до ресурсного сховища колекцій."""

from .catalog_api import PRODUCTS_COLLECTION, STORE_INFO_COLLECTION, CatalogApi
from .request_executor import DEFAULT_BASE_URL, RequestExecutor, RequestOutcome, RequestState

__all__ = [
    "CatalogApi",
    "DEFAULT_BASE_URL",
    "PRODUCTS_COLLECTION",
    "STORE_INFO_COLLECTION",
    "RequestExecutor",
    "RequestOutcome",
    "RequestState",
]
