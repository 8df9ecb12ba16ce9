# 🛒 catalog_admin/__init__.py
"""
🛒 catalog_admin: клієнт синхронізації даних і рушій запитів для адмін-панелі каталогу.

🔹 `RequestExecutor`: HTTP-шлюз до ресурсного сховища зі спільним станом loading/error.
🔹 `ProductCatalogService`: локальний знімок, фільтрація та сесія редагування.
"""

from catalog_admin.errors import CatalogError, ErrorKind, ProtocolError, TransportError, ValidationError
from catalog_admin.infrastructure.api import CatalogApi, RequestExecutor, RequestOutcome, RequestState
from catalog_admin.infrastructure.services import ProductCatalogService

__version__ = "0.1.0"

__all__ = [
    "CatalogApi",
    "CatalogError",
    "ErrorKind",
    "ProductCatalogService",
    "ProtocolError",
    "RequestExecutor",
    "RequestOutcome",
    "RequestState",
    "TransportError",
    "ValidationError",
]
