# 🚨 catalog_admin/errors/__init__.py
"""🚨 Доменні помилки та стратегії їх конвертації."""

from .custom_errors import (
    PROTOCOL_ERROR_TEMPLATE,
    CatalogError,
    ErrorKind,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .strategies import HttpxErrorStrategy, IErrorHandlingStrategy, convert_error

__all__ = [
    "PROTOCOL_ERROR_TEMPLATE",
    "CatalogError",
    "ErrorKind",
    "ProtocolError",
    "TransportError",
    "ValidationError",
    "HttpxErrorStrategy",
    "IErrorHandlingStrategy",
    "convert_error",
]
