# 🚨 catalog_admin/errors/custom_errors.py
"""
🚨 Ієрархія помилок клієнта каталогу.

🔹 `CatalogError`: базовий виняток із тегом `ErrorKind`, за яким викликачі розгалужуються.
🔹 `TransportError`: відповіді не отримано (DNS, відмова з'єднання, обрив).
🔹 `ProtocolError`: відповідь є, але зі статусом поза 2xx.
🔹 `ValidationError`: локальна перевірка полів товару не пройшла.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення помилок
from enum import Enum												# 🏷️ Тег виду помилки
from types import MappingProxyType									# 🧊 Незмінна мапа помилок полів
from typing import Dict, Mapping, Optional							# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.shared.utils.logger import LOG_NAME


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")


# ================================
# 💬 ШАБЛОНИ ПОВІДОМЛЕНЬ
# ================================
PROTOCOL_ERROR_TEMPLATE = "HTTP error! status: {status}"			# 🔢 Фіксований шаблон статусу
TRANSPORT_ERROR_FALLBACK = "An error occurred"						# 🌐 Якщо опис збою порожній


class ErrorKind(str, Enum):
    """🏷️ Вид помилки (тегований варіант)."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    VALIDATION = "validation"


# ================================
# 🧱 БАЗОВИЙ ВИНЯТОК
# ================================
class CatalogError(Exception):
    """🧱 Базова помилка: людиночитне `message` + `kind`."""

    kind: ErrorKind

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message											# 💬 Текст для стану executor-а / UI
        self.details = details											# 🔍 Технічні подробиці для логів

    def __str__(self) -> str:
        return self.message

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        return {"error_kind": self.kind.value, "details": self.details}


# ================================
# 🌐 ТРАНСПОРТ / ПРОТОКОЛ
# ================================
class TransportError(CatalogError):
    """🌐 Відповіді не отримано зовсім."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, details: Optional[str] = None, url: Optional[str] = None) -> None:
        super().__init__(message or TRANSPORT_ERROR_FALLBACK, details=details)
        self.url = url

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["url"] = self.url
        return extra


class ProtocolError(CatalogError):
    """🔢 Сховище відповіло статусом поза 2xx (або зіпсованим тілом)."""

    kind = ErrorKind.PROTOCOL

    def __init__(
        self,
        status_code: int,
        *,
        message: Optional[str] = None,
        details: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message or PROTOCOL_ERROR_TEMPLATE.format(status=status_code), details=details)
        self.status_code = status_code
        self.url = url

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"status_code": self.status_code, "url": self.url})
        return extra


# ================================
# 🧾 ВАЛІДАЦІЯ
# ================================
class ValidationError(CatalogError):
    """
    🧾 Поле товару не пройшло перевірку.

    `field`: перше проблемне поле; `errors`: повна мапа поле → повідомлення.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str, *, errors: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(message)
        self.field = field
        self.errors: Mapping[str, str] = MappingProxyType(dict(errors or {field: message}))
        logger.debug("🧾 ValidationError created", extra={"field": field, "fields": list(self.errors)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["field"] = self.field
        return extra


__all__ = [
    "PROTOCOL_ERROR_TEMPLATE",
    "ErrorKind",
    "CatalogError",
    "TransportError",
    "ProtocolError",
    "ValidationError",
]
