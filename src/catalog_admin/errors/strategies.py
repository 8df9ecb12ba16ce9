# 📜 catalog_admin/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `CatalogError`.

🔹 Виносять знання про httpx із `RequestExecutor`, щоб виконавець залишався простим.
🔹 Можна додавати нові стратегії, не змінюючи ядро.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)

# 🔠 Системні імпорти
import logging															# 🧾 Логування стратегій
from typing import Iterable, Optional, Protocol							# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from catalog_admin.shared.utils.logger import LOG_NAME
from .custom_errors import CatalogError, ProtocolError, TransportError


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[CatalogError]:
        """Вертає `CatalogError`, якщо виняток розпізнано, або None."""


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorHandlingStrategy):
    """🌐 Перетворює httpx-помилки на `TransportError` / `ProtocolError`."""

    def handle(self, error: Exception) -> Optional[CatalogError]:
        if isinstance(error, httpx.HTTPStatusError):					# 🔢 Неочікуваний статус
            url = _request_url(error)
            status = error.response.status_code
            logger.debug("🔢 httpx status error", extra={"url": url, "status": status})
            return ProtocolError(status, url=url, details=str(error))

        if isinstance(error, httpx.RequestError):						# 🌐 Відповіді не отримано
            url = _request_url(error)
            description = str(error) or type(error).__name__			# 📝 Опис першопричини
            logger.debug("🌐 httpx request error", extra={"url": url, "exc_type": type(error).__name__})
            return TransportError(description, url=url, details=repr(error))

        return None


def convert_error(
    error: Exception, strategies: Iterable[IErrorHandlingStrategy]
) -> Optional[CatalogError]:
    """🔄 Пропускає виняток через стратегії; вже доменні помилки повертає як є."""
    if isinstance(error, CatalogError):
        return error
    for strategy in strategies:
        converted = strategy.handle(error)
        if converted is not None:
            return converted
    return None


def _request_url(error: httpx.HTTPError) -> str:
    """🔗 Дістає URL запиту, якщо httpx його прикріпив."""
    try:
        return str(error.request.url)
    except RuntimeError:												# ⚠️ `.request` не встановлено
        return "N/A"


__all__ = ["IErrorHandlingStrategy", "HttpxErrorStrategy", "convert_error"]
