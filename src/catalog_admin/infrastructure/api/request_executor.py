# 🌐 catalog_admin/infrastructure/api/request_executor.py
"""
🌐 RequestExecutor: єдиний шлюз до ресурсного HTTP-сховища колекцій.

🎯 Призначення:
    • типізовані операції list/get/create/update/remove над іменованими колекціями;
    • перетворення транспортних і протокольних збоїв у `TransportError` / `ProtocolError`;
    • спільний стан `loading` / `error`, який можуть спостерігати викликачі.

⚙️ Порядок на кожен виклик:
    1. `in_flight += 1` (loading=True) і очищення попередньої помилки;
    2. мережевий запит;
    3. на збої: запис помилки у стан;
    4. `in_flight -= 1` у `finally`, на будь-якому шляху;
    5. помилка повертається в `RequestOutcome` (`execute`) або піднімається (типізовані операції).

⚠️ Нотатки:
    • без ретраїв і скасування; таймаут лише з конфігу;
    • стан спільний на екземпляр: при конкурентних викликах `error` відображає той,
      що завершився останнім (обмеження, а не гарантія ізоляції).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Асинхронний HTTP-клієнт

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи виконавця
from dataclasses import dataclass                                   # 🧱 DTO стану/результату
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence  # 📐 Типізація
from urllib.parse import quote                                      # 🔗 Екранування сегментів шляху

# 🧩 Внутрішні модулі проєкту
from catalog_admin.errors import (
    CatalogError,
    HttpxErrorStrategy,
    IErrorHandlingStrategy,
    ProtocolError,
    convert_error,
)
from catalog_admin.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.executor")

DEFAULT_BASE_URL = "http://localhost:3001"
DEFAULT_HEADERS = {"Content-Type": "application/json"}

Record = Dict[str, Any]
Decoder = Callable[[Any], Any]


# ================================
# 📚 СТАН І РЕЗУЛЬТАТ
# ================================
@dataclass
class RequestState:
    """📊 Спільний стан виконавця: лічильник запитів у польоті + остання помилка."""

    in_flight: int = 0
    last_error: Optional[CatalogError] = None

    @property
    def loading(self) -> bool:
        return self.in_flight > 0

    @property
    def error(self) -> Optional[str]:
        return self.last_error.message if self.last_error else None


@dataclass(frozen=True)
class RequestOutcome:
    """🎯 Результат одного виклику: значення або типізована помилка."""

    value: Any = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


# ================================
# 🚀 ВИКОНАВЕЦЬ
# ================================
class RequestExecutor:
    """🚀 Виконує запити до сховища та веде спільний стан loading/error."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        strategies: Optional[Sequence[IErrorHandlingStrategy]] = None,
    ) -> None:
        merged_headers = {**DEFAULT_HEADERS, **dict(headers or {})}
        self._owns_client = client is None                          # 🔐 Закриваємо лише свій клієнт
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            base_url=base_url,
            headers=merged_headers,
            timeout=timeout,
            transport=transport,
        )
        self._strategies: List[IErrorHandlingStrategy] = list(strategies or [HttpxErrorStrategy()])
        self._state = RequestState()
        logger.debug(
            "⚙️ RequestExecutor init base_url=%s timeout=%s owns_client=%s",
            self._client.base_url,
            timeout,
            self._owns_client,
        )

    @classmethod
    def from_config(cls, config: Any, **kwargs: Any) -> "RequestExecutor":
        """🏭 Будує виконавця з `ConfigService`-подібного обʼєкта (`.get(key, default)`)."""
        timeout = config.get("api.timeout_sec", None)
        return cls(
            str(config.get("api.base_url", DEFAULT_BASE_URL) or DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout is not None else None,
            headers=config.get("api.headers", None) or {},
            **kwargs,
        )

    # ================================
    # 📊 СТАН
    # ================================
    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def last_error(self) -> Optional[CatalogError]:
        return self._state.last_error

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    # ================================
    # 🔓 ТИПІЗОВАНІ ОПЕРАЦІЇ
    # ================================
    async def list(self, collection: str, *, decode: Optional[Decoder] = None) -> Any:
        outcome = await self.execute("GET", self._path(collection), expect=list, decode=decode)
        return outcome.unwrap()

    async def get(self, collection: str, record_id: Any, *, decode: Optional[Decoder] = None) -> Any:
        outcome = await self.execute("GET", self._path(collection, record_id), expect=dict, decode=decode)
        return outcome.unwrap()

    async def create(self, collection: str, payload: Mapping[str, Any]) -> Record:
        outcome = await self.execute("POST", self._path(collection), payload=payload, expect=dict)
        return outcome.unwrap()

    async def update(self, collection: str, record_id: Any, partial_payload: Mapping[str, Any]) -> Record:
        outcome = await self.execute(
            "PATCH", self._path(collection, record_id), payload=partial_payload, expect=dict
        )
        return outcome.unwrap()

    async def remove(self, collection: str, record_id: Any) -> None:
        outcome = await self.execute("DELETE", self._path(collection, record_id), expect=None)
        outcome.unwrap()

    # ================================
    # 🔁 ЯДРО
    # ================================
    async def execute(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[Mapping[str, Any]] = None,
        expect: Optional[type] = dict,
        decode: Optional[Decoder] = None,
    ) -> RequestOutcome:
        """
        Виконує один запит і повертає `RequestOutcome`, не піднімаючи доменних помилок.

        `expect`: очікуваний тип JSON-тіла (`list` / `dict`); `None`: тіло ігнорується.
        `decode`: перетворює тіло на доменні обʼєкти; його `CatalogError` теж потрапляє у стан.
        Невідомі (не мережеві) винятки не перехоплюються, але loading все одно скидається.
        """
        self._state.in_flight += 1                                  # ⏳ loading = True
        self._state.last_error = None                               # 🧹 Стираємо попередню помилку
        logger.debug("➡️ %s %s", method, path)
        try:
            response = await self._client.request(
                method, path, json=dict(payload) if payload is not None else None
            )
            response.raise_for_status()                             # ❗ Не-2xx → HTTPStatusError
            value = self._decode(response, expect)
            if decode is not None:
                value = decode(value)
            logger.debug("✅ %s %s → %s", method, path, response.status_code)
            return RequestOutcome(value=value)
        except (httpx.HTTPError, CatalogError) as exc:
            error = convert_error(exc, self._strategies)
            if error is None:
                raise
            self._state.last_error = error
            logger.warning(
                "❌ %s %s failed: %s",
                method,
                path,
                error.message,
                extra={"method": method, "path": path, **error.to_log_extra()},
            )
            return RequestOutcome(error=error)
        finally:
            self._state.in_flight -= 1                              # 🔓 Завжди знімаємо loading

    async def close(self) -> None:
        """🔌 Закриває HTTP-клієнт, якщо виконавець ним володіє."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.info("🔌 HTTP-клієнт виконавця закрито.")

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    @staticmethod
    def _path(collection: str, record_id: Any = None) -> str:
        path = "/" + quote(str(collection).strip("/"), safe="")
        if record_id is not None:
            path += "/" + quote(str(record_id), safe="")
        return path

    @staticmethod
    def _decode(response: httpx.Response, expect: Optional[type]) -> Any:
        """Розбирає JSON-тіло успішної відповіді й перевіряє його форму."""
        if expect is None:
            return None
        try:
            body = response.json()
        except ValueError:
            raise ProtocolError(
                response.status_code,
                message=f"Invalid JSON in response (status: {response.status_code})",
                url=str(response.request.url),
            ) from None
        if not isinstance(body, expect):
            raise ProtocolError(
                response.status_code,
                message=f"Unexpected response body: expected {expect.__name__}, got {type(body).__name__}",
                url=str(response.request.url),
            )
        return body


__all__ = ["DEFAULT_BASE_URL", "Record", "RequestExecutor", "RequestOutcome", "RequestState"]
