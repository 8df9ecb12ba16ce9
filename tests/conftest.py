# tests/conftest.py
import sys
from pathlib import Path

# Додаємо src в sys.path, щоб працював імпорт "catalog_admin.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import copy
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from catalog_admin.infrastructure.api import CatalogApi, RequestExecutor
from catalog_admin.infrastructure.services import ProductCatalogService

BASE_URL = "http://store.test"


# ───────────────────────────────────────────────────────────────────────────
# ФЕЙКОВЕ СХОВИЩЕ (json-server-подібне, без мережі)
# ───────────────────────────────────────────────────────────────────────────

def make_product(product_id: Any, **overrides: Any) -> Dict[str, Any]:
    record = {
        "id": product_id,
        "name": f"Product {product_id}",
        "description": "",
        "category": "A",
        "price": 10,
        "stock": 5,
        "image": "https://img.example.com/p.png",
        "featured": False,
    }
    record.update(overrides)
    return record


class FakeStore:
    """In-memory колекції + інʼєкція збоїв для `httpx.MockTransport`."""

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None) -> None:
        self.collections: Dict[str, List[Dict[str, Any]]] = copy.deepcopy(collections or {})
        self.requests: List[httpx.Request] = []
        self.fail_status: Dict[str, int] = {}          # METHOD → статус для наступного запиту
        self.transport_down = False                    # True → ConnectError
        self.on_request: Optional[Callable[[httpx.Request], None]] = None
        self._next_id = 1 + max(
            (r["id"] for rows in self.collections.values() for r in rows if isinstance(r.get("id"), int)),
            default=0,
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.transport_down:
            raise httpx.ConnectError("Connection refused", request=request)
        status = self.fail_status.pop(request.method, None)
        if status is not None:
            return httpx.Response(status, json={"error": "forced"})

        parts = [p for p in request.url.path.split("/") if p]
        rows = self.collections.get(parts[0]) if parts else None
        if rows is None:
            return httpx.Response(404, json={})
        if len(parts) == 1:
            if request.method == "GET":
                return httpx.Response(200, json=rows)
            if request.method == "POST":
                record = dict(json.loads(request.content))
                record["id"] = self._next_id
                self._next_id += 1
                rows.append(record)
                return httpx.Response(201, json=record)
            return httpx.Response(405, json={})

        index = next((i for i, r in enumerate(rows) if str(r.get("id")) == parts[1]), None)
        if index is None:
            return httpx.Response(404, json={})
        if request.method == "GET":
            return httpx.Response(200, json=rows[index])
        if request.method == "PATCH":
            rows[index] = {**rows[index], **json.loads(request.content)}
            return httpx.Response(200, json=rows[index])
        if request.method == "DELETE":
            rows.pop(index)
            return httpx.Response(200, json={})
        return httpx.Response(405, json={})


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore(
        {
            "products": [
                make_product(1, name="X", price=10, stock=5, category="A", featured=False),
                make_product(2, name="Y", price=200, stock=2, category="B", featured=True),
            ],
            "store_info": [
                {
                    "name": "TechStore",
                    "description": "Gadgets",
                    "phone_number": "+1 555 0100",
                    "email": "hello@techstore.test",
                    "address": "1 Main St",
                }
            ],
        }
    )


@pytest_asyncio.fixture
async def executor(fake_store: FakeStore):
    executor = RequestExecutor(BASE_URL, transport=fake_store.transport())
    yield executor
    await executor.close()


@pytest.fixture
def catalog(executor: RequestExecutor) -> ProductCatalogService:
    return ProductCatalogService(CatalogApi(executor))
