"""
🧪 test_catalog_api.py: тести фасаду CatalogApi над фейковим сховищем
"""

import json

import pytest

from catalog_admin.infrastructure.api import CatalogApi


@pytest.mark.asyncio
async def test_store_info_is_first_element(executor):
    api = CatalogApi(executor)
    info = await api.get_store_info()
    assert info["name"] == "TechStore"


@pytest.mark.asyncio
async def test_empty_store_info_collection_gives_none(fake_store, executor):
    fake_store.collections["store_info"] = []
    assert await CatalogApi(executor).get_store_info() is None


@pytest.mark.asyncio
async def test_product_calls_use_configured_collection(fake_store, executor):
    fake_store.collections["inventory"] = fake_store.collections.pop("products")
    api = CatalogApi(executor, products_collection="inventory")

    assert [r["id"] for r in await api.get_products()] == [1, 2]
    assert (await api.get_product(2))["name"] == "Y"
    await api.update_product(1, {"stock": 0})
    await api.delete_product(2)

    assert [(r.method, r.url.path) for r in fake_store.requests] == [
        ("GET", "/inventory"),
        ("GET", "/inventory/2"),
        ("PATCH", "/inventory/1"),
        ("DELETE", "/inventory/2"),
    ]
    assert json.loads(fake_store.requests[2].content) == {"stock": 0}
