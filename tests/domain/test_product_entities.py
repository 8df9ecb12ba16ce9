"""
🧪 test_product_entities.py: unit-тести для Product / ProductDraft / StoreInfo

Перевіряє:
- Відмову від розріджених записів
- Десяткові ціни та їх подання в JSON
- Правила форми створення товару
"""

from decimal import Decimal

import pytest

from catalog_admin.domain.products import Product, ProductDraft, StoreInfo
from catalog_admin.domain.products.entities import is_valid_url, price_to_wire
from catalog_admin.errors import ErrorKind, ValidationError

RECORD = {
    "id": 7,
    "name": "Speaker",
    "description": "Loud",
    "category": "Audio",
    "price": 49.99,
    "stock": 4,
    "image": "https://img.example.com/s.png",
    "featured": False,
}


def test_from_record_keeps_decimal_price():
    product = Product.from_record(RECORD)
    assert product.price == Decimal("49.99")
    assert product.to_record() == RECORD


def test_sparse_record_is_rejected():
    sparse = {k: v for k, v in RECORD.items() if k not in ("stock", "image")}

    with pytest.raises(ValidationError) as exc_info:
        Product.from_record(sparse)

    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert set(exc_info.value.errors) == {"stock", "image"}


def test_with_field_coerces_and_leaves_original_untouched():
    product = Product.from_record(RECORD)
    changed = product.with_field("stock", "12")

    assert changed.stock == 12
    assert product.stock == 4
    with pytest.raises(ValidationError):
        product.with_field("id", 99)
    with pytest.raises(ValidationError):
        product.with_field("stock", "1.5")


def test_payload_has_no_id_and_integral_price_is_int():
    payload = Product.from_record({**RECORD, "price": "120.00"}).to_payload()
    assert "id" not in payload
    assert payload["price"] == 120
    assert isinstance(payload["price"], int)


def test_price_to_wire_keeps_fraction():
    assert price_to_wire(Decimal("19.5")) == 19.5
    assert price_to_wire(Decimal("20")) == 20


def test_draft_validation_reports_every_field():
    errors = ProductDraft(stock=-1, image="not a url").validate()

    assert errors == {
        "name": "Product name is required",
        "description": "Product description is required",
        "category": "Category is required",
        "price": "Price must be greater than 0",
        "stock": "Stock cannot be negative",
        "image": "Please enter a valid image URL",
    }


def test_draft_requires_image():
    draft = ProductDraft.from_mapping({**RECORD, "image": "   "})
    assert draft.validate() == {"image": "Image URL is required"}


def test_draft_from_mapping_drops_id_and_validates():
    draft = ProductDraft.from_mapping(RECORD)
    assert draft.ensure_valid() is draft
    assert "id" not in draft.to_payload()


def test_is_valid_url():
    assert is_valid_url("https://example.com/a.png")
    assert not is_valid_url("example.com/a.png")
    assert not is_valid_url("")


def test_store_info_reads_phone_number():
    info = StoreInfo.from_record({"name": "TechStore", "phone_number": "+1 555"})
    assert info.phone == "+1 555"
    assert info.email == ""
