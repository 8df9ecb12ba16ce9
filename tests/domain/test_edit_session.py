"""
🧪 test_edit_session.py: unit-тести для EditSession
"""

from catalog_admin.domain.products import EditSession, Product

BASE = Product.from_record(
    {
        "id": "a1",
        "name": "Lamp",
        "description": "Desk lamp",
        "category": "Home",
        "price": 25,
        "stock": 3,
        "image": "https://img.example.com/l.png",
        "featured": False,
    }
)


def test_begin_copies_baseline():
    session = EditSession.begin(BASE)
    assert session.product_id == "a1"
    assert session.working_copy == BASE
    assert session.changed_fields() == ()


def test_with_field_returns_new_session():
    session = EditSession.begin(BASE)
    edited = session.with_field("featured", True).with_field("price", "30")

    assert session.working_copy.featured is False
    assert edited.baseline is BASE
    assert edited.changed_fields() == ("price", "featured")


def test_commit_payload_is_full_record_without_id():
    payload = EditSession.begin(BASE).with_field("stock", 0).commit_payload()

    assert set(payload) == {"name", "description", "category", "price", "stock", "image", "featured"}
    assert payload["stock"] == 0
    assert payload["name"] == "Lamp"
