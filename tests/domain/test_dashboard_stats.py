"""
🧪 test_dashboard_stats.py: unit-тести для compute_dashboard_stats
"""

from catalog_admin.domain.products import Product
from catalog_admin.domain.products.services import compute_dashboard_stats


def _product(product_id, stock, featured=False, category="A"):
    return Product.from_record(
        {
            "id": product_id,
            "name": f"P{product_id}",
            "description": "",
            "category": category,
            "price": 1,
            "stock": stock,
            "image": "https://img.example.com/p.png",
            "featured": featured,
        }
    )


def test_empty_snapshot():
    stats = compute_dashboard_stats(())
    assert (stats.total_products, stats.low_stock_count, stats.featured_count, stats.category_count) == (0, 0, 0, 0)


def test_low_stock_is_strictly_below_threshold():
    snapshot = [_product(1, 9), _product(2, 10), _product(3, 0)]
    assert compute_dashboard_stats(snapshot).low_stock_count == 2


def test_featured_preview_is_limited_and_ordered():
    snapshot = [_product(i, 50, featured=True, category=f"C{i % 2}") for i in range(1, 6)]

    stats = compute_dashboard_stats(snapshot, featured_limit=2)

    assert [p.id for p in stats.featured] == [1, 2]
    assert stats.total_products == 5
    assert stats.category_count == 2
