# 🖥️ catalog_admin/cli.py
"""
🖥️ Консольна панель каталогу: підсумки, інформація про магазин і відфільтрований список.

Використання:
    python -m catalog_admin --query headphones --max-price 200 --featured-only
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Тип транспорту
from rich.console import Console                                    # 🖨️ Вивід у термінал
from rich.table import Table                                        # 📋 Таблиця товарів

# 🔠 Системні імпорти
import argparse                                                     # 🧭 Аргументи командного рядка
import asyncio                                                      # 🔁 Запуск корутин
import logging                                                      # 🧾 Логи запуску
from typing import Optional, Sequence                               # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.config import ConfigService
from catalog_admin.config.setup import Container, bootstrap_logging
from catalog_admin.domain.products.services import DashboardStats
from catalog_admin.errors import CatalogError
from catalog_admin.infrastructure.services import ProductCatalogService
from catalog_admin.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog_admin", description="Catalog admin dashboard")
    parser.add_argument("--query", default=None, help="Text to search in name or description")
    parser.add_argument("--category", default=None, help="Exact category")
    parser.add_argument("--min-price", default=None, help="Lower price bound (inclusive)")
    parser.add_argument("--max-price", default=None, help="Upper price bound (inclusive)")
    parser.add_argument("--featured-only", action="store_true", help="Only featured products")
    return parser


def render_dashboard(console: Console, catalog: ProductCatalogService, stats: DashboardStats) -> None:
    info = catalog.store_info
    if info is not None:
        console.print(f"[bold]{info.name}[/bold]: {info.description}")
        console.print(f"📞 {info.phone}  📧 {info.email}  📍 {info.address}")
    console.print(
        f"Total products: {stats.total_products} | Featured: {stats.featured_count} | "
        f"Low stock: {stats.low_stock_count} | Categories: {stats.category_count}"
    )


def render_products(console: Console, catalog: ProductCatalogService) -> None:
    products = catalog.view()
    table = Table(title=f"Showing {len(products)} of {len(catalog.snapshot)} products")
    for column in ("ID", "Name", "Category", "Price", "Stock", "Featured"):
        table.add_column(column)
    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            product.category,
            f"${product.price:.2f}",
            str(product.stock),
            "⭐" if product.featured else "",
        )
    console.print(table)


async def run(
    args: argparse.Namespace,
    *,
    config: Optional[object] = None,
    console: Optional[Console] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    config = config or ConfigService()
    console = console or Console()
    async with Container(config, transport=transport) as container:
        catalog = container.catalog
        changes = {
            name: value
            for name, value in (
                ("query", args.query),
                ("category", args.category),
                ("min_price", args.min_price),
                ("max_price", args.max_price),
            )
            if value is not None
        }
        try:
            catalog.update_filters(featured_only=args.featured_only, **changes)
            await catalog.refresh()
            await catalog.load_store_info()
        except CatalogError as exc:
            logger.error("❌ Catalog unavailable: %s", exc.message, extra=exc.to_log_extra())
            console.print(f"[red]Error: {exc.message}[/red]")
            return 1
        render_dashboard(console, catalog, catalog.dashboard())
        render_products(console, catalog)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = ConfigService()
    bootstrap_logging(config)
    return asyncio.run(run(args, config=config))


__all__ = ["build_parser", "main", "render_dashboard", "render_products", "run"]
