"""
🧪 test_cli_dashboard.py: тести консольної панелі поверх фейкового сховища
"""

import io
import types

import pytest
from rich.console import Console

from catalog_admin.cli import build_parser, run


def _config():
    values = {"api.base_url": "http://store.test"}
    return types.SimpleNamespace(get=lambda key, default=None: values.get(key, default))


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.mark.asyncio
async def test_dashboard_and_filtered_table(fake_store):
    console = _console()
    args = build_parser().parse_args(["--max-price", "50"])

    code = await run(args, config=_config(), console=console, transport=fake_store.transport())

    output = console.file.getvalue()
    assert code == 0
    assert "TechStore" in output
    assert "Total products: 2 | Featured: 1 | Low stock: 2 | Categories: 2" in output
    assert "Showing 1 of 2 products" in output
    assert "$10.00" in output


@pytest.mark.asyncio
async def test_featured_only_flag(fake_store):
    console = _console()
    args = build_parser().parse_args(["--featured-only"])

    await run(args, config=_config(), console=console, transport=fake_store.transport())

    assert "Showing 1 of 2 products" in console.file.getvalue()
    assert "$200.00" in console.file.getvalue()


@pytest.mark.asyncio
async def test_store_unavailable_returns_error_code(fake_store):
    fake_store.transport_down = True
    console = _console()

    code = await run(build_parser().parse_args([]), config=_config(), console=console, transport=fake_store.transport())

    assert code == 1
    assert "Connection refused" in console.file.getvalue()


@pytest.mark.asyncio
async def test_bad_price_argument_is_reported(fake_store):
    console = _console()

    code = await run(
        build_parser().parse_args(["--min-price", "cheap"]),
        config=_config(),
        console=console,
        transport=fake_store.transport(),
    )

    assert code == 1
    assert fake_store.requests == []
