"""Shared fixtures for ShopChat tests."""

import asyncio
from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest

from shopchat.core.config import ShopChatConfig
from shopchat.data.models import Product


def run(coro):
    return asyncio.run(coro)


def make_product(
    name: str = "Oslo Jacket",
    brand: Optional[str] = "Nordic",
    collection: Optional[str] = "Winter",
    variants: Optional[List[Dict[str, Any]]] = None,
) -> Product:
    return Product.model_validate({
        "id": 1,
        "name": name,
        "brand": {"name": brand} if brand is not None else None,
        "collection": {"name": collection} if collection is not None else None,
        "variants": variants or [],
    })


def variant(size: str = "M", color: str = "Black", price: Any = "499", stock: int = 0) -> Dict[str, Any]:
    return {"size": size, "color": color, "sales_price": Decimal(str(price)), "stock": stock}


class FakeCatalogStore:
    """In-memory stand-in for CatalogStore that records every call."""

    def __init__(self, tables: Optional[Dict[str, Optional[list]]] = None, products: Optional[list] = None, delay: float = 0.0):
        self.tables = tables or {}
        self.products = products if products is not None else []
        self.delay = delay
        self.calls: List[tuple] = []
        self.observer = None

    async def fetch_table(self, name, search_term=None):
        self.calls.append(("fetch_table", name, search_term))
        if self.observer:
            self.observer()
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.tables.get(name)

    async def find_product_by_name(self, phrase):
        self.calls.append(("find_product_by_name", phrase))
        if self.observer:
            self.observer()
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.products, Exception):
            raise self.products
        return self.products

    async def close(self):
        pass


@pytest.fixture
def plain_config():
    """Config with a plain "1,234.50" currency rendering and no symbol."""
    return ShopChatConfig(
        supabase_url="https://example.supabase.co",
        supabase_key="test-key",
        request_timeout=1.0,
        currency_symbol="",
        currency_decimal_separator=".",
        currency_group_separator=",",
    )
