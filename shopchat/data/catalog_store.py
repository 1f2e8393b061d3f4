"""
Catalog data access layer backed by Supabase.

Wraps the two reads the chat assistant needs: a generic table fetch with an
optional name/description search, and a product search with brand,
collection and variants joined in. Store failures and timeouts are logged and
returned as None; they are never raised to the caller.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, List, Optional, TypeVar

from pydantic import ValidationError

from shopchat.core.config import ShopChatConfig, get_config
from shopchat.data.models import GenericRecord, Product
from shopchat.utils.logger import get_logger
from shopchat.utils.supabase_client import SupabaseClient

logger = get_logger("data.catalog_store")

PRODUCTS_TABLE = "products"
PRODUCT_SELECT = (
    "*,"
    "variants:variants(*),"
    "brand:brands!brand(name),"
    "collection:collections!collection(name)"
)

T = TypeVar("T")


def _is_row_list(rows: Any, source: str) -> bool:
    """True if a store response is a list of rows; logs anything else."""
    if rows is None:
        return False
    if not isinstance(rows, list):
        logger.error(f"Unexpected response shape from {source}: {type(rows).__name__}")
        return False
    return True


def _ilike_pattern(term: str) -> str:
    """Case-insensitive contains pattern in PostgREST syntax."""
    return f"*{term}*"


class CatalogStore:
    """
    Read-only gateway to the catalog tables.
    """

    def __init__(self, client: Optional[SupabaseClient] = None, config: Optional[ShopChatConfig] = None):
        self.config = config or get_config()
        self.client = client or SupabaseClient(
            url=self.config.supabase_url,
            key=self.config.supabase_key,
            timeout=self.config.request_timeout,
        )

    async def _bounded(self, call: Awaitable[Optional[T]], source: str) -> Optional[T]:
        try:
            return await asyncio.wait_for(call, timeout=self.config.request_timeout)
        except asyncio.TimeoutError:
            logger.error(f"Timed out after {self.config.request_timeout}s fetching from {source}")
            return None

    async def fetch_table(self, name: str, search_term: Optional[str] = None) -> Optional[List[GenericRecord]]:
        """
        Fetch all rows of a table.

        Args:
            name: Table name
            search_term: Optional text matched against the name or description column

        Returns:
            List of rows, or None if the store could not be reached
        """
        filters = None
        if search_term:
            pattern = _ilike_pattern(search_term)
            filters = {"or": f"(name.ilike.{pattern},description.ilike.{pattern})"}

        rows = await self._bounded(self.client.select(name, filters=filters), name)
        if not _is_row_list(rows, name):
            return None

        logger.info(f"Fetched {len(rows)} rows from {name}" + (f" matching '{search_term}'" if search_term else ""))
        return rows

    async def find_product_by_name(self, phrase: str) -> Optional[List[Product]]:
        """
        Find products whose name contains phrase (case-insensitive).

        Returns:
            Matching products (possibly empty), or None if the store could not be reached
        """
        rows = await self._bounded(
            self.client.select(
                PRODUCTS_TABLE,
                filters={"name": f"ilike.{_ilike_pattern(phrase.strip())}"},
                select=PRODUCT_SELECT,
            ),
            PRODUCTS_TABLE,
        )
        if not _is_row_list(rows, PRODUCTS_TABLE):
            return None

        products = []
        for row in rows:
            try:
                products.append(Product.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed product row {row!r}: {e}")

        logger.info(f"Found {len(products)} products matching '{phrase}'")
        return products

    async def close(self) -> None:
        await self.client.aclose()
