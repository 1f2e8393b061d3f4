import os
import httpx
from typing import Dict, Any, List, Optional
from shopchat.utils.logger import get_logger

logger = get_logger("utils.supabase_client")

FILTER_OPERATORS = ("eq", "neq", "gt", "lt", "gte", "lte", "like", "ilike", "in", "is")
LOGICAL_FILTERS = ("or", "and")


class SupabaseClient:
    """
    Lightweight async client for the Supabase REST (PostgREST) API.
    """
    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url or os.environ.get("SUPABASE_URL")
        self.key = key or os.environ.get("SUPABASE_KEY")

        if not self.url or not self.key:
            logger.warning("SUPABASE_URL or SUPABASE_KEY not set in environment.")

        self.headers = {
            "apikey": self.key or "",
            "Authorization": f"Bearer {self.key or ''}",
            "Content-Type": "application/json",
        }
        self.client = httpx.AsyncClient(
            base_url=self.url or "",
            headers=self.headers,
            timeout=timeout,
            transport=transport,
        )

    async def select(self, table: str, filters: Optional[Dict[str, str]] = None, select: str = "*", limit: Optional[int] = None, order: Optional[str] = None) -> Optional[List[Dict[str, Any]]]:
        """
        Query a Supabase table.

        Returns the decoded rows, or None when the request fails.
        """
        params = {"select": select}
        if filters:
            for key, val in filters.items():
                if key in LOGICAL_FILTERS:
                    params[key] = val
                elif isinstance(val, str) and "." in val and val.split(".")[0] in FILTER_OPERATORS:
                    params[key] = val
                else:
                    params[key] = f"eq.{val}"

        if limit:
            params["limit"] = str(limit)

        if order:
            params["order"] = order

        try:
            response = await self.client.get(f"/rest/v1/{table}", params=params)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            logger.error(f"Supabase select failed on {table}: {e}")
            return None

    async def aclose(self) -> None:
        await self.client.aclose()
