"""
Tests for the Supabase client and the catalog gateway built on it.

HTTP is served by httpx.MockTransport, so no network is needed.
"""

import asyncio

import httpx

from shopchat.data.catalog_store import PRODUCT_SELECT, CatalogStore
from shopchat.utils.supabase_client import SupabaseClient
from tests.conftest import run


def _client(handler) -> SupabaseClient:
    return SupabaseClient(
        url="https://example.supabase.co",
        key="test-key",
        transport=httpx.MockTransport(handler),
    )


class TestSupabaseClient:
    def test_select_sends_auth_and_filters(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            seen["apikey"] = request.headers.get("apikey")
            return httpx.Response(200, json=[{"id": 1}])

        rows = run(_client(handler).select("brands", filters={"name": "ilike.*nord*", "id": 3}))

        assert rows == [{"id": 1}]
        assert seen["path"] == "/rest/v1/brands"
        assert seen["params"] == {"select": "*", "name": "ilike.*nord*", "id": "eq.3"}
        assert seen["apikey"] == "test-key"

    def test_http_error_returns_none(self):
        client = _client(lambda request: httpx.Response(500, json={"message": "boom"}))
        assert run(client.select("brands")) is None

    def test_transport_error_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert run(_client(handler).select("brands")) is None


class TestCatalogStore:
    def test_fetch_table_with_search(self, plain_config):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[{"id": 1, "name": "Acme"}])

        store = CatalogStore(client=_client(handler), config=plain_config)
        rows = run(store.fetch_table("suppliers", "acme"))

        assert rows == [{"id": 1, "name": "Acme"}]
        assert seen["or"] == "(name.ilike.*acme*,description.ilike.*acme*)"

    def test_fetch_table_without_search(self, plain_config):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[])

        store = CatalogStore(client=_client(handler), config=plain_config)
        assert run(store.fetch_table("sizes")) == []
        assert "or" not in seen

    def test_fetch_table_failure(self, plain_config):
        store = CatalogStore(client=_client(lambda r: httpx.Response(404)), config=plain_config)
        assert run(store.fetch_table("suppliers")) is None

    def test_find_product_by_name(self, plain_config):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[
                {
                    "id": 1,
                    "name": "Oslo Jacket",
                    "brand": {"name": "Nordic"},
                    "collection": None,
                    "variants": [
                        {"size": "M", "color": "Black", "sales_price": 499, "stock": 4},
                        {"size": "L", "color": "Black", "sales_price": 599.5, "stock": 0},
                    ],
                },
                {"id": 2, "name": "Broken Row", "variants": [{"sales_price": -10}]},
            ])

        store = CatalogStore(client=_client(handler), config=plain_config)
        products = run(store.find_product_by_name("Oslo jacket"))

        assert seen["name"] == "ilike.*Oslo jacket*"
        assert seen["select"] == PRODUCT_SELECT
        assert len(products) == 1
        product = products[0]
        assert product.brand.name == "Nordic"
        assert product.collection is None
        assert [v.stock for v in product.variants] == [4, 0]
        assert product.full_name == "Nordic Oslo Jacket ()"

    def test_find_product_no_rows_is_empty_list(self, plain_config):
        store = CatalogStore(client=_client(lambda r: httpx.Response(200, json=[])), config=plain_config)
        assert run(store.find_product_by_name("nothing")) == []

    def test_find_product_failure_is_none(self, plain_config):
        store = CatalogStore(client=_client(lambda r: httpx.Response(503)), config=plain_config)
        assert run(store.find_product_by_name("Oslo")) is None

    def test_timeout_resolves_to_failure(self, plain_config):
        plain_config.request_timeout = 0.01

        class SlowClient:
            async def select(self, *args, **kwargs):
                await asyncio.sleep(1)
                return []

        store = CatalogStore(client=SlowClient(), config=plain_config)
        assert run(store.fetch_table("suppliers")) is None
        assert run(store.find_product_by_name("Oslo")) is None

    def test_non_object_product_rows_are_skipped(self, plain_config):
        body = [1, "oops", {"id": 3, "name": "Oslo Jacket", "variants": []}]
        store = CatalogStore(client=_client(lambda r: httpx.Response(200, json=body)), config=plain_config)

        products = run(store.find_product_by_name("Oslo"))

        assert [p.name for p in products] == ["Oslo Jacket"]

    def test_non_list_body_is_failure(self, plain_config):
        store = CatalogStore(client=_client(lambda r: httpx.Response(200, json={"a": 1})), config=plain_config)
        assert run(store.fetch_table("suppliers")) is None
        assert run(store.find_product_by_name("Oslo")) is None
