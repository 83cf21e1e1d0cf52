"""Unit tests for food service providers."""
import json
from decimal import Decimal

import httpx
import pytest

from app.services.catalog.base import FoodServiceError, MenuItem
from app.services.catalog.http_client import HttpFoodService
from app.services.catalog.in_memory import InMemoryFoodService
from app.services.food_session.manager import FoodSessionManager
from app.services.ordering.models import OrderSubmission

FOODS = [
    {
        "id": 1,
        "name": "Ao molho",
        "description": "Pasta with white sauce",
        "category": 1,
        "price": 19.9,
        "thumbnail_url": "/images/ao_molho.png",
        "image_url": "/images/ao_molho_large.png",
        "extras": [{"id": 1, "name": "Bacon", "value": 1.5}],
    },
    {"id": 11, "name": "Veggie", "price": 21.9},
]


class RecordingHandler:
    """MockTransport handler that records requests."""

    def __init__(self, status_code=200):
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/foods":
            # id_like matches substrings, so 1 also returns 11
            return httpx.Response(self.status_code, json=list(reversed(FOODS)))
        if request.url.path == "/favorites" and request.method == "GET":
            return httpx.Response(self.status_code, json=FOODS[:1])
        return httpx.Response(self.status_code if self.status_code != 200 else 201, json={})


def _service(handler):
    return HttpFoodService(
        base_url="http://foods.test/",
        transport=httpx.MockTransport(handler),
    )


class TestHttpFoodService:
    """Test REST food service client."""

    @pytest.mark.asyncio
    async def test_fetch_items_exact_match_first(self):
        handler = RecordingHandler()
        items = await _service(handler).fetch_items(1)

        assert [item.id for item in items] == [1, 11]
        assert items[0].extras[0].name == "Bacon"
        assert handler.requests[0].url.params["id_like"] == "1"

    @pytest.mark.asyncio
    async def test_fetch_favorites(self):
        favorites = await _service(RecordingHandler()).fetch_favorites()
        assert [fav.id for fav in favorites] == [1]

    @pytest.mark.asyncio
    async def test_add_favorite_posts_item(self):
        handler = RecordingHandler()
        await _service(handler).add_favorite(MenuItem(**FOODS[0]))

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/favorites"
        assert json.loads(request.content)["id"] == 1

    @pytest.mark.asyncio
    async def test_remove_favorite(self):
        handler = RecordingHandler()
        await _service(handler).remove_favorite(1)

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert request.url.path == "/favorites/1"

    @pytest.mark.asyncio
    async def test_submit_order(self):
        handler = RecordingHandler()
        submission = OrderSubmission(id="abc", product_id=1, name="Ao molho", price=19.9)

        await _service(handler).submit_order(submission)

        body = json.loads(handler.requests[0].content)
        assert handler.requests[0].url.path == "/orders"
        assert body["product_id"] == 1
        assert body["extras"] == []

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        with pytest.raises(FoodServiceError, match="500"):
            await _service(RecordingHandler(status_code=500)).remove_favorite(1)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FoodServiceError):
            await _service(handler).fetch_favorites()


class TestInMemoryFoodService:
    """Test YAML-backed food service."""

    @pytest.mark.asyncio
    async def test_load_catalog_from_yaml(self, food_service):
        items = await food_service.fetch_items(1)

        assert len(items) == 1
        assert items[0].name == "Ao molho"
        assert [extra.value for extra in items[0].extras] == [5, 3]

    @pytest.mark.asyncio
    async def test_item_without_extras(self, food_service):
        items = await food_service.fetch_items(2)
        assert items[0].extras == []

    @pytest.mark.asyncio
    async def test_missing_item(self, food_service):
        assert await food_service.fetch_items(999) == []

    @pytest.mark.asyncio
    async def test_default_catalog_when_file_missing(self, tmp_path):
        service = InMemoryFoodService(catalog_file=str(tmp_path / "missing.yaml"))
        items = await service.fetch_items(1)
        assert items[0].name == "Ao molho"

    @pytest.mark.asyncio
    async def test_bundled_catalog(self):
        items = await InMemoryFoodService().fetch_items(3)
        assert items[0].extras == []

    @pytest.mark.asyncio
    async def test_favorites_not_duplicated(self, food_service):
        item = (await food_service.fetch_items(1))[0]
        await food_service.add_favorite(item)
        await food_service.add_favorite(item)

        assert len(await food_service.fetch_favorites()) == 1


class TestMenuItemPayloads:
    """Test backend item payloads with missing or malformed fields."""

    def test_null_extras_become_empty(self):
        item = MenuItem(id=3, name="A la Camarón", price=25.9, extras=None)
        assert item.extras == []

    @pytest.mark.asyncio
    async def test_fetch_items_null_extras(self):
        def handler(request):
            return httpx.Response(
                200, json=[{"id": 3, "name": "A la Camarón", "price": 25.9, "extras": None}]
            )

        items = await _service(handler).fetch_items(3)

        assert items[0].extras == []

    @pytest.mark.asyncio
    async def test_invalid_payload_raises(self):
        def handler(request):
            return httpx.Response(200, json=[{"id": 3, "price": -1}])

        with pytest.raises(FoodServiceError, match="Invalid item payload"):
            await _service(handler).fetch_items(3)

    @pytest.mark.asyncio
    async def test_non_json_payload_raises(self):
        def handler(request):
            return httpx.Response(200, text="<html>maintenance</html>")

        with pytest.raises(FoodServiceError):
            await _service(handler).fetch_favorites()

    @pytest.mark.asyncio
    async def test_open_session_item_with_null_extras(self):
        def handler(request):
            if request.url.path == "/foods":
                return httpx.Response(
                    200, json=[{"id": 3, "name": "A la Camarón", "price": 25.9, "extras": None}]
                )
            return httpx.Response(200, json=[])

        session = await FoodSessionManager(service=_service(handler)).open_session(3)

        assert session.extras.lines == ()
        assert session.total == Decimal("25.9")
