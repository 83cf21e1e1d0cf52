"""HTTP food service client."""
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from app.services.catalog.base import FoodService, FoodServiceError, MenuItem
from app.services.ordering.models import OrderSubmission

logger = logging.getLogger(__name__)


class HttpFoodService(FoodService):
    """Food service backed by a REST API (foods, favorites, orders)."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and raise FoodServiceError on any failure."""
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"[FOOD API] {method} {path} failed - status {e.response.status_code}"
            )
            raise FoodServiceError(
                f"{method} {path} returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"[FOOD API] {method} {path} failed - {type(e).__name__}: {e}")
            raise FoodServiceError(f"{method} {path} failed: {e}") from e

    def _parse_items(self, response: httpx.Response) -> List[MenuItem]:
        """Parse a list of menu items, raising FoodServiceError on bad payloads."""
        try:
            return [MenuItem(**data) for data in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(
                f"[FOOD API] Unreadable item payload from {response.request.url.path} - {e}"
            )
            raise FoodServiceError(f"Invalid item payload: {e}") from e

    async def fetch_items(self, item_id: int) -> List[MenuItem]:
        response = await self._request("GET", "/foods", params={"id_like": item_id})
        # id_like is a pattern match on the backend, keep exact matches first
        items = self._parse_items(response)
        items.sort(key=lambda item: item.id != item_id)
        return items

    async def fetch_favorites(self) -> List[MenuItem]:
        response = await self._request("GET", "/favorites")
        return self._parse_items(response)

    async def add_favorite(self, item: MenuItem) -> None:
        await self._request("POST", "/favorites", json=item.model_dump())

    async def remove_favorite(self, item_id: int) -> None:
        await self._request("DELETE", f"/favorites/{item_id}")

    async def submit_order(self, submission: OrderSubmission) -> None:
        await self._request("POST", "/orders", json=submission.model_dump())
