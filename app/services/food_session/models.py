"""Food details session models."""
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from app.services.catalog.base import FoodService, MenuItem
from app.services.ordering.assembler import build_order, submit_order
from app.services.ordering.extras import ExtraLineStore
from app.services.ordering.favorite import FavoriteToggle
from app.services.ordering.models import FavoriteOutcome, OrderOutcome, OrderSubmission
from app.services.ordering.money import format_value
from app.services.ordering.pricing import calculate_total
from app.services.ordering.quantity import OrderQuantityCounter


class FoodDetailsSession:
    """Configuration state for one menu item while its details are open."""

    def __init__(
        self,
        session_id: str,
        item: MenuItem,
        service: FoodService,
        money_format: Optional[Dict[str, str]] = None,
    ):
        self.session_id = session_id
        self.item = item
        self.service = service
        self.money_format = money_format or {}
        self.extras = ExtraLineStore()
        self.extras.load(item.extras)
        self.quantity = OrderQuantityCounter()
        self.favorite = FavoriteToggle()

    def increment_extra(self, extra_id: int) -> None:
        self.extras.increment(extra_id)

    def decrement_extra(self, extra_id: int) -> None:
        self.extras.decrement(extra_id)

    def increment_quantity(self) -> None:
        self.quantity.increment()

    def decrement_quantity(self) -> None:
        self.quantity.decrement()

    @property
    def total(self) -> Decimal:
        return calculate_total(self.extras.lines, self.item.price, self.quantity.quantity)

    @property
    def formatted_total(self) -> str:
        return self.format(self.total)

    @property
    def is_favorite(self) -> bool:
        return self.favorite.is_favorite

    def format(self, amount: Union[Decimal, float]) -> str:
        return format_value(amount, **self.money_format)

    async def refresh_favorite(self) -> bool:
        """Check whether the item is in the remote favorites collection."""
        favorites = await self.service.fetch_favorites()
        return self.favorite.resolve(favorites, self.item.id)

    async def toggle_favorite(self) -> FavoriteOutcome:
        return await self.favorite.toggle(self.service, self.item)

    def build_order(self, order_id: Optional[Union[str, int]] = None) -> OrderSubmission:
        return build_order(
            self.item,
            self.extras.lines,
            quantity=self.quantity.quantity,
            order_id=order_id,
        )

    async def finish_order(self) -> OrderOutcome:
        """Build the order from the current state and submit it."""
        return await submit_order(self.service, self.build_order())

    def snapshot(self) -> Dict[str, Any]:
        """Current state for display."""
        return {
            "session_id": self.session_id,
            "item": self.item.model_dump(),
            "formatted_price": self.format(self.item.price),
            "extras": [line.model_dump() for line in self.extras.lines],
            "quantity": self.quantity.quantity,
            "total": self.total,
            "formatted_total": self.formatted_total,
            "is_favorite": self.is_favorite,
        }
