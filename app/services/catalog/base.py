"""Food service interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.services.ordering.models import OrderSubmission


class FoodServiceError(Exception):
    """Raised when the food service cannot complete a request."""


class ItemNotFoundError(LookupError):
    """Raised when a menu item lookup returns no match."""

    def __init__(self, item_id: int):
        super().__init__(f"Menu item {item_id} not found")
        self.item_id = item_id


class ExtraDefinition(BaseModel):
    """Add-on available for a menu item."""

    id: int
    name: str
    value: float = Field(default=0.0, ge=0)


class MenuItem(BaseModel):
    """Menu item model."""

    id: int
    name: str
    description: Optional[str] = None
    category: Optional[int] = None
    thumbnail_url: Optional[str] = None
    image_url: Optional[str] = None
    price: float = Field(default=0.0, ge=0)
    extras: List[ExtraDefinition] = []

    @field_validator("extras", mode="before")
    @classmethod
    def _null_extras(cls, value):
        # Backends send null for items without add-ons
        return [] if value is None else value


class FoodService(ABC):
    """Abstract base class for the remote food data service."""

    @abstractmethod
    async def fetch_items(self, item_id: int) -> List[MenuItem]:
        """Get the items matching an identifier."""
        pass

    @abstractmethod
    async def fetch_favorites(self) -> List[MenuItem]:
        """Get the favorites collection."""
        pass

    @abstractmethod
    async def add_favorite(self, item: MenuItem) -> None:
        """Add an item to the favorites collection."""
        pass

    @abstractmethod
    async def remove_favorite(self, item_id: int) -> None:
        """Remove an item from the favorites collection."""
        pass

    @abstractmethod
    async def submit_order(self, submission: OrderSubmission) -> None:
        """Create an order."""
        pass
