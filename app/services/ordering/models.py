"""Order models."""
from typing import List, Optional, Union
from pydantic import BaseModel, Field


class ExtraLine(BaseModel):
    """Add-on line with the quantity chosen in the current session."""

    model_config = {"frozen": True}

    id: int
    name: str
    value: float = 0.0
    quantity: int = Field(default=0, ge=0)


class OrderExtra(BaseModel):
    """Selected add-on as sent with an order."""

    id: int
    name: str
    value: float
    quantity: int


class OrderSubmission(BaseModel):
    """Order payload for the order-creation endpoint."""

    id: Union[str, int]
    product_id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[int] = None
    thumbnail_url: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    extras: List[OrderExtra] = []


class CommandOutcome(BaseModel):
    """Result of a command with a remote side effect."""

    ok: bool = True
    error: Optional[str] = None


class FavoriteOutcome(CommandOutcome):
    """Result of a favorite toggle."""

    is_favorite: bool


class OrderOutcome(CommandOutcome):
    """Result of an order submission."""

    order: OrderSubmission
