"""Order assembly and submission."""
import logging
import uuid
from typing import Iterable, List, Optional, Union

from app.services.catalog.base import FoodService, FoodServiceError, MenuItem
from app.services.ordering.models import (
    ExtraLine,
    OrderExtra,
    OrderOutcome,
    OrderSubmission,
)

logger = logging.getLogger(__name__)


def new_order_id() -> str:
    """Generate a locally unique order identifier."""
    return uuid.uuid4().hex


def select_extras(item: MenuItem, lines: Iterable[ExtraLine]) -> List[OrderExtra]:
    """
    Build the extras payload for an order.

    Follows the item's own extra definitions in order, takes the chosen
    quantity for each and drops the ones left at zero.
    """
    chosen = {line.id: line.quantity for line in lines if line.quantity > 0}
    return [
        OrderExtra(
            id=extra.id,
            name=extra.name,
            value=extra.value,
            quantity=chosen[extra.id],
        )
        for extra in item.extras
        if chosen.get(extra.id, 0) > 0
    ]


def build_order(
    item: MenuItem,
    lines: Iterable[ExtraLine],
    quantity: int = 1,
    order_id: Optional[Union[str, int]] = None,
) -> OrderSubmission:
    """Assemble the order payload from the item and the current extra lines."""
    return OrderSubmission(
        id=order_id if order_id is not None else new_order_id(),
        product_id=item.id,
        name=item.name,
        description=item.description,
        price=item.price,
        category=item.category,
        thumbnail_url=item.thumbnail_url,
        quantity=quantity,
        extras=select_extras(item, lines),
    )


async def submit_order(service: FoodService, submission: OrderSubmission) -> OrderOutcome:
    """Send an order to the food service and report the outcome."""
    try:
        await service.submit_order(submission)
    except FoodServiceError as e:
        logger.error(f"[ORDER] Submission {submission.id} failed - {e}")
        return OrderOutcome(ok=False, error=str(e), order=submission)

    logger.info(
        f"[ORDER] Submitted order {submission.id} - product {submission.product_id}, "
        f"{len(submission.extras)} extras"
    )
    return OrderOutcome(order=submission)
