"""Order total calculation."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

from app.services.ordering.models import ExtraLine
from app.services.ordering.money import CENTS, to_decimal


def calculate_extras_total(extras: Iterable[ExtraLine]) -> Decimal:
    """Sum of value * quantity over the extra lines."""
    return sum(
        (to_decimal(line.value) * line.quantity for line in extras),
        Decimal("0"),
    )


def calculate_total(
    extras: Iterable[ExtraLine],
    price: Union[Decimal, float, int],
    quantity: int,
) -> Decimal:
    """
    Calculate the order total.

    total = (sum(extra.value * extra.quantity) + price) * quantity

    Amounts are converted through their decimal representation and the
    result is rounded half-up to cents.
    """
    total = (calculate_extras_total(extras) + to_decimal(price)) * quantity
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)
