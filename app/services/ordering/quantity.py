"""Order quantity counter."""


class OrderQuantityCounter:
    """Quantity of the base item, never below 1."""

    MINIMUM = 1

    def __init__(self, quantity: int = MINIMUM):
        self.quantity = max(self.MINIMUM, quantity)

    def increment(self) -> None:
        self.quantity += 1

    def decrement(self) -> None:
        if self.quantity == self.MINIMUM:
            return
        self.quantity -= 1
