"""Money display formatting."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")


def to_decimal(amount: Union[Decimal, float, int, str]) -> Decimal:
    """Convert an amount to Decimal without binary float noise."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def format_value(
    amount: Union[Decimal, float, int],
    symbol: str = "$",
    decimal_separator: str = ".",
    thousands_separator: str = ",",
) -> str:
    """
    Format an amount for display.

    Examples:
        format_value(1234.5) -> "$ 1,234.50"
        format_value(66, symbol="R$", decimal_separator=",",
                     thousands_separator=".") -> "R$ 66,00"
    """
    value = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, cents = f"{abs(value):,.2f}".split(".")
    whole = whole.replace(",", thousands_separator)
    return f"{sign}{symbol} {whole}{decimal_separator}{cents}"
