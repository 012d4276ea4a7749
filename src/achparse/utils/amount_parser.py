"""Amount parsing and conversion utilities."""

from decimal import Decimal, InvalidOperation
import re

CENTS_PER_DOLLAR = Decimal(100)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert an amount in cents to a two-place Decimal dollar amount."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(Decimal("0.01"))


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-supplied dollar amount into a Decimal.

    Handles:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Negative amounts are rejected since ACH amounts are unsigned.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount in dollars

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$,\s]", "", amount_str)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}': {e!r}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")
    if amount < 0:
        raise ValueError(f"Amount must not be negative: '{amount_str.strip()}'")
    return amount
