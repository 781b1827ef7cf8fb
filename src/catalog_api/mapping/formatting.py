"""Display helpers shared by the order and product mappers."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Two decimals, half-up rounding, thousands separator: ``$1,234.50``."""
    rounded = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def name_initials(name: str | None) -> str:
    if name is None or not name.strip():
        return "?"

    words = name.split()
    if len(words) == 1:
        return words[0][0].upper()
    return f"{words[0][0]}{words[-1][0]}".upper()


def availability_status(is_available: bool, stock_quantity: int, last_unit_label: str) -> str:
    if not is_available:
        return "Out of Stock"
    # Only reachable when is_available and stock_quantity disagree
    if stock_quantity <= 0:
        return "Unavailable"
    if stock_quantity == 1:
        return last_unit_label
    if stock_quantity <= 5:
        return "Limited Stock"
    return "In Stock"
