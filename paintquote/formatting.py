"""
Display formatting shared by the quote summary and the API responses.
"""

from decimal import Decimal, ROUND_HALF_UP


def format_currency(amount: float, decimals: int = 0) -> str:
    """
    Format a dollar amount with thousands separators, rounding half up.

    format_currency(1234.5)     -> "$1,235"
    format_currency(1234.5, 2)  -> "$1,234.50"
    format_currency(-12)        -> "-$12"
    """
    step = Decimal(1).scaleb(-decimals)
    rounded = Decimal(str(float(amount or 0))).quantize(step, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{decimals}f}"
