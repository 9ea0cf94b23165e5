"""Exact decimal helpers for monetary amounts."""

import re
from decimal import Decimal, ROUND_HALF_UP

# Column type of stored amounts: NUMERIC(AMOUNT_PRECISION, AMOUNT_SCALE)
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2
MAX_INTEGER_DIGITS = AMOUNT_PRECISION - AMOUNT_SCALE

# Non-negative amount with at most two fractional digits, e.g. "100", "25.5", "0.99"
AMOUNT_PATTERN = r"^\d+(\.\d{1,2})?$"
AMOUNT_RE = re.compile(AMOUNT_PATTERN)

CENT = Decimal("0.01")
ZERO_AMOUNT = "0.00"
MAX_AMOUNT = Decimal(10) ** MAX_INTEGER_DIGITS - CENT


def is_valid_amount(value: str) -> bool:
    return bool(AMOUNT_RE.fullmatch(value))


def fits_amount_column(value: str) -> bool:
    """True when a pattern-valid amount has at most MAX_INTEGER_DIGITS integer digits."""
    integer_part = value.partition(".")[0].lstrip("0")
    return len(integer_part) <= MAX_INTEGER_DIGITS


def to_amount(value: str | Decimal | int) -> Decimal:
    """Convert a validated amount string (or Decimal/int) to a 2dp Decimal."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal | None) -> str:
    """Render a Decimal with exactly two fractional digits; None renders as 0.00."""
    if value is None:
        return ZERO_AMOUNT
    return str(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))
