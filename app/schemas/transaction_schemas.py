from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import AfterValidator, BeforeValidator, field_serializer
from app.core.amounts import (
    MAX_AMOUNT,
    ZERO_AMOUNT,
    fits_amount_column,
    format_amount,
    is_valid_amount,
)
from app.schemas.base import CamelModel


def _coerce_amount(value):
    """Accept numeric input by turning it into its decimal string form"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


def _coerce_optional_amount(value):
    if value is None or value == "":
        return ZERO_AMOUNT
    return _coerce_amount(value)


def _check_amount(value: str) -> str:
    if not is_valid_amount(value):
        raise ValueError(
            "Amount must be a non-negative number with at most 2 decimal places"
        )
    if not fits_amount_column(value):
        raise ValueError(f"Amount must not exceed {MAX_AMOUNT}")
    return value


def _parse_date(value):
    """Parse ISO-8601 dates and datetimes into naive UTC datetimes"""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        if not value.strip():
            raise ValueError("Date is required")
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}")
    else:
        raise ValueError("Invalid date")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


# Validators on the right run first
Amount = Annotated[str, AfterValidator(_check_amount), BeforeValidator(_coerce_amount)]
RemainingAmount = Annotated[
    str, AfterValidator(_check_amount), BeforeValidator(_coerce_optional_amount)
]
TransactionDate = Annotated[datetime, BeforeValidator(_parse_date)]


class TransactionCreate(CamelModel):
    """Schema for creating a transaction; store and creator come from the request context"""

    date: TransactionDate
    amount_supplied: Amount
    amount_remaining: RemainingAmount = ZERO_AMOUNT
    notes: Optional[str] = None


class TransactionUpdate(CamelModel):
    """Schema for updating a transaction (partial)"""

    date: Optional[TransactionDate] = None
    amount_supplied: Optional[Amount] = None
    amount_remaining: Optional[RemainingAmount] = None
    notes: Optional[str] = None


class TransactionResponse(CamelModel):
    """Schema for transaction response; amounts are 2dp decimal strings"""

    id: int
    store_id: int
    date: datetime
    amount_supplied: Decimal
    amount_remaining: Decimal
    notes: Optional[str]
    created_by: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("amount_supplied", "amount_remaining")
    def serialize_amount(self, value: Decimal) -> str:
        return format_amount(value)
