from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, ForeignKey, DateTime, Text, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.core.amounts import AMOUNT_PRECISION, AMOUNT_SCALE
from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.store import Store
    from app.models.user import User


class Transaction(Base, TimestampMixin):
    """
    Dated supply record against a store.

    amount_supplied: value delivered to the store
    amount_remaining: value still outstanding
    Both are exact decimals with 2 fractional digits (never floats).
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    amount_supplied: Mapped[Decimal] = mapped_column(
        Numeric(precision=AMOUNT_PRECISION, scale=AMOUNT_SCALE, asdecimal=True),
        nullable=False,
        default=Decimal("0.00"),
    )
    amount_remaining: Mapped[Decimal] = mapped_column(
        Numeric(precision=AMOUNT_PRECISION, scale=AMOUNT_SCALE, asdecimal=True),
        nullable=False,
        default=Decimal("0.00"),
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.id"), nullable=False
    )

    # Relationships
    store: Mapped["Store"] = relationship("Store", back_populates="transactions")
    creator: Mapped["User"] = relationship("User")

    # Store listing is ordered by date, newest first
    __table_args__ = (Index("ix_transactions_store_date", "store_id", "date"),)
