"""Store model: the unit of access-control scoping."""

from sqlalchemy import String, Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.store_access import StoreAccessGrant
    from app.models.transaction import Transaction

STORE_NAME_MAX_LENGTH = 150


class Store(Base, TimestampMixin):
    """
    A bookkeeping unit owned by one user.

    The owner is fixed at creation. Other users reach the store through
    StoreAccessGrant rows. Balances are never stored here; they are always
    recomputed from the transactions.
    """

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(STORE_NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id"),
        nullable=False,
        index=True,  # Visibility queries filter on owner
    )

    # Relationships
    owner: Mapped["User"] = relationship("User", back_populates="owned_stores")
    grants: Mapped[list["StoreAccessGrant"]] = relationship(
        "StoreAccessGrant",
        back_populates="store",
        cascade="all, delete-orphan",
    )
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction",
        back_populates="store",
        cascade="all, delete-orphan",  # Hard delete removes the history too
    )

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name='{self.name}', owner_id='{self.owner_id}')>"
