"""Store access grants linking non-owner users to stores."""

from datetime import datetime
from sqlalchemy import Integer, String, DateTime, ForeignKey, Enum, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from app.models.base import Base
from app.models.role import StoreRole

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.store import Store


class StoreAccessGrant(Base):
    """
    Join table granting a user access to a store they do not own.

    Grants are additive and never expire. The store owner needs no row here.

    Constraints:
    - Unique(store_id, user_id) - one grant per user per store
    """

    __tablename__ = "store_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role_in_store: Mapped[StoreRole] = mapped_column(
        Enum(StoreRole, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=StoreRole.CLERK,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    # Relationships
    store: Mapped["Store"] = relationship("Store", back_populates="grants")
    user: Mapped["User"] = relationship("User", back_populates="store_grants")

    __table_args__ = (
        UniqueConstraint("store_id", "user_id", name="uq_store_user"),
    )

    def __repr__(self) -> str:
        return (
            f"<StoreAccessGrant(store_id={self.store_id}, user_id='{self.user_id}', "
            f"role_in_store={self.role_in_store.value})>"
        )
