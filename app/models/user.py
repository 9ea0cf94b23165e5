from sqlalchemy import String, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin
from app.models.role import UserRole

if TYPE_CHECKING:
    from app.models.store import Store
    from app.models.store_access import StoreAccessGrant


class User(Base, TimestampMixin):
    """
    Users provisioned from the identity provider.

    id is the 'sub' claim of the JWT; profile fields are refreshed from
    token claims on every request (upsert-on-login). No auth credentials.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=UserRole.STORE_OWNER,
    )

    # Relationships
    owned_stores: Mapped[list["Store"]] = relationship("Store", back_populates="owner")
    store_grants: Mapped[list["StoreAccessGrant"]] = relationship(
        "StoreAccessGrant", back_populates="user"
    )

    def __repr__(self) -> str:
        return f"<User(id='{self.id}', role={self.role.value})>"
