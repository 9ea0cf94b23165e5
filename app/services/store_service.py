from typing import Optional
from sqlalchemy.orm import Session
from app.logging_config import get_logger
from app.models.store import Store
from app.models.user import User
from app.repositories.store_repository import StoreRepository
from app.schemas.base import parse_body
from app.schemas.store_schemas import StoreCreate, StoreUpdate
from app.services.access_service import AccessService
from app.services.balance_service import BalanceService
from app.core.exceptions import ValidationException

logger = get_logger(__name__)


class StoreService:
    """Service for store business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = StoreRepository(db)
        self.access = AccessService(db)

    def create_store(self, data: StoreCreate, user: User) -> Store:
        """Create new store owned by the caller"""
        store = Store(
            name=data.name,
            description=data.description,
            owner_id=user.id,
        )
        store = self.repo.create(store)
        logger.info("Store created", extra={"store_id": store.id, "owner_id": user.id})
        return store

    def get_user_stores(
        self, user: User, include_granted_stores: Optional[bool] = None
    ) -> list[Store]:
        """Get stores visible to the user (all stores for Admins)"""
        return BalanceService(self.db).visible_stores(user.id, include_granted_stores)

    def get_all_stores(self, user: User) -> list[Store]:
        """
        Get every store, unfiltered (Admin only).

        Raises:
            ForbiddenException: If user is not an Admin
        """
        self.access.require_admin(user)
        return self.repo.get_all()

    def get_store(self, store_id: int, user: User) -> Store:
        """
        Get specific store after the existence and access checks.

        Raises:
            NotFoundException: If store not found
            ForbiddenException: If user has no access to the store
        """
        return self.access.get_accessible_store(store_id, user)

    def update_store(self, store_id: int, payload: dict, user: User) -> Store:
        """
        Partially update store details; the owner never changes.

        The body is validated only after the existence and access checks.

        Raises:
            NotFoundException: If store not found
            ForbiddenException: If user has no access to the store
            ValidationException: If the body is invalid
        """
        store = self.get_store(store_id, user)
        data = parse_body(StoreUpdate, payload, "Invalid store data")

        fields = data.model_dump(exclude_unset=True)
        if "name" in fields and fields["name"] is None:
            raise ValidationException(
                "Invalid store data",
                errors=[{"field": "name", "message": "Name cannot be null"}],
            )

        if "name" in fields:
            store.name = fields["name"]
        if "description" in fields:
            store.description = fields["description"]

        return self.repo.update(store)

    def delete_store(self, store_id: int, user: User) -> None:
        """Hard delete store with its transactions and grants"""
        store = self.get_store(store_id, user)
        self.repo.delete(store)
        logger.info("Store deleted", extra={"store_id": store_id, "user_id": user.id})
