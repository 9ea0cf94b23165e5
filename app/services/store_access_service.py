from sqlalchemy.orm import Session
from app.logging_config import get_logger
from app.models.store import Store
from app.models.store_access import StoreAccessGrant
from app.models.user import User
from app.repositories.store_access_repository import StoreAccessRepository
from app.repositories.user_repository import UserRepository
from app.schemas.base import parse_body
from app.schemas.store_access_schemas import StoreAccessGrantRequest
from app.services.access_service import AccessService
from app.core.exceptions import (
    NotFoundException,
    ForbiddenException,
    ValidationException,
)

logger = get_logger(__name__)


class StoreAccessService:
    """Service layer for managing store_users grants"""

    def __init__(self, db: Session):
        self.db = db
        self.grant_repo = StoreAccessRepository(db)
        self.user_repo = UserRepository(db)
        self.access = AccessService(db)

    def _get_managed_store(self, store_id: int, user: User) -> Store:
        """
        Load a store the caller may manage grants for (owner or Admin).

        Raises:
            NotFoundException: If store not found
            ForbiddenException: If caller is neither the owner nor an Admin
        """
        store = self.access.get_accessible_store(store_id, user)
        if store.owner_id != user.id and not self.access.is_admin(user.id):
            raise ForbiddenException("Only the store owner or an admin can manage store access")
        return store

    def list_grants(self, store_id: int, user: User) -> list[StoreAccessGrant]:
        """
        List grants on a store (any user with access to the store).

        Raises:
            NotFoundException: If store not found
            ForbiddenException: If user has no access to the store
        """
        self.access.get_accessible_store(store_id, user)
        return self.grant_repo.get_store_grants(store_id)

    def grant_access(self, store_id: int, payload: dict, user: User) -> StoreAccessGrant:
        """
        Grant an existing user access to a store.

        Args:
            store_id: Store ID
            payload: Raw body with target userId and roleInStore
            user: Caller (store owner or Admin)

        Returns:
            Created grant

        Raises:
            ForbiddenException: If caller cannot manage the store
            NotFoundException: If target user does not exist
            ValidationException: If body invalid, target is the owner or already granted
        """
        store = self._get_managed_store(store_id, user)
        request = parse_body(StoreAccessGrantRequest, payload, "Invalid store access data")

        target = self.user_repo.get_by_id(request.user_id)
        if not target:
            raise NotFoundException(f"User {request.user_id} not found")

        if target.id == store.owner_id:
            raise ValidationException(
                "Store owner already has access",
                errors=[{"field": "userId", "message": "User owns this store"}],
            )

        if self.grant_repo.has_grant(store_id, target.id):
            raise ValidationException(
                f"User {target.id} already has access to this store",
                errors=[{"field": "userId", "message": "Access already granted"}],
            )

        grant = StoreAccessGrant(
            store_id=store_id,
            user_id=target.id,
            role_in_store=request.role_in_store,
        )
        grant = self.grant_repo.create(grant)
        logger.info(
            "Store access granted",
            extra={"store_id": store_id, "grantee_id": target.id, "granted_by": user.id},
        )
        return grant

    def revoke_access(self, store_id: int, user_id: str, user: User) -> None:
        """
        Remove a user's grant on a store.

        Raises:
            ForbiddenException: If caller cannot manage the store
            NotFoundException: If no grant exists for the user
        """
        self._get_managed_store(store_id, user)

        grant = self.grant_repo.get_grant(store_id, user_id)
        if not grant:
            raise NotFoundException("Store access grant not found")

        self.grant_repo.delete(grant)
        logger.info(
            "Store access revoked",
            extra={"store_id": store_id, "grantee_id": user_id, "revoked_by": user.id},
        )
