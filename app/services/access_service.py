from sqlalchemy.orm import Session
from app.logging_config import get_logger
from app.models.role import DEFAULT_USER_ROLE, UserRole
from app.models.store import Store
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.repositories.store_repository import StoreRepository
from app.repositories.store_access_repository import StoreAccessRepository
from app.core.exceptions import NotFoundException, ForbiddenException

logger = get_logger(__name__)


class AccessService:
    """
    Store-scoped access control.

    Rules, in order:
    1. Admins can access every store
    2. A store that does not exist is denied
    3. The store owner can access it
    4. Anyone else needs a store_users grant
    """

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.store_repo = StoreRepository(db)
        self.grant_repo = StoreAccessRepository(db)

    def get_user_role(self, user_id: str) -> UserRole:
        """
        Resolve a user's global role.

        Unknown users resolve to DEFAULT_USER_ROLE, never to Admin.
        """
        role = self.user_repo.get_role(user_id)
        if role is None:
            return DEFAULT_USER_ROLE
        return role

    def is_admin(self, user_id: str) -> bool:
        return self.get_user_role(user_id) == UserRole.ADMIN

    def can_access(self, user_id: str, store_id: int) -> bool:
        """
        Decide whether a user may read and write a store's data.

        Fails closed: a missing store is denied for non-admins. Never raises.
        """
        if self.is_admin(user_id):
            return True

        store = self.store_repo.get_by_id(store_id)
        if store is None:
            return False

        if store.owner_id == user_id:
            return True

        return self.grant_repo.has_grant(store_id, user_id)

    def get_accessible_store(self, store_id: int, user: User) -> Store:
        """
        Load a store for a store-scoped operation.

        Existence is checked before permission on every route.

        Raises:
            NotFoundException: If the store does not exist
            ForbiddenException: If the user may not access it
        """
        store = self.store_repo.get_by_id(store_id)
        if store is None:
            raise NotFoundException("Store not found")

        if not self.can_access(user.id, store_id):
            logger.warning(
                "Store access denied", extra={"user_id": user.id, "store_id": store_id}
            )
            raise ForbiddenException("Access denied")

        return store

    def require_admin(self, user: User) -> None:
        """
        Raises:
            ForbiddenException: If the user is not an Admin
        """
        if not self.is_admin(user.id):
            logger.warning("Admin access denied", extra={"user_id": user.id})
            raise ForbiddenException("Admin access required")
