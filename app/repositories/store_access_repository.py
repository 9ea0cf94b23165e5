"""Repository for StoreAccessGrant model operations."""

from sqlalchemy.orm import Session
from app.database import commit
from app.models.store_access import StoreAccessGrant


class StoreAccessRepository:
    """Repository for StoreAccessGrant (store_users) operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_grant(self, store_id: int, user_id: str) -> StoreAccessGrant | None:
        """
        Get the grant for a specific user on a specific store.

        Args:
            store_id: Store ID
            user_id: User ID

        Returns:
            StoreAccessGrant object or None if not found
        """
        return (
            self.db.query(StoreAccessGrant)
            .filter(
                StoreAccessGrant.store_id == store_id,
                StoreAccessGrant.user_id == user_id,
            )
            .first()
        )

    def has_grant(self, store_id: int, user_id: str) -> bool:
        return self.get_grant(store_id, user_id) is not None

    def get_store_grants(self, store_id: int) -> list[StoreAccessGrant]:
        """Get all grants for a store"""
        return (
            self.db.query(StoreAccessGrant)
            .filter(StoreAccessGrant.store_id == store_id)
            .order_by(StoreAccessGrant.id)
            .all()
        )

    def create(self, grant: StoreAccessGrant) -> StoreAccessGrant:
        """
        Create a new grant.

        Raises:
            PersistenceException: If (store_id, user_id) already exists
        """
        self.db.add(grant)
        commit(self.db)
        self.db.refresh(grant)
        return grant

    def delete(self, grant: StoreAccessGrant) -> None:
        """Revoke a grant"""
        self.db.delete(grant)
        commit(self.db)
