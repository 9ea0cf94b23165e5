"""Repository for Store model operations."""

from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from app.database import commit
from app.models.store import Store
from app.models.store_access import StoreAccessGrant


class StoreRepository:
    """Repository for Store model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, store_id: int) -> Store | None:
        """Get store by ID"""
        return self.db.query(Store).filter(Store.id == store_id).first()

    def get_all(self) -> list[Store]:
        """Get all stores, newest first"""
        return self.db.query(Store).order_by(Store.created_at.desc(), Store.id.desc()).all()

    def get_visible_to_user(self, user_id: str, include_granted: bool = False) -> list[Store]:
        """
        Get stores a non-admin user can see, newest first.

        Args:
            user_id: User ID
            include_granted: Also return stores reached through store_users grants

        Returns:
            Owned stores, plus granted stores when include_granted is set
        """
        query = self.db.query(Store)
        if include_granted:
            granted_ids = select(StoreAccessGrant.store_id).where(
                StoreAccessGrant.user_id == user_id
            )
            query = query.filter(or_(Store.owner_id == user_id, Store.id.in_(granted_ids)))
        else:
            query = query.filter(Store.owner_id == user_id)
        return query.order_by(Store.created_at.desc(), Store.id.desc()).all()

    def create(self, store: Store) -> Store:
        """Create new store"""
        self.db.add(store)
        commit(self.db)
        self.db.refresh(store)
        return store

    def update(self, store: Store) -> Store:
        """Update existing store"""
        commit(self.db)
        self.db.refresh(store)
        return store

    def delete(self, store: Store) -> None:
        """Hard delete store (cascades to transactions and grants)"""
        self.db.delete(store)
        commit(self.db)
