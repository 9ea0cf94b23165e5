from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session

from app.database import commit
from app.models.transaction import Transaction


class TransactionRepository:
    """Repository for Transaction data access"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Create a new transaction"""
        self.db.add(transaction)
        commit(self.db)
        self.db.refresh(transaction)
        return transaction

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID"""
        return self.db.query(Transaction).filter(Transaction.id == transaction_id).first()

    def get_by_store(self, store_id: int) -> list[Transaction]:
        """Get all transactions for a store, newest date first"""
        return (
            self.db.query(Transaction)
            .filter(Transaction.store_id == store_id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )

    def update(self, transaction: Transaction) -> Transaction:
        """Update a transaction"""
        commit(self.db)
        self.db.refresh(transaction)
        return transaction

    def delete(self, transaction: Transaction) -> None:
        """Delete a transaction"""
        self.db.delete(transaction)
        commit(self.db)

    def get_amounts(self, store_ids: list[int]) -> list[tuple[Decimal, Decimal]]:
        """
        Get (amount_supplied, amount_remaining) pairs for the given stores.

        Summation happens in Python with Decimal so the result is exact on
        every backend (SQLite SUM over NUMERIC returns a float).
        """
        rows = (
            self.db.query(Transaction.amount_supplied, Transaction.amount_remaining)
            .filter(Transaction.store_id.in_(store_ids))
            .all()
        )
        return [(row[0], row[1]) for row in rows]
