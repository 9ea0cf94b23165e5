from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from app.core.amounts import ZERO_AMOUNT, to_amount
from app.logging_config import get_logger
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.transaction_repository import TransactionRepository
from app.schemas.base import parse_body
from app.schemas.transaction_schemas import TransactionCreate, TransactionUpdate
from app.services.access_service import AccessService
from app.core.exceptions import NotFoundException, ValidationException

logger = get_logger(__name__)


class TransactionService:
    """Service layer for transaction business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.access = AccessService(db)

    def create_transaction(self, store_id: int, payload: dict, user: User) -> Transaction:
        """
        Record a transaction against a store.

        Args:
            store_id: Store the transaction belongs to
            payload: Raw request body, validated after the access check
            user: Current user, recorded as creator

        Returns:
            Created transaction

        Raises:
            NotFoundException: If store doesn't exist
            ForbiddenException: If user has no access to the store
            ValidationException: If the body is invalid
        """
        self.access.get_accessible_store(store_id, user)
        transaction_data = parse_body(TransactionCreate, payload, "Invalid transaction data")

        transaction = Transaction(
            store_id=store_id,
            date=transaction_data.date,
            amount_supplied=to_amount(transaction_data.amount_supplied),
            amount_remaining=to_amount(transaction_data.amount_remaining),
            notes=transaction_data.notes,
            created_by=user.id,
        )
        transaction = self.transaction_repo.create(transaction)
        logger.info(
            "Transaction created",
            extra={"transaction_id": transaction.id, "store_id": store_id, "user_id": user.id},
        )
        return transaction

    def get_store_transactions(self, store_id: int, user: User) -> list[Transaction]:
        """
        List a store's transactions, newest date first.

        Raises:
            NotFoundException: If store doesn't exist
            ForbiddenException: If user has no access to the store
        """
        self.access.get_accessible_store(store_id, user)
        return self.transaction_repo.get_by_store(store_id)

    def get_transaction(self, transaction_id: int, user: User) -> Transaction:
        """
        Get transaction by ID, checking access on the store it belongs to.

        Raises:
            NotFoundException: If transaction doesn't exist
            ForbiddenException: If user has no access to its store
        """
        transaction = self.transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundException(f"Transaction {transaction_id} not found")

        self.access.get_accessible_store(transaction.store_id, user)
        return transaction

    def update_transaction(self, transaction_id: int, payload: dict, user: User) -> Transaction:
        """
        Partially update a transaction. Store and creator never change.

        Raises:
            NotFoundException: If transaction doesn't exist
            ForbiddenException: If user has no access to its store
            ValidationException: If the body is invalid
        """
        transaction = self.get_transaction(transaction_id, user)
        transaction_data = parse_body(TransactionUpdate, payload, "Invalid transaction data")

        fields = transaction_data.model_dump(exclude_unset=True)
        # date and amountSupplied may be omitted but not cleared
        cleared = [
            name for name in ("date", "amount_supplied") if name in fields and fields[name] is None
        ]
        if cleared:
            raise ValidationException(
                "Invalid transaction data",
                errors=[
                    {"field": to_camel(name), "message": "Field cannot be null"} for name in cleared
                ],
            )

        if "date" in fields:
            transaction.date = fields["date"]
        if "amount_supplied" in fields:
            transaction.amount_supplied = to_amount(fields["amount_supplied"])
        if "amount_remaining" in fields:
            transaction.amount_remaining = to_amount(fields["amount_remaining"] or ZERO_AMOUNT)
        if "notes" in fields:
            transaction.notes = fields["notes"]

        return self.transaction_repo.update(transaction)

    def delete_transaction(self, transaction_id: int, user: User) -> None:
        """
        Delete a transaction.

        Raises:
            NotFoundException: If transaction doesn't exist
            ForbiddenException: If user has no access to its store
        """
        transaction = self.get_transaction(transaction_id, user)
        self.transaction_repo.delete(transaction)
        logger.info(
            "Transaction deleted",
            extra={"transaction_id": transaction_id, "user_id": user.id},
        )
