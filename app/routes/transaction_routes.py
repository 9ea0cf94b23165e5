from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.services.transaction_service import TransactionService
from app.schemas.transaction_schemas import TransactionResponse

router = APIRouter()


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    payload: dict[str, Any] = Body(..., description="TransactionUpdate fields"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update a transaction.

    - Returns 404 if transaction doesn't exist
    - Returns 403 if the user has no access to the transaction's store
    - Only provided fields are updated (partial update)
    """
    service = TransactionService(db)
    return service.update_transaction(transaction_id, payload, user)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Delete a transaction.

    - Returns 404 if transaction doesn't exist
    - Returns 403 if the user has no access to the transaction's store
    """
    service = TransactionService(db)
    service.delete_transaction(transaction_id, user)
