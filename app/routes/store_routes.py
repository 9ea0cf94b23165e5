from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.services.balance_service import BalanceService
from app.services.store_service import StoreService
from app.services.store_access_service import StoreAccessService
from app.services.transaction_service import TransactionService
from app.schemas.balance_schemas import StoreBalanceResponse
from app.schemas.store_schemas import StoreCreate, StoreResponse
from app.schemas.store_access_schemas import StoreAccessGrantResponse
from app.schemas.transaction_schemas import TransactionResponse

router = APIRouter()


@router.get("", response_model=list[StoreResponse])
def list_stores(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    List stores visible to the authenticated user.

    - Admins see every store
    - Others see the stores they own (and granted stores when
      DASHBOARD_INCLUDE_GRANTED_STORES is enabled)
    """
    service = StoreService(db)
    return service.get_user_stores(user)


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    data: StoreCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create a new store owned by the authenticated user"""
    service = StoreService(db)
    return service.create_store(data, user)


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(
    store_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """
    Get store details.

    - 404 if the store doesn't exist, 403 if the user has no access
    """
    service = StoreService(db)
    return service.get_store(store_id, user)


@router.patch("/{store_id}", response_model=StoreResponse)
def update_store(
    store_id: int,
    payload: dict[str, Any] = Body(..., description="StoreUpdate fields"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update store name and/or description (partial update)"""
    service = StoreService(db)
    return service.update_store(store_id, payload, user)


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(
    store_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Delete store and all associated transactions and access grants"""
    service = StoreService(db)
    service.delete_store(store_id, user)


@router.get("/{store_id}/transactions", response_model=list[TransactionResponse])
def list_store_transactions(
    store_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """List a store's transactions, newest date first"""
    service = TransactionService(db)
    return service.get_store_transactions(store_id, user)


@router.post(
    "/{store_id}/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_store_transaction(
    store_id: int,
    payload: dict[str, Any] = Body(..., description="TransactionCreate fields"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Record a transaction against a store.

    - amountSupplied: required, non-negative, at most 2 decimal places
    - amountRemaining: optional, defaults to "0.00"
    - date: ISO-8601 date or datetime
    """
    service = TransactionService(db)
    return service.create_transaction(store_id, payload, user)


@router.get("/{store_id}/balance", response_model=StoreBalanceResponse)
def get_store_balance(
    store_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Total supplied, total remaining and net balance for a store"""
    StoreService(db).get_store(store_id, user)
    return BalanceService(db).store_balance(store_id)


@router.get("/{store_id}/users", response_model=list[StoreAccessGrantResponse])
def list_store_users(
    store_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """List users granted access to a store"""
    service = StoreAccessService(db)
    return service.list_grants(store_id, user)


@router.post(
    "/{store_id}/users",
    response_model=StoreAccessGrantResponse,
    status_code=status.HTTP_201_CREATED,
)
def grant_store_access(
    store_id: int,
    payload: dict[str, Any] = Body(..., description="StoreAccessGrantRequest fields"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Grant a user access to a store.

    - **Requires store owner or Admin**
    - The user must have signed in at least once
    - Default store role: Clerk
    """
    service = StoreAccessService(db)
    return service.grant_access(store_id, payload, user)


@router.delete("/{store_id}/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def revoke_store_access(
    store_id: int,
    user_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Revoke a user's access to a store.

    - **Requires store owner or Admin**
    """
    service = StoreAccessService(db)
    service.revoke_access(store_id, user_id, user)
