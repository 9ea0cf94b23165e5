"""Balance aggregation over store transactions."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.core.amounts import format_amount
from app.models.role import UserRole
from app.models.store import Store
from app.repositories.store_repository import StoreRepository
from app.repositories.transaction_repository import TransactionRepository
from app.services.access_service import AccessService


@dataclass(frozen=True)
class BalanceSummary:
    """Exact totals over a set of transactions."""

    total_supplied: Decimal
    total_remaining: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.total_supplied - self.total_remaining

    def as_dict(self) -> dict:
        return {
            "total_supplied": format_amount(self.total_supplied),
            "total_remaining": format_amount(self.total_remaining),
            "net_balance": format_amount(self.net_balance),
        }


EMPTY_SUMMARY = BalanceSummary(Decimal("0.00"), Decimal("0.00"))


def summarize_amounts(amounts: Iterable[tuple[Decimal, Decimal]]) -> BalanceSummary:
    """
    Sum (supplied, remaining) pairs with Decimal arithmetic.

    None values (NULL rows) count as zero.
    """
    total_supplied = Decimal("0.00")
    total_remaining = Decimal("0.00")
    for supplied, remaining in amounts:
        if supplied is not None:
            total_supplied += Decimal(supplied)
        if remaining is not None:
            total_remaining += Decimal(remaining)
    return BalanceSummary(total_supplied, total_remaining)


class BalanceService:
    """Service computing store balances and dashboard totals"""

    def __init__(self, db: Session):
        self.db = db
        self.store_repo = StoreRepository(db)
        self.transaction_repo = TransactionRepository(db)
        self.access = AccessService(db)

    def store_balance(self, store_id: int) -> dict:
        """
        Totals for one store.

        Returns:
            {"total_supplied", "total_remaining", "net_balance"} as 2dp strings,
            all "0.00" when the store has no transactions
        """
        summary = summarize_amounts(self.transaction_repo.get_amounts([store_id]))
        return summary.as_dict()

    def visible_stores(
        self, user_id: str, include_granted_stores: Optional[bool] = None
    ) -> list[Store]:
        """
        Stores a user sees on the dashboard and in the store list.

        Admins see every store. Others see the stores they own, plus the
        stores granted to them when include_granted_stores is true.

        Args:
            user_id: User ID
            include_granted_stores: Defaults to DASHBOARD_INCLUDE_GRANTED_STORES
        """
        if include_granted_stores is None:
            include_granted_stores = settings.DASHBOARD_INCLUDE_GRANTED_STORES

        if self.access.get_user_role(user_id) == UserRole.ADMIN:
            return self.store_repo.get_all()
        return self.store_repo.get_visible_to_user(user_id, include_granted=include_granted_stores)

    def dashboard_stats(
        self, user_id: str, include_granted_stores: Optional[bool] = None
    ) -> dict:
        """
        Totals across every store visible to the user.

        No transaction query is issued when the user sees no stores.
        """
        stores = self.visible_stores(user_id, include_granted_stores)
        if not stores:
            return {"total_stores": 0, **EMPTY_SUMMARY.as_dict()}

        amounts = self.transaction_repo.get_amounts([store.id for store in stores])
        return {"total_stores": len(stores), **summarize_amounts(amounts).as_dict()}
