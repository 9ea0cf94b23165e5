from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.services.balance_service import BalanceService
from app.schemas.balance_schemas import DashboardStatsResponse

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Store count and totals across every store visible to the user.

    - Admins aggregate over all stores
    - Zeroed totals when the user has no stores
    """
    service = BalanceService(db)
    return service.dashboard_stats(user.id)
