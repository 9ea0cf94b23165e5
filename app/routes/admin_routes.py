from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.services.store_service import StoreService
from app.schemas.store_schemas import StoreResponse

router = APIRouter()


@router.get("/stores", response_model=list[StoreResponse])
def list_all_stores(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    List every store, unfiltered.

    - **Requires Admin role**
    """
    service = StoreService(db)
    return service.get_all_stores(user)
