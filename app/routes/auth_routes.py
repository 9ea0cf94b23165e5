from fastapi import APIRouter, Depends

from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.user_schemas import UserResponse

router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def get_authenticated_user(user: User = Depends(get_current_user)):
    """Profile and global role of the authenticated user"""
    return user
