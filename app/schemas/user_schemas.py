from datetime import datetime
from app.models.role import UserRole
from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    """Authenticated user profile"""

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
