from datetime import datetime
from pydantic import Field
from app.models.role import StoreRole
from app.schemas.base import CamelModel


class StoreAccessGrantRequest(CamelModel):
    """Grant an existing user access to a store"""

    user_id: str = Field(..., min_length=1, description="Identity provider user ID")
    role_in_store: StoreRole = Field(
        default=StoreRole.CLERK, description="Store-local role (default: Clerk)"
    )


class StoreAccessGrantResponse(CamelModel):
    """Store access grant details"""

    id: int
    store_id: int
    user_id: str
    role_in_store: StoreRole
    created_at: datetime
