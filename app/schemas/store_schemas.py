from datetime import datetime
from pydantic import Field
from app.models.store import STORE_NAME_MAX_LENGTH
from app.schemas.base import CamelModel


class StoreCreate(CamelModel):
    """Schema for creating a new store (owner is always the caller)"""

    name: str = Field(..., min_length=1, max_length=STORE_NAME_MAX_LENGTH)
    description: str | None = None


class StoreUpdate(CamelModel):
    """Schema for updating a store; ownership cannot be changed"""

    name: str | None = Field(None, min_length=1, max_length=STORE_NAME_MAX_LENGTH)
    description: str | None = None


class StoreResponse(CamelModel):
    """Schema for store response"""

    id: int
    name: str
    description: str | None
    owner_id: str
    created_at: datetime
    updated_at: datetime
