from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.core.security import extract_user_claims
from app.core.exceptions import UnauthorizedException
from app.database import get_db
from app.repositories.user_repository import UserRepository
from app.services.access_service import AccessService
from app.models.user import User

# auto_error=False so a missing header maps to our 401 handler, not HTTPBearer's own error
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    FastAPI dependency to validate JWT and upsert the user.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Extract user id ('sub') and profile claims
    4. Create or refresh the User record (role is left untouched)
    5. Return User object for use in endpoints

    Raises:
        UnauthorizedException: If token missing, invalid or expired (401)
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Not authenticated")

    user_id, profile = extract_user_claims(credentials.credentials)
    return UserRepository(db).upsert(user_id, profile)


async def require_admin(
    user: User = Depends(get_current_user), db: Session = Depends(get_db)
) -> User:
    """
    FastAPI dependency for Admin-only endpoints.

    Raises:
        ForbiddenException: If the caller's stored role is not Admin (403)
    """
    AccessService(db).require_admin(user)
    return user
