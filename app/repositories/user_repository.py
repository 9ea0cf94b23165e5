from sqlalchemy.orm import Session
from app.database import commit
from app.logging_config import get_logger
from app.models.role import UserRole
from app.models.user import User

logger = get_logger(__name__)


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def upsert(self, user_id: str, profile: dict) -> User:
        """
        Get user by id or create it, refreshing profile fields from token claims.

        Called on every authenticated request. The role is never touched here:
        new users get the default role, existing users keep theirs. An email
        claim already held by another user is dropped so the request can proceed.

        Args:
            user_id: 'sub' claim from the JWT
            profile: email / first_name / last_name / profile_image_url claims

        Returns:
            User object (either existing or newly created)
        """
        profile = self._without_conflicting_email(user_id, profile)
        user = self.get_by_id(user_id)

        if not user:
            user = User(id=user_id, **profile)
            self.db.add(user)
            commit(self.db)
            self.db.refresh(user)
            return user

        changed = False
        for field, value in profile.items():
            if getattr(user, field) != value:
                setattr(user, field, value)
                changed = True
        if changed:
            commit(self.db)
            self.db.refresh(user)

        return user

    def _without_conflicting_email(self, user_id: str, profile: dict) -> dict:
        email = profile.get("email")
        if not email:
            return profile

        holder = self.get_by_email(email)
        if holder is None or holder.id == user_id:
            return profile

        logger.warning(
            "Email claim already belongs to another user; keeping stored email",
            extra={"user_id": user_id, "email_holder_id": holder.id},
        )
        return {field: value for field, value in profile.items() if field != "email"}

    def get_by_id(self, user_id: str) -> User | None:
        """Get user by id"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()

    def get_role(self, user_id: str) -> UserRole | None:
        """Get the stored global role, or None when the user is unknown"""
        return self.db.query(User.role).filter(User.id == user_id).scalar()
