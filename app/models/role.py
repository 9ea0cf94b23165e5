"""Role enums for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Global user roles.

    - ADMIN: Sees and manages every store, bypasses per-store grants
    - STORE_OWNER: Default role; sees the stores they own
    - CLERK: Works in stores they have been granted access to

    The role is read from the users table only, never from the token.
    """

    ADMIN = "Admin"
    STORE_OWNER = "StoreOwner"
    CLERK = "Clerk"


# Role assumed for callers without a users row
DEFAULT_USER_ROLE = UserRole.STORE_OWNER


class StoreRole(str, PyEnum):
    """Store-local role recorded on a store access grant."""

    OWNER = "Owner"
    CLERK = "Clerk"
