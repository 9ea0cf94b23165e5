import pytest
from app.core.exceptions import ForbiddenException, NotFoundException
from app.models.role import DEFAULT_USER_ROLE, UserRole
from app.models.store_access import StoreAccessGrant
from app.models.user import User
from app.services.access_service import AccessService
from tests.conftest import make_store, make_user


@pytest.fixture
def owner(db_session):
    return make_user(db_session, "owner-1")


@pytest.fixture
def store_x(db_session, owner):
    return make_store(db_session, owner, name="Store X")


@pytest.fixture
def store_y(db_session, owner):
    return make_store(db_session, owner, name="Store Y")


class TestCanAccess:
    """AccessService.can_access decision rules"""

    def test_owner_has_access(self, db_session, owner, store_x):
        assert AccessService(db_session).can_access(owner.id, store_x.id) is True

    def test_non_owner_without_grant_denied(self, db_session, store_x):
        make_user(db_session, "stranger")

        assert AccessService(db_session).can_access("stranger", store_x.id) is False

    def test_admin_has_access_to_every_store(self, db_session, store_x, store_y):
        make_user(db_session, "boss", role=UserRole.ADMIN)
        service = AccessService(db_session)

        assert service.can_access("boss", store_x.id) is True
        assert service.can_access("boss", store_y.id) is True

    def test_admin_allowed_for_missing_store(self, db_session):
        """Admin check comes before the existence check"""
        make_user(db_session, "boss", role=UserRole.ADMIN)

        assert AccessService(db_session).can_access("boss", 424242) is True

    def test_missing_store_denied(self, db_session, owner):
        """Fails closed for non-admins"""
        assert AccessService(db_session).can_access(owner.id, 424242) is False

    def test_grant_is_store_specific(self, db_session, store_x, store_y):
        """A grant on X gives access to X only"""
        clerk = make_user(db_session, "clerk-1", role=UserRole.CLERK)
        db_session.add(StoreAccessGrant(store_id=store_x.id, user_id=clerk.id))
        db_session.commit()
        service = AccessService(db_session)

        assert service.can_access(clerk.id, store_x.id) is True
        assert service.can_access(clerk.id, store_y.id) is False

    def test_clerk_role_alone_grants_nothing(self, db_session, store_x):
        make_user(db_session, "clerk-1", role=UserRole.CLERK)

        assert AccessService(db_session).can_access("clerk-1", store_x.id) is False

    def test_revoked_grant_denied(self, db_session, store_x):
        clerk = make_user(db_session, "clerk-1", role=UserRole.CLERK)
        grant = StoreAccessGrant(store_id=store_x.id, user_id=clerk.id)
        db_session.add(grant)
        db_session.commit()
        db_session.delete(grant)
        db_session.commit()

        assert AccessService(db_session).can_access(clerk.id, store_x.id) is False


class TestUserRole:
    """Global role resolution"""

    def test_unknown_user_gets_default_role(self, db_session):
        role = AccessService(db_session).get_user_role("nobody")

        assert role == DEFAULT_USER_ROLE == UserRole.STORE_OWNER

    def test_unknown_user_is_not_admin(self, db_session):
        assert AccessService(db_session).is_admin("nobody") is False

    def test_stored_role_returned(self, db_session):
        make_user(db_session, "boss", role=UserRole.ADMIN)

        assert AccessService(db_session).get_user_role("boss") == UserRole.ADMIN

    def test_new_user_defaults_to_store_owner(self, client, db_session, user_a_headers):
        client.get("/api/stores", headers=user_a_headers)

        user = db_session.query(User).filter(User.id == "user-a").one()
        assert user.role == UserRole.STORE_OWNER


class TestGetAccessibleStore:
    """Existence is checked before permission"""

    def test_missing_store_raises_not_found(self, db_session, owner):
        with pytest.raises(NotFoundException):
            AccessService(db_session).get_accessible_store(424242, owner)

    def test_forbidden_store_raises_forbidden(self, db_session, store_x):
        stranger = make_user(db_session, "stranger")

        with pytest.raises(ForbiddenException):
            AccessService(db_session).get_accessible_store(store_x.id, stranger)

    def test_accessible_store_returned(self, db_session, owner, store_x):
        store = AccessService(db_session).get_accessible_store(store_x.id, owner)

        assert store.id == store_x.id

    def test_require_admin(self, db_session, owner):
        with pytest.raises(ForbiddenException, match="Admin access required"):
            AccessService(db_session).require_admin(owner)


class TestRouteAccessOrdering:
    """Every store-scoped route answers 404 before 403"""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/stores/99999"),
            ("patch", "/api/stores/99999"),
            ("delete", "/api/stores/99999"),
            ("get", "/api/stores/99999/transactions"),
            ("post", "/api/stores/99999/transactions"),
            ("get", "/api/stores/99999/balance"),
            ("get", "/api/stores/99999/users"),
        ],
    )
    def test_missing_store_is_404(self, client, user_b_headers, method, path):
        kwargs = {"json": {}} if method in ("post", "patch") else {}

        response = getattr(client, method)(path, headers=user_b_headers, **kwargs)

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "method,suffix",
        [
            ("get", ""),
            ("patch", ""),
            ("delete", ""),
            ("get", "/transactions"),
            ("post", "/transactions"),
            ("get", "/balance"),
            ("get", "/users"),
        ],
    )
    def test_other_users_store_is_403(self, client, user_b_headers, store, method, suffix):
        kwargs = {"json": {}} if method in ("post", "patch") else {}

        response = getattr(client, method)(
            f"/api/stores/{store['id']}{suffix}", headers=user_b_headers, **kwargs
        )

        assert response.status_code == 403
