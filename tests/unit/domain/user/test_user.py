"""Tests for the User aggregate."""

from uuid import uuid4

from bluevelvet.domain.user import Email, User, UserRole


class TestUserCreation:
    def test_create_defaults_to_enabled_shopper(self):
        user = User.create("a@x.com", password_hash="hash")

        assert user.role == UserRole.SHOPPER
        assert user.enabled is True
        assert user.is_admin is False
        assert user.id is not None

    def test_create_administrator(self):
        user = User.create(Email("Boss@X.com"), "hash", UserRole.ADMINISTRATOR)

        assert user.is_admin is True
        assert user.email == "boss@x.com"

    def test_each_user_gets_a_fresh_id(self):
        assert User.create("a@x.com", "h").id != User.create("b@x.com", "h").id


class TestUserReconstitute:
    def test_reconstitute_accepts_role_string(self):
        user_id = uuid4()
        first = User.create("a@x.com", "h")

        user = User.reconstitute(
            id=user_id,
            email="a@x.com",
            password_hash="h",
            role="administrator",
            enabled=False,
            created_at=first.created_at,
            updated_at=first.updated_at,
        )

        assert user.id == user_id
        assert user.role == UserRole.ADMINISTRATOR
        assert user.enabled is False

    def test_equality_is_by_id(self):
        user_id = uuid4()
        a = User(email="a@x.com", password_hash="h1", id=user_id)
        b = User(email="b@x.com", password_hash="h2", id=user_id)

        assert a == b
        assert hash(a) == hash(b)
