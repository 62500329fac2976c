"""Integration tests for UserRepositorySQLAlchemy against SQLite."""

import pytest

from bluevelvet.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRole,
)


@pytest.fixture
def repo(factory):
    return factory.user_repository()


class TestUserRepository:
    async def test_save_and_find(self, repo):
        user = User.create("a@x.com", "hash", UserRole.ADMINISTRATOR)
        await repo.save(user)

        by_id = await repo.find_by_id(user.id)
        by_email = await repo.find_by_email("A@X.COM")

        assert by_id == user
        assert by_email == user
        assert by_id.role == UserRole.ADMINISTRATOR
        assert by_id.password_hash == "hash"

    async def test_exists_by_email(self, repo):
        await repo.save(User.create("a@x.com", "hash"))

        assert await repo.exists_by_email("a@x.com") is True
        assert await repo.exists_by_email("A@X.COM") is True
        assert await repo.exists_by_email("b@x.com") is False

    async def test_duplicate_email(self, repo):
        await repo.save(User.create("a@x.com", "hash"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(User.create("a@x.com", "other"))

    async def test_unknown_email(self, repo):
        assert await repo.find_by_email("nobody@x.com") is None

    async def test_malformed_email_lookup(self, repo):
        with pytest.raises(InvalidEmailError):
            await repo.find_by_email("nope")
