"""
Name: InMemoryUserRepository Unit Tests

Responsibilities:
  - Defaults assigned on create (id, avatar, role, timestamps)
  - Public views never include the password
  - Insertion-ordered listing
  - update_avatar on an unknown id raises and leaves the store intact
  - Duplicate email on create raises like the unique constraint
"""

from datetime import date
from uuid import UUID

import pytest

from app.domain.entities import (
    USER_DEFAULT_AVATAR_URL,
    User,
    UserAvatarData,
    UserCreateData,
    UserMapped,
    UserRole,
)
from app.domain.errors import DuplicateResourceError, UnregisteredParamError
from app.infrastructure.repositories import InMemoryUserRepository

pytestmark = pytest.mark.unit


def _data(email: str = "maria@example.com") -> UserCreateData:
    return UserCreateData(
        name="Maria Silva",
        email=email,
        phone="+5511987654321",
        birthdate="1990-05-17",
        password="hashed",
    )


def test_create_assigns_defaults():
    repo = InMemoryUserRepository()

    repo.create(_data())

    user = repo.find_by_email("maria@example.com")
    assert isinstance(user, User)
    assert str(UUID(user.id)) == user.id
    assert user.birthdate == date(1990, 5, 17)
    assert user.avatar_url == USER_DEFAULT_AVATAR_URL
    assert user.role is UserRole.CLIENT
    assert user.created_at == user.updated_at
    assert user.password == "hashed"


def test_find_by_email_is_exact():
    repo = InMemoryUserRepository()
    repo.create(_data())

    assert repo.find_by_email("MARIA@example.com") is None
    assert repo.find_by_email("other@example.com") is None


def test_find_by_id_returns_public_view():
    repo = InMemoryUserRepository()
    repo.create(_data())
    user = repo.find_by_email("maria@example.com")

    found = repo.find_by_id(user.id)

    assert isinstance(found, UserMapped)
    assert "password" not in found.to_dict()
    assert repo.find_by_id("missing") is None


def test_list_keeps_insertion_order():
    repo = InMemoryUserRepository()
    for email in ("a@example.com", "b@example.com", "c@example.com"):
        repo.create(_data(email))

    users = repo.list()

    assert [u.email for u in users] == ["a@example.com", "b@example.com", "c@example.com"]
    assert all(isinstance(u, UserMapped) for u in users)


def test_update_avatar():
    repo = InMemoryUserRepository()
    repo.create(_data())
    user = repo.find_by_email("maria@example.com")

    repo.update_avatar(UserAvatarData(id=user.id, avatar_url="/new.png"))

    updated = repo.find_by_id(user.id)
    assert updated.avatar_url == "/new.png"
    assert updated.updated_at >= user.updated_at
    assert repo.find_by_email("maria@example.com").password == "hashed"


def test_update_avatar_unknown_id():
    repo = InMemoryUserRepository()
    repo.create(_data())

    with pytest.raises(UnregisteredParamError):
        repo.update_avatar(
            UserAvatarData(id="00000000-0000-4000-8000-000000000000", avatar_url="/x")
        )

    assert len(repo.list()) == 1


def test_create_duplicate_email_raises():
    repo = InMemoryUserRepository()
    repo.create(_data())

    with pytest.raises(DuplicateResourceError):
        repo.create(_data())

    assert len(repo.list()) == 1
