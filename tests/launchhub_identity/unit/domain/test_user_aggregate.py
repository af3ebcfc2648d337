"""Unit tests for the User aggregate."""

from datetime import timedelta

import pytest

from launchhub_identity.domain.shared.exceptions import ValidationFailedError
from launchhub_identity.domain.shared.time import utc_now
from launchhub_identity.domain.user import InvalidRoleError, User, UserRole

HASH = "$2b$04$abcdefghijklmnopqrstuv"


class TestUserCreate:
    def test_new_user_has_no_id(self):
        user = User.create("new@example.com", HASH, UserRole.CLIENT)

        assert user.id is None
        assert not user.is_persisted

    def test_defaults(self):
        user = User.create("New@Example.com", HASH, "freelancer")

        assert user.email == "new@example.com"
        assert user.role == UserRole.FREELANCER
        assert user.is_active is True

    def test_timestamps_equal_at_creation(self):
        user = User.create("new@example.com", HASH, UserRole.CLIENT)

        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is not None

    def test_empty_password_hash_rejected(self):
        with pytest.raises(ValidationFailedError):
            User.create("new@example.com", "", UserRole.CLIENT)

    def test_unknown_role_rejected(self):
        with pytest.raises(InvalidRoleError):
            User.create("new@example.com", HASH, "owner")

    def test_updated_before_created_rejected(self):
        now = utc_now()
        with pytest.raises(ValidationFailedError):
            User.reconstitute(
                id=1,
                email="old@example.com",
                password_hash=HASH,
                role="client",
                is_active=True,
                created_at=now,
                updated_at=now - timedelta(seconds=1),
            )


class TestUserMutations:
    def test_change_role_touches_updated_at(self, client_user):
        before = client_user.updated_at

        client_user.change_role(UserRole.ADMIN)

        assert client_user.role == UserRole.ADMIN
        assert client_user.updated_at > before
        assert client_user.updated_at >= client_user.created_at

    def test_back_to_back_mutations_strictly_advance_updated_at(self, client_user):
        stamps = [client_user.updated_at]

        client_user.change_role(UserRole.ADMIN)
        stamps.append(client_user.updated_at)
        client_user.deactivate()
        stamps.append(client_user.updated_at)
        client_user.change_email("moved@example.com")
        stamps.append(client_user.updated_at)

        assert stamps == sorted(set(stamps))

    def test_updated_at_advances_past_a_future_stored_value(self):
        now = utc_now()
        later = now + timedelta(hours=1)
        user = User.reconstitute(1, "skew@example.com", HASH, "client", True, now, later)

        user.deactivate()

        assert user.updated_at > later

    def test_noop_mutations_keep_updated_at(self, client_user):
        before = client_user.updated_at

        client_user.change_role(UserRole.CLIENT)
        client_user.activate()
        client_user.change_email("CLIENT@example.com")

        assert client_user.updated_at == before

    def test_deactivate_and_activate(self, client_user):
        client_user.deactivate()
        assert client_user.is_active is False

        client_user.activate()
        assert client_user.is_active is True

    def test_change_email_normalizes(self, client_user):
        client_user.change_email(" Other@Example.com ")
        assert client_user.email == "other@example.com"

    def test_change_password_hash_rejects_empty(self, client_user):
        with pytest.raises(ValidationFailedError):
            client_user.change_password_hash("")

    def test_created_at_never_changes(self, client_user):
        created = client_user.created_at

        client_user.change_role(UserRole.FREELANCER)
        client_user.deactivate()

        assert client_user.created_at == created


class TestUserEquality:
    def test_equal_by_id(self):
        now = utc_now()
        a = User.reconstitute(1, "a@example.com", HASH, "client", True, now, now)
        b = User.reconstitute(1, "b@example.com", HASH, "admin", False, now, now)

        assert a == b
        assert hash(a) == hash(b)

    def test_unsaved_users_compare_by_identity(self):
        a = User.create("a@example.com", HASH, UserRole.CLIENT)
        b = User.create("a@example.com", HASH, UserRole.CLIENT)

        assert a != b
        assert a == a
